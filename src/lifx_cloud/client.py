from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from lifx_cloud import endpoints
from lifx_cloud.commands import (
    BreatheEffect,
    Clean,
    EffectsOff,
    FlameEffect,
    MorphEffect,
    MoveEffect,
    PulseEffect,
    State,
    StateDelta,
    States,
    Toggle,
)
from lifx_cloud.config import LifxConfig
from lifx_cloud.endpoints import LifxRequest, Selector
from lifx_cloud.errors import LifxConfigError, LifxDecodeError, LifxError, LifxTransportError

__all__ = [
    "AsyncLifxClient",
    "LifxClient",
    "LifxConfigError",
    "LifxDecodeError",
    "LifxError",
    "LifxTransportError",
]

logger = logging.getLogger("lifx_cloud")


def _auth_headers(config: LifxConfig) -> dict[str, str]:
    return {"Authorization": f"Bearer {config.access_token}"}


def _request_kwargs(request: LifxRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if request.form is not None:
        kwargs["data"] = dict(request.form)
    if request.json_body is not None:
        kwargs["json"] = request.json_body
    return kwargs


def _decode(request: LifxRequest, resp: httpx.Response) -> Any:
    # The HTTP status is not inspected: API-level failures arrive in the body's error fields.
    try:
        body = resp.json()
    except ValueError as exc:
        raise LifxDecodeError(
            f"{request.method} {request.path}: response is not JSON",
            status_code=resp.status_code,
            body=resp.text,
        ) from exc
    try:
        return request.parse(body)
    except ValidationError as exc:
        raise LifxDecodeError(
            f"{request.method} {request.path}: unexpected response shape",
            status_code=resp.status_code,
            body=body,
        ) from exc


def _body_read_error(request: LifxRequest, endpoint: str, exc: Exception) -> LifxTransportError:
    logger.warning("%s %s: response body from %s interrupted: %s", request.method, request.path, endpoint, exc)
    return LifxTransportError(
        f"{request.method} {request.path}: response body from {endpoint} interrupted: {exc}",
        endpoint=endpoint,
    )


def _log_transport_failure(request: LifxRequest, endpoint: str, exc: Exception, *, has_next: bool) -> None:
    if not has_next:
        logger.warning("%s %s failed against %s: %s", request.method, request.path, endpoint, exc)
        return
    if request.method == "POST":
        # The first endpoint may still have applied the command.
        logger.warning(
            "%s %s failed against %s (%s); retrying non-idempotent request on fallback endpoint",
            request.method,
            request.path,
            endpoint,
            exc,
        )
    else:
        logger.warning(
            "%s %s failed against %s (%s); trying fallback endpoint", request.method, request.path, endpoint, exc
        )


class _Operations:
    """Operation surface shared by both clients.

    Each method describes its request once and hands it to ``_send``; the
    blocking client returns the parsed result, the async client returns an
    awaitable of it.
    """

    def _send(self, request: LifxRequest) -> Any:
        raise NotImplementedError

    def list_lights(self, selector: Selector = "all"):
        """Lights matching ``selector`` as a list of :class:`~lifx_cloud.models.Light`."""
        return self._send(endpoints.list_lights(selector))

    def set_state(self, selector: Selector, state: State):
        return self._send(endpoints.set_state(selector, state))

    def set_states(self, states: States):
        """Apply several per-selector states in one request (JSON body)."""
        return self._send(endpoints.set_states(states))

    def state_delta(self, selector: Selector, delta: StateDelta):
        return self._send(endpoints.state_delta(selector, delta))

    def toggle(self, selector: Selector, toggle: Toggle | None = None):
        return self._send(endpoints.toggle(selector, toggle or Toggle()))

    def clean(self, selector: Selector, clean: Clean | None = None):
        return self._send(endpoints.clean(selector, clean or Clean()))

    def breathe_effect(self, selector: Selector, effect: BreatheEffect | None = None):
        return self._send(endpoints.breathe_effect(selector, effect or BreatheEffect()))

    def pulse_effect(self, selector: Selector, effect: PulseEffect | None = None):
        return self._send(endpoints.pulse_effect(selector, effect or PulseEffect()))

    def move_effect(self, selector: Selector, effect: MoveEffect | None = None):
        return self._send(endpoints.move_effect(selector, effect or MoveEffect()))

    def morph_effect(self, selector: Selector, effect: MorphEffect | None = None):
        return self._send(endpoints.morph_effect(selector, effect or MorphEffect()))

    def flame_effect(self, selector: Selector, effect: FlameEffect | None = None):
        return self._send(endpoints.flame_effect(selector, effect or FlameEffect()))

    def effects_off(self, selector: Selector, effects_off: EffectsOff | None = None):
        return self._send(endpoints.effects_off(selector, effects_off or EffectsOff()))

    def list_scenes(self):
        return self._send(endpoints.list_scenes())

    def validate_color(self, color: str):
        """Ask the API to parse a color string; invalid input comes back in ``Color.error``."""
        return self._send(endpoints.validate_color(color))


class LifxClient(_Operations):
    """Blocking client. Endpoints are tried in configured order on transport failure."""

    def __init__(self, config: LifxConfig, *, transport: httpx.BaseTransport | None = None) -> None:
        config.validate()
        self._config = config
        self._client = httpx.Client(headers=_auth_headers(config), transport=transport)

    @property
    def config(self) -> LifxConfig:
        return self._config

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "LifxClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, request: LifxRequest) -> Any:
        api_endpoints = self._config.api_endpoints
        last_error: httpx.TransportError | None = None
        for index, endpoint in enumerate(api_endpoints):
            url = request.url(endpoint)
            outgoing = self._client.build_request(request.method, url, **_request_kwargs(request))
            try:
                resp = self._client.send(outgoing, stream=True)
            except httpx.TransportError as exc:
                last_error = exc
                _log_transport_failure(request, endpoint, exc, has_next=index + 1 < len(api_endpoints))
                continue
            logger.debug("%s %s -> %s", request.method, url, resp.status_code)
            # The endpoint answered; a failure from here on is final.
            try:
                resp.read()
            except httpx.TransportError as exc:
                raise _body_read_error(request, endpoint, exc) from exc
            finally:
                resp.close()
            return _decode(request, resp)
        raise LifxTransportError(str(last_error), endpoint=api_endpoints[-1]) from last_error


class AsyncLifxClient(_Operations):
    """Non-blocking client; every operation method returns an awaitable."""

    def __init__(self, config: LifxConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        config.validate()
        self._config = config
        self._client = httpx.AsyncClient(headers=_auth_headers(config), transport=transport)

    @property
    def config(self) -> LifxConfig:
        return self._config

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncLifxClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _send(self, request: LifxRequest) -> Any:
        api_endpoints = self._config.api_endpoints
        last_error: httpx.TransportError | None = None
        for index, endpoint in enumerate(api_endpoints):
            url = request.url(endpoint)
            outgoing = self._client.build_request(request.method, url, **_request_kwargs(request))
            try:
                resp = await self._client.send(outgoing, stream=True)
            except httpx.TransportError as exc:
                last_error = exc
                _log_transport_failure(request, endpoint, exc, has_next=index + 1 < len(api_endpoints))
                continue
            logger.debug("%s %s -> %s", request.method, url, resp.status_code)
            try:
                await resp.aread()
            except httpx.TransportError as exc:
                raise _body_read_error(request, endpoint, exc) from exc
            finally:
                await resp.aclose()
            return _decode(request, resp)
        raise LifxTransportError(str(last_error), endpoint=api_endpoints[-1]) from last_error
