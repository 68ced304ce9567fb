from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from lifx_cloud.commands import (
    BreatheEffect,
    Clean,
    EffectsOff,
    FlameEffect,
    MorphEffect,
    MoveEffect,
    Params,
    PulseEffect,
    State,
    StateDelta,
    States,
    Toggle,
)
from lifx_cloud.models import Light, parse_color, parse_lights, parse_results, parse_scenes


Selector = str | Light


@dataclass(frozen=True)
class LifxRequest:
    """One logical API call, independent of base URL and calling style."""

    method: str
    path: str
    parse: Callable[[Any], Any]
    form: Params | None = None
    json_body: Any | None = None

    def url(self, endpoint: str) -> str:
        return f"{endpoint.rstrip('/')}{self.path}"


def selector_of(target: Selector) -> str:
    # Passed through unescaped; callers own selector syntax.
    if isinstance(target, Light):
        return target.selector
    return target


def _lights_path(target: Selector, suffix: str = "") -> str:
    return f"/v1/lights/{selector_of(target)}{suffix}"


def list_lights(selector: Selector = "all") -> LifxRequest:
    return LifxRequest(method="GET", path=_lights_path(selector), parse=parse_lights)


def set_state(selector: Selector, state: State) -> LifxRequest:
    return LifxRequest(
        method="PUT", path=_lights_path(selector, "/state"), parse=parse_results, form=state.to_params()
    )


def set_states(states: States) -> LifxRequest:
    return LifxRequest(method="PUT", path="/v1/lights/state", parse=parse_results, json_body=states.to_json())


def state_delta(selector: Selector, delta: StateDelta) -> LifxRequest:
    return LifxRequest(
        method="POST", path=_lights_path(selector, "/state/delta"), parse=parse_results, form=delta.to_params()
    )


def toggle(selector: Selector, command: Toggle) -> LifxRequest:
    return LifxRequest(
        method="POST", path=_lights_path(selector, "/toggle"), parse=parse_results, form=command.to_params()
    )


def clean(selector: Selector, command: Clean) -> LifxRequest:
    return LifxRequest(
        method="POST", path=_lights_path(selector, "/clean"), parse=parse_results, form=command.to_params()
    )


def _effect(selector: Selector, name: str, params: Params) -> LifxRequest:
    return LifxRequest(
        method="POST", path=_lights_path(selector, f"/effects/{name}"), parse=parse_results, form=params
    )


def breathe_effect(selector: Selector, effect: BreatheEffect) -> LifxRequest:
    return _effect(selector, "breathe", effect.to_params())


def pulse_effect(selector: Selector, effect: PulseEffect) -> LifxRequest:
    return _effect(selector, "pulse", effect.to_params())


def move_effect(selector: Selector, effect: MoveEffect) -> LifxRequest:
    return _effect(selector, "move", effect.to_params())


def morph_effect(selector: Selector, effect: MorphEffect) -> LifxRequest:
    return _effect(selector, "morph", effect.to_params())


def flame_effect(selector: Selector, effect: FlameEffect) -> LifxRequest:
    return _effect(selector, "flame", effect.to_params())


def effects_off(selector: Selector, command: EffectsOff) -> LifxRequest:
    return _effect(selector, "off", command.to_params())


def list_scenes() -> LifxRequest:
    return LifxRequest(method="GET", path="/v1/scenes", parse=parse_scenes)


def validate_color(color: str) -> LifxRequest:
    return LifxRequest(method="GET", path=f"/v1/color?string={color}", parse=parse_color)
