from __future__ import annotations

from typing import Any


class LifxError(Exception):
    pass


class LifxConfigError(LifxError, ValueError):
    pass


class LifxTransportError(LifxError):
    """No configured endpoint produced an HTTP response.

    ``endpoint`` is the last base URL attempted; the underlying httpx error is
    chained as ``__cause__``.
    """

    def __init__(self, message: str, *, endpoint: str) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class LifxDecodeError(LifxError):
    def __init__(self, message: str, *, status_code: int, body: Any) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
