from __future__ import annotations

from dataclasses import dataclass

import os

from lifx_cloud.errors import LifxConfigError


DEFAULT_API_ENDPOINT = "https://api.lifx.com"
# Unofficial offline server speaking the same HTTP surface.
DEFAULT_LOCAL_ENDPOINT = "http://localhost:8089"


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class LifxConfig:
    access_token: str
    api_endpoints: tuple[str, ...] = (DEFAULT_API_ENDPOINT,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_endpoints", tuple(self.api_endpoints))

    def validate(self) -> None:
        if not isinstance(self.access_token, str) or not self.access_token.strip():
            raise LifxConfigError("access_token must be a non-empty string")
        if not self.api_endpoints:
            raise LifxConfigError("at least one api endpoint is required")
        for endpoint in self.api_endpoints:
            if not isinstance(endpoint, str) or "://" not in endpoint:
                raise LifxConfigError(f"api endpoint must be an absolute URL: {endpoint!r}")

    @property
    def primary_endpoint(self) -> str:
        return self.api_endpoints[0]

    @staticmethod
    def from_env() -> "LifxConfig":
        return LifxConfig(
            access_token=os.getenv("LIFX_ACCESS_TOKEN", ""),
            api_endpoints=tuple(_split_csv(os.getenv("LIFX_API_ENDPOINTS"))) or (DEFAULT_API_ENDPOINT,),
        )
