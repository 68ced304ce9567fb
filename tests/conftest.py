from typing import Any

import pytest

from lifx_cloud.config import LifxConfig


PRIMARY = "http://primary.test"
FALLBACK = "http://fallback.test"


@pytest.fixture
def config() -> LifxConfig:
    return LifxConfig(access_token="tok", api_endpoints=[PRIMARY, FALLBACK])


@pytest.fixture
def single_config() -> LifxConfig:
    return LifxConfig(access_token="tok", api_endpoints=[PRIMARY])


def light_payload(light_id: str = "d073d5000001", label: str = "Desk") -> dict[str, Any]:
    return {
        "id": light_id,
        "uuid": "8fa5f072-af97-44ed-ae54-e70fd7bd9d20",
        "label": label,
        "connected": True,
        "power": "on",
        "color": {"hue": 250.0, "saturation": 0.0, "kelvin": 3500},
        "brightness": 0.5,
        "group": {"id": "1c8de82b81f445e7cfaafae49b259c71", "name": "Lounge"},
        "location": {"id": "1d6fe8ef0fde4c6d77b0012dc736662c", "name": "Home"},
        "product": {
            "name": "LIFX Color 1000",
            "identifier": "lifx_color_a19",
            "company": "LIFX",
            "vendor_id": 1,
            "product_id": 22,
            "capabilities": {
                "has_color": True,
                "has_variable_color_temp": True,
                "has_ir": False,
                "has_hev": False,
                "has_chain": False,
                "has_matrix": False,
                "has_multizone": False,
                "min_kelvin": 2500,
                "max_kelvin": 9000,
            },
        },
        "last_seen": "2026-10-19T12:00:00Z",
        "seconds_since_seen": 0,
    }


def results_payload(light_id: str = "d073d5000001", status: str = "ok") -> dict[str, Any]:
    return {"results": [{"id": light_id, "label": "Desk", "status": status}]}
