from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter


class Error(BaseModel):
    field: str
    message: list[str]


class Color(BaseModel):
    # Partial on input ("kelvin:3500"), complete when returned by the API.
    hue: float | None = None
    saturation: float | None = None
    kelvin: int | None = None
    brightness: float | None = None
    error: str | None = None
    errors: list[Error] | None = None


class Group(BaseModel):
    id: str
    name: str


class Location(BaseModel):
    id: str
    name: str


class Capabilities(BaseModel):
    has_color: bool
    has_variable_color_temp: bool
    has_ir: bool
    has_hev: bool
    has_chain: bool
    has_matrix: bool
    has_multizone: bool
    min_kelvin: int
    max_kelvin: int


class Product(BaseModel):
    name: str
    identifier: str
    company: str
    vendor_id: int
    product_id: int
    capabilities: Capabilities


class Light(BaseModel):
    """Snapshot of one light as returned by ``GET /v1/lights/{selector}``.

    Never mutated locally: send a new State and list again to observe changes.
    """

    id: str
    uuid: str
    label: str
    connected: bool
    power: str
    color: Color
    brightness: float
    group: Group
    location: Location
    product: Product
    last_seen: str
    seconds_since_seen: int
    error: str | None = None
    errors: list[Error] | None = None

    @property
    def selector(self) -> str:
        return f"id:{self.id}"


class Account(BaseModel):
    uuid: str


class SceneState(BaseModel):
    selector: str | None = None
    power: str | None = None
    color: Color | str | None = None
    brightness: float | None = None
    duration: float | None = None
    infrared: float | None = None
    fast: bool | None = None


class Scene(BaseModel):
    uuid: str
    name: str
    account: Account
    states: list[SceneState] = Field(default_factory=list)
    created_at: int
    updated_at: int
    error: str | None = None
    errors: list[Error] | None = None


class LifxResult(BaseModel):
    id: str
    label: str
    status: str


class LifxResults(BaseModel):
    """Per-target outcomes of a write, or a top-level ``error`` string."""

    results: list[LifxResult] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        if self.error:
            return False
        return all(result.status == "ok" for result in self.results or [])


_LIGHTS = TypeAdapter(list[Light])
_SCENES = TypeAdapter(list[Scene])


def parse_lights(body: Any) -> list[Light]:
    return _LIGHTS.validate_python(body)


def parse_scenes(body: Any) -> list[Scene]:
    return _SCENES.validate_python(body)


def parse_color(body: Any) -> Color:
    return Color.model_validate(body)


def parse_results(body: Any) -> LifxResults:
    return LifxResults.model_validate(body)
