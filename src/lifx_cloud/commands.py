from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


Params = list[tuple[str, str]]


def render_value(value: Any) -> str:
    """Render a form value the way the LIFX HTTP API parses it.

    Booleans are lowercase and integral floats drop the trailing ``.0``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # Positional notation; str() switches to exponents below 1e-4.
        return format(Decimal(repr(value)), "f")
    return str(value)


def palette_param(palette: list[str]) -> str:
    # The effects endpoint expects this exact quoting, not a JSON-encoded array.
    return "[" + ", ".join(f'"{color}"' for color in palette) + "]"


class _FormCommand(BaseModel):
    def _render_field(self, name: str, value: Any) -> str:
        return render_value(value)

    def to_params(self) -> Params:
        """Flatten populated fields into form pairs, in declaration order."""
        params: Params = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            params.append((name, self._render_field(name, value)))
        return params


class State(_FormCommand):
    power: str | None = Field(default=None, description="on or off.", examples=["on"])
    color: str | None = Field(default=None, description="Any LIFX color string.", examples=["red", "kelvin:2700"])
    brightness: float | None = Field(default=None, description="0.0 to 1.0.")
    duration: float | None = Field(default=None, description="Transition time in seconds.")
    infrared: float | None = Field(default=None, description="Infrared channel, 0.0 to 1.0.")
    selector: str | None = Field(default=None, description="Only meaningful inside a bulk States payload.")
    fast: bool | None = Field(default=None, description="Skip state checks and return 202 immediately.")


class StateDelta(_FormCommand):
    power: str | None = None
    duration: float | None = None
    infrared: float | None = None
    hue: float | None = Field(default=None, description="Rotate hue by this many degrees.")
    saturation: float | None = None
    brightness: float | None = None
    kelvin: int | None = None
    fast: bool | None = None


class Toggle(_FormCommand):
    duration: int | None = None


class Clean(_FormCommand):
    stop: bool | None = Field(default=None, description="Stop a running clean cycle.")
    duration: int | None = Field(default=None, description="Cycle length in seconds; 0 uses the device default.")


class BreatheEffect(_FormCommand):
    color: str | None = None
    from_color: str | None = None
    period: float | None = None
    cycles: float | None = None
    persist: bool | None = None
    power_on: bool | None = None
    peak: float | None = None


class PulseEffect(_FormCommand):
    color: str | None = None
    from_color: str | None = None
    period: float | None = None
    cycles: float | None = None
    persist: bool | None = None
    power_on: bool | None = None


class MoveEffect(_FormCommand):
    direction: str | None = Field(default=None, examples=["forward", "backward"])
    period: int | None = None
    cycles: float | None = None
    power_on: bool | None = None
    fast: bool | None = None


class MorphEffect(_FormCommand):
    period: int | None = None
    duration: float | None = None
    palette: list[str] | None = Field(default=None, examples=[["red", "green"]])
    power_on: bool | None = None
    fast: bool | None = None

    def _render_field(self, name: str, value: Any) -> str:
        if name == "palette":
            return palette_param(value)
        return render_value(value)


class FlameEffect(_FormCommand):
    period: int | None = None
    duration: float | None = None
    power_on: bool | None = None
    fast: bool | None = None


class EffectsOff(_FormCommand):
    power_off: bool | None = None


class States(BaseModel):
    """Bulk state write: per-selector states plus shared defaults.

    Sent as a JSON body; nested structure does not flatten to form pairs.
    """

    states: list[State] | None = None
    defaults: State | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
