import pytest

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
    palette_param,
    render_value,
)


@pytest.mark.parametrize(
    "command_cls",
    [State, StateDelta, Toggle, Clean, BreatheEffect, PulseEffect, MoveEffect, MorphEffect, FlameEffect, EffectsOff],
)
def test_empty_command_flattens_to_no_params(command_cls):
    assert command_cls().to_params() == []


def test_state_power_off_flattens_to_single_pair():
    assert State(power="off").to_params() == [("power", "off")]


def test_state_all_fields_follow_declaration_order():
    state = State(power="on", color="red", brightness=0.5, duration=2.0, infrared=0.25, selector="all", fast=True)
    assert state.to_params() == [
        ("power", "on"),
        ("color", "red"),
        ("brightness", "0.5"),
        ("duration", "2"),
        ("infrared", "0.25"),
        ("selector", "all"),
        ("fast", "true"),
    ]


def test_state_delta_all_fields_follow_declaration_order():
    delta = StateDelta(
        power="on", duration=1.5, infrared=0.1, hue=30, saturation=0.2, brightness=-0.1, kelvin=500, fast=False
    )
    assert [name for name, _ in delta.to_params()] == [
        "power",
        "duration",
        "infrared",
        "hue",
        "saturation",
        "brightness",
        "kelvin",
        "fast",
    ]
    assert dict(delta.to_params())["fast"] == "false"
    assert dict(delta.to_params())["hue"] == "30"
    assert dict(delta.to_params())["kelvin"] == "500"


def test_breathe_effect_all_fields():
    effect = BreatheEffect(
        color="red", from_color="green", period=10, cycles=1.5, persist=False, power_on=True, peak=0.5
    )
    assert effect.to_params() == [
        ("color", "red"),
        ("from_color", "green"),
        ("period", "10"),
        ("cycles", "1.5"),
        ("persist", "false"),
        ("power_on", "true"),
        ("peak", "0.5"),
    ]


def test_pulse_effect_has_no_peak():
    effect = PulseEffect(color="red", from_color="green", period=1, cycles=3, persist=True, power_on=True)
    assert [name for name, _ in effect.to_params()] == [
        "color",
        "from_color",
        "period",
        "cycles",
        "persist",
        "power_on",
    ]


def test_move_and_flame_effects():
    assert MoveEffect(direction="backward", period=4, cycles=2.0, power_on=True, fast=False).to_params() == [
        ("direction", "backward"),
        ("period", "4"),
        ("cycles", "2"),
        ("power_on", "true"),
        ("fast", "false"),
    ]
    assert FlameEffect(period=5, duration=30.0, power_on=True, fast=True).to_params() == [
        ("period", "5"),
        ("duration", "30"),
        ("power_on", "true"),
        ("fast", "true"),
    ]


def test_morph_effect_palette_uses_bracket_quote_format():
    effect = MorphEffect(period=5, duration=2.5, palette=["red", "green"], power_on=True, fast=False)
    assert effect.to_params() == [
        ("period", "5"),
        ("duration", "2.5"),
        ("palette", '["red", "green"]'),
        ("power_on", "true"),
        ("fast", "false"),
    ]


def test_palette_param_literal_format():
    assert palette_param(["red", "green"]) == '["red", "green"]'
    assert palette_param(["kelvin:2700"]) == '["kelvin:2700"]'
    assert palette_param([]) == "[]"


def test_clean_toggle_effects_off_fields():
    assert Clean(stop=False, duration=0).to_params() == [("stop", "false"), ("duration", "0")]
    assert Toggle(duration=3).to_params() == [("duration", "3")]
    assert EffectsOff(power_off=True).to_params() == [("power_off", "true")]


def test_render_value_canonical_forms():
    assert render_value(True) == "true"
    assert render_value(False) == "false"
    assert render_value(1.0) == "1"
    assert render_value(0.75) == "0.75"
    assert render_value(0.00001) == "0.00001"
    assert render_value(-0.0001) == "-0.0001"
    assert render_value(-3) == "-3"
    assert render_value("id:abc") == "id:abc"


def test_states_json_omits_absent_fields():
    states = States(
        states=[State(selector="id:a", power="on"), State(selector="id:b", brightness=0.5)],
        defaults=State(duration=5.0),
    )
    assert states.to_json() == {
        "states": [{"selector": "id:a", "power": "on"}, {"selector": "id:b", "brightness": 0.5}],
        "defaults": {"duration": 5.0},
    }
    assert States().to_json() == {}
