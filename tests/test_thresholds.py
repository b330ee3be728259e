# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for thresholds.py — WeatherThresholds and condition weights."""

import dataclasses

import pytest

from tourism_forecast.thresholds import (
    DEFAULT_THRESHOLDS,
    IMPACT_WEIGHTS,
    Condition,
    WeatherThresholds,
    impact_weight,
)


def test_default_values():
    t = DEFAULT_THRESHOLDS
    assert (t.temperature_ideal_min, t.temperature_ideal_max) == (25.0, 30.0)
    assert (t.temperature_warning_min, t.temperature_warning_max) == (20.0, 35.0)
    assert (t.temperature_critical_min, t.temperature_critical_max) == (15.0, 40.0)
    assert (t.precipitation_warning, t.precipitation_critical) == (5.0, 15.0)
    assert (t.wind_warning, t.wind_critical) == (20.0, 30.0)


def test_thresholds_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_THRESHOLDS.wind_critical = 99.0


def test_from_config_overrides_only_given_fields():
    t = WeatherThresholds.from_config({"precipitation_warning": 3, "wind_critical": 25.5})
    assert t.precipitation_warning == 3.0
    assert t.wind_critical == 25.5
    assert t.temperature_ideal_min == 25.0


@pytest.mark.parametrize("section", [None, {}])
def test_from_config_empty_gives_defaults(section):
    assert WeatherThresholds.from_config(section) == DEFAULT_THRESHOLDS


def test_from_config_unknown_key_raises():
    with pytest.raises(ValueError, match="Unknown threshold"):
        WeatherThresholds.from_config({"humidity_max": 80})


@pytest.mark.parametrize("value", ["5", True, None])
def test_from_config_non_number_raises(value):
    with pytest.raises(ValueError, match="must be a number"):
        WeatherThresholds.from_config({"wind_warning": value})


def test_impact_weights_table():
    assert IMPACT_WEIGHTS[Condition.CLEAR] == 1.0
    assert IMPACT_WEIGHTS[Condition.CLOUDS] == 0.8
    assert IMPACT_WEIGHTS[Condition.RAIN] == 0.4
    assert IMPACT_WEIGHTS[Condition.THUNDERSTORM] == 0.2
    assert IMPACT_WEIGHTS[Condition.SNOW] == 0.1


def test_impact_weights_are_read_only():
    with pytest.raises(TypeError):
        IMPACT_WEIGHTS[Condition.CLEAR] = 0.0


@pytest.mark.parametrize("condition, weight", [
    ("Clear", 1.0),
    ("Clouds", 0.8),
    ("Rain", 0.4),
    ("Thunderstorm", 0.2),
    ("Snow", 0.1),
])
def test_impact_weight_known(condition, weight):
    assert impact_weight(condition) == weight


def test_impact_weight_unknown_is_neutral_and_logged(log_file):
    assert impact_weight("Haze") == 1.0
    assert "[WARNING] Unknown weather condition 'Haze'" in log_file.read_text()
