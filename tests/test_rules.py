# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_rules.py — Unit tests for each alert generator.

Plain lists of values, no API calls. Each test focuses on one rule and one
boundary condition.
"""

import pytest
from tourism_forecast.rules import (
    generate_condition_alerts,
    generate_precipitation_alerts,
    generate_temperature_alerts,
    generate_wind_alerts,
)
from tourism_forecast.thresholds import WeatherThresholds


# ---------------------------------------------------------------------------
# generate_temperature_alerts
# ---------------------------------------------------------------------------

def test_temperature_below_critical_min():
    alerts = generate_temperature_alerts([14.9])
    assert alerts == [{"type": "critical", "message": "Critical low temperature: 14.9°C"}]


def test_temperature_above_critical_max():
    alerts = generate_temperature_alerts([40.5])
    assert alerts == [{"type": "critical", "message": "Critical high temperature: 40.5°C"}]


def test_temperature_whole_number_has_no_decimal():
    alerts = generate_temperature_alerts([12.0])
    assert alerts[0]["message"] == "Critical low temperature: 12°C"


@pytest.mark.parametrize("temp", [15.0, 20.0, 27.0, 35.0, 40.0])
def test_temperature_inside_critical_band_never_alerts(temp):
    """The 20-35°C warning band is not checked; 15 and 40 are not breaches."""
    assert generate_temperature_alerts([temp]) == []


def test_temperature_one_alert_per_sample():
    alerts = generate_temperature_alerts([10.0, 27.0, 10.0, 45.0])
    assert [a["message"] for a in alerts] == [
        "Critical low temperature: 10°C",
        "Critical low temperature: 10°C",
        "Critical high temperature: 45°C",
    ]


def test_temperature_negative_values_are_valid():
    alerts = generate_temperature_alerts([-5.5])
    assert alerts[0]["message"] == "Critical low temperature: -5.5°C"


# ---------------------------------------------------------------------------
# generate_precipitation_alerts
# ---------------------------------------------------------------------------

def test_precipitation_warning_then_critical_in_input_order():
    alerts = generate_precipitation_alerts([0, 3, 6, 16, 0])
    assert alerts == [
        {"type": "warning", "message": "Moderate rainfall expected: 6.0mm in 3 hours"},
        {"type": "critical", "message": "Heavy rainfall expected: 16.0mm in 3 hours"},
    ]


def test_precipitation_at_thresholds_does_not_alert_at_that_level():
    """Both limits are strict: 5mm is fine, 15mm is only a warning."""
    alerts = generate_precipitation_alerts([5.0, 15.0])
    assert [a["type"] for a in alerts] == ["warning"]


def test_precipitation_rounds_to_one_decimal():
    alerts = generate_precipitation_alerts([7.26])
    assert alerts[0]["message"] == "Moderate rainfall expected: 7.3mm in 3 hours"


def test_precipitation_exact_halves_round_up():
    alerts = generate_precipitation_alerts([6.25, 8.25, 16.25])
    assert [a["message"] for a in alerts] == [
        "Moderate rainfall expected: 6.3mm in 3 hours",
        "Moderate rainfall expected: 8.3mm in 3 hours",
        "Heavy rainfall expected: 16.3mm in 3 hours",
    ]


def test_precipitation_none_is_dry():
    assert generate_precipitation_alerts([None, 0.0]) == []


# ---------------------------------------------------------------------------
# generate_wind_alerts
# ---------------------------------------------------------------------------

def test_wind_above_critical():
    alerts = generate_wind_alerts([31.2])
    assert alerts == [{"type": "critical", "message": "Critical wind speed: 31.2m/s"}]


@pytest.mark.parametrize("speed", [0.0, 20.0, 25.0, 30.0])
def test_wind_no_warning_level_alert(speed):
    """Only the critical limit alerts; 20-30 m/s produces nothing."""
    assert generate_wind_alerts([speed]) == []


# ---------------------------------------------------------------------------
# generate_condition_alerts
# ---------------------------------------------------------------------------

def test_thunderstorm_alerts_per_sample():
    alerts = generate_condition_alerts(["Thunderstorm", "Clear", "Thunderstorm"])
    assert alerts == [
        {"type": "critical", "message": "Thunderstorm conditions detected"},
        {"type": "critical", "message": "Thunderstorm conditions detected"},
    ]


@pytest.mark.parametrize("condition", ["Clear", "Clouds", "Rain", "Snow", "thunderstorm", "Mist"])
def test_other_conditions_do_not_alert(condition):
    assert generate_condition_alerts([condition]) == []


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("generator", [
    generate_temperature_alerts,
    generate_precipitation_alerts,
    generate_wind_alerts,
    generate_condition_alerts,
])
def test_empty_input_gives_no_alerts(generator):
    assert generator([]) == []


def test_custom_thresholds_are_respected():
    thresholds = WeatherThresholds(
        temperature_critical_min=0.0,
        precipitation_warning=1.0,
        wind_critical=10.0,
    )
    assert generate_temperature_alerts([5.0], thresholds) == []
    assert generate_precipitation_alerts([2.0], thresholds)[0]["type"] == "warning"
    assert len(generate_wind_alerts([12.0], thresholds)) == 1
