# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
rules.py — Turn raw forecast values into threshold alerts.

Each generate_* function receives the values of one metric in forecast
order and returns one alert dict per value that breaches a rule:

    {"type": "critical", "message": "Critical wind speed: 31.2m/s"}

Alerts are not deduplicated; a stormy afternoon produces one alert per
3-hour bucket. Empty input gives an empty list.

Only the critical temperature band and the critical wind limit raise
alerts. The warning temperature band (20-35°C) and the wind warning limit
are used by the impact score, not here.
"""

from tourism_forecast.thresholds import DEFAULT_THRESHOLDS, Condition, WeatherThresholds
from tourism_forecast.utils import fmt_fixed, fmt_number


def _alert(severity: str, message: str) -> dict:
    return {"type": severity, "message": message}


def generate_temperature_alerts(
    temps: list[float],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> list[dict]:
    """Critical alert for every temperature below or above the critical band."""
    alerts = []
    for temp in temps:
        if temp < thresholds.temperature_critical_min:
            alerts.append(_alert("critical", f"Critical low temperature: {fmt_number(temp)}°C"))
        elif temp > thresholds.temperature_critical_max:
            alerts.append(_alert("critical", f"Critical high temperature: {fmt_number(temp)}°C"))
    return alerts


def generate_precipitation_alerts(
    precipitation: list[float],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> list[dict]:
    """Critical alert above the critical limit, warning above the warning limit."""
    alerts = []
    for precip in precipitation:
        precip = precip or 0.0
        if precip > thresholds.precipitation_critical:
            alerts.append(_alert(
                "critical",
                f"Heavy rainfall expected: {fmt_fixed(precip, 1)}mm in 3 hours",
            ))
        elif precip > thresholds.precipitation_warning:
            alerts.append(_alert(
                "warning",
                f"Moderate rainfall expected: {fmt_fixed(precip, 1)}mm in 3 hours",
            ))
    return alerts


def generate_wind_alerts(
    speeds: list[float],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> list[dict]:
    """Critical alert for every wind speed above the critical limit."""
    return [
        _alert("critical", f"Critical wind speed: {fmt_number(speed)}m/s")
        for speed in speeds
        if speed > thresholds.wind_critical
    ]


def generate_condition_alerts(conditions: list[str]) -> list[dict]:
    """Critical alert for every Thunderstorm bucket."""
    return [
        _alert("critical", "Thunderstorm conditions detected")
        for condition in conditions
        if condition == Condition.THUNDERSTORM.value
    ]
