# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
analysis.py — Summary statistics, trends and impact score for a forecast.

Every function takes the full list of forecast sample dicts produced by
weather.fetch_forecast (keys: time, temperature, precipitation,
wind_speed, condition) and extracts the values it needs itself.

All calculations use the Python standard library only.
"""

from tourism_forecast.exceptions import EmptyInputError
from tourism_forecast.rules import (
    generate_condition_alerts,
    generate_precipitation_alerts,
    generate_temperature_alerts,
    generate_wind_alerts,
)
from tourism_forecast.thresholds import DEFAULT_THRESHOLDS, WeatherThresholds, impact_weight
from tourism_forecast.utils import round_half_up

TREND_THRESHOLD_RATIO = 0.1


def _mean(values: list[float], label: str) -> float:
    if not values:
        raise EmptyInputError(f"Cannot average {label}: no forecast samples")
    return sum(values) / len(values)


def temperatures(samples: list[dict]) -> list[float]:
    return [s["temperature"] for s in samples]


def precipitations(samples: list[dict]) -> list[float]:
    """Precipitation per sample; a missing reading counts as 0 mm."""
    return [s.get("precipitation") or 0.0 for s in samples]


def wind_speeds(samples: list[dict]) -> list[float]:
    return [s["wind_speed"] for s in samples]


def conditions(samples: list[dict]) -> list[str]:
    return [s["condition"] for s in samples]


def compute_trend(values: list[float]) -> str:
    """Classify a series as "increasing", "decreasing" or "stable".

    The series is split in two halves (the second half gets the extra
    element when the length is odd) and the difference of the half means is
    compared with 10% of the range of the whole series.

    Returns:
        "stable" for fewer than 2 values or when the difference is smaller
        than the threshold, otherwise "increasing" / "decreasing".
    """
    if len(values) < 2:
        return "stable"

    middle = len(values) // 2
    first_half = values[:middle]
    second_half = values[middle:]

    first_avg = sum(first_half) / len(first_half)
    second_avg = sum(second_half) / len(second_half)

    difference = second_avg - first_avg
    threshold = (max(values) - min(values)) * TREND_THRESHOLD_RATIO

    if abs(difference) < threshold:
        return "stable"
    # A flat series has threshold 0 and difference 0
    if difference == 0:
        return "stable"
    return "increasing" if difference > 0 else "decreasing"


def analyze_temperature(
    samples: list[dict],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> dict:
    """Average, min, max, trend and critical alerts for temperature (°C).

    Raises:
        EmptyInputError: If samples is empty.
    """
    temps = temperatures(samples)
    return {
        "average": _mean(temps, "temperature"),
        "min":     min(temps),
        "max":     max(temps),
        "trend":   compute_trend(temps),
        "alerts":  generate_temperature_alerts(temps, thresholds),
    }


def analyze_precipitation(
    samples: list[dict],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> dict:
    """Average, max, trend and rainfall alerts for precipitation (mm per 3h).

    There is no "min" key: the minimum is almost always 0 mm.

    Raises:
        EmptyInputError: If samples is empty.
    """
    precip = precipitations(samples)
    return {
        "average": _mean(precip, "precipitation"),
        "max":     max(precip),
        "trend":   compute_trend(precip),
        "alerts":  generate_precipitation_alerts(precip, thresholds),
    }


def analyze_wind(
    samples: list[dict],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> dict:
    """Average, min, max, trend and critical alerts for wind speed (m/s).

    Raises:
        EmptyInputError: If samples is empty.
    """
    winds = wind_speeds(samples)
    return {
        "average": _mean(winds, "wind speed"),
        "min":     min(winds),
        "max":     max(winds),
        "trend":   compute_trend(winds),
        "alerts":  generate_wind_alerts(winds, thresholds),
    }


def count_conditions(samples: list[dict]) -> dict[str, int]:
    """Occurrences per condition, in first-seen order."""
    counts: dict[str, int] = {}
    for condition in conditions(samples):
        counts[condition] = counts.get(condition, 0) + 1
    return counts


def analyze_conditions(samples: list[dict]) -> dict:
    """Dominant condition, counts and percentage share of each condition.

    Percentages are rounded independently, so they may not add up to 100.
    Ties for the dominant condition go to the one seen first.

    Raises:
        EmptyInputError: If samples is empty.
    """
    if not samples:
        raise EmptyInputError("Cannot analyse conditions: no forecast samples")

    counts = count_conditions(samples)
    total = len(samples)
    percentages = {
        condition: int(round_half_up(count / total * 100))
        for condition, count in counts.items()
    }

    return {
        "dominant":     max(counts, key=counts.get),
        "distribution": counts,
        "percentages":  percentages,
        "alerts":       generate_condition_alerts(conditions(samples)),
    }


def compute_impact_score(
    samples: list[dict],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """Score how favourable the forecast is for tourism, from 0.0 to 1.0.

    Starts at 1.0 and multiplies in a penalty for each unfavourable mean:

        temperature outside the ideal band   x 0.8
        precipitation above the warning mm   x 0.6
        wind above the warning speed         x 0.7

    then multiplies by the share-weighted condition weight
    (Clear 1.0 ... Snow 0.1). Every factor lies in [0, 1], so the score
    does too. Rounded half-up to 2 decimals.

    Raises:
        EmptyInputError: If samples is empty.
    """
    score = 1.0

    avg_temp = _mean(temperatures(samples), "temperature")
    avg_precip = _mean(precipitations(samples), "precipitation")
    avg_wind = _mean(wind_speeds(samples), "wind speed")

    if avg_temp < thresholds.temperature_ideal_min or avg_temp > thresholds.temperature_ideal_max:
        score *= 0.8

    # Only the warning level counts here; heavier rain is not penalised further
    if avg_precip > thresholds.precipitation_warning:
        score *= 0.6

    if avg_wind > thresholds.wind_warning:
        score *= 0.7

    total = len(samples)
    condition_score = 0.0
    for condition, count in count_conditions(samples).items():
        condition_score += impact_weight(condition) * (count / total)

    score *= condition_score

    return round_half_up(score, 2)


def analyze_trends(samples: list[dict]) -> dict:
    """Trend label per metric plus raw condition counts."""
    return {
        "temperature":   compute_trend(temperatures(samples)),
        "precipitation": compute_trend(precipitations(samples)),
        "wind":          compute_trend(wind_speeds(samples)),
        "conditions":    count_conditions(samples),
    }
