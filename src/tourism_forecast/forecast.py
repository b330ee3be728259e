# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
forecast.py — Weather analysis entry point used by the demand forecaster.

get_weather_analysis() fetches the forecast, runs every analyzer and returns
one result dict. It never raises: any failure is logged and reported as
None, which callers treat as "weather unavailable".
"""

from datetime import date
from pathlib import Path

from tourism_forecast.analysis import (
    analyze_conditions,
    analyze_precipitation,
    analyze_temperature,
    analyze_trends,
    analyze_wind,
    compute_impact_score,
    conditions,
    precipitations,
    temperatures,
    wind_speeds,
)
from tourism_forecast.config import default_config, resolve_api_key, thresholds_from_config
from tourism_forecast.exceptions import EmptyInputError
from tourism_forecast.rules import (
    generate_condition_alerts,
    generate_precipitation_alerts,
    generate_temperature_alerts,
    generate_wind_alerts,
)
from tourism_forecast.thresholds import DEFAULT_THRESHOLDS, WeatherThresholds
from tourism_forecast.utils import log_event
from tourism_forecast.weather import fetch_forecast, filter_samples_to_range


def build_weather_analysis(
    samples: list[dict],
    thresholds: WeatherThresholds = DEFAULT_THRESHOLDS,
) -> dict:
    """Run every analyzer over a list of forecast samples.

    The top-level "alerts" list repeats the alerts already embedded in each
    metric summary, in the order temperature, precipitation, wind,
    condition.

    Returns:
        Dict with keys temperature, precipitation, wind, conditions,
        alerts, impact_score and trends.

    Raises:
        EmptyInputError: If samples is empty.
    """
    if not samples:
        raise EmptyInputError("Forecast provider returned no samples")

    all_alerts = [
        *generate_temperature_alerts(temperatures(samples), thresholds),
        *generate_precipitation_alerts(precipitations(samples), thresholds),
        *generate_wind_alerts(wind_speeds(samples), thresholds),
        *generate_condition_alerts(conditions(samples)),
    ]

    return {
        "temperature":   analyze_temperature(samples, thresholds),
        "precipitation": analyze_precipitation(samples, thresholds),
        "wind":          analyze_wind(samples, thresholds),
        "conditions":    analyze_conditions(samples),
        "alerts":        all_alerts,
        "impact_score":  compute_impact_score(samples, thresholds),
        "trends":        analyze_trends(samples),
    }


def get_weather_analysis(
    latitude: float,
    longitude: float,
    start_date: str | date,
    end_date: str | date,
    config: dict | None = None,
) -> dict | None:
    """Fetch and analyse the forecast for a trip.

    By default the provider's whole horizon (about 5 days from now) is
    analysed whatever the trip dates are. Set
    ``[weather] restrict_to_dates = true`` to keep only samples inside
    [start_date, end_date].

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        start_date: Trip start, 'YYYY-MM-DD' or date.
        end_date: Trip end, 'YYYY-MM-DD' or date.
        config: Loaded config dict; defaults plus $OPENWEATHERMAP_API_KEY
            when None.

    Returns:
        The analysis dict from build_weather_analysis(), or None if the
        forecast could not be fetched or analysed.
    """
    if config is None:
        config = default_config()
    log_path = None

    print(
        f"[weather] Starting analysis for ({latitude}, {longitude}) "
        f"from {start_date} to {end_date}"
    )

    try:
        log_section = config.get("log") or {}
        if log_section.get("path"):
            log_path = Path(log_section["path"])
        weather_config = config.get("weather") or {}
        api_key = resolve_api_key(config)
        thresholds = thresholds_from_config(config)

        samples = fetch_forecast(
            latitude=latitude,
            longitude=longitude,
            api_key=api_key,
            units=weather_config.get("units", "metric"),
        )
        print(f"[weather] Received {len(samples)} forecast samples")

        if weather_config.get("restrict_to_dates", False):
            samples = filter_samples_to_range(samples, start_date, end_date)
            print(f"[weather] {len(samples)} samples fall within the trip dates")

        analysis = build_weather_analysis(samples, thresholds)
    except Exception as e:
        msg = f"Weather analysis unavailable for ({latitude}, {longitude}): {e}"
        print(f"[weather] {msg}")
        log_event(msg, level="ERROR", log_path=log_path)
        return None

    log_event(
        f"Weather analysis for ({latitude}, {longitude}): "
        f"impact score {analysis['impact_score']}, {len(analysis['alerts'])} alert(s)",
        log_path=log_path,
    )
    return analysis
