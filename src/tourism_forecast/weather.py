# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch the 5-day / 3-hour forecast from OpenWeatherMap.

The forecast endpoint always returns the provider's fixed horizon (about
40 buckets starting now); it has no date-range parameters. Use
filter_samples_to_range() to cut the result down to a trip.

API docs: https://openweathermap.org/forecast5
"""

import requests
from datetime import date

from tourism_forecast.exceptions import ProviderFetchError
from tourism_forecast.utils import parse_date, with_retry

OPENWEATHERMAP_FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"
REQUEST_TIMEOUT_SECONDS = 10


def fetch_forecast(
    latitude: float,
    longitude: float,
    api_key: str,
    units: str = "metric",
) -> list[dict]:
    """Fetch the 3-hourly forecast for a location.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        api_key: OpenWeatherMap API key.
        units: 'metric' (°C, m/s) is what the analysis thresholds expect.

    Returns:
        List of sample dicts in forecast order, each with time,
        temperature, precipitation, wind_speed and condition.

    Raises:
        ProviderFetchError: If every retry fails (network error or non-2xx
            status) or the payload has an unexpected shape.
    """
    params = {
        "lat": latitude,
        "lon": longitude,
        "appid": api_key,
        "units": units,
    }

    def _call():
        r = requests.get(OPENWEATHERMAP_FORECAST_URL, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label="OpenWeatherMap forecast API")

    return _parse_forecast(data)


def _parse_forecast(data: dict) -> list[dict]:
    """Convert the raw OpenWeatherMap payload into forecast sample dicts.

    Each entry of data["list"] looks like::

        {"dt_txt": "2024-01-01 12:00:00",
         "main": {"temp": 27.3, ...},
         "rain": {"3h": 0.4},          # absent when dry
         "wind": {"speed": 5.1, ...},
         "weather": [{"main": "Rain", ...}]}

    Raises:
        ProviderFetchError: If the payload is missing required fields.
    """
    try:
        buckets = data["list"]
        samples = []
        for bucket in buckets:
            rain = bucket.get("rain") or {}
            samples.append({
                "time":          bucket.get("dt_txt", ""),
                "temperature":   float(bucket["main"]["temp"]),
                "precipitation": float(rain.get("3h") or 0.0),
                "wind_speed":    float(bucket["wind"]["speed"]),
                "condition":     bucket["weather"][0]["main"],
            })
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        raise ProviderFetchError(f"Unexpected API response structure: {e!r}") from e

    return samples


def filter_samples_to_range(
    samples: list[dict],
    start_date: str | date,
    end_date: str | date,
) -> list[dict]:
    """Keep only samples whose date lies within [start_date, end_date].

    Samples with an unreadable time are dropped.

    Raises:
        ValueError: If a date is not ISO formatted or start is after end.
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start > end:
        raise ValueError(f"Start date {start} is after end date {end}")

    kept = []
    for sample in samples:
        try:
            day = date.fromisoformat(sample["time"][:10])
        except (KeyError, TypeError, ValueError):
            continue
        if start <= day <= end:
            kept.append(sample)
    return kept
