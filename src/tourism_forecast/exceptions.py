# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
exceptions.py — Error types raised inside the weather analysis engine.

None of these reach the forecast caller: get_weather_analysis() logs them
and returns None instead.
"""


class WeatherAnalysisError(Exception):
    """Base class for all tourism-forecast errors."""


class ProviderFetchError(WeatherAnalysisError, RuntimeError):
    """The forecast provider failed, returned a non-success status, or sent
    a payload we could not read."""


class EmptyInputError(WeatherAnalysisError, ValueError):
    """An analysis was asked to summarise zero forecast samples."""


class ConfigurationError(WeatherAnalysisError):
    """Required configuration (e.g. the provider API key) is missing or invalid."""
