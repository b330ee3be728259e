# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Weather-signal analysis for tourism demand forecasting."""

from tourism_forecast.forecast import build_weather_analysis, get_weather_analysis

__all__ = ["build_weather_analysis", "get_weather_analysis"]
