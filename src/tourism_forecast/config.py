# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.

The OpenWeatherMap API key may live in the file or in the
OPENWEATHERMAP_API_KEY environment variable; the file wins.
"""

import os
import tomllib
from pathlib import Path

from tourism_forecast.exceptions import ConfigurationError
from tourism_forecast.thresholds import WeatherThresholds

DEFAULT_CONFIG_PATH = Path("config.toml")
API_KEY_ENV_VAR = "OPENWEATHERMAP_API_KEY"

DEFAULT_CONFIG = {
    "weather": {
        "units": "metric",
        "restrict_to_dates": False,
    },
    "thresholds": {},
    "log": {
        "path": "logs/tourism_forecast.log",
    },
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values, with optional keys filled in
        from DEFAULT_CONFIG.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your API key."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return _with_defaults(config)


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [weather]
        api_key           = <str>    # optional, else $OPENWEATHERMAP_API_KEY
        units             = <str>    # "metric" (default)
        restrict_to_dates = <bool>   # filter samples to the trip dates

        [thresholds]                 # optional WeatherThresholds overrides
        precipitation_warning = <float>

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a
            threshold override is invalid.
    """
    required_sections = ["weather", "log"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    if "path" not in config["log"]:
        raise ValueError("Missing required config key: [log].path")

    weather = config["weather"]
    if "restrict_to_dates" in weather and not isinstance(weather["restrict_to_dates"], bool):
        raise ValueError("[weather].restrict_to_dates must be true or false")

    # Raises ValueError on unknown or non-numeric thresholds
    WeatherThresholds.from_config(config.get("thresholds"))


def _with_defaults(config: dict) -> dict:
    merged = {}
    for section, defaults in DEFAULT_CONFIG.items():
        merged[section] = {**defaults, **config.get(section, {})}
    for section, values in config.items():
        merged.setdefault(section, values)
    return merged


def default_config() -> dict:
    """Configuration used when no config file is supplied."""
    return {section: dict(values) for section, values in DEFAULT_CONFIG.items()}


def resolve_api_key(config: dict) -> str:
    """Return the OpenWeatherMap API key from config or the environment.

    Raises:
        ConfigurationError: If neither source provides a key.
    """
    key = (config.get("weather") or {}).get("api_key") or os.environ.get(API_KEY_ENV_VAR)
    if not key:
        raise ConfigurationError(
            f"No OpenWeatherMap API key: set [weather].api_key or ${API_KEY_ENV_VAR}"
        )
    return key


def thresholds_from_config(config: dict) -> WeatherThresholds:
    return WeatherThresholds.from_config(config.get("thresholds"))
