# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
thresholds.py — Weather thresholds and condition impact weights.

Defaults are tuned for Caribbean beach tourism. A [thresholds] table in
config.toml can override individual values; the result is frozen so the
analysis functions can share one instance safely.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from types import MappingProxyType

from tourism_forecast.utils import log_event


@dataclass(frozen=True)
class WeatherThresholds:
    """Temperature bands (°C), precipitation (mm per 3h) and wind (m/s) limits."""

    temperature_ideal_min: float = 25.0
    temperature_ideal_max: float = 30.0
    temperature_warning_min: float = 20.0
    temperature_warning_max: float = 35.0
    temperature_critical_min: float = 15.0
    temperature_critical_max: float = 40.0
    precipitation_warning: float = 5.0
    precipitation_critical: float = 15.0
    wind_warning: float = 20.0
    wind_critical: float = 30.0

    @classmethod
    def from_config(cls, section: dict | None) -> "WeatherThresholds":
        """Build thresholds from a [thresholds] config table.

        Args:
            section: Mapping of field name to number. Missing fields keep
                their defaults. None or {} returns the defaults.

        Raises:
            ValueError: If a key is not a known threshold or a value is
                not a number.
        """
        if not section:
            return cls()

        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in section.items():
            if key not in known:
                raise ValueError(f"Unknown threshold in [thresholds]: {key}")
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Threshold [thresholds].{key} must be a number, got {value!r}")
            overrides[key] = float(value)
        return replace(cls(), **overrides)


DEFAULT_THRESHOLDS = WeatherThresholds()


class Condition(str, Enum):
    """Primary weather condition categories reported by OpenWeatherMap."""

    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"


# How favourable each condition is for tourism demand (0-1)
IMPACT_WEIGHTS = MappingProxyType({
    Condition.CLEAR:        1.0,
    Condition.CLOUDS:       0.8,
    Condition.RAIN:         0.4,
    Condition.THUNDERSTORM: 0.2,
    Condition.SNOW:         0.1,
})

UNKNOWN_CONDITION_WEIGHT = 1.0


def impact_weight(condition: str) -> float:
    """Return the impact weight for a condition category.

    Categories outside the Condition enum (Mist, Haze, Drizzle, ...) are
    scored as neutral (UNKNOWN_CONDITION_WEIGHT) and a warning is logged.
    """
    try:
        return IMPACT_WEIGHTS[Condition(condition)]
    except ValueError:
        msg = f"Unknown weather condition {condition!r}; using neutral weight {UNKNOWN_CONDITION_WEIGHT}"
        print(f"[analysis] {msg}")
        log_event(msg, level="WARNING")
        return UNKNOWN_CONDITION_WEIGHT
