# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: retry logic, event logging and number helpers.
"""

import math
import time
from collections.abc import Callable
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

from tourism_forecast.exceptions import ProviderFetchError

DEFAULT_LOG_PATH = Path("logs/tourism_forecast.log")
MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 5


def with_retry(
    fn: Callable[..., Any],
    *args: Any,
    label: str = "API call",
    log_path: Path | None = None,
    **kwargs: Any,
) -> Any:
    """Call a function up to MAX_ATTEMPTS times, retrying on any exception.

    Args:
        fn: Callable to invoke (usually a zero-argument closure).
        *args: Positional arguments forwarded to fn.
        label: Human-readable name for the call, used in warning messages.
        log_path: Log file for recording the final failure.
        **kwargs: Keyword arguments forwarded to fn.

    Returns:
        The return value of fn on success.

    Raises:
        ProviderFetchError: If all MAX_ATTEMPTS attempts raise exceptions.
    """
    last_error = None
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            last_error = e
            if attempt < MAX_ATTEMPTS:
                print(
                    f"[weather] {label} failed (attempt {attempt}/{MAX_ATTEMPTS}): "
                    f"{e}. Retrying in {RETRY_DELAY_SECONDS}s..."
                )
                time.sleep(RETRY_DELAY_SECONDS)
    msg = f"All {MAX_ATTEMPTS} attempts failed for {label}: {last_error}"
    print(f"[weather] {msg}")
    log_event(msg, level="ERROR", log_path=log_path)
    raise ProviderFetchError(msg) from last_error


def log_event(message: str, level: str = "INFO", log_path: Path | None = None) -> None:
    """Append a timestamped line to the log file.

    Format: ``2026-02-23 20:00:01 [WARNING] Unknown weather condition 'Mist'``

    Args:
        message: Text to log.
        level: Severity label written in brackets.
        log_path: Destination log file. Defaults to DEFAULT_LOG_PATH.
    """
    path = log_path if log_path is not None else DEFAULT_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(path, "a") as f:
            f.write(f"{timestamp} [{level}] {message}\n")
    except OSError:
        pass  # Never crash on logging failure


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, e.g. 0.125 -> 0.13 at two digits.

    Python's round() uses banker's rounding; forecast scores and
    percentages are published with half-up rounding instead.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def fmt_number(value: float) -> str:
    """Format a reading without a trailing '.0' for whole numbers.

    Examples: 12.0 -> '12', 41.5 -> '41.5', -3 -> '-3'.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def fmt_fixed(value: float, digits: int = 1) -> str:
    """Format with a fixed number of decimals, halves rounded away from zero.

    Works on the exact binary value of the float, so 6.25 -> '6.3' while
    1.45 (stored as 1.4499999...) -> '1.4'. Format specs like ':.1f'
    round halves to even instead.
    """
    exponent = Decimal(1).scaleb(-digits)
    return str(Decimal(float(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def parse_date(value: str | date) -> date:
    """Accept a 'YYYY-MM-DD' string or a date and return a date.

    Raises:
        ValueError: If the string is not an ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())
