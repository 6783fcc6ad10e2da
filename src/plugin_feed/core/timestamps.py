"""Timestamp normalization and relative-time rendering."""

import math
import time
from typing import Any, Optional

# Larger than any plausible seconds value, so it must be milliseconds
MILLIS_THRESHOLD = 40_000_000_000

MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 2_592_000
YEAR = 31_536_000


def _to_number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        # float() accepts digit-group underscores, feeds never mean them
        if "_" in value:
            return 0.0
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def normalize_timestamp(value: Any) -> int:
    """
    Convert a seconds-or-milliseconds epoch value to epoch milliseconds.

    Upstream repositories emit either unit without tagging it, so the unit is
    guessed from magnitude.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Epoch milliseconds, or 0 when the value is missing or implausible
    """
    if isinstance(value, int) and not isinstance(value, bool):
        # Exact path so large integer millis never pass through float
        number: float | int = value
    else:
        number = _to_number(value)

    if not math.isfinite(number) or number == 0:
        return 0

    digits = len(str(int(abs(number))))

    if digits >= 12 or number > MILLIS_THRESHOLD:
        return int(number)
    if 9 <= digits <= 11:
        return int(number * 1000)
    return 0


def time_ago(value: Any, now_ms: Optional[int] = None) -> str:
    """Render a timestamp relative to now, e.g. ``3d ago`` or ``in 2h``."""
    millis = normalize_timestamp(value)
    if millis == 0:
        return "unknown"

    if now_ms is None:
        now_ms = int(time.time() * 1000)

    seconds = (now_ms - millis) // 1000
    prefix = ""
    suffix = " ago"

    if seconds < 0:
        seconds = abs(seconds)
        prefix = "in "
        suffix = ""

    if seconds < 5 and not prefix:
        return "just now"
    if seconds < MINUTE:
        return f"{prefix}{seconds}s{suffix}"
    if seconds < HOUR:
        return f"{prefix}{seconds // MINUTE}m{suffix}"
    if seconds < DAY:
        return f"{prefix}{seconds // HOUR}h{suffix}"
    if seconds < 30 * DAY:
        return f"{prefix}{seconds // DAY}d{suffix}"
    if seconds // MONTH < 12:
        return f"{prefix}{seconds // MONTH}mo{suffix}"
    return f"{prefix}{seconds // YEAR}yr{suffix}"
