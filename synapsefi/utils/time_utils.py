"""
Timestamp rendering for Unix-second timestamps.

format_timestamp -> "Jan 5, 2024, 14:03" (24-hour clock, display timezone).
relative_time_from_seconds -> "3 days ago", "in 1 hour", "5 mins ago".
Non-finite or non-positive timestamps render as "".
"""

from __future__ import annotations

import math
import time
from datetime import datetime, tzinfo
from typing import Any, Optional

from synapsefi.config.env import get_display_timezone
from synapsefi.utils.numeric import FLOAT_MAX, finite_or_zero

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400

# Short month names as en-US renders them; strftime("%b") is locale dependent
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _valid_timestamp(timestamp: Any) -> Optional[float]:
    ts = finite_or_zero(timestamp)
    return ts if ts > 0 else None


def format_timestamp(timestamp: Any, tz: Optional[tzinfo] = None) -> str:
    """Render Unix seconds as "Mon D, YYYY, HH:MM" in tz (default: display timezone)."""
    ts = _valid_timestamp(timestamp)
    if ts is None:
        return ""
    try:
        dt = datetime.fromtimestamp(ts, tz or get_display_timezone())
    except (OverflowError, OSError, ValueError):
        # Beyond datetime's range (year > 9999)
        return ""
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {dt.hour:02d}:{dt.minute:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def _now_seconds(now: Any) -> float:
    """Caller-supplied now if it is a finite number, else the wall clock."""
    if now is not None and not isinstance(now, (bool, str, bytes)):
        try:
            value = float(now)
        except (TypeError, ValueError, OverflowError):
            value = math.nan
        if math.isfinite(value):
            return value
    return time.time()


def relative_time_from_seconds(timestamp: Any, now: Optional[float] = None) -> str:
    """
    Describe how far timestamp (Unix seconds) is from now.

    Uses the largest non-zero unit among days, hours and minutes; anything
    under a minute is "0 min ago". now (Unix seconds) defaults to the wall
    clock, which is also used when now is not a finite number.
    """
    ts = _valid_timestamp(timestamp)
    if ts is None:
        return ""
    diff = _now_seconds(now) - ts
    ahead = diff < 0
    # |now - ts| can exceed the float range for extreme inputs
    abs_s = min(abs(diff), FLOAT_MAX)

    days = math.floor(abs_s / SECONDS_PER_DAY)
    hours = math.floor(abs_s / SECONDS_PER_HOUR)
    minutes = math.floor(abs_s / SECONDS_PER_MINUTE)
    if days:
        label = _plural(days, "day")
    elif hours:
        label = _plural(hours, "hour")
    else:
        label = _plural(minutes, "min")
    return f"in {label}" if ahead else f"{label} ago"
