"""Numeric sanitizers shared by the score and formatting helpers."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from typing import Any

from synapsefi.synapse_logging import get_logger

logger = get_logger(__name__)

FLOAT_MAX = sys.float_info.max


def finite_or_zero(value: Any) -> float:
    """
    Return value as a float, or 0.0 when it is not a finite number.

    Strings, bytes, bools and None are not numbers here, even when float()
    would accept them. Finite numbers beyond the float range (10**400,
    Decimal("1e400")) saturate to +/- sys.float_info.max.
    """
    if value is None or isinstance(value, (bool, str, bytes)):
        if value is not None:
            logger.debug("numeric_value_substituted", raw=repr(value)[:32])
        return 0.0
    try:
        f = float(value)
    except OverflowError:
        return FLOAT_MAX if value > 0 else -FLOAT_MAX
    except (TypeError, ValueError):
        logger.debug("numeric_value_substituted", raw=repr(value)[:32])
        return 0.0
    if math.isinf(f) and isinstance(value, Decimal) and value.is_finite():
        return math.copysign(FLOAT_MAX, f)
    if not math.isfinite(f):
        logger.debug("numeric_value_substituted", raw=repr(value))
        return 0.0
    return f


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 toward +inf (2.5 -> 3, -2.5 -> -2)."""
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole
