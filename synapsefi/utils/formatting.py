"""
en-US number, currency and percent formatting.

Output follows the browser's Intl.NumberFormat("en-US") conventions the
front-end shows: "," grouping, "." decimal point, leading "-" sign (kept
when a negative value rounds to zero, "-0") and half-away-from-zero rounding
on the shortest decimal form of the float (1.005 -> "1.01", not "1.00").
Non-finite input is rendered as 0. Currency symbols and minor units come from
the CLDR data shipped with Babel.
"""

from __future__ import annotations

import decimal
import re
import unicodedata
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, TypeVar

from babel.numbers import get_currency_precision, get_currency_symbol

from synapsefi.constants import DEFAULT_CURRENCY, DEFAULT_LOCALE
from synapsefi.utils.numeric import finite_or_zero

T = TypeVar("T")

MAX_FRACTION_DIGITS = 20

_CURRENCY_CODE_RE = re.compile(r"[A-Za-z]{3}")

# Enough precision to quantize any finite float (up to ~1.8e308) to 20 places
_CONTEXT = decimal.Context(prec=400)

# Inserted between a symbol ending in a letter ("CHF", "FCFA") and the digits
NBSP = "\u00a0"


def _to_decimal(value: Any) -> Decimal:
    return Decimal(repr(finite_or_zero(value)))


def _check_fraction_digits(minimum: int, maximum: int) -> None:
    if not 0 <= minimum <= MAX_FRACTION_DIGITS or not 0 <= maximum <= MAX_FRACTION_DIGITS:
        raise ValueError(f"fraction digits must be within 0..{MAX_FRACTION_DIGITS}")
    if minimum > maximum:
        raise ValueError(
            f"minimum_fraction_digits ({minimum}) exceeds maximum_fraction_digits ({maximum})"
        )


def _format_decimal(
    d: Decimal,
    minimum_fraction_digits: int,
    maximum_fraction_digits: int,
    use_grouping: bool = True,
) -> tuple[str, str]:
    """
    Round and render d; returns (sign, digits) so callers can place a symbol
    between them. The sign follows d, so -0.001 renders as "-0".
    """
    q = d.quantize(
        Decimal(1).scaleb(-maximum_fraction_digits),
        rounding=ROUND_HALF_UP,
        context=_CONTEXT,
    )
    sign = "-" if d.is_signed() else ""
    q = abs(q)
    spec = f"{',' if use_grouping else ''}.{maximum_fraction_digits}f"
    text = format(q, spec)
    if maximum_fraction_digits > minimum_fraction_digits:
        whole, _, frac = text.partition(".")
        frac = frac.rstrip("0").ljust(minimum_fraction_digits, "0")
        text = f"{whole}.{frac}" if frac else whole
    return sign, text


def format_number(
    value: Any,
    minimum_fraction_digits: int = 0,
    maximum_fraction_digits: int = 2,
    use_grouping: bool = True,
) -> str:
    """
    Format a number with grouping and up to two decimals by default.

        format_number(1234.5)     -> "1,234.5"
        format_number(0.129)      -> "0.13"
        format_number(float("nan")) -> "0"
    """
    _check_fraction_digits(minimum_fraction_digits, maximum_fraction_digits)
    sign, text = _format_decimal(
        _to_decimal(value), minimum_fraction_digits, maximum_fraction_digits, use_grouping
    )
    return f"{sign}{text}"


def currency_minor_units(currency: str) -> int:
    """Default number of decimals for an ISO 4217 code (0 for JPY and PYG, 2 for USD)."""
    return get_currency_precision(currency.upper())


def currency_prefix(currency: str) -> str:
    """
    en-US display prefix for a currency: "$", "MX$", or "CHF" plus a no-break space.

    Codes without a CLDR symbol fall back to the ISO code. A no-break space
    separates the prefix from the digits when it ends in a letter.
    """
    symbol = get_currency_symbol(currency.upper(), locale=DEFAULT_LOCALE)
    if unicodedata.category(symbol[-1])[0] not in ("S", "Z"):
        return f"{symbol}{NBSP}"
    return symbol


def format_currency(
    value: Any,
    currency: str = DEFAULT_CURRENCY,
    minimum_fraction_digits: Optional[int] = None,
    maximum_fraction_digits: int = 2,
) -> str:
    """
    Format an amount of money: "$1,234.50", "-€3.00", "¥1,235", "CHF 10.00".

    The currency's CLDR minor units are the default minimum decimals, capped
    by maximum_fraction_digits. Codes without an en-US symbol are shown as the
    upper-cased ISO code followed by a no-break space.

    Raises:
        ValueError: currency is not a three-letter code, or the fraction
            digit arguments are out of range.
    """
    if not isinstance(currency, str) or not _CURRENCY_CODE_RE.fullmatch(currency):
        raise ValueError(f"invalid currency code: {currency!r}")
    code = currency.upper()
    if minimum_fraction_digits is None:
        minimum_fraction_digits = min(currency_minor_units(code), maximum_fraction_digits)
    _check_fraction_digits(minimum_fraction_digits, maximum_fraction_digits)

    sign, text = _format_decimal(
        _to_decimal(value), minimum_fraction_digits, maximum_fraction_digits
    )
    return f"{sign}{currency_prefix(code)}{text}"


def to_percent(ratio: Any, fraction_digits: int = 0) -> str:
    """
    Render a 0..1 ratio as a percentage; the ratio is clamped to [0, 1].

        to_percent(0.1234)    -> "12%"
        to_percent(0.1234, 1) -> "12.3%"
        to_percent(1.7)       -> "100%"
    """
    _check_fraction_digits(0, fraction_digits)
    r = _to_decimal(ratio)
    r = max(Decimal(0), min(Decimal(1), r))
    _, text = _format_decimal(r.scaleb(2), 0, fraction_digits)
    return f"{text}%"


def ensure_defined(value: Optional[T], fallback: T) -> T:
    """Return value unless it is None (falsy values such as 0 or "" are kept)."""
    return fallback if value is None else value
