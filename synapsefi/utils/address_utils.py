"""EVM address validation and display utilities."""

from __future__ import annotations

import re
from typing import Any

from synapsefi.constants import ZERO_ADDRESS

HEX_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def is_hex_address(value: Any) -> bool:
    """Return True if value is a 0x-prefixed, 40-hex-digit address (any hex case)."""
    return isinstance(value, str) and HEX_ADDRESS_RE.fullmatch(value) is not None


def is_zero_address(address: Any) -> bool:
    """Return True if address is a valid hex address equal to the zero address."""
    return is_hex_address(address) and address.lower() == ZERO_ADDRESS


def address_equals(a: str | None, b: str | None) -> bool:
    """
    Case-insensitive address comparison.

    Both sides must be non-empty strings; the hex shape is not checked, so
    this also works for partially typed input.
    """
    if not a or not b or not isinstance(a, str) or not isinstance(b, str):
        return False
    return a.lower() == b.lower()


def format_address(address: Any, leading: int = 6, trailing: int = 4) -> str:
    """
    Shorten an address for display: 0x1234...abcd.

    Returns "" for anything that is not a valid hex address. trailing=0 keeps
    the full address after the ellipsis.
    """
    if not is_hex_address(address):
        return ""
    return f"{address[:leading]}...{address[-trailing:]}"
