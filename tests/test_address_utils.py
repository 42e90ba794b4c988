"""
Tests for address validation and display helpers.
"""

from __future__ import annotations

import pytest

from synapsefi.constants import ZERO_ADDRESS
from synapsefi.utils.address_utils import (
    address_equals,
    format_address,
    is_hex_address,
    is_zero_address,
)


def test_is_hex_address_accepts_mixed_case(valid_address):
    """0x + 40 hex digits is valid regardless of hex case."""
    assert is_hex_address(valid_address)
    assert is_hex_address(valid_address.lower())
    assert is_hex_address("0x" + valid_address[2:].upper())


@pytest.mark.parametrize(
    "value",
    [
        "",
        None,
        42,
        "0x",
        "0x" + "a" * 39,
        "0x" + "a" * 41,
        "0X" + "a" * 40,
        "a" * 42,
        "0x" + "g" * 40,
        "0x" + "a" * 40 + "\n",
        " 0x" + "a" * 40,
    ],
)
def test_is_hex_address_rejects_malformed(value):
    """Wrong length, prefix, characters, whitespace or type are rejected."""
    assert is_hex_address(value) is False


def test_is_zero_address():
    """Only a well-formed all-zero address counts as the zero address."""
    assert is_zero_address(ZERO_ADDRESS)
    assert not is_zero_address("0x" + "0" * 39 + "1")
    assert not is_zero_address("0x0")
    assert not is_zero_address(None)


def test_address_equals_case_insensitive(valid_address):
    """Comparison ignores case."""
    assert address_equals(valid_address, valid_address.lower())
    assert not address_equals(valid_address, ZERO_ADDRESS)


def test_address_equals_requires_both_values(valid_address):
    """Empty or missing operands are never equal, even to each other."""
    assert not address_equals(None, None)
    assert not address_equals("", "")
    assert not address_equals(valid_address, None)
    assert not address_equals("", valid_address)


def test_address_equals_does_not_validate_shape():
    """Partial input compares as plain case-insensitive strings."""
    assert address_equals("0xABC", "0xabc")


def test_format_address_default(valid_address):
    """First 6 + '...' + last 4."""
    assert format_address(valid_address) == "0xAbCd...EF01"


def test_format_address_custom_lengths(valid_address):
    """leading / trailing control how much is kept."""
    assert format_address(valid_address, leading=4, trailing=6) == "0xAb...CDEF01"


def test_format_address_zero_trailing_keeps_whole_tail(valid_address):
    """trailing=0 slices from the start, so the full address follows the ellipsis."""
    assert format_address(valid_address, trailing=0) == f"0xAbCd...{valid_address}"


def test_format_address_invalid_returns_empty():
    """Invalid input yields an empty string rather than an error."""
    assert format_address("not-an-address") == ""
    assert format_address(None) == ""
