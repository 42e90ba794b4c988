"""
SynapseFi helpers — formatting and validation utilities for the credit passport.

Pure, stateless helpers: EVM address validation, credit score clamping and
tiering, number / currency / percent formatting, timestamps and relative time.
Contract addresses are read once from the environment (see synapsefi.config).
"""

__version__ = "0.1.0"

from synapsefi.config import CONTRACT_ADDRESSES, ContractAddresses, get_contract_addresses
from synapsefi.constants import ZERO_ADDRESS
from synapsefi.utils.address_utils import (
    address_equals,
    format_address,
    is_hex_address,
    is_zero_address,
)
from synapsefi.utils.formatting import (
    ensure_defined,
    format_currency,
    format_number,
    to_percent,
)
from synapsefi.utils.score_utils import (
    ScoreTier,
    clamp_score,
    get_score_tier,
    score_to_progress,
)
from synapsefi.utils.time_utils import format_timestamp, relative_time_from_seconds

__all__ = [
    "CONTRACT_ADDRESSES",
    "ContractAddresses",
    "ScoreTier",
    "ZERO_ADDRESS",
    "address_equals",
    "clamp_score",
    "ensure_defined",
    "format_address",
    "format_currency",
    "format_number",
    "format_timestamp",
    "get_contract_addresses",
    "get_score_tier",
    "is_hex_address",
    "is_zero_address",
    "relative_time_from_seconds",
    "score_to_progress",
    "to_percent",
]
