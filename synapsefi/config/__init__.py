"""
Configuration for SynapseFi helpers.

Reads .env and environment variables once; exposes the configured contract
addresses and the display timezone.
"""

from synapsefi.config.env import (  # noqa: F401
    CONTRACT_ADDRESSES,
    ContractAddresses,
    get_contract_addresses,
    get_display_timezone,
    load_synapse_env,
)

__all__ = [
    "CONTRACT_ADDRESSES",
    "ContractAddresses",
    "get_contract_addresses",
    "get_display_timezone",
    "load_synapse_env",
]
