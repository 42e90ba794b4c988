"""
Environment variable loading for SynapseFi helpers.

- CREDIT_PASSPORT_ADDRESS: CreditPassport contract (fallback: VITE_CREDIT_PASSPORT_ADDRESS)
- SYNAPSE_TOKEN_ADDRESS: SYN token contract (fallback: VITE_SYNAPSE_TOKEN_ADDRESS)
- SYNAPSE_DISPLAY_TZ: IANA zone used by format_timestamp (default: UTC)
- Loads .env from project root when available.

Absent or malformed values never raise; they fall back to ZERO_ADDRESS / UTC.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from synapsefi.constants import DEFAULT_DISPLAY_TZ, ZERO_ADDRESS
from synapsefi.synapse_logging import get_logger
from synapsefi.utils.address_utils import is_hex_address

logger = get_logger(__name__)

# Project root: config is synapsefi/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"

CREDIT_PASSPORT_KEYS = ("CREDIT_PASSPORT_ADDRESS", "VITE_CREDIT_PASSPORT_ADDRESS")
SYNAPSE_TOKEN_KEYS = ("SYNAPSE_TOKEN_ADDRESS", "VITE_SYNAPSE_TOKEN_ADDRESS")


@dataclass(frozen=True)
class ContractAddresses:
    """Deployed contract addresses; ZERO_ADDRESS when not configured."""

    credit_passport: str = ZERO_ADDRESS
    synapse_token: str = ZERO_ADDRESS

    def is_configured(self) -> bool:
        """True when neither address is the zero address."""
        return ZERO_ADDRESS not in (self.credit_passport.lower(), self.synapse_token.lower())


def load_synapse_env(env_path: Path | str | None = None) -> None:
    """Load .env (project root by default). Existing variables are not overridden."""
    load_dotenv(env_path or _ENV_PATH, override=False)


def env_address(keys: tuple[str, ...]) -> str:
    """
    Return the first non-empty variable among keys if it is a hex address.

    Missing -> ZERO_ADDRESS silently; malformed -> ZERO_ADDRESS with a warning.
    """
    for key in keys:
        value = (os.getenv(key) or "").strip()
        if not value:
            continue
        if is_hex_address(value):
            return value
        logger.warning("contract_address_invalid", key=key, length=len(value))
        return ZERO_ADDRESS
    return ZERO_ADDRESS


def get_contract_addresses() -> ContractAddresses:
    """Read contract addresses from the environment (after loading .env)."""
    load_synapse_env()
    addresses = ContractAddresses(
        credit_passport=env_address(CREDIT_PASSPORT_KEYS),
        synapse_token=env_address(SYNAPSE_TOKEN_KEYS),
    )
    if not addresses.is_configured():
        logger.debug("contract_addresses_unset", address=ZERO_ADDRESS)
    return addresses


def get_display_timezone() -> tzinfo:
    """
    Return SYNAPSE_DISPLAY_TZ as a ZoneInfo.
    Default: UTC; unknown zone names log a warning and use UTC.
    Reads the process environment only; .env is loaded once at import.
    """
    name = (os.getenv("SYNAPSE_DISPLAY_TZ") or DEFAULT_DISPLAY_TZ).strip()
    if name.upper() == DEFAULT_DISPLAY_TZ:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("display_timezone_invalid", tz=name, fallback=DEFAULT_DISPLAY_TZ)
        return timezone.utc


# Read once at import (also loads .env)
CONTRACT_ADDRESSES = get_contract_addresses()
