"""
Structured logging for SynapseFi helpers.

structlog with ISO timestamps, log level and an event_type key, rendered as
JSON by default (LOG_FORMAT=json) or as console output for local work.
Addresses passed under the "address" key are shortened before rendering so
logs never carry full wallet or contract addresses.

Uses only Python stdlib logging and structlog; no other synapsefi imports to
avoid circular imports (config.env logs through this module).
"""

from __future__ import annotations

import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

# SYNAPSE_LOG_LEVEL wins over the generic LOG_LEVEL
LOG_LEVEL = (os.getenv("SYNAPSE_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

_HEX_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601, UTC)."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _shorten_address(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """0x1234...abcd for well-formed addresses; anything else is logged as-is."""
    value = event_dict.get("address")
    if isinstance(value, str) and _HEX_ADDRESS_RE.fullmatch(value):
        event_dict["address"] = f"{value[:6]}...{value[-4:]}"
    return event_dict


def configure_structlog() -> None:
    """Configure structlog: timestamp, level, event_type, JSON or console renderer."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
        _shorten_address,
    ]
    if LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.warning("contract_address_invalid", key="SYNAPSE_TOKEN_ADDRESS")
    """
    return structlog.get_logger(name).bind(logger=name)
