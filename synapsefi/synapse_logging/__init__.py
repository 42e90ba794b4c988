"""
Structured logging for SynapseFi helpers.

Use get_logger() in every module; log with a snake_case event_type first.
"""

from synapsefi.synapse_logging.logger import get_logger

__all__ = ["get_logger"]
