"""CLI helpers for UTOPIA GATEWAY.

Utilities used by the command-line interface: parsing of logger-level
overrides and message emitters that write to stderr with emoji→ASCII
fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["parse_log_level", "error", "success"]
