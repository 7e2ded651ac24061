"""
Logging setup for favicon_fetch.

Console output through rich, file output, optional structured JSON records.
"""

from .formatters import CONTEXT_FIELDS, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "cleanup_logging",
    "StructuredFormatter",
    "CONTEXT_FIELDS",
]
