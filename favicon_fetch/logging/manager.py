"""
Logging manager for favicon_fetch.

This module provides centralized logging configuration and management.
"""

import logging
import sys
from pathlib import Path
from typing import Dict

from rich.console import Console
from rich.logging import RichHandler

from ..config.models import LoggingConfig, LogLevel
from .formatters import StructuredFormatter


class LoggingManager:
    """Centralized logging manager."""

    def __init__(self) -> None:
        """Initialize logging manager."""
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.value))

        if config.enable_console:
            self._setup_console_handler(config)

        if config.file_path:
            self._setup_file_handler(config)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug("Logging system configured successfully")

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Setup console logging handler."""
        # stdout is reserved for command output
        if config.enable_structured:
            handler: logging.Handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(StructuredFormatter())
        else:
            handler = RichHandler(
                console=Console(stderr=True),
                show_path=False,
                markup=False,
            )
        handler.setLevel(getattr(logging, config.level.value))
        self.add_handler("console", handler)

    def _setup_file_handler(self, config: LoggingConfig) -> None:
        """Setup file logging handler."""
        log_path = Path(str(config.file_path))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(
            StructuredFormatter() if config.enable_structured else logging.Formatter(config.format)
        )
        handler.setLevel(getattr(logging, config.level.value))
        self.add_handler("file", handler)

    def set_level(self, level: LogLevel) -> None:
        """
        Set logging level on the root logger and all managed handlers.

        Args:
            level: New logging level
        """
        log_level = getattr(logging, level.value)
        logging.getLogger().setLevel(log_level)
        for handler in self._handlers.values():
            handler.setLevel(log_level)

    def add_handler(self, name: str, handler: logging.Handler) -> None:
        """
        Add logging handler to the root logger.

        Args:
            name: Handler name
            handler: Logging handler
        """
        logging.getLogger().addHandler(handler)
        self._handlers[name] = handler

    def cleanup(self) -> None:
        """Remove and close all managed handlers."""
        root_logger = logging.getLogger()
        for handler in list(self._handlers.values()):
            root_logger.removeHandler(handler)
            handler.close()

        self._handlers.clear()
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration
    """
    _logging_manager.setup_logging(config)


def cleanup_logging() -> None:
    """Cleanup logging system."""
    _logging_manager.cleanup()
