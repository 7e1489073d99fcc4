"""Logging utilities for the ENERGRID simulation engine.

This module provides the centralized logger for the package and a helper to
apply a logging configuration at runtime.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from energrid.config.schema import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Create a default logger
logger = logging.getLogger("energrid")

# Configure logging if not already configured
if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    logger.addHandler(console_handler)
    logger.setLevel(logging.INFO)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply a logging configuration to the package logger.

    Args:
        config: Logging configuration to apply

    Returns:
        The configured package logger
    """
    level = getattr(logging, config.level.value)
    formatter = logging.Formatter(config.format)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.setLevel(level)
    return logger


__all__ = ["logger", "configure_logging", "DEFAULT_FORMAT"]
