"""Utility modules for the ENERGRID simulation engine.

This module provides domain enumerations, type definitions and the package
logger.
"""

from . import enums, types

__all__ = ["enums", "types"]
