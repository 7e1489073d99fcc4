"""Simulation module for the ENERGRID system.

This module provides the grid allocation engine, the simulation driver and
the error types they raise.
"""

from .errors import DepletedError, EnergridError, GridOverloadedError, OverloadedError
from .grid import Grid, GridState
from .simulation import Simulation

__all__ = [
    "Grid",
    "GridState",
    "Simulation",
    "EnergridError",
    "DepletedError",
    "OverloadedError",
    "GridOverloadedError",
]
