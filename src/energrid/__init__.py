"""ENERGRID - discrete-time energy grid allocation and simulation engine."""

from .sim import Grid, GridState, Simulation

__version__ = "0.1.0"
__description__ = "Discrete-time energy grid allocation and simulation engine"

__all__ = [
    "Grid",
    "GridState",
    "Simulation",
]
