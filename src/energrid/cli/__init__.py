"""CLI module for the ENERGRID simulation engine.

The CLI runs the simulation and reports its progress and final metrics.
"""

from .main import app, main

__all__ = ["app", "main"]
