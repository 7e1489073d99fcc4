"""Asset module for the ENERGRID simulation system.

This module provides the load contract, the load implementations and the
energy source used by the grid.
"""

from .base import Load
from .load import SteadyLoad, WindTurbineFactory
from .source import EnergySource, create_coal_power_plant, create_source, create_wind_turbine

__all__ = [
    "Load",
    "SteadyLoad",
    "WindTurbineFactory",
    "EnergySource",
    "create_source",
    "create_wind_turbine",
    "create_coal_power_plant",
]
