"""Load asset implementations for the ENERGRID simulation system.

This module provides the two consumers of the simulation: a steady load
with constant demand, and the wind turbine factory whose demand grows with
the number of turbines it manufactured during the current step.
"""

from __future__ import annotations

import logging

from pydantic import Field

from energrid.config.schema import SourceConfig
from energrid.sim.assets.base import Load
from energrid.sim.assets.source import EnergySource, create_wind_turbine
from energrid.utils.types import STEADY_DEMAND, TURBINE_BUILD_LOAD, Energy

logger = logging.getLogger(__name__)


class SteadyLoad(Load):
    """Consumer with a constant demand at every step."""

    name: str = Field(default="steady-load", min_length=1, description="Human-readable name of the load")
    load_value: Energy = Field(default=STEADY_DEMAND, ge=0.0, description="Constant demand per step")

    def demand(self) -> Energy:
        return self.load_value

    def advance(self) -> None:
        pass


class WindTurbineFactory(Load):
    """Factory manufacturing wind turbines.

    Each turbine built costs ``build_load`` energy, charged to the grid on
    the step following the build. The energy of committed steps accumulates
    in ``consumption``.
    """

    name: str = Field(default="wind-turbine-factory", min_length=1, description="Human-readable name of the load")
    build_load: Energy = Field(default=TURBINE_BUILD_LOAD, ge=0.0, description="Energy spent per turbine built")
    turbine: SourceConfig = Field(default_factory=SourceConfig.wind_turbine, description="Built turbine parameters")
    built: int = Field(default=0, ge=0, description="Total turbines built")
    built_since_last_step: int = Field(default=0, ge=0, description="Turbines built since the last committed step")
    consumption: Energy = Field(default=0.0, ge=0.0, description="Energy consumed by committed steps")

    def demand(self) -> Energy:
        """Energy owed for the turbines built since the last committed step.

        Returns:
            Build load times pending turbine count
        """
        return self.build_load * self.built_since_last_step

    def build(self) -> EnergySource:
        """Manufacture a new wind turbine.

        Returns:
            A fresh wind turbine source
        """
        self.built_since_last_step += 1
        self.built += 1
        turbine = create_wind_turbine(self.turbine, name=f"wind-turbine-{self.built}")
        logger.debug(f"Built {turbine}")
        return turbine

    def advance(self) -> None:
        self.consumption += self.demand()
        self.built_since_last_step = 0

    def get_built(self) -> int:
        return self.built

    def get_consumption(self) -> Energy:
        """Energy consumed so far, including the pending build load.

        Returns:
            Committed consumption plus the current demand
        """
        return self.consumption + self.demand()


__all__ = ["SteadyLoad", "WindTurbineFactory"]
