"""Simulation driver for the ENERGRID system.

This module drives a grid across many steps: a steady consumer and a wind
turbine factory draw from the connected sources, the factory adds a turbine
to the grid at a fixed cadence, and the run halts as soon as the grid is out
of energy, overloaded, or the step bound is reached.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from energrid.config.schema import EnergridConfig, GridConfig, SimulationConfig
from energrid.sim.assets.base import Load
from energrid.sim.assets.load import SteadyLoad, WindTurbineFactory
from energrid.sim.assets.source import EnergySource, create_coal_power_plant
from energrid.sim.errors import GridOverloadedError
from energrid.sim.grid import Grid
from energrid.utils.enums import ProgressStatus, SimulationState
from energrid.utils.logger import logger
from energrid.utils.types import steps_to_years

type ProgressCallback = Callable[[int, ProgressStatus], None]


class Simulation:
    """Bounded run of a grid fed by coal power plants and wind turbines."""

    def __init__(
        self,
        sources: Iterable[EnergySource],
        factory: WindTurbineFactory | None = None,
        config: SimulationConfig | None = None,
        grid_config: GridConfig | None = None,
        loads: Iterable[Load] | None = None,
    ):
        """Initialize the simulation.

        Args:
            sources: Sources connected at start
            factory: Wind turbine factory; a default one is created if omitted
            config: Simulation cadence and bounds
            grid_config: Optional grid configuration
            loads: Loads drawing from the grid besides the factory; defaults to
                a steady load with the configured demand
        """
        self.config = config or SimulationConfig()
        self._factory = factory or WindTurbineFactory(build_load=self.config.build_load)

        if loads is None:
            loads = [SteadyLoad(load_value=self.config.steady_demand)]

        self._grid = Grid([*loads, self._factory], sources, grid_config)
        self._elapsed_steps = 0
        self._state = SimulationState.NOT_STARTED

    @classmethod
    def from_config(cls, config: EnergridConfig) -> Simulation:
        """Build a simulation from a full configuration.

        Args:
            config: Configuration of the run

        Returns:
            A simulation ready to run
        """
        plants = [
            create_coal_power_plant(config.coal_power_plant, name=f"coal-power-plant-{i + 1}")
            for i in range(config.simulation.coal_power_plants)
        ]
        factory = WindTurbineFactory(build_load=config.simulation.build_load, turbine=config.wind_turbine)
        return cls(plants, factory, config=config.simulation, grid_config=config.grid)

    def step(self) -> None:
        """Advance the simulation by one step.

        Raises:
            GridOverloadedError: If the grid is overloaded; the simulation
                halts and the error is passed on to the caller
        """
        if self._state == SimulationState.NOT_STARTED:
            self._state = SimulationState.RUNNING

        try:
            self._grid.iterate()
        except GridOverloadedError:
            self._state = SimulationState.HALTED_OVERLOADED
            raise

        self._elapsed_steps += 1

        if self._elapsed_steps % self.config.build_interval == 0:
            turbine = self._factory.build()
            self._grid.connect(turbine)
            logger.debug(f"Step {self._elapsed_steps}: connected {turbine.name}")

        self._update_state()

    def simulate(self, progress_callback: ProgressCallback | None = None) -> SimulationState:
        """Run the simulation until it halts.

        Args:
            progress_callback: Observer called with the elapsed steps and a
                progress status at start, every progress interval, and at end

        Returns:
            Final simulation state
        """
        logger.info(
            f"Simulation started: {self._grid.count_sources()} sources, "
            f"demand {self._grid.total_demand():.1f}/step, bound {self.config.max_steps} steps"
        )
        self._notify(progress_callback, ProgressStatus.START)

        while not self._should_halt():
            self.step()
            if self._elapsed_steps % self.config.progress_interval == 0:
                self._notify(progress_callback, ProgressStatus.IN_PROGRESS)

        self._update_state()
        self._notify(progress_callback, ProgressStatus.END)

        logger.info(
            f"Simulation halted ({self._state.value}) after {self._elapsed_steps} steps "
            f"({steps_to_years(self._elapsed_steps):.1f} years)"
        )
        return self._state

    def _should_halt(self) -> bool:
        return (
            self._grid.is_out_of_energy()
            or self._grid.is_overloaded()
            or self._elapsed_steps >= self.config.max_steps
        )

    def _update_state(self) -> None:
        if self._grid.is_overloaded():
            self._state = SimulationState.HALTED_OVERLOADED
        elif self._grid.is_out_of_energy():
            self._state = SimulationState.HALTED_OUT_OF_ENERGY
        elif self._elapsed_steps >= self.config.max_steps:
            self._state = SimulationState.HALTED_STEP_BOUND
        else:
            self._state = SimulationState.RUNNING

    def _notify(self, progress_callback: ProgressCallback | None, status: ProgressStatus) -> None:
        if progress_callback is not None:
            progress_callback(self._elapsed_steps, status)

    def get_grid(self) -> Grid:
        return self._grid

    def get_factory(self) -> WindTurbineFactory:
        return self._factory

    def get_elapsed_steps(self) -> int:
        return self._elapsed_steps

    def get_maximum_steps(self) -> int:
        return self.config.max_steps

    def get_state(self) -> SimulationState:
        return self._state

    def is_halted(self) -> bool:
        return self._state.is_halted

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the simulation run.

        Returns:
            Dictionary with run and grid metrics
        """
        return {
            "state": self._state.value,
            "elapsed_steps": self._elapsed_steps,
            "elapsed_years": steps_to_years(self._elapsed_steps),
            "max_steps": self.config.max_steps,
            "turbines_built": self._factory.get_built(),
            "factory_consumption": self._factory.get_consumption(),
            "grid": self._grid.get_grid_summary(),
        }

    def __str__(self) -> str:
        """String representation of the simulation."""
        return f"Simulation(state={self._state.value}, steps={self._elapsed_steps}/{self.config.max_steps})"


__all__ = ["Simulation", "ProgressCallback"]
