"""Grid allocation engine for the ENERGRID simulation system.

This module provides the grid that runs one simulation step: it sums the
demand of every load, splits it equally across the exploitable sources,
retries with a smaller cohort when a source cannot take its share, and
either commits the whole step or rolls it back.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from energrid.config.schema import GridConfig
from energrid.sim.assets.base import Load
from energrid.sim.assets.source import EnergySource
from energrid.sim.errors import GridOverloadedError
from energrid.utils.logger import logger
from energrid.utils.types import Energy


class GridState(BaseModel):
    """Snapshot of the grid aggregate metrics."""

    consumption: Energy = Field(..., ge=0.0, description="Energy consumed by committed steps")
    demand: Energy = Field(..., ge=0.0, description="Demand of the next step")
    sources: int = Field(..., ge=0, description="Sources not depleted")
    exploitable_sources: int = Field(..., ge=0, description="Sources neither depleted nor overloaded")
    total_reserve: Energy = Field(..., ge=0.0, description="Remaining energy across all sources")
    overloaded: bool = Field(..., description="Whether the grid is overloaded")
    overload_count: int = Field(..., ge=0, description="Steps the grid failed to satisfy")
    source_overload_incidents: int = Field(..., ge=0, description="Draws refused by sources")

    @property
    def is_out_of_energy(self) -> bool:
        return self.sources == 0

    def __str__(self) -> str:
        """String representation of grid state."""
        return (
            f"GridState(consumption={self.consumption:.1f}, "
            f"sources={self.sources}, exploitable={self.exploitable_sources}, "
            f"overloaded={self.overloaded})"
        )


class Grid:
    """Energy grid connecting loads to sources.

    The grid owns its sources: depleted sources are pruned after every
    committed step and never offered a draw again. When a step cannot be
    satisfied the grid becomes overloaded and refuses to iterate until
    ``rearm()`` is called.
    """

    def __init__(
        self,
        loads: Iterable[Load],
        sources: Iterable[EnergySource] | None = None,
        config: GridConfig | None = None,
    ):
        """Initialize the grid.

        Args:
            loads: Loads drawing from the grid, in a fixed order
            sources: Sources initially connected
            config: Optional grid configuration
        """
        self.config = config or GridConfig()
        self._loads: list[Load] = list(loads)
        self._sources: list[EnergySource] = []

        self._consumption = 0.0
        self._overloaded = False
        self._overload_count = 0
        self._source_overload_incidents = 0

        for source in sources or []:
            self.connect(source)

        logger.debug(f"Grid initialized with {len(self._loads)} loads and {len(self._sources)} sources")

    def connect(self, source: EnergySource) -> None:
        """Connect a source to the grid.

        Args:
            source: Source to connect

        Raises:
            ValueError: If the source is depleted or already connected
        """
        if source.is_depleted():
            raise ValueError(f"Cannot connect depleted source {source.name}")

        if any(connected is source for connected in self._sources):
            raise ValueError(f"Source {source.name} is already connected")

        if self.config.overload_policy is not None:
            source.overload_policy = self.config.overload_policy

        self._sources.append(source)
        logger.debug(f"Connected source: {source}")

    def iterate(self) -> None:
        """Run one step of the grid.

        The step is atomic: either the whole demand is served, the sources
        re-armed, depleted sources pruned and the loads advanced, or nothing
        but the overload counters changes and the grid becomes overloaded.

        Raises:
            GridOverloadedError: If the grid is overloaded
        """
        if self._overloaded:
            raise GridOverloadedError("Grid is overloaded, rearm it before iterating")

        target_load = self.total_demand()
        previous_consumption = self._consumption
        self._consumption += target_load

        if not self._allocate(target_load):
            self._consumption = previous_consumption
            self._overloaded = True
            self._overload_count += 1
            logger.warning(
                f"Grid overloaded: demand of {target_load:.3f} cannot be served by "
                f"{self.count_sources()} sources (overload #{self._overload_count})"
            )
            return

        self.rearm_sources()
        self._collect_depleted_sources()

        for load in self._loads:
            load.advance()

    def _allocate(self, target_load: Energy) -> bool:
        """Share the target load equally across exploitable sources.

        A pass draws the same share from every source of the cohort. When a
        source leaves a residual, every draw of the pass is undone, the
        sources that left a residual are dropped from the cohort and the
        original target is split again over the remaining ones.

        Args:
            target_load: Energy to serve for this step

        Returns:
            True if a pass served the whole target
        """
        if target_load <= 0:
            return True

        # Sources that could not take a share in this step, by identity
        excluded: set[int] = set()

        while True:
            cohort = [s for s in self._sources if s.is_exploitable() and id(s) not in excluded]
            if not cohort:
                return False

            share = target_load / len(cohort)
            short: list[EnergySource] = []

            for source in cohort:
                residual = source.draw(share)
                if source.is_overloaded():
                    self._source_overload_incidents += 1
                if residual > 0:
                    short.append(source)

            if not short:
                return True

            logger.debug(f"{len(short)} of {len(cohort)} sources could not take a share of {share:.3f}, retrying")

            # Refused draws consumed nothing and keep their overload flag
            for source in cohort:
                if not source.is_overloaded():
                    source.rollback()

            excluded.update(id(s) for s in short)

    def _collect_depleted_sources(self) -> None:
        depleted = [s for s in self._sources if s.is_depleted()]
        if depleted:
            self._sources = [s for s in self._sources if not s.is_depleted()]
            for source in depleted:
                logger.debug(f"Pruned depleted source: {source.name}")

    def rearm_sources(self) -> None:
        for source in self._sources:
            source.rearm()

    def rearm(self) -> None:
        """Clear the grid overload flag and re-arm every source."""
        self._overloaded = False
        self.rearm_sources()
        logger.info("Grid re-armed")

    def total_demand(self) -> Energy:
        """Sum the demand of every load.

        Returns:
            Total demand for the next step
        """
        return sum(load.demand() for load in self._loads)

    def count_sources(self) -> int:
        """Count sources that are not depleted, overloaded or not."""
        return sum(1 for s in self._sources if not s.is_depleted())

    def count_exploitable_sources(self) -> int:
        """Count sources that are neither depleted nor overloaded."""
        return sum(1 for s in self._sources if s.is_exploitable())

    def is_out_of_energy(self) -> bool:
        return self.count_sources() == 0

    def is_overloaded(self) -> bool:
        return self._overloaded

    def get_consumption(self) -> Energy:
        return self._consumption

    def get_overload_count(self) -> int:
        return self._overload_count

    def get_source_overloaded_incidents(self) -> int:
        return self._source_overload_incidents

    def get_total_reserve(self) -> Energy:
        return sum(s.reserve for s in self._sources)

    def get_sources(self) -> list[EnergySource]:
        return list(self._sources)

    def get_loads(self) -> list[Load]:
        return list(self._loads)

    def get_state(self) -> GridState:
        """Get the current aggregate state of the grid.

        Returns:
            Grid state snapshot
        """
        return GridState(
            consumption=self._consumption,
            demand=self.total_demand(),
            sources=self.count_sources(),
            exploitable_sources=self.count_exploitable_sources(),
            total_reserve=self.get_total_reserve(),
            overloaded=self._overloaded,
            overload_count=self._overload_count,
            source_overload_incidents=self._source_overload_incidents,
        )

    def get_grid_summary(self) -> dict[str, Any]:
        """Get a summary of the current grid state.

        Returns:
            Dictionary with grid summary information
        """
        state = self.get_state()

        return {
            "consumption": state.consumption,
            "demand": state.demand,
            "sources": {
                "total": state.sources,
                "exploitable": state.exploitable_sources,
                "by_kind": self._count_sources_by_kind(),
                "total_reserve": state.total_reserve,
            },
            "loads": [load.get_state() for load in self._loads],
            "overload": {
                "overloaded": state.overloaded,
                "grid_incidents": state.overload_count,
                "source_incidents": state.source_overload_incidents,
            },
        }

    def _count_sources_by_kind(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for source in self._sources:
            counts[source.kind.value] = counts.get(source.kind.value, 0) + 1
        return counts

    def __str__(self) -> str:
        """String representation of the grid."""
        return (
            f"Grid(loads={len(self._loads)}, sources={self.count_sources()}, "
            f"consumption={self._consumption:.1f}, overloaded={self._overloaded})"
        )


__all__ = ["Grid", "GridState"]
