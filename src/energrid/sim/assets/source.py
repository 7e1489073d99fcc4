"""Energy source assets for the ENERGRID simulation system.

An energy source has a finite reserve and a per-step capacity. Wind turbines
and coal power plants are the same class built with different parameters.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from energrid.config.schema import SourceConfig
from energrid.sim.errors import DepletedError, OverloadedError
from energrid.utils.enums import OverloadPolicy, SourceKind
from energrid.utils.types import Energy

logger = logging.getLogger(__name__)


class EnergySource(BaseModel):
    """Capacity-limited producer with a finite reserve.

    A draw either succeeds (fully or until the reserve runs out) or, when it
    exceeds the per-step capacity, is refused and flags the source as
    overloaded. The amount consumed by the last draw is kept so the grid can
    undo it when the step it belongs to is rolled back.
    """

    name: str = Field(default="energy-source", min_length=1, description="Human-readable name of the source")
    kind: SourceKind = Field(default=SourceKind.CUSTOM, description="Kind of source")
    reserve: Energy = Field(..., ge=0.0, description="Remaining energy the source can deliver")
    capacity: Energy = Field(..., gt=0.0, description="Maximum energy delivered in a single step")
    overload_policy: OverloadPolicy = Field(
        default=OverloadPolicy.REJECT, description="Behaviour when a draw exceeds capacity"
    )
    overload_count: int = Field(default=0, ge=0, description="Number of refused draws")
    overloaded: bool = Field(default=False, description="Whether the source refused a draw this step")
    last_draw: Energy = Field(default=0.0, ge=0.0, description="Energy consumed by the in-flight draw")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate source name is not empty."""
        if not v or not v.strip():
            raise ValueError("Source name cannot be empty")
        return v.strip()

    def draw(self, amount: Energy) -> Energy:
        """Draw energy from the source for the current step.

        Args:
            amount: Energy requested from this source

        Returns:
            Residual energy that the source could not provide

        Raises:
            DepletedError: If the source reserve is exhausted
            OverloadedError: If the source is overloaded and was not re-armed
            ValueError: If amount is negative
        """
        self.last_draw = 0.0

        if self.is_depleted():
            raise DepletedError(f"{self.name} is out of energy")

        if self.overloaded:
            raise OverloadedError(f"{self.name} is overloaded")

        if amount < 0:
            raise ValueError("Draw amount must be non-negative")

        requested = amount
        if amount > self.capacity:
            if self.overload_policy == OverloadPolicy.REJECT:
                self.overloaded = True
                self.overload_count += 1
                logger.debug(f"{self.name} refused draw of {amount:.3f} (capacity {self.capacity:.3f})")
                return amount
            requested = self.capacity

        consumed = min(self.reserve, requested)
        self.last_draw = consumed
        self.reserve -= consumed

        return amount - consumed

    def rollback(self) -> None:
        """Undo the last draw and clear the overloaded flag."""
        self.reserve += self.last_draw
        self.last_draw = 0.0
        self.overloaded = False

    def rearm(self) -> None:
        """Clear the overloaded flag, leaving the reserve untouched."""
        self.overloaded = False

    def is_depleted(self) -> bool:
        """Check if the source reserve is exhausted.

        Returns:
            True if no energy is left
        """
        return self.reserve <= 0

    def is_overloaded(self) -> bool:
        """Check if the source refused a draw during the current step.

        Returns:
            True if the source is overloaded
        """
        return self.overloaded

    def is_exploitable(self) -> bool:
        """Check if the source can be offered a draw.

        Returns:
            True if the source is neither depleted nor overloaded
        """
        return not self.is_depleted() and not self.overloaded

    def get_reserve(self) -> Energy:
        return self.reserve

    def get_capacity(self) -> Energy:
        return self.capacity

    def get_overload_count(self) -> int:
        return self.overload_count

    def get_state(self) -> dict[str, Any]:
        """Get state information for the source.

        Returns:
            Dictionary containing the source state
        """
        return {
            "name": self.name,
            "kind": self.kind,
            "reserve": self.reserve,
            "capacity": self.capacity,
            "overload_policy": self.overload_policy,
            "overloaded": self.overloaded,
            "overload_count": self.overload_count,
            "is_depleted": self.is_depleted(),
        }

    def __str__(self) -> str:
        """String representation of the source."""
        return f"{self.name} ({self.kind.value}, {self.capacity:.1f}/step, {self.reserve:.1f} left)"


def create_source(
    config: SourceConfig,
    name: str = "energy-source",
    kind: SourceKind = SourceKind.CUSTOM,
) -> EnergySource:
    """Build an energy source from a configuration.

    Args:
        config: Reserve, capacity and overload policy of the source
        name: Human-readable name
        kind: Kind of source

    Returns:
        A fresh energy source
    """
    return EnergySource(
        name=name,
        kind=kind,
        reserve=config.reserve,
        capacity=config.capacity,
        overload_policy=config.overload_policy,
    )


def create_wind_turbine(config: SourceConfig | None = None, name: str = "wind-turbine") -> EnergySource:
    """Build a wind turbine, using the preset parameters unless overridden."""
    return create_source(config or SourceConfig.wind_turbine(), name=name, kind=SourceKind.WIND_TURBINE)


def create_coal_power_plant(config: SourceConfig | None = None, name: str = "coal-power-plant") -> EnergySource:
    """Build a coal power plant, using the preset parameters unless overridden."""
    return create_source(config or SourceConfig.coal_power_plant(), name=name, kind=SourceKind.COAL_POWER_PLANT)


__all__ = ["EnergySource", "create_source", "create_wind_turbine", "create_coal_power_plant"]
