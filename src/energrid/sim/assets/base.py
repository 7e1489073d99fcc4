"""Base load contract for the ENERGRID simulation system.

This module provides the abstract base class for every energy consumer
connected to the grid.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field, field_validator

from energrid.utils.types import Energy


class Load(BaseModel, ABC):
    """Base class for all grid loads.

    A load answers how much energy it needs for the current step and advances
    its own state once the grid has committed that step. ``advance()`` is
    never called for a step that was rolled back.
    """

    name: str = Field(default="load", min_length=1, description="Human-readable name of the load")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate load name is not empty."""
        if not v or not v.strip():
            raise ValueError("Load name cannot be empty")
        return v.strip()

    @abstractmethod
    def demand(self) -> Energy:
        """Energy required for the current step.

        Returns:
            Non-negative energy demand
        """

    @abstractmethod
    def advance(self) -> None:
        """Move to the next step after the current one was committed."""

    def get_state(self) -> dict[str, Any]:
        """Get state information for the load.

        Returns:
            Dictionary containing the load state
        """
        return {"name": self.name, "type": type(self).__name__, "demand": self.demand()}

    def __str__(self) -> str:
        """String representation of the load."""
        return f"{self.name} ({self.demand():.1f}/step)"


__all__ = ["Load"]
