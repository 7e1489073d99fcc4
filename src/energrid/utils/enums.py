"""Domain enumerations for the ENERGRID simulation engine.

This module defines enumerations for the domain concepts shared by the
grid, its assets, the simulation driver and the configuration layer.
"""

from enum import Enum


class SourceKind(str, Enum):
    """Kinds of energy sources connected to the grid."""

    WIND_TURBINE = "Wind Turbine"
    COAL_POWER_PLANT = "Coal Power Plant"
    CUSTOM = "Custom Source"


class OverloadPolicy(str, Enum):
    """Behaviour of a source asked for more than its per-step capacity.

    REJECT refuses the whole draw and flags the source as overloaded.
    CAP consumes up to capacity and hands the excess back as residual.
    """

    REJECT = "REJECT"
    CAP = "CAP"


class SimulationState(Enum):
    """Lifecycle states of a simulation run."""

    NOT_STARTED = "NOT_STARTED"
    RUNNING = "RUNNING"
    HALTED_OUT_OF_ENERGY = "HALTED_OUT_OF_ENERGY"
    HALTED_OVERLOADED = "HALTED_OVERLOADED"
    HALTED_STEP_BOUND = "HALTED_STEP_BOUND"

    @property
    def is_halted(self) -> bool:
        """Whether the state is terminal."""
        return self.name.startswith("HALTED")


class ProgressStatus(Enum):
    """Status reported to simulation progress callbacks."""

    START = "START"
    IN_PROGRESS = "IN_PROGRESS"
    END = "END"


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
