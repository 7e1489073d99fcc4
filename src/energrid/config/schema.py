"""Configuration schema models for the ENERGRID simulation engine.

This module defines Pydantic models for configuration validation of the
grid, its source presets, the simulation cadence and logging.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from energrid.utils.enums import LogLevel, OverloadPolicy
from energrid.utils.logger import DEFAULT_FORMAT
from energrid.utils.types import (
    COAL_POWER_PLANT_CAPACITY,
    COAL_POWER_PLANT_RESERVE,
    DEFAULT_BUILD_INTERVAL,
    DEFAULT_MAX_STEPS,
    DEFAULT_PROGRESS_INTERVAL,
    STEADY_DEMAND,
    TURBINE_BUILD_LOAD,
    WIND_TURBINE_CAPACITY,
    WIND_TURBINE_RESERVE,
)


class SourceConfig(BaseModel):
    """Construction parameters of an energy source."""

    reserve: float = Field(..., ge=0.0, description="Total energy the source can deliver over its life")
    capacity: float = Field(..., gt=0.0, description="Maximum energy delivered in a single step")
    overload_policy: OverloadPolicy = Field(
        default=OverloadPolicy.REJECT, description="Behaviour when a draw exceeds capacity"
    )

    @classmethod
    def wind_turbine(cls) -> "SourceConfig":
        """Small reserve, low capacity preset."""
        return cls(reserve=WIND_TURBINE_RESERVE, capacity=WIND_TURBINE_CAPACITY)

    @classmethod
    def coal_power_plant(cls) -> "SourceConfig":
        """Large reserve, high capacity preset."""
        return cls(reserve=COAL_POWER_PLANT_RESERVE, capacity=COAL_POWER_PLANT_CAPACITY)


class GridConfig(BaseModel):
    """Configuration for grid-level behaviour."""

    overload_policy: OverloadPolicy | None = Field(
        default=None, description="Policy forced on every connected source (None keeps each source's own)"
    )


class SimulationConfig(BaseModel):
    """Configuration for simulation parameters."""

    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=0, description="Maximum number of simulated steps")
    build_interval: int = Field(
        default=DEFAULT_BUILD_INTERVAL, ge=1, description="Steps between two wind turbine builds"
    )
    progress_interval: int = Field(
        default=DEFAULT_PROGRESS_INTERVAL, ge=1, description="Steps between two progress notifications"
    )
    steady_demand: float = Field(default=STEADY_DEMAND, ge=0.0, description="Constant demand per step")
    build_load: float = Field(default=TURBINE_BUILD_LOAD, ge=0.0, description="Energy spent to build one turbine")
    coal_power_plants: int = Field(default=1, ge=0, le=10000, description="Coal power plants connected at start")


class LoggingConfig(BaseModel):
    """Configuration for logging parameters."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    format: str = Field(default=DEFAULT_FORMAT, description="Log message format")
    enable_console: bool = Field(default=True, description="Enable console output")


class EnergridConfig(BaseModel):
    """Main configuration model for ENERGRID."""

    version: str = Field(default="0.1.0", description="Configuration version")
    simulation: SimulationConfig = Field(default_factory=SimulationConfig, description="Simulation configuration")
    grid: GridConfig = Field(default_factory=GridConfig, description="Grid configuration")
    wind_turbine: SourceConfig = Field(default_factory=SourceConfig.wind_turbine, description="Wind turbine preset")
    coal_power_plant: SourceConfig = Field(
        default_factory=SourceConfig.coal_power_plant, description="Coal power plant preset"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version format."""
        if not v or not isinstance(v, str):
            raise ValueError("Version must be a non-empty string")
        parts = v.split(".")
        if len(parts) != 3:
            raise ValueError("Version must be in format X.Y.Z")
        try:
            for part in parts:
                int(part)
        except ValueError:
            raise ValueError("Version parts must be integers") from None
        return v

    @model_validator(mode="after")
    def validate_wind_turbine_reserve(self) -> "EnergridConfig":
        """Ensure built turbines are not depleted on arrival."""
        if self.wind_turbine.reserve <= 0:
            raise ValueError("Wind turbine reserve must be positive")
        return self

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "version": "0.1.0",
                "simulation": {
                    "max_steps": 4380000,
                    "build_interval": 75,
                    "progress_interval": 1000,
                    "steady_demand": 1000.0,
                    "build_load": 80.0,
                    "coal_power_plants": 1,
                },
                "grid": {"overload_policy": None},
                "wind_turbine": {"reserve": 50000.0, "capacity": 1.0, "overload_policy": "REJECT"},
                "coal_power_plant": {"reserve": 219000000.0, "capacity": 1000.0, "overload_policy": "REJECT"},
                "logging": {
                    "level": "INFO",
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    "enable_console": True,
                },
            }
        },
    )
