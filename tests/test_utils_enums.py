"""Tests for utility enumerations, types and logging helpers."""

import logging

import energrid.utils.types as energy_types
from energrid.config.schema import LoggingConfig
from energrid.utils.enums import LogLevel, OverloadPolicy, ProgressStatus, SimulationState, SourceKind
from energrid.utils.logger import configure_logging, logger
from energrid.utils.types import HOURS_PER_YEAR, steps_to_years


class TestEnums:
    """Test domain enumerations."""

    def test_source_kind_values(self):
        """Test source kind display values."""
        assert SourceKind.WIND_TURBINE.value == "Wind Turbine"
        assert SourceKind.COAL_POWER_PLANT.value == "Coal Power Plant"

    def test_overload_policy_from_string(self):
        """Test overload policies parse from strings."""
        assert OverloadPolicy("REJECT") is OverloadPolicy.REJECT
        assert OverloadPolicy("CAP") is OverloadPolicy.CAP

    def test_simulation_state_halted(self):
        """Test terminal simulation states."""
        assert SimulationState.NOT_STARTED.is_halted is False
        assert SimulationState.RUNNING.is_halted is False
        assert SimulationState.HALTED_OUT_OF_ENERGY.is_halted is True
        assert SimulationState.HALTED_OVERLOADED.is_halted is True
        assert SimulationState.HALTED_STEP_BOUND.is_halted is True

    def test_progress_status_members(self):
        """Test progress statuses."""
        assert [s.name for s in ProgressStatus] == ["START", "IN_PROGRESS", "END"]


class TestTypes:
    """Test type helpers."""

    def test_steps_to_years(self):
        """Test hourly steps convert to years."""
        assert steps_to_years(0) == 0
        assert steps_to_years(HOURS_PER_YEAR) == 1
        assert steps_to_years(HOURS_PER_YEAR * 500) == 500

    def test_module_exposes_energy_alias_only(self):
        """Test the module declares the energy alias and no other units."""
        assert energy_types.Energy.__value__ is float
        assert not hasattr(energy_types, "Power")
        assert not hasattr(energy_types, "Steps")


class TestLogger:
    """Test logger configuration."""

    def test_default_logger(self):
        """Test the package logger exists with a handler."""
        assert logger.name == "energrid"
        assert logger.handlers

    def test_configure_logging(self):
        """Test applying a logging configuration."""
        configured = configure_logging(LoggingConfig(level=LogLevel.DEBUG))
        assert configured is logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        configure_logging(LoggingConfig(enable_console=False))
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0], logging.NullHandler)

        configure_logging(LoggingConfig())

    def test_configure_logging_every_level(self):
        """Test each configured level maps onto the stdlib level."""
        for level in LogLevel:
            configure_logging(LoggingConfig(level=level))
            assert logger.level == logging.getLevelName(level.value)
            assert logger.handlers[0].level == logger.level

        configure_logging(LoggingConfig())
