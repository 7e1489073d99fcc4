"""Tests for CLI main module.

This module tests the command-line interface: the simulate command and its
overrides, example configuration generation and version reporting.
"""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from energrid.cli.main import (
    app,
    build_summary_table,
    init_config_command,
    simulate_command,
    version_command,
)
from energrid.config.loaders import load_config_from_yaml
from energrid.config.schema import EnergridConfig, LoggingConfig
from energrid.utils.logger import configure_logging
from rich.table import Table
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind the package logger to the current stdout after each test."""
    yield
    configure_logging(LoggingConfig())


class TestCLIInterface:
    """Test CLI application wiring."""

    def test_command_registration(self):
        """Test that every command is registered."""
        command_names = [cmd.name or cmd.callback.__name__ for cmd in app.registered_commands]
        assert "simulate" in command_names
        assert "init-config" in command_names
        assert "version" in command_names

    def test_package_exports(self):
        """Test the package exposes the app and its entry point only."""
        import energrid.cli

        assert energrid.cli.__all__ == ["app", "main"]
        assert energrid.cli.app is app


class TestSimulateCommand:
    """Test the simulate command."""

    def test_simulate_with_overrides(self):
        """Test a bounded run with command line overrides."""
        result = simulate_command(max_steps=10, build_interval=100)

        assert result["status"] == "success"
        assert result["final_state"] == "HALTED_STEP_BOUND"
        assert result["summary"]["elapsed_steps"] == 10
        assert result["summary"]["grid"]["consumption"] == 10 * 1000

    def test_simulate_default_overloads(self):
        """Test the default setup halts overloaded after the first turbine build."""
        result = simulate_command()

        assert result["status"] == "success"
        assert result["final_state"] == "HALTED_OVERLOADED"
        assert result["summary"]["elapsed_steps"] == 76

    def test_simulate_with_more_coal_plants(self):
        """Test the coal plant override."""
        result = simulate_command(max_steps=5, coal_plants=3)
        assert result["summary"]["grid"]["sources"]["total"] == 3

    def test_simulate_with_config_file(self):
        """Test a run configured from a YAML file."""
        config_data = {"simulation": {"max_steps": 12, "steady_demand": 10.0}}

        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "energrid.yaml"
            config_path.write_text(yaml.safe_dump(config_data), encoding="utf-8")

            result = simulate_command(config_file=str(config_path))

        assert result["final_state"] == "HALTED_STEP_BOUND"
        assert result["summary"]["grid"]["consumption"] == 120

    def test_simulate_missing_config_file(self):
        """Test a missing configuration file."""
        with pytest.raises(FileNotFoundError):
            simulate_command(config_file="/nonexistent/energrid.yaml")

    def test_simulate_invalid_override(self):
        """Test an invalid override is reported as an error."""
        result = simulate_command(build_interval=0)
        assert result["status"] == "error"
        assert "build_interval" in result["error_message"]

    def test_simulate_invalid_config_file(self):
        """Test invalid values in a configuration file are reported as an error."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "energrid.yaml"
            config_path.write_text(yaml.safe_dump({"simulation": {"build_interval": 0}}), encoding="utf-8")

            result = simulate_command(config_file=str(config_path))

        assert result["status"] == "error"
        assert "build_interval" in result["error_message"]

    def test_simulate_malformed_config_file(self):
        """Test malformed YAML is reported as an error."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "broken.yaml"
            config_path.write_text("simulation: [unclosed", encoding="utf-8")

            result = simulate_command(config_file=str(config_path))

        assert result["status"] == "error"

    def test_simulate_runner_invalid_config_file(self):
        """Test the runner exits with an error code on an invalid configuration file."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "energrid.yaml"
            config_path.write_text(yaml.safe_dump({"simulation": {"max_steps": -1}}), encoding="utf-8")

            result = runner.invoke(app, ["simulate", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid simulation parameters" in result.output

    def test_simulate_verbose(self):
        """Test verbose mode lowers the logger level."""
        with patch("energrid.cli.main.logger") as mock_logger:
            mock_logger.handlers = []
            simulate_command(max_steps=1, verbose=True)
            mock_logger.setLevel.assert_called()

    def test_simulate_through_runner(self):
        """Test the simulate command through the Typer runner."""
        result = runner.invoke(app, ["simulate", "--max-steps", "3", "--build-interval", "100"])

        assert result.exit_code == 0
        assert "Simulation Summary" in result.output

    def test_simulate_runner_invalid_override(self):
        """Test the runner exits with an error code on invalid overrides."""
        result = runner.invoke(app, ["simulate", "--build-interval", "0"])
        assert result.exit_code == 1

    def test_summary_table(self):
        """Test the summary table rendering."""
        result = simulate_command(max_steps=2)
        table = build_summary_table(result["summary"])

        assert isinstance(table, Table)
        assert table.row_count == 9


class TestInitConfigCommand:
    """Test example configuration generation."""

    def test_init_config(self):
        """Test the example configuration is written and loadable."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = init_config_command(str(Path(tmp_dir) / "example.yaml"))

            assert config_path.exists()
            assert load_config_from_yaml(config_path) == EnergridConfig()

    def test_init_config_through_runner(self):
        """Test init-config through the Typer runner."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "generated.yaml"
            result = runner.invoke(app, ["init-config", str(config_path)])

            assert result.exit_code == 0
            assert config_path.exists()


class TestVersionCommand:
    """Test version reporting."""

    def test_version_command(self):
        """Test version string."""
        from energrid import __version__

        assert version_command() == f"ENERGRID v{__version__}"

    def test_version_through_runner(self):
        """Test version through the Typer runner."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "ENERGRID" in result.output
