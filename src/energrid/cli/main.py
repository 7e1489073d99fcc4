"""Main CLI interface for the ENERGRID simulation engine.

This module provides the command-line interface using the Typer framework.
It is a sink over the simulation's read-only query interface: it prints
progress from the simulation callback and the final grid metrics.

Usage:
    energrid simulate --max-steps 100000
    energrid init-config energrid.yaml
    energrid version
"""

import logging
import os
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from energrid.config.loaders import YamlConfigLoader
from energrid.config.schema import EnergridConfig, SimulationConfig
from energrid.sim.simulation import Simulation
from energrid.utils.enums import ProgressStatus
from energrid.utils.logger import configure_logging, logger
from energrid.utils.types import steps_to_years

console = Console()

app = typer.Typer(
    name="energrid",
    help="ENERGRID - discrete-time energy grid simulation",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command()
def simulate(
    config_file: str | None = typer.Option(None, "--config", "-c", help="Configuration file path"),
    max_steps: int | None = typer.Option(None, "--max-steps", "-n", help="Maximum number of steps"),
    build_interval: int | None = typer.Option(None, "--build-interval", "-b", help="Steps between turbine builds"),
    coal_plants: int | None = typer.Option(None, "--coal-plants", help="Coal power plants connected at start"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Run the grid simulation until it halts."""
    result = simulate_command(
        config_file=config_file,
        max_steps=max_steps,
        build_interval=build_interval,
        coal_plants=coal_plants,
        verbose=verbose,
    )
    if result.get("status") == "error":
        raise typer.Exit(code=1)


def simulate_command(
    config_file: str | None = None,
    max_steps: int | None = None,
    build_interval: int | None = None,
    coal_plants: int | None = None,
    verbose: bool = False,
) -> dict[str, Any]:
    """Execute the simulate command.

    Args:
        config_file: Optional configuration file path
        max_steps: Optional step bound override
        build_interval: Optional turbine build cadence override
        coal_plants: Optional initial coal plant count override
        verbose: Enable debug logging

    Returns:
        Simulation summary with a ``status`` key

    Raises:
        FileNotFoundError: If config file not found
    """
    if config_file and not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    overrides = {"max_steps": max_steps, "build_interval": build_interval, "coal_power_plants": coal_plants}
    overrides = {key: value for key, value in overrides.items() if value is not None}

    try:
        config = load_cli_config(config_file) if config_file else create_default_config()
        if overrides:
            config.simulation = SimulationConfig(**{**config.simulation.model_dump(), **overrides})
        simulation = Simulation.from_config(config)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[bold red]Invalid simulation parameters:[/bold red] {escape(str(e))}")
        return {"status": "error", "error_message": str(e)}

    configure_logging(config.logging)
    if verbose:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

    grid = simulation.get_grid()

    def report_progress(elapsed_steps: int, status: ProgressStatus) -> None:
        if status == ProgressStatus.START:
            console.print(
                f"[bold green]Starting simulation:[/bold green] {grid.count_sources()} sources, "
                f"bound {simulation.get_maximum_steps()} steps"
            )
        elif status == ProgressStatus.IN_PROGRESS:
            console.print(
                f"[dim]{steps_to_years(elapsed_steps):8.2f} years | "
                f"consumption {grid.get_consumption():,.0f} | "
                f"sources {grid.count_sources()} | "
                f"source overloads {grid.get_source_overloaded_incidents()}[/dim]"
            )
        else:
            console.print(f"[bold]Simulation ended after {elapsed_steps} steps[/bold]")

    final_state = simulation.simulate(report_progress)
    summary = simulation.get_summary()

    console.print(build_summary_table(summary))

    return {"status": "success", "final_state": final_state.value, "summary": summary}


def build_summary_table(summary: dict[str, Any]) -> Table:
    """Render a simulation summary as a rich table.

    Args:
        summary: Summary returned by ``Simulation.get_summary()``

    Returns:
        Table with the final metrics
    """
    grid = summary["grid"]

    table = Table(title="ENERGRID Simulation Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Final state", summary["state"])
    table.add_row("Elapsed steps", f"{summary['elapsed_steps']:,}")
    table.add_row("Elapsed years", f"{summary['elapsed_years']:.2f}")
    table.add_row("Consumption", f"{grid['consumption']:,.0f}")
    table.add_row("Sources left", str(grid["sources"]["total"]))
    table.add_row("Remaining reserve", f"{grid['sources']['total_reserve']:,.0f}")
    table.add_row("Turbines built", str(summary["turbines_built"]))
    table.add_row("Source overloads", str(grid["overload"]["source_incidents"]))
    table.add_row("Grid overloaded", "yes" if grid["overload"]["overloaded"] else "no")

    return table


@app.command("init-config")
def init_config(
    path: str = typer.Argument("energrid.yaml", help="Where to write the example configuration"),
) -> None:
    """Write an example configuration file."""
    init_config_command(path)


def init_config_command(path: str) -> Path:
    """Execute the init-config command.

    Args:
        path: Destination of the example configuration

    Returns:
        Path of the written file
    """
    config_path = Path(path)
    YamlConfigLoader().generate_example_config(config_path)
    console.print(f"[bold green]Example configuration written to[/bold green] {config_path}")
    return config_path


@app.command()
def version() -> None:
    """Show ENERGRID version information."""
    version_command()


def version_command() -> str:
    """Execute version command.

    Returns:
        Version string
    """
    from energrid import __version__

    version_info = f"ENERGRID v{__version__}"

    console.print(f"[bold cyan]{version_info}[/bold cyan]")
    console.print("[dim]Discrete-time energy grid simulation[/dim]")

    return version_info


def load_cli_config(config_file: str) -> EnergridConfig:
    """Load CLI configuration from file.

    Args:
        config_file: Path to configuration file

    Returns:
        Loaded configuration
    """
    return YamlConfigLoader().load_config(config_file)


def create_default_config() -> EnergridConfig:
    """Create default CLI configuration.

    Returns:
        Default configuration
    """
    return EnergridConfig()


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
