"""Typer CLI for schedule generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinetry.cli.commands import generate, validate_command
from cabinetry.cli.commands.generate import (
    OutputFormat,
    load_project_or_exit,
    render,
    run_project,
)
from cabinetry.domain.units import DisplayUnit

app = typer.Typer(
    name="cabinetry",
    help="Generate cut lists, door and hardware schedules and material takeoffs "
    "for modular cabinetry.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="generate")(generate)
app.command(name="validate")(validate_command)


def _print_single(config_file: Path, output_format: OutputFormat, unit: DisplayUnit) -> None:
    config = load_project_or_exit(config_file)
    typer.echo(render(run_project(config), output_format, unit, config.name))


@app.command()
def cutlist(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    unit: Annotated[
        DisplayUnit, typer.Option("--unit", "-u", help="Display unit for dimensions")
    ] = DisplayUnit.MM,
) -> None:
    """Display the panel cut list."""
    _print_single(config_file, OutputFormat.CUTLIST, unit)


@app.command()
def doors(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    unit: Annotated[
        DisplayUnit, typer.Option("--unit", "-u", help="Display unit for dimensions")
    ] = DisplayUnit.MM,
) -> None:
    """Display the door schedule."""
    _print_single(config_file, OutputFormat.DOORS, unit)


@app.command()
def hardware(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
) -> None:
    """Display the hardware schedule."""
    _print_single(config_file, OutputFormat.HARDWARE, DisplayUnit.MM)


@app.command()
def takeoff(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
) -> None:
    """Display the material takeoff."""
    _print_single(config_file, OutputFormat.TAKEOFF, DisplayUnit.MM)


if __name__ == "__main__":
    app()
