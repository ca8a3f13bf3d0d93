"""Generate command for the cabinetry CLI.

Loads a project file, runs every generator and prints the requested
schedules or writes them as JSON.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from cabinetry.application import GenerateSchedulesCommand, ScheduleOutput
from cabinetry.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_modules,
    config_to_standards,
    load_config,
)
from cabinetry.domain.units import DisplayUnit
from cabinetry.infrastructure import (
    CutListFormatter,
    DoorScheduleFormatter,
    HardwareScheduleFormatter,
    JsonExporter,
    MaterialTakeoffFormatter,
)

from .validate import display_load_error

__all__ = ["OutputFormat", "generate", "load_project_or_exit", "render", "run_project"]

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Which schedule(s) to print."""

    ALL = "all"
    CUTLIST = "cutlist"
    DOORS = "doors"
    HARDWARE = "hardware"
    TAKEOFF = "takeoff"
    JSON = "json"


def load_project_or_exit(config_file: Path) -> ProjectConfiguration:
    """Load a project file, printing errors and exiting 1 on failure."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def run_project(config: ProjectConfiguration) -> ScheduleOutput:
    command = GenerateSchedulesCommand()
    return command.execute(config_to_modules(config), config_to_standards(config))


def render(
    output: ScheduleOutput,
    output_format: OutputFormat,
    unit: DisplayUnit = DisplayUnit.MM,
    project_name: str = "project",
) -> str:
    """Render schedules as text (or JSON for ``OutputFormat.JSON``)."""
    if output_format == OutputFormat.JSON:
        return JsonExporter().export(output, project_name)

    sections: list[str] = []
    if output_format in (OutputFormat.ALL, OutputFormat.CUTLIST):
        sections.append(CutListFormatter(unit).format(output.cut_list))
    if output_format in (OutputFormat.ALL, OutputFormat.DOORS):
        sections.append(DoorScheduleFormatter(unit).format(output.door_schedule))
    if output_format in (OutputFormat.ALL, OutputFormat.HARDWARE):
        sections.append(HardwareScheduleFormatter().format(output.hardware_schedule))
    if output_format in (OutputFormat.ALL, OutputFormat.TAKEOFF):
        sections.append(MaterialTakeoffFormatter().format(output.material_takeoff))
    return "\n\n".join(sections)


def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Schedule to print, or json for all four"),
    ] = OutputFormat.ALL,
    unit: Annotated[
        DisplayUnit,
        typer.Option("--unit", "-u", help="Display unit for dimensions"),
    ] = DisplayUnit.MM,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
) -> None:
    """Generate cut list, door and hardware schedules and material takeoff."""
    config = load_project_or_exit(config_file)
    output = run_project(config)
    text = render(output, output_format, unit, config.name)

    if output_file is not None:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote {output_format.value} output to {output_file}")
        typer.echo(f"Output written to: {output_file}")
    else:
        typer.echo(text)
