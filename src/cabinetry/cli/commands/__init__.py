"""CLI command implementations for the cabinetry application.

This package contains subcommands for the cabinetry CLI:
- generate: Produce schedules from a project file
- validate: Validate a project file
"""

from cabinetry.cli.commands.generate import generate
from cabinetry.cli.commands.validate import validate_command

__all__ = ["generate", "validate_command"]
