"""FastAPI dependency injection for generation services."""

from typing import Annotated

from fastapi import Depends

from cabinetry.application.commands import GenerateSchedulesCommand


def get_generate_command() -> GenerateSchedulesCommand:
    """Dependency for GenerateSchedulesCommand."""
    return GenerateSchedulesCommand()


GenerateCommandDep = Annotated[GenerateSchedulesCommand, Depends(get_generate_command)]
