"""Schedule generation endpoint."""

from fastapi import APIRouter

from cabinetry.application.config import (
    config_to_modules,
    config_to_standards,
    load_config_from_dict,
)
from cabinetry.infrastructure import JsonExporter
from cabinetry.web.dependencies import GenerateCommandDep
from cabinetry.web.schemas import GenerateRequest, ScheduleOutputSchema

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=ScheduleOutputSchema)
async def generate_schedules(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> ScheduleOutputSchema:
    """Generate all four schedules for a project.

    Raises:
        ConfigError: If the configuration fails schema validation
            (returned as 422 by the registered handler).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_modules(config), config_to_standards(config))
    data = JsonExporter().to_dict(output, config.name)
    return ScheduleOutputSchema.model_validate(data)
