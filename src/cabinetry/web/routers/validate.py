"""Project validation endpoint."""

from fastapi import APIRouter

from cabinetry.application.config import (
    ConfigError,
    ValidationResult,
    load_config_from_dict,
    result_from_config_error,
    validate_config,
)
from cabinetry.web.schemas import GenerateRequest, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


def _to_schema(result: ValidationResult) -> ValidationResultSchema:
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            {"message": e.message, "path": e.path, "value": e.value}
            for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )


@router.post("", response_model=ValidationResultSchema)
async def validate_project(request: GenerateRequest) -> ValidationResultSchema:
    """Validate a project without generating.

    Schema errors are reported as errors with ``is_valid`` false;
    manufacturing advisories are returned as warnings.
    """
    try:
        result = validate_config(load_config_from_dict(request.config))
    except ConfigError as e:
        result = result_from_config_error(e)
    return _to_schema(result)
