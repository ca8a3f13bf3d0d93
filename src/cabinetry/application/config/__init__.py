"""Project configuration schema and loading.

Public API:
    - ProjectConfiguration: Root configuration model
    - ModuleConfig: One cabinet module
    - StandardConfig: One standards catalog entry
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Schema-valid config -> advisories
    - config_to_modules / config_to_standards: Convert to domain entities

Example:
    >>> from pathlib import Path
    >>> from cabinetry.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.modules)} modules")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinetry.application.config.adapter import (
    config_to_modules,
    config_to_standards,
    module_from_config,
    standard_from_config,
)
from cabinetry.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinetry.application.config.schema import (
    SUPPORTED_VERSIONS,
    ModuleConfig,
    ProjectConfiguration,
    StandardConfig,
)
from cabinetry.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_manufacturing_advisories,
    result_from_config_error,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ModuleConfig",
    "ProjectConfiguration",
    "StandardConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_manufacturing_advisories",
    "config_to_modules",
    "config_to_standards",
    "load_config",
    "load_config_from_dict",
    "module_from_config",
    "result_from_config_error",
    "standard_from_config",
    "validate_config",
]
