"""Convert a validated ProjectConfiguration into domain entities."""

from cabinetry.application.config.schema import (
    ModuleConfig,
    ProjectConfiguration,
    StandardConfig,
)
from cabinetry.domain.entities import Module, Standard


def module_from_config(config: ModuleConfig) -> Module:
    return Module(**config.model_dump())


def standard_from_config(config: StandardConfig) -> Standard:
    return Standard(**config.model_dump())


def config_to_modules(config: ProjectConfiguration) -> list[Module]:
    """Modules in file order."""
    return [module_from_config(m) for m in config.modules]


def config_to_standards(config: ProjectConfiguration) -> list[Standard]:
    """Standards in catalog order (order decides first-match lookups)."""
    return [standard_from_config(s) for s in config.standards]
