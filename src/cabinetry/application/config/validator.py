"""Validation structures and manufacturing advisory checks.

The generation engine silently degrades on odd input (malformed JSON
fields, clamped dimensions, duplicate standards). These checks surface
those cases to the user before generating.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from cabinetry.application.config.adapter import config_to_modules, config_to_standards
from cabinetry.application.config.loader import ConfigError
from cabinetry.application.config.schema import ModuleConfig, ProjectConfiguration
from cabinetry.domain.services.constants import (
    BACK_PANEL_RECESS_ALLOWANCE,
    DRAWER_BOX_CLEARANCE,
)
from cabinetry.domain.services.cut_list import CutListGenerator
from cabinetry.domain.services.parsing import parse_custom_hardware
from cabinetry.domain.services.standards import (
    DEFAULT_THICKNESS,
    StandardsResolver,
    resolve_value,
)
from cabinetry.domain.value_objects import BackPanelType, StandardCategory


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "modules[0].name")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _decode_or_none(raw: Any) -> tuple[Any, bool]:
    """Decode JSON text; the flag is False when the text is malformed."""
    if not isinstance(raw, str):
        return raw, True
    if not raw.strip():
        return None, True
    try:
        return json.loads(raw), True
    except json.JSONDecodeError:
        return None, False


def _category_thickness(config: ProjectConfiguration, category: StandardCategory) -> float:
    for standard in config.standards:
        if standard.category == category:
            return resolve_value(None, standard.thickness_mm, DEFAULT_THICKNESS[category])
    return DEFAULT_THICKNESS[category]


def _check_drawers(
    module: ModuleConfig, path: str, carcass_thickness: float, result: ValidationResult
) -> None:
    heights, well_formed = _decode_or_none(module.drawer_heights_mm)
    if not well_formed:
        result.add_warning(
            f"{path}.drawer_heights_mm",
            "Malformed JSON; every drawer will use the equal-split height",
            suggestion='Use a JSON array such as "[150, 200, 250]"',
        )
    elif heights is not None and not isinstance(heights, list):
        result.add_warning(
            f"{path}.drawer_heights_mm",
            "Not an array; every drawer will use the equal-split height",
        )
    elif isinstance(heights, list) and len(heights) > module.drawer_count:
        result.add_warning(
            f"{path}.drawer_heights_mm",
            f"{len(heights)} heights given for {module.drawer_count} drawers; extras are ignored",
        )

    if module.drawer_count > 0:
        default_height = (
            module.height_mm - module.shelf_count * carcass_thickness
        ) / module.drawer_count
        if default_height <= DRAWER_BOX_CLEARANCE:
            result.add_warning(
                f"{path}.drawer_count",
                f"Equal-split drawer height {default_height:.1f}mm leaves no box height; "
                "drawer panels will be clamped to zero",
                suggestion="Reduce drawer_count or give explicit drawer_heights_mm",
            )


def _check_hardware(module: ModuleConfig, path: str, result: ValidationResult) -> None:
    decoded, well_formed = _decode_or_none(module.hardware_json)
    if not well_formed:
        result.add_warning(
            f"{path}.hardware_json", "Malformed JSON; custom hardware is ignored"
        )
        return
    if decoded is None:
        return
    if not isinstance(decoded, dict):
        result.add_warning(
            f"{path}.hardware_json",
            "Not an object; custom hardware is ignored",
            suggestion='Use an object such as {"Wardrobe Rod": 1}',
        )
        return
    kept = parse_custom_hardware(decoded)
    for name in decoded:
        if str(name) not in kept:
            result.add_warning(
                f"{path}.hardware_json.{name}",
                "Quantity is not a non-negative number; entry is ignored",
            )


def _check_takeoff_rates(config: ProjectConfiguration, result: ValidationResult) -> None:
    """Warn about board groups the takeoff will price at zero."""
    modules = config_to_modules(config)
    standards = config_to_standards(config)
    resolver = StandardsResolver(standards)
    cut_list = CutListGenerator().generate(modules, standards)
    groups = {(panel.material, panel.thickness_mm) for panel in cut_list}
    for material, thickness in sorted(groups):
        standard = resolver.for_material(material, thickness)
        if standard is None or not standard.rate_per_sqft:
            result.add_warning(
                "standards",
                f"No rate_per_sqft for {material} at {thickness:g}mm; its cost will be 0",
                suggestion="Add a standard with this material, thickness and rate_per_sqft",
            )


def check_manufacturing_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Check a project for input the generators will silently degrade.

    Args:
        config: A schema-valid project configuration

    Returns:
        ValidationResult holding warnings only.
    """
    result = ValidationResult()
    carcass_t = _category_thickness(config, StandardCategory.CARCASS)
    back_t = _category_thickness(config, StandardCategory.BACK_PANEL)

    seen_names: set[str] = set()
    for i, module in enumerate(config.modules):
        path = f"modules[{i}]"
        if module.name in seen_names:
            result.add_warning(
                f"{path}.name",
                f"Duplicate module name '{module.name}'; door numbers will repeat",
            )
        seen_names.add(module.name)

        if module.back_panel_type == BackPanelType.RECESSED:
            if module.depth_mm <= back_t + BACK_PANEL_RECESS_ALLOWANCE:
                result.add_warning(
                    f"{path}.depth_mm",
                    "Depth does not exceed the recessed back panel allowance; "
                    "carcass panel widths will be clamped to zero",
                )

        _check_drawers(module, path, carcass_t, result)
        _check_hardware(module, path, result)

    _check_takeoff_rates(config, result)

    seen_categories: set[StandardCategory] = set()
    for i, standard in enumerate(config.standards):
        if standard.category in seen_categories:
            result.add_warning(
                f"standards[{i}].category",
                f"Another '{standard.category.value}' standard appears earlier; "
                "only the first is used",
            )
        seen_categories.add(standard.category)

    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Perform full validation of a loaded project configuration.

    Schema rules are enforced when the configuration is loaded; this adds
    the manufacturing advisories.
    """
    result = ValidationResult()
    if not config.modules:
        result.add_warning("modules", "Project has no modules; all schedules will be empty")
    return result.merge(check_manufacturing_advisories(config))


def result_from_config_error(error: ConfigError) -> ValidationResult:
    """Convert a load failure into blocking validation errors.

    Schema failures yield one error per offending field; file and JSON
    syntax failures yield a single error carrying the loader's message.
    """
    result = ValidationResult()
    if error.error_type != "validation" or not error.details:
        result.add_error(str(error.path or ""), error.message)
        return result

    for detail in error.details:
        result.add_error(
            detail.get("path", ""),
            detail.get("message", "Invalid value"),
            value=detail.get("value"),
        )
    return result
