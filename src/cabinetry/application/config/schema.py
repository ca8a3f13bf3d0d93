"""Project configuration schema.

A project file lists the modules to manufacture and the standards catalog
they are built from. Field names match the domain entities so that records
exported by the planning application load without renaming.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinetry.domain.value_objects import (
    BackPanelType,
    DoorOpenType,
    ModuleType,
    ShelfType,
    StandardCategory,
)

# Version 1.0: Modules and standards catalog
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ModuleConfig(BaseModel):
    """Configuration for one cabinet module.

    ``drawer_heights_mm`` and ``hardware_json`` are deliberately loose:
    they may be JSON text or decoded JSON and are parsed leniently at
    generation time.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    module_type: ModuleType = ModuleType.BASE
    zone: str = ""
    width_mm: float = Field(..., gt=0)
    height_mm: float = Field(..., gt=0)
    depth_mm: float = Field(..., gt=0)
    door_count: int = Field(default=0, ge=0)
    door_style: str = ""
    door_open_type: DoorOpenType = DoorOpenType.HINGED
    drawer_count: int = Field(default=0, ge=0)
    drawer_heights_mm: Any = None
    shelf_count: int = Field(default=0, ge=0)
    shelf_type: ShelfType = ShelfType.FIXED
    has_back_panel: bool = True
    back_panel_type: BackPanelType = BackPanelType.NAILED
    carcass_material: str | None = None
    shutter_material: str | None = None
    hardware_json: Any = None


class StandardConfig(BaseModel):
    """Configuration for one standards catalog entry."""

    model_config = ConfigDict(extra="forbid")

    category: StandardCategory
    material: str = ""
    thickness_mm: float | None = Field(default=None, ge=0)
    finish: str = ""
    rate_per_sqft: float | None = Field(default=None, ge=0)
    rate_per_unit: float | None = Field(default=None, ge=0)
    edge_band_mm: float | None = Field(default=None, ge=0)


class ProjectConfiguration(BaseModel):
    """Root configuration model for a project file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Project name used for output titles
        modules: Modules in the order their rows should appear
        standards: Standards catalog; first entry per category wins

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     modules=[ModuleConfig(name="B1", width_mm=600, height_mm=720, depth_mm=560)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str = "project"
    modules: list[ModuleConfig] = Field(default_factory=list)
    standards: list[StandardConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
