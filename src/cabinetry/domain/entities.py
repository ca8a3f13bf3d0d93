"""Domain entities: cabinet modules and catalog standards.

All dimensions are millimeters. Display-unit conversion happens outside
the domain (see ``cabinetry.domain.units``).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

from .value_objects import (
    BackPanelType,
    DoorOpenType,
    ModuleType,
    ShelfType,
    StandardCategory,
)

# Free-form fields arrive either as JSON text or as already-decoded JSON.
DrawerHeightsInput = Union[str, Sequence[object], None]
HardwareInput = Union[str, Mapping[str, object], None]


@dataclass(frozen=True)
class Module:
    """One cabinet unit to be manufactured.

    Attributes:
        name: Identifier printed on every output row.
        width_mm: Overall width.
        height_mm: Overall height.
        depth_mm: Overall depth.
        module_type: Kind of module (base, wall, tall, ...).
        zone: Free-text location, e.g. "Kitchen - North wall".
        door_count: Number of door leaves.
        door_style: Free-text door style carried to the door schedule.
        door_open_type: How the doors open.
        drawer_count: Number of drawers.
        drawer_heights_mm: Per-drawer heights as JSON text or a sequence.
            May be shorter than ``drawer_count``; missing entries use the
            equal-split default height.
        shelf_count: Number of shelves.
        shelf_type: Shelf mounting style.
        has_back_panel: Whether a back panel is cut.
        back_panel_type: Back panel fitting.
        carcass_material: Overrides the carcass standard's material.
        shutter_material: Overrides the shutter standard's material.
        hardware_json: Custom hardware as JSON text or a mapping of
            item name to quantity. Added on top of rule-derived hardware.
    """

    name: str
    width_mm: float
    height_mm: float
    depth_mm: float
    module_type: ModuleType = ModuleType.BASE
    zone: str = ""
    door_count: int = 0
    door_style: str = ""
    door_open_type: DoorOpenType = DoorOpenType.HINGED
    drawer_count: int = 0
    drawer_heights_mm: DrawerHeightsInput = None
    shelf_count: int = 0
    shelf_type: ShelfType = ShelfType.FIXED
    has_back_panel: bool = True
    back_panel_type: BackPanelType = BackPanelType.NAILED
    carcass_material: str | None = None
    shutter_material: str | None = None
    hardware_json: HardwareInput = None

    @property
    def is_recessed(self) -> bool:
        """True when the back panel sits in a routed groove."""
        return self.back_panel_type == BackPanelType.RECESSED

    @property
    def is_sliding(self) -> bool:
        """True when the doors slide rather than swing."""
        return self.door_open_type == DoorOpenType.SLIDING


@dataclass(frozen=True)
class Standard:
    """Catalog entry giving material, thickness and pricing for a category.

    Numeric fields are optional; a missing (or zero) thickness falls back
    to the built-in default for the category when resolved.
    """

    category: StandardCategory
    material: str = ""
    thickness_mm: float | None = None
    finish: str = ""
    rate_per_sqft: float | None = None
    rate_per_unit: float | None = None
    edge_band_mm: float | None = None

    @classmethod
    def empty(cls, category: StandardCategory | str) -> Standard:
        """Create the fallback used when a category has no catalog entry."""
        return cls(category=category)  # type: ignore[arg-type]


__all__ = [
    "DrawerHeightsInput",
    "HardwareInput",
    "Module",
    "Standard",
]
