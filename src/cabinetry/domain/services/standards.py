"""Standards resolution with module overrides and built-in fallbacks.

Every generator resolves values through the same three tiers:
module override, then the category standard, then a built-in default.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ..entities import Module, Standard
from ..value_objects import StandardCategory
from .constants import (
    DEFAULT_BACK_PANEL_MATERIAL,
    DEFAULT_BACK_PANEL_THICKNESS,
    DEFAULT_CARCASS_MATERIAL,
    DEFAULT_CARCASS_THICKNESS,
    DEFAULT_EDGE_BAND_MATERIAL,
    DEFAULT_EDGE_BAND_THICKNESS,
    DEFAULT_SHUTTER_FINISH,
    DEFAULT_SHUTTER_MATERIAL,
    DEFAULT_SHUTTER_THICKNESS,
)

T = TypeVar("T")

DEFAULT_THICKNESS: dict[StandardCategory, float] = {
    StandardCategory.CARCASS: DEFAULT_CARCASS_THICKNESS,
    StandardCategory.BACK_PANEL: DEFAULT_BACK_PANEL_THICKNESS,
    StandardCategory.SHUTTER: DEFAULT_SHUTTER_THICKNESS,
}

DEFAULT_MATERIAL: dict[StandardCategory, str] = {
    StandardCategory.CARCASS: DEFAULT_CARCASS_MATERIAL,
    StandardCategory.BACK_PANEL: DEFAULT_BACK_PANEL_MATERIAL,
    StandardCategory.SHUTTER: DEFAULT_SHUTTER_MATERIAL,
    StandardCategory.EDGEBAND: DEFAULT_EDGE_BAND_MATERIAL,
}


def resolve_value(override: T | None, standard_value: T | None, default: T) -> T:
    """Pick the first usable value: override, then standard, then default.

    Empty strings, zero and None are all treated as "not set", so a blank
    override or a zero-thickness standard falls through to the next tier.
    """
    if override:
        return override
    if standard_value:
        return standard_value
    return default


class StandardsResolver:
    """Looks up catalog standards by category.

    When several standards share a category the first one in catalog
    order wins. A missing category resolves to an empty standard and all
    numeric reads fall back to built-in constants; it is never an error.
    """

    def __init__(self, standards: Sequence[Standard]) -> None:
        self._standards = tuple(standards)

    def for_category(self, category: StandardCategory) -> Standard:
        """Return the first standard for ``category`` or an empty fallback."""
        for standard in self._standards:
            if standard.category == category:
                return standard
        return Standard.empty(category)

    def for_material(self, material: str, thickness_mm: float) -> Standard | None:
        """Return the first standard with this exact material and thickness."""
        for standard in self._standards:
            if standard.material == material and standard.thickness_mm == thickness_mm:
                return standard
        return None

    def thickness(self, category: StandardCategory) -> float:
        """Resolved thickness for a panel category."""
        return resolve_value(
            None,
            self.for_category(category).thickness_mm,
            DEFAULT_THICKNESS[category],
        )

    def material(
        self, category: StandardCategory, override: str | None = None
    ) -> str:
        """Resolved material, honoring a module-level override."""
        return resolve_value(
            override,
            self.for_category(category).material,
            DEFAULT_MATERIAL[category],
        )

    def carcass_material(self, module: Module) -> str:
        return self.material(StandardCategory.CARCASS, module.carcass_material)

    def shutter_material(self, module: Module) -> str:
        return self.material(StandardCategory.SHUTTER, module.shutter_material)

    def shutter_finish(self) -> str:
        return resolve_value(
            None,
            self.for_category(StandardCategory.SHUTTER).finish,
            DEFAULT_SHUTTER_FINISH,
        )

    def hardware_rate(self) -> float:
        """Per-unit hardware rate, 0 when the catalog has none."""
        return resolve_value(
            None, self.for_category(StandardCategory.HARDWARE).rate_per_unit, 0
        )

    def edge_band_thickness(self) -> float:
        return resolve_value(
            None,
            self.for_category(StandardCategory.EDGEBAND).edge_band_mm,
            DEFAULT_EDGE_BAND_THICKNESS,
        )

    def edge_band_rate(self) -> float:
        """Per running foot edge band rate, 0 when the catalog has none."""
        return resolve_value(
            None, self.for_category(StandardCategory.EDGEBAND).rate_per_unit, 0
        )


__all__ = [
    "DEFAULT_MATERIAL",
    "DEFAULT_THICKNESS",
    "StandardsResolver",
    "resolve_value",
]
