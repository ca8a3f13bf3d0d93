"""Cut list generation service.

Decomposes each module into carcass, shelf, back panel and drawer box
panels. Rows are numbered with one sequence shared across all modules of
a generation call, in input module order and then fixed part order.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..entities import Module, Standard
from ..value_objects import StandardCategory, enum_value
from .constants import (
    BACK_PANEL_GROOVE_OVERSIZE,
    BACK_PANEL_RECESS_ALLOWANCE,
    DRAWER_BOX_CLEARANCE,
    DRAWER_DEPTH_CLEARANCE,
    DRAWER_FRONT_CLEARANCE,
    DRAWER_WIDTH_CLEARANCE,
    SHELF_DEPTH_CLEARANCE,
    SHELF_LENGTH_CLEARANCE,
)
from .numeric import clamp_non_negative, round_half_up
from .parsing import parse_drawer_heights
from .standards import StandardsResolver

__all__ = ["CutListGenerator", "CutPanel"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CutPanel:
    """One row of the panel cut list.

    Attributes:
        seq: Position in the cut list, starting at 1 per generation call.
        module_name: Name of the module the panel belongs to.
        module_type: Type of that module.
        zone: Zone of that module.
        part: Part label, e.g. "Left Side", "Shelf 2", "Drawer 1 Base".
        length_mm: Length, rounded to whole millimeters, never negative.
        width_mm: Width, rounded to whole millimeters, never negative.
        thickness_mm: Board thickness.
        area_sqmm: Clamped length times clamped width, rounded once; the
            unrounded sides are multiplied.
        material: Board material.
        qty: Number of identical pieces.
        edge_L1: First long edge is banded.
        edge_L2: Second long edge is banded.
        edge_W1: First short edge is banded.
        edge_W2: Second short edge is banded.
    """

    seq: int
    module_name: str
    module_type: str
    zone: str
    part: str
    length_mm: int
    width_mm: int
    thickness_mm: float
    area_sqmm: int
    material: str
    qty: int
    edge_L1: bool
    edge_L2: bool
    edge_W1: bool
    edge_W2: bool

    @property
    def banded_length_mm(self) -> float:
        """Running length of edge band on one piece."""
        return (
            self.length_mm * (self.edge_L1 + self.edge_L2)
            + self.width_mm * (self.edge_W1 + self.edge_W2)
        )


def _make_panel(
    seq: Iterator[int],
    module: Module,
    part: str,
    length: float,
    width: float,
    thickness: float,
    material: str,
    is_shelf: bool = False,
) -> CutPanel:
    length_mm = round_half_up(clamp_non_negative(length))
    width_mm = round_half_up(clamp_non_negative(width))
    return CutPanel(
        seq=next(seq),
        module_name=module.name,
        module_type=enum_value(module.module_type),
        zone=module.zone,
        part=part,
        length_mm=length_mm,
        width_mm=width_mm,
        thickness_mm=thickness,
        area_sqmm=round_half_up(clamp_non_negative(length) * clamp_non_negative(width)),
        material=material,
        qty=1,
        # Long edges are always exposed; only shelves show a short edge.
        edge_L1=True,
        edge_L2=True,
        edge_W1=is_shelf,
        edge_W2=False,
    )


class CutListGenerator:
    """Generates the panel cut list for a batch of modules."""

    def generate(
        self, modules: Sequence[Module], standards: Sequence[Standard]
    ) -> list[CutPanel]:
        """Generate the cut list.

        Args:
            modules: Modules in the order their panels should appear.
            standards: Standards catalog.

        Returns:
            Panels numbered from 1 across the whole batch.
        """
        resolver = StandardsResolver(standards)
        seq = itertools.count(1)
        panels: list[CutPanel] = []
        for module in modules:
            panels.extend(self._module_panels(module, resolver, seq))
        logger.debug(f"Generated {len(panels)} panels for {len(modules)} modules")
        return panels

    def _module_panels(
        self, module: Module, resolver: StandardsResolver, seq: Iterator[int]
    ) -> list[CutPanel]:
        t = resolver.thickness(StandardCategory.CARCASS)
        bt = resolver.thickness(StandardCategory.BACK_PANEL)
        carcass_mat = resolver.carcass_material(module)
        back_mat = resolver.material(StandardCategory.BACK_PANEL)

        W, H, D = module.width_mm, module.height_mm, module.depth_mm
        recess = bt + BACK_PANEL_RECESS_ALLOWANCE if module.is_recessed else 0
        depth = D - recess

        panels = [
            _make_panel(seq, module, "Left Side", H, depth, t, carcass_mat),
            _make_panel(seq, module, "Right Side", H, depth, t, carcass_mat),
            _make_panel(seq, module, "Top", W - 2 * t, depth, t, carcass_mat),
            _make_panel(seq, module, "Bottom", W - 2 * t, depth, t, carcass_mat),
        ]

        shelf_length = W - 2 * t - SHELF_LENGTH_CLEARANCE
        shelf_width = depth - SHELF_DEPTH_CLEARANCE
        for i in range(1, module.shelf_count + 1):
            panels.append(
                _make_panel(
                    seq, module, f"Shelf {i}", shelf_length, shelf_width, t,
                    carcass_mat, is_shelf=True,
                )
            )

        if module.has_back_panel:
            if module.is_recessed:
                back_width = W - 2 * t + BACK_PANEL_GROOVE_OVERSIZE
                back_height = H + BACK_PANEL_GROOVE_OVERSIZE
            else:
                back_width, back_height = W, H
            panels.append(
                _make_panel(seq, module, "Back Panel", back_height, back_width, bt, back_mat)
            )

        panels.extend(self._drawer_panels(module, resolver, seq))
        return panels

    def _drawer_panels(
        self, module: Module, resolver: StandardsResolver, seq: Iterator[int]
    ) -> list[CutPanel]:
        """Five panels per drawer: front, back, left, right and base.

        The front is cut from shutter board, the box sides and back from
        carcass board, and the base from back panel board.
        """
        if module.drawer_count <= 0:
            return []

        t = resolver.thickness(StandardCategory.CARCASS)
        bt = resolver.thickness(StandardCategory.BACK_PANEL)
        st = resolver.thickness(StandardCategory.SHUTTER)
        carcass_mat = resolver.carcass_material(module)
        back_mat = resolver.material(StandardCategory.BACK_PANEL)
        shutter_mat = resolver.shutter_material(module)

        heights = parse_drawer_heights(module.drawer_heights_mm)
        default_height = (module.height_mm - module.shelf_count * t) / module.drawer_count
        inner_width = module.width_mm - 2 * t - DRAWER_WIDTH_CLEARANCE
        inner_depth = module.depth_mm - DRAWER_DEPTH_CLEARANCE
        box_width = inner_width - 2 * t

        panels: list[CutPanel] = []
        for d in range(1, module.drawer_count + 1):
            height = heights[d - 1] if d <= len(heights) else None
            # Zero or missing entries take the equal split
            dh = height or default_height
            box_height = dh - DRAWER_BOX_CLEARANCE
            label = f"Drawer {d}"
            panels += [
                _make_panel(seq, module, f"{label} Front", dh - DRAWER_FRONT_CLEARANCE,
                            inner_width, st, shutter_mat),
                _make_panel(seq, module, f"{label} Back", box_height, box_width, t, carcass_mat),
                _make_panel(seq, module, f"{label} Left", box_height, inner_depth, t, carcass_mat),
                _make_panel(seq, module, f"{label} Right", box_height, inner_depth, t, carcass_mat),
                _make_panel(seq, module, f"{label} Base", box_width, inner_depth, bt, back_mat),
            ]
        return panels
