"""Material takeoff aggregation service."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..entities import Standard
from ..units import running_feet, sqmm_to_sqft
from ..value_objects import StandardCategory
from .constants import EDGE_BAND_WASTAGE_PCT, SHEET_AREA_SQMM, SHEET_WASTAGE_PCT
from .cut_list import CutPanel
from .numeric import round_2dp, round_half_up
from .standards import StandardsResolver, resolve_value

__all__ = [
    "EdgeBandSummary",
    "MaterialGroup",
    "MaterialTakeoff",
    "MaterialTakeoffAggregator",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialGroup:
    """Board requirement for one (material, thickness) pair.

    Attributes:
        material: Board material.
        thickness_mm: Board thickness.
        panel_count: Pieces cut from this board.
        total_area_sqmm: Net area of those pieces.
        total_area_sqft: Net area in square feet, two decimals.
        wastage_pct: Cutting loss allowance applied to sheets and cost.
        sheets_needed: Whole 2440x1220 sheets after wastage.
        rate_per_sqft: Price per square foot from the catalog, 0 if unmatched.
        estimated_cost: Net square feet plus wastage times rate, rounded.
    """

    material: str
    thickness_mm: float
    panel_count: int
    total_area_sqmm: int
    total_area_sqft: float
    wastage_pct: int
    sheets_needed: int
    rate_per_sqft: float
    estimated_cost: int


@dataclass(frozen=True)
class EdgeBandSummary:
    """Edge band running length across the whole cut list."""

    material: str
    thickness_mm: float
    total_running_mm: int
    total_running_ft: float
    wastage_pct: int
    rate_per_rft: float
    estimated_cost: int


@dataclass(frozen=True)
class MaterialTakeoff:
    """Takeoff result: board groups, the edge band row and the grand total."""

    groups: tuple[MaterialGroup, ...] = field(default_factory=tuple)
    edge_band: EdgeBandSummary | None = None
    grand_total: int = 0

    @property
    def total_sheets(self) -> int:
        return sum(group.sheets_needed for group in self.groups)


class MaterialTakeoffAggregator:
    """Aggregates a cut list into sheet, edge band and cost requirements."""

    def __init__(
        self,
        sheet_area_sqmm: float = SHEET_AREA_SQMM,
        sheet_wastage_pct: int = SHEET_WASTAGE_PCT,
        edge_band_wastage_pct: int = EDGE_BAND_WASTAGE_PCT,
    ) -> None:
        self.sheet_area_sqmm = sheet_area_sqmm
        self.sheet_wastage_pct = sheet_wastage_pct
        self.edge_band_wastage_pct = edge_band_wastage_pct

    def aggregate(
        self, cut_list: Sequence[CutPanel], standards: Sequence[Standard]
    ) -> MaterialTakeoff:
        """Group the cut list by material and thickness and price it.

        Args:
            cut_list: Output of ``CutListGenerator.generate``.
            standards: Standards catalog used for rates.

        Returns:
            MaterialTakeoff whose grand total includes the edge band cost.
        """
        resolver = StandardsResolver(standards)

        # Insertion order keeps groups in first-seen cut list order
        totals: dict[tuple[str, float], list[int]] = {}
        for panel in cut_list:
            area_and_count = totals.setdefault((panel.material, panel.thickness_mm), [0, 0])
            area_and_count[0] += panel.area_sqmm * panel.qty
            area_and_count[1] += panel.qty

        groups = tuple(
            self._price_group(material, thickness, area, count, resolver)
            for (material, thickness), (area, count) in totals.items()
        )
        edge_band = self._edge_band(cut_list, resolver)
        grand_total = sum(g.estimated_cost for g in groups) + edge_band.estimated_cost

        logger.debug(
            f"Takeoff: {len(groups)} material groups, grand total {grand_total}"
        )
        return MaterialTakeoff(groups=groups, edge_band=edge_band, grand_total=grand_total)

    def _price_group(
        self,
        material: str,
        thickness: float,
        total_area: int,
        panel_count: int,
        resolver: StandardsResolver,
    ) -> MaterialGroup:
        factor = 1 + self.sheet_wastage_pct / 100
        standard = resolver.for_material(material, thickness)
        rate = resolve_value(None, standard.rate_per_sqft if standard else None, 0)
        area_sqft = sqmm_to_sqft(total_area)
        return MaterialGroup(
            material=material,
            thickness_mm=thickness,
            panel_count=panel_count,
            total_area_sqmm=total_area,
            total_area_sqft=round_2dp(area_sqft),
            wastage_pct=self.sheet_wastage_pct,
            sheets_needed=math.ceil(total_area * factor / self.sheet_area_sqmm),
            rate_per_sqft=rate,
            estimated_cost=round_half_up(area_sqft * factor * rate),
        )

    def _edge_band(
        self, cut_list: Sequence[CutPanel], resolver: StandardsResolver
    ) -> EdgeBandSummary:
        total_mm = sum(panel.banded_length_mm * panel.qty for panel in cut_list)
        feet = running_feet(total_mm)
        rate = resolver.edge_band_rate()
        factor = 1 + self.edge_band_wastage_pct / 100
        return EdgeBandSummary(
            material=resolver.material(StandardCategory.EDGEBAND),
            thickness_mm=resolver.edge_band_thickness(),
            total_running_mm=round_half_up(total_mm),
            total_running_ft=round_2dp(feet),
            wastage_pct=self.edge_band_wastage_pct,
            rate_per_rft=rate,
            estimated_cost=round_half_up(feet * factor * rate),
        )
