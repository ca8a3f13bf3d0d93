"""Unit tests for MaterialTakeoffAggregator."""

import pytest

from cabinetry.domain import (
    CutListGenerator,
    CutPanel,
    MaterialTakeoffAggregator,
    Standard,
    StandardCategory,
)


def make_panel(seq=1, material="HDHMR 18mm", thickness=18, length=2500, width=2000, qty=1):
    return CutPanel(
        seq=seq,
        module_name="B1",
        module_type="base",
        zone="",
        part="Left Side",
        length_mm=length,
        width_mm=width,
        thickness_mm=thickness,
        area_sqmm=length * width,
        material=material,
        qty=qty,
        edge_L1=True,
        edge_L2=True,
        edge_W1=False,
        edge_W2=False,
    )


PRICED = [
    Standard(
        category=StandardCategory.CARCASS,
        material="HDHMR 18mm",
        thickness_mm=18,
        rate_per_sqft=100,
    ),
    Standard(
        category=StandardCategory.EDGEBAND,
        material="PVC 2mm",
        edge_band_mm=2,
        rate_per_unit=10,
    ),
]


@pytest.fixture
def aggregator() -> MaterialTakeoffAggregator:
    return MaterialTakeoffAggregator()


class TestMaterialGroups:
    """Tests for grouping, sheet counts and board cost."""

    def test_sheets_include_wastage(self, aggregator):
        """5,000,000 sq mm plus 8% needs two 2440x1220 sheets."""
        takeoff = aggregator.aggregate([make_panel()], PRICED)

        group = takeoff.groups[0]
        assert group.total_area_sqmm == 5_000_000
        assert group.sheets_needed == 2
        assert group.wastage_pct == 8

    def test_board_cost(self, aggregator):
        group = aggregator.aggregate([make_panel()], PRICED).groups[0]

        assert group.total_area_sqft == 53.82
        assert group.rate_per_sqft == 100
        assert group.estimated_cost == 5813

    def test_quantity_multiplies_area_and_count(self, aggregator):
        group = aggregator.aggregate([make_panel(length=1000, width=500, qty=3)], PRICED).groups[0]

        assert group.panel_count == 3
        assert group.total_area_sqmm == 1_500_000

    def test_groups_by_material_and_thickness_in_first_seen_order(self, aggregator):
        cut_list = [
            make_panel(1, "MR Ply 6mm", 6),
            make_panel(2, "HDHMR 18mm", 18),
            make_panel(3, "MR Ply 6mm", 6),
            make_panel(4, "HDHMR 18mm", 25),
        ]

        groups = aggregator.aggregate(cut_list, PRICED).groups

        assert [(g.material, g.thickness_mm) for g in groups] == [
            ("MR Ply 6mm", 6),
            ("HDHMR 18mm", 18),
            ("HDHMR 18mm", 25),
        ]
        assert groups[0].panel_count == 2

    def test_unmatched_material_costs_zero(self, aggregator):
        group = aggregator.aggregate([make_panel(material="Teak")], PRICED).groups[0]

        assert group.rate_per_sqft == 0
        assert group.estimated_cost == 0
        assert group.sheets_needed == 2

    def test_rate_lookup_ignores_category(self, aggregator):
        """A back panel board priced under the carcass category still matches."""
        standards = [
            Standard(
                category=StandardCategory.GENERAL,
                material="MR Ply 6mm",
                thickness_mm=6,
                rate_per_sqft=40,
            )
        ]

        group = aggregator.aggregate([make_panel(material="MR Ply 6mm", thickness=6)], standards).groups[0]

        assert group.rate_per_sqft == 40


class TestEdgeBand:
    """Tests for the edge band summary row."""

    def test_running_length_and_cost(self, aggregator):
        band = aggregator.aggregate([make_panel()], PRICED).edge_band

        assert band.material == "PVC 2mm"
        assert band.thickness_mm == 2
        assert band.total_running_mm == 5000
        assert band.total_running_ft == 16.4
        assert band.wastage_pct == 10
        assert band.estimated_cost == 180

    def test_defaults_without_edgeband_standard(self, aggregator):
        band = aggregator.aggregate([make_panel()], []).edge_band

        assert band.material == "PVC Edge Band"
        assert band.thickness_mm == 1
        assert band.rate_per_rft == 0
        assert band.estimated_cost == 0


class TestTotals:
    """Tests for the grand total."""

    def test_grand_total_includes_edge_band(self, aggregator):
        takeoff = aggregator.aggregate([make_panel()], PRICED)

        assert takeoff.grand_total == 5813 + 180

    def test_empty_cut_list(self, aggregator):
        takeoff = aggregator.aggregate([], PRICED)

        assert takeoff.groups == ()
        assert takeoff.edge_band.total_running_mm == 0
        assert takeoff.grand_total == 0
        assert takeoff.total_sheets == 0

    def test_custom_sheet_size(self):
        aggregator = MaterialTakeoffAggregator(sheet_area_sqmm=1_000_000, sheet_wastage_pct=0)

        group = aggregator.aggregate([make_panel()], PRICED).groups[0]

        assert group.sheets_needed == 5

    def test_takeoff_from_generated_cut_list(self, make_module, standards):
        modules = [make_module(has_back_panel=True, drawer_count=1)]
        cut_list = CutListGenerator().generate(modules, standards)

        takeoff = MaterialTakeoffAggregator().aggregate(cut_list, standards)

        assert [g.material for g in takeoff.groups] == [
            "HDHMR 18mm", "MR Ply 6mm", "Ply + Laminate",
        ]
        assert sum(g.panel_count for g in takeoff.groups) == len(cut_list)
        assert takeoff.grand_total == (
            sum(g.estimated_cost for g in takeoff.groups) + takeoff.edge_band.estimated_cost
        )

    def test_aggregation_is_repeatable(self, aggregator, make_module, standards):
        modules = [make_module(has_back_panel=True, drawer_count=2, shelf_count=1)]
        cut_list = CutListGenerator().generate(modules, standards)

        first = aggregator.aggregate(cut_list, standards)
        second = aggregator.aggregate(cut_list, standards)

        assert first == second
        assert first.grand_total == second.grand_total
