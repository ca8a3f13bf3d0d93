"""Output formatters for generated schedules."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from cabinetry.application.dtos import ScheduleOutput
from cabinetry.domain import CutPanel, DoorSpec, HardwareItem, MaterialTakeoff
from cabinetry.domain.units import DisplayUnit, format_area, format_dimension


def _edge_code(panel: CutPanel) -> str:
    """Compact banding marker, e.g. "L1 L2 W1"."""
    flags = [
        ("L1", panel.edge_L1),
        ("L2", panel.edge_L2),
        ("W1", panel.edge_W1),
        ("W2", panel.edge_W2),
    ]
    return " ".join(code for code, banded in flags if banded) or "-"


class CutListFormatter:
    """Formats the panel cut list as a table.

    Dimensions are stored in millimeters; ``unit`` only changes how they
    are printed.
    """

    def __init__(self, unit: DisplayUnit = DisplayUnit.MM) -> None:
        self._unit = unit

    def format(self, cut_list: list[CutPanel] | tuple[CutPanel, ...]) -> str:
        if not cut_list:
            return "No panels in cut list."

        lines = [
            "CUT LIST",
            "=" * 110,
            f"{'#':>4} {'Module':<12} {'Part':<18} {'Length':>12} {'Width':>12} "
            f"{'Thk':>5} {'Qty':>4} {'Material':<20} {'Edges'}",
            "-" * 110,
        ]

        total_area = 0
        for panel in cut_list:
            lines.append(
                f"{panel.seq:>4} {panel.module_name:<12} {panel.part:<18} "
                f"{format_dimension(panel.length_mm, self._unit):>12} "
                f"{format_dimension(panel.width_mm, self._unit):>12} "
                f"{panel.thickness_mm:>5g} {panel.qty:>4} {panel.material:<20} "
                f"{_edge_code(panel)}"
            )
            total_area += panel.area_sqmm * panel.qty

        lines.append("-" * 110)
        area = format_area(total_area, self._unit)
        lines.append(f"{'TOTAL':<36} {len(cut_list)} panels, {area}")
        return "\n".join(lines)


class DoorScheduleFormatter:
    """Formats the door schedule as a table."""

    def __init__(self, unit: DisplayUnit = DisplayUnit.MM) -> None:
        self._unit = unit

    def format(self, doors: list[DoorSpec] | tuple[DoorSpec, ...]) -> str:
        if not doors:
            return "No doors scheduled."

        lines = [
            "DOOR SCHEDULE",
            "=" * 100,
            f"{'Door':<14} {'Open':<9} {'Width':>12} {'Height':>12} {'Thk':>5} "
            f"{'Material':<20} {'Finish'}",
            "-" * 100,
        ]
        for door in doors:
            width = (
                f"{door.width_mm:.2f} mm"
                if self._unit == DisplayUnit.MM
                else format_dimension(door.width_mm, self._unit)
            )
            height = (
                f"{door.height_mm:.2f} mm"
                if self._unit == DisplayUnit.MM
                else format_dimension(door.height_mm, self._unit)
            )
            lines.append(
                f"{door.door_no:<14} {door.open_type:<9} {width:>12} {height:>12} "
                f"{door.thickness_mm:>5g} {door.material:<20} {door.finish}"
            )
        lines.append("-" * 100)
        lines.append(f"{'TOTAL':<14} {len(doors)} leaves")
        return "\n".join(lines)


class HardwareScheduleFormatter:
    """Formats the hardware schedule, grouped by module."""

    def format(
        self,
        items: list[HardwareItem] | tuple[HardwareItem, ...],
        title: str = "HARDWARE SCHEDULE",
    ) -> str:
        lines = [title, "=" * 80, ""]
        if not items:
            lines.append("No hardware required.")
            return "\n".join(lines)

        lines.append(f"{'Item':<36} {'Qty':>8} {'Unit':<5} {'Rate':>8} {'Cost':>10}")
        lines.append("-" * 80)

        current_module: str | None = None
        for item in items:
            if item.module_name != current_module:
                current_module = item.module_name
                lines.append(f"\n{current_module.upper()}")
            lines.append(
                f"  {item.item:<34} {item.qty:>8g} {item.unit:<5} "
                f"{item.rate:>8g} {item.estimated_cost:>10}"
            )

        lines.append("")
        lines.append("-" * 80)
        total = sum(item.estimated_cost for item in items)
        lines.append(f"{'TOTAL':<60} {total:>10}")
        return "\n".join(lines)


class MaterialTakeoffFormatter:
    """Formats the material takeoff report."""

    def format(self, takeoff: MaterialTakeoff) -> str:
        lines = ["MATERIAL TAKEOFF", "=" * 60, ""]

        for group in takeoff.groups:
            lines.append(f"{group.material} ({group.thickness_mm:g}mm)")
            lines.append(f"  Panels:      {group.panel_count}")
            lines.append(f"  Area needed: {group.total_area_sqft:.2f} sq ft")
            lines.append(
                f"  8x4 sheets:  {group.sheets_needed} (with {group.wastage_pct}% wastage)"
            )
            lines.append(f"  Cost:        {group.estimated_cost} @ {group.rate_per_sqft:g}/sq ft")
            lines.append("")

        band = takeoff.edge_band
        if band is not None:
            lines.append(f"{band.material} ({band.thickness_mm:g}mm edge band)")
            lines.append(
                f"  Running:     {band.total_running_ft:.2f} ft "
                f"({band.total_running_mm} mm, +{band.wastage_pct}% wastage)"
            )
            lines.append(f"  Cost:        {band.estimated_cost} @ {band.rate_per_rft:g}/rft")
            lines.append("")

        lines.append("-" * 60)
        lines.append(f"Sheets (all materials): {takeoff.total_sheets}")
        lines.append(f"GRAND TOTAL: {takeoff.grand_total}")
        return "\n".join(lines)


class JsonExporter:
    """Exports all four schedules as one JSON document."""

    def to_dict(self, output: ScheduleOutput, project_name: str = "project") -> dict[str, Any]:
        takeoff = output.material_takeoff
        return {
            "project": project_name,
            "cut_list": [asdict(panel) for panel in output.cut_list],
            "door_schedule": [asdict(door) for door in output.door_schedule],
            "hardware_schedule": [asdict(item) for item in output.hardware_schedule],
            "hardware_total": output.hardware_total,
            "material_takeoff": {
                "items": [asdict(group) for group in takeoff.groups],
                "edge_band": asdict(takeoff.edge_band) if takeoff.edge_band else None,
                "grand_total": takeoff.grand_total,
            },
        }

    def export(self, output: ScheduleOutput, project_name: str = "project") -> str:
        """Export schedules as a JSON string."""
        return json.dumps(self.to_dict(output, project_name), indent=2)
