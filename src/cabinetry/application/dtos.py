"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinetry.domain import CutPanel, DoorSpec, HardwareItem, MaterialTakeoff


@dataclass(frozen=True)
class ScheduleOutput:
    """The four manufacturing documents produced by one generate action.

    Callers persist the four sets together; a new generation replaces all
    of them rather than patching.
    """

    cut_list: tuple[CutPanel, ...] = field(default_factory=tuple)
    door_schedule: tuple[DoorSpec, ...] = field(default_factory=tuple)
    hardware_schedule: tuple[HardwareItem, ...] = field(default_factory=tuple)
    material_takeoff: MaterialTakeoff = field(default_factory=MaterialTakeoff)

    @property
    def grand_total(self) -> int:
        """Takeoff cost total (board groups plus edge band)."""
        return self.material_takeoff.grand_total

    @property
    def hardware_total(self) -> int:
        return sum(item.estimated_cost for item in self.hardware_schedule)
