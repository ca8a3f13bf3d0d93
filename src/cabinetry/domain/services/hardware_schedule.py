"""Hardware schedule generation service.

This module provides HardwareScheduleGenerator for deriving fittings and
accessories from module configuration, plus caller-defined custom items.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..entities import Module, Standard
from ..value_objects import DoorOpenType, ModuleType, ShelfType, enum_value
from .constants import (
    BASE_MODULE_LEGS,
    FLAP_STAYS_PER_DOOR,
    HINGE_HEIGHT_BANDS,
    HINGES_EXTRA_TALL,
    SHELF_PINS_PER_SHELF,
    TELESCOPIC_CHANNEL_MIN_DEPTH,
)
from .numeric import round_half_up
from .parsing import parse_custom_hardware
from .standards import StandardsResolver

__all__ = ["HardwareItem", "HardwareScheduleGenerator", "hinges_per_door"]

logger = logging.getLogger(__name__)

SOFT_CLOSE_HINGE = "Soft-Close Hinge"
LIFT_UP_MECHANISM = "Lift-Up Mechanism"
FLAP_STAY = "Flap Stay"
SLIDING_CHANNEL_SET = "Sliding Channel Set"
TELESCOPIC_CHANNEL = "Telescopic Channel (full ext.)"
BALL_BEARING_CHANNEL = "Ball Bearing Channel"
HANDLE = "Handle / Knob"
SHELF_SUPPORT_PIN = "Shelf Support Pin"
ADJUSTABLE_LEG = "Adjustable Leg"


@dataclass(frozen=True)
class HardwareItem:
    """One hardware schedule row.

    Attributes:
        module_name: Name of the module needing the hardware.
        module_type: Type of that module.
        zone: Zone of that module.
        item: Hardware name.
        category: Grouping tag, e.g. "hinge", "drawer_channel", "custom".
        qty: Quantity in ``unit``.
        unit: "pcs", "set" or "pair".
        rate: Cost per unit.
        estimated_cost: ``qty * rate`` rounded to whole currency units.
    """

    module_name: str
    module_type: str
    zone: str
    item: str
    category: str
    qty: float
    unit: str
    rate: float
    estimated_cost: int


def hinges_per_door(door_height_mm: float) -> int:
    """Number of hinges a door of this height needs."""
    for max_height, hinges in HINGE_HEIGHT_BANDS:
        if door_height_mm <= max_height:
            return hinges
    return HINGES_EXTRA_TALL


class HardwareScheduleGenerator:
    """Service for deriving hardware requirements.

    Every rule is evaluated independently per module, so one module can
    yield several rows. Custom entries from ``hardware_json`` follow the
    rule-derived rows. All rows are priced at the hardware standard's
    per-unit rate.
    """

    def generate(
        self, modules: Sequence[Module], standards: Sequence[Standard]
    ) -> list[HardwareItem]:
        resolver = StandardsResolver(standards)
        rate = resolver.hardware_rate()

        items: list[HardwareItem] = []
        for module in modules:
            for name, category, qty, unit in self._module_requirements(module):
                items.append(
                    HardwareItem(
                        module_name=module.name,
                        module_type=enum_value(module.module_type),
                        zone=module.zone,
                        item=name,
                        category=category,
                        qty=qty,
                        unit=unit,
                        rate=rate,
                        estimated_cost=round_half_up(qty * rate),
                    )
                )

        logger.debug(f"Scheduled {len(items)} hardware rows")
        return items

    def _module_requirements(
        self, module: Module
    ) -> list[tuple[str, str, float, str]]:
        """Rows for one module as (item, category, qty, unit)."""
        rows: list[tuple[str, str, float, str]] = []
        rows.extend(self._door_hardware(module))
        rows.extend(self._drawer_hardware(module))

        handle_count = module.door_count + module.drawer_count
        if handle_count > 0:
            rows.append((HANDLE, "handle", handle_count, "pcs"))

        if module.shelf_count > 0 and module.shelf_type == ShelfType.ADJUSTABLE:
            rows.append(
                (SHELF_SUPPORT_PIN, "shelf_pin", module.shelf_count * SHELF_PINS_PER_SHELF, "pcs")
            )

        if module.module_type == ModuleType.BASE:
            rows.append((ADJUSTABLE_LEG, "leg", BASE_MODULE_LEGS, "pcs"))

        for name, qty in parse_custom_hardware(module.hardware_json).items():
            rows.append((name, "custom", qty, "pcs"))

        return rows

    def _door_hardware(self, module: Module) -> list[tuple[str, str, float, str]]:
        """Hinges, stays, lift mechanisms or sliding channels.

        Hinges need at least one door; the other mechanisms follow the open
        type alone. Hinge count uses the module height as the door height.
        """
        open_type = module.door_open_type
        rows: list[tuple[str, str, float, str]] = []

        if module.door_count > 0 and open_type == DoorOpenType.HINGED:
            qty = hinges_per_door(module.height_mm) * module.door_count
            rows.append((SOFT_CLOSE_HINGE, "hinge", qty, "pcs"))

        if open_type == DoorOpenType.LIFT_UP:
            rows.append((LIFT_UP_MECHANISM, "lift_up", module.door_count, "set"))

        if open_type == DoorOpenType.FLAP:
            rows.append((FLAP_STAY, "flap_stay", module.door_count * FLAP_STAYS_PER_DOOR, "pcs"))

        if open_type == DoorOpenType.SLIDING:
            rows.append((SLIDING_CHANNEL_SET, "sliding_channel", 1, "set"))

        return rows

    def _drawer_hardware(self, module: Module) -> list[tuple[str, str, float, str]]:
        if module.drawer_count <= 0:
            return []
        if module.depth_mm > TELESCOPIC_CHANNEL_MIN_DEPTH:
            channel = TELESCOPIC_CHANNEL
        else:
            channel = BALL_BEARING_CHANNEL
        return [(channel, "drawer_channel", module.drawer_count, "pair")]
