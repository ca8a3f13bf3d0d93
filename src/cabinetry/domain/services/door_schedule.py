"""Door schedule generation service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..entities import Module, Standard
from ..value_objects import StandardCategory, enum_value
from .constants import DOOR_GAP_TOTAL, SLIDING_DOOR_OVERLAP
from .numeric import clamp_non_negative, round_2dp, round_half_up
from .standards import StandardsResolver

__all__ = ["DoorScheduleGenerator", "DoorSpec"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoorSpec:
    """One door leaf.

    Attributes:
        module_name: Name of the module the door hangs on.
        module_type: Type of that module.
        zone: Zone of that module.
        door_no: Leaf label, ``"<module name>-D<n>"``.
        door_style: Style carried from the module.
        open_type: How the door opens.
        width_mm: Leaf width to two decimals.
        height_mm: Leaf height to two decimals.
        thickness_mm: Shutter board thickness.
        area_sqmm: Leaf area rounded to whole square millimeters.
        material: Shutter material.
        finish: Shutter finish.
    """

    module_name: str
    module_type: str
    zone: str
    door_no: str
    door_style: str
    open_type: str
    width_mm: float
    height_mm: float
    thickness_mm: float
    area_sqmm: int
    material: str
    finish: str


class DoorScheduleGenerator:
    """Computes per-door leaf sizes, material and finish.

    Hinged and other swinging doors share a 4mm total gap across the module
    width and lose 4mm of height. Sliding doors take an equal share of the
    width plus a 20mm overlap and keep full height.
    """

    def generate(
        self, modules: Sequence[Module], standards: Sequence[Standard]
    ) -> list[DoorSpec]:
        resolver = StandardsResolver(standards)
        thickness = resolver.thickness(StandardCategory.SHUTTER)
        finish = resolver.shutter_finish()

        doors: list[DoorSpec] = []
        for module in modules:
            if module.door_count <= 0:
                continue

            if module.is_sliding:
                door_width = module.width_mm / module.door_count + SLIDING_DOOR_OVERLAP
                door_height = module.height_mm
            else:
                door_width = (module.width_mm - DOOR_GAP_TOTAL) / module.door_count
                door_height = module.height_mm - DOOR_GAP_TOTAL

            door_width = clamp_non_negative(door_width)
            door_height = clamp_non_negative(door_height)
            material = resolver.shutter_material(module)
            for i in range(1, module.door_count + 1):
                doors.append(
                    DoorSpec(
                        module_name=module.name,
                        module_type=enum_value(module.module_type),
                        zone=module.zone,
                        door_no=f"{module.name}-D{i}",
                        door_style=module.door_style,
                        open_type=enum_value(module.door_open_type),
                        width_mm=round_2dp(door_width),
                        height_mm=round_2dp(door_height),
                        thickness_mm=thickness,
                        area_sqmm=round_half_up(door_width * door_height),
                        material=material,
                        finish=finish,
                    )
                )

        logger.debug(f"Scheduled {len(doors)} doors")
        return doors
