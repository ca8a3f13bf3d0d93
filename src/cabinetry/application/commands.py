"""Application commands (use cases) for schedule generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cabinetry.domain import (
    CutListGenerator,
    DoorScheduleGenerator,
    HardwareScheduleGenerator,
    MaterialTakeoffAggregator,
    Module,
    Standard,
)

from .dtos import ScheduleOutput

logger = logging.getLogger(__name__)


class GenerateSchedulesCommand:
    """Command to generate every manufacturing document for a project.

    The generators are independent pure functions of (modules, standards);
    only the takeoff depends on the cut list produced in the same call.
    """

    def __init__(
        self,
        cut_list_generator: CutListGenerator | None = None,
        door_schedule_generator: DoorScheduleGenerator | None = None,
        hardware_schedule_generator: HardwareScheduleGenerator | None = None,
        takeoff_aggregator: MaterialTakeoffAggregator | None = None,
    ) -> None:
        self.cut_list_generator = cut_list_generator or CutListGenerator()
        self.door_schedule_generator = door_schedule_generator or DoorScheduleGenerator()
        self.hardware_schedule_generator = (
            hardware_schedule_generator or HardwareScheduleGenerator()
        )
        self.takeoff_aggregator = takeoff_aggregator or MaterialTakeoffAggregator()

    def execute(
        self, modules: Sequence[Module], standards: Sequence[Standard]
    ) -> ScheduleOutput:
        """Generate the cut list, door and hardware schedules and takeoff.

        Args:
            modules: Modules in output order.
            standards: Standards catalog; first entry per category wins.

        Returns:
            ScheduleOutput holding all four documents.
        """
        cut_list = self.cut_list_generator.generate(modules, standards)
        doors = self.door_schedule_generator.generate(modules, standards)
        hardware = self.hardware_schedule_generator.generate(modules, standards)
        takeoff = self.takeoff_aggregator.aggregate(cut_list, standards)

        logger.info(
            f"Generated schedules for {len(modules)} modules: "
            f"{len(cut_list)} panels, {len(doors)} doors, {len(hardware)} hardware rows"
        )
        return ScheduleOutput(
            cut_list=tuple(cut_list),
            door_schedule=tuple(doors),
            hardware_schedule=tuple(hardware),
            material_takeoff=takeoff,
        )
