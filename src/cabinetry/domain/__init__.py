"""Domain layer - schedule generation engine."""

from .entities import Module, Standard
from .services import (
    CutListGenerator,
    CutPanel,
    DoorScheduleGenerator,
    DoorSpec,
    EdgeBandSummary,
    HardwareItem,
    HardwareScheduleGenerator,
    MaterialGroup,
    MaterialTakeoff,
    MaterialTakeoffAggregator,
    StandardsResolver,
)
from .value_objects import (
    BackPanelType,
    DoorOpenType,
    ModuleType,
    ShelfType,
    StandardCategory,
)

__all__ = [
    "BackPanelType",
    "CutListGenerator",
    "CutPanel",
    "DoorOpenType",
    "DoorScheduleGenerator",
    "DoorSpec",
    "EdgeBandSummary",
    "HardwareItem",
    "HardwareScheduleGenerator",
    "MaterialGroup",
    "MaterialTakeoff",
    "MaterialTakeoffAggregator",
    "Module",
    "ModuleType",
    "ShelfType",
    "Standard",
    "StandardCategory",
    "StandardsResolver",
]
