"""Domain services for schedule generation.

This package provides the pure generation engine:
- Standards resolution with override and fallback tiers
- Cut list, door schedule and hardware schedule generators
- Material takeoff aggregation over a generated cut list
"""

from .cut_list import CutListGenerator, CutPanel
from .door_schedule import DoorScheduleGenerator, DoorSpec
from .hardware_schedule import HardwareItem, HardwareScheduleGenerator, hinges_per_door
from .material_takeoff import (
    EdgeBandSummary,
    MaterialGroup,
    MaterialTakeoff,
    MaterialTakeoffAggregator,
)
from .parsing import parse_custom_hardware, parse_drawer_heights
from .standards import StandardsResolver, resolve_value

__all__ = [
    "CutListGenerator",
    "CutPanel",
    "DoorScheduleGenerator",
    "DoorSpec",
    "EdgeBandSummary",
    "HardwareItem",
    "HardwareScheduleGenerator",
    "MaterialGroup",
    "MaterialTakeoff",
    "MaterialTakeoffAggregator",
    "StandardsResolver",
    "hinges_per_door",
    "parse_custom_hardware",
    "parse_drawer_heights",
    "resolve_value",
]
