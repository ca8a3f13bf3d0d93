"""Infrastructure layer - output formatting."""

from .formatters import (
    CutListFormatter,
    DoorScheduleFormatter,
    HardwareScheduleFormatter,
    JsonExporter,
    MaterialTakeoffFormatter,
)

__all__ = [
    "CutListFormatter",
    "DoorScheduleFormatter",
    "HardwareScheduleFormatter",
    "JsonExporter",
    "MaterialTakeoffFormatter",
]
