"""Application layer - use cases and orchestration."""

from .commands import GenerateSchedulesCommand
from .dtos import ScheduleOutput

__all__ = [
    "GenerateSchedulesCommand",
    "ScheduleOutput",
]
