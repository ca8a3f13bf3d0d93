"""Enumerations describing cabinet module configuration and catalog entries."""

from __future__ import annotations

from enum import Enum


class ModuleType(str, Enum):
    """Kinds of cabinet module.

    Only ``BASE`` changes generated output (it receives adjustable legs);
    the others are carried through to every output row for reporting.
    """

    BASE = "base"
    WALL = "wall"
    TALL = "tall"
    DRAWER = "drawer"
    CORNER = "corner"
    SHELF = "shelf"
    HANGING = "hanging"


class DoorOpenType(str, Enum):
    """How the doors of a module open.

    Attributes:
        HINGED: Side-hung doors on soft-close hinges.
        SLIDING: Bypass doors running in a channel set.
        LIFT_UP: Top-hung doors on a lift-up mechanism.
        FLAP: Bottom-hung flap doors held by stays.
        NONE: No door hardware.
    """

    HINGED = "hinged"
    SLIDING = "sliding"
    LIFT_UP = "lift_up"
    FLAP = "flap"
    NONE = "none"


class ShelfType(str, Enum):
    """Shelf mounting style."""

    FIXED = "fixed"
    ADJUSTABLE = "adjustable"
    PULLOUT = "pullout"
    NONE = "none"


class BackPanelType(str, Enum):
    """Back panel fitting.

    Attributes:
        RECESSED: Panel sits in a routed groove; adjoining panels lose depth.
        NAILED: Panel is nailed onto the back edges at full size.
        NONE: No back panel fitting.
    """

    RECESSED = "recessed"
    NAILED = "nailed"
    NONE = "none"


class StandardCategory(str, Enum):
    """Construction categories a catalog standard can describe."""

    CARCASS = "carcass"
    SHUTTER = "shutter"
    BACK_PANEL = "back_panel"
    COUNTERTOP = "countertop"
    HARDWARE = "hardware"
    EDGEBAND = "edgeband"
    GENERAL = "general"


def enum_value(value: object) -> str:
    """Plain string for an enum member or a raw string from a record."""
    return str(getattr(value, "value", value))


__all__ = [
    "BackPanelType",
    "DoorOpenType",
    "ModuleType",
    "ShelfType",
    "StandardCategory",
    "enum_value",
]
