"""Lenient parsing of free-form module fields.

``drawer_heights_mm`` and ``hardware_json`` are stored as JSON text by the
surrounding application. Malformed values never fail generation: they
degrade to an empty sequence or mapping and the rule-derived defaults apply.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence

from ..entities import DrawerHeightsInput, HardwareInput

logger = logging.getLogger(__name__)


def _as_number(value: object) -> float | int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _decode(raw: object, field_name: str) -> object:
    if not isinstance(raw, str):
        return raw
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.debug(f"Ignoring malformed {field_name}: {e.msg}")
        return None


def parse_drawer_heights(raw: DrawerHeightsInput) -> list[float | None]:
    """Parse per-drawer heights.

    Args:
        raw: JSON text such as ``"[150, 200]"``, a sequence, or None.

    Returns:
        One entry per supplied height. Entries that are not finite numbers
        are None so the caller substitutes the default height. Anything that
        is not a sequence yields an empty list.
    """
    decoded = _decode(raw, "drawer_heights_mm")
    if isinstance(decoded, (str, bytes)) or not isinstance(decoded, Sequence):
        return []
    return [_as_number(item) for item in decoded]


def parse_custom_hardware(raw: HardwareInput) -> dict[str, float | int]:
    """Parse caller-defined hardware entries.

    Args:
        raw: JSON text of an object, a mapping, or None.

    Returns:
        Item name to quantity, in input order. Entries whose quantity is
        not a non-negative number are dropped. Arrays and scalars yield an
        empty mapping.
    """
    decoded = _decode(raw, "hardware_json")
    if not isinstance(decoded, Mapping):
        return {}

    items: dict[str, float | int] = {}
    for name, qty in decoded.items():
        number = _as_number(qty)
        if number is None or number < 0:
            logger.debug(f"Dropping custom hardware {name!r} with quantity {qty!r}")
            continue
        items[str(name)] = number
    return items


__all__ = ["parse_custom_hardware", "parse_drawer_heights"]
