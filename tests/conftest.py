"""Pytest configuration and shared fixtures for schedule generation tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cabinetry.domain import Module, Standard, StandardCategory

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "projects"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON project fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def standards() -> list[Standard]:
    """A complete catalog with one standard per priced category."""
    return [
        Standard(
            category=StandardCategory.CARCASS,
            material="HDHMR 18mm",
            thickness_mm=18,
            rate_per_sqft=120,
        ),
        Standard(
            category=StandardCategory.BACK_PANEL,
            material="MR Ply 6mm",
            thickness_mm=6,
            rate_per_sqft=45,
        ),
        Standard(
            category=StandardCategory.SHUTTER,
            material="Ply + Laminate",
            thickness_mm=18,
            finish="Matte Laminate",
            rate_per_sqft=180,
        ),
        Standard(category=StandardCategory.HARDWARE, rate_per_unit=85),
        Standard(
            category=StandardCategory.EDGEBAND,
            material="PVC 2mm",
            edge_band_mm=2,
            rate_per_unit=12,
        ),
    ]


@pytest.fixture
def make_module() -> Callable[..., Module]:
    """Factory for modules based on a 600x720x550 base unit.

    Keyword arguments override any field.
    """

    def _make(**overrides: Any) -> Module:
        fields: dict[str, Any] = {
            "name": "B1",
            "width_mm": 600,
            "height_mm": 720,
            "depth_mm": 550,
            "zone": "Kitchen",
            "has_back_panel": False,
        }
        fields.update(overrides)
        return Module(**fields)

    return _make
