"""Unit tests for unit conversion and display helpers."""

import pytest

from cabinetry.domain.units import (
    DisplayUnit,
    format_area,
    format_dimension,
    mm_to_inches,
    running_feet,
    sqmm_to_sqft,
)


class TestConversions:
    """Tests for raw conversions."""

    def test_mm_to_inches(self):
        assert mm_to_inches(25.4) == pytest.approx(1.0)

    def test_sqmm_to_sqft(self):
        assert sqmm_to_sqft(92903.04) == pytest.approx(1.0)

    def test_running_feet(self):
        assert running_feet(3048) == pytest.approx(10.0)


class TestFormatDimension:
    """Tests for format_dimension."""

    def test_millimeters_round_half_up(self):
        assert format_dimension(600) == "600 mm"
        assert format_dimension(563.5) == "564 mm"

    def test_inches(self):
        assert format_dimension(609.6, DisplayUnit.INCHES) == "24.00 in"

    def test_feet_and_inches(self):
        assert format_dimension(762, DisplayUnit.FT_IN) == "2'-6.0\""

    def test_missing_value(self):
        assert format_dimension(None) == "—"


class TestFormatArea:
    """Tests for format_area."""

    def test_square_meters(self):
        assert format_area(1_000_000) == "1.0000 m²"

    def test_square_feet(self):
        assert format_area(92903.04, DisplayUnit.INCHES) == "1.00 sqft"
