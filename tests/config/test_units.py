# File: tests/config/test_units.py

"""Tests for unit conversion."""

import pytest

from wall_gap_adjuster.config.units import (
    ProjectUnits,
    convert,
    from_millimeters,
    to_millimeters,
)


class TestConvert:
    """Tests for convert and the millimeter helpers."""

    @pytest.mark.parametrize(
        "units, expected_mm",
        [
            (ProjectUnits.FEET, 304.8),
            (ProjectUnits.METERS, 1000.0),
            (ProjectUnits.MILLIMETERS, 1.0),
            (ProjectUnits.INCHES, 25.4),
        ],
    )
    def test_one_unit_in_millimeters(self, units, expected_mm):
        assert to_millimeters(1.0, units) == pytest.approx(expected_mm)

    def test_gap_to_meters(self):
        assert from_millimeters(1000.0, "meters") == pytest.approx(1.0)

    def test_gap_to_feet(self):
        assert from_millimeters(304.8, ProjectUnits.FEET) == pytest.approx(1.0)

    def test_feet_to_inches(self):
        assert convert(1.0, "feet", "inches") == pytest.approx(12.0)

    def test_same_units_unchanged(self):
        assert convert(12.5, "inches", ProjectUnits.INCHES) == 12.5

    def test_unit_names_case_insensitive(self):
        assert from_millimeters(25.4, "INCHES") == pytest.approx(1.0)

    def test_unsupported_unit(self):
        with pytest.raises(ValueError, match="Unsupported unit"):
            from_millimeters(1.0, "yards")

    def test_unsupported_unit_type(self):
        with pytest.raises(ValueError):
            convert(1.0, 3, "feet")
