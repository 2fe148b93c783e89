# File: wall_gap_adjuster/config/units.py

"""
Unit conversion for the wall gap adjuster.

The engine itself is unit-agnostic: gap, thickness and tolerances only
need to share one linear unit. Callers use these helpers to bring a
user-facing value (usually a gap in millimeters) into the working unit
of their wall coordinates, and back for display.
"""

from enum import Enum
from typing import Union, Dict


class ProjectUnits(Enum):
    """
    Enumeration of supported linear units.
    """
    FEET = "feet"
    METERS = "meters"
    MILLIMETERS = "millimeters"
    INCHES = "inches"


# Conversion factors to millimeters
_CONVERSION_TO_MM: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 304.8,
    ProjectUnits.METERS: 1000.0,
    ProjectUnits.MILLIMETERS: 1.0,
    ProjectUnits.INCHES: 25.4,
}


def _resolve_units(units: Union[ProjectUnits, str]) -> ProjectUnits:
    """
    Turns a unit name or enum into a ProjectUnits member.

    Raises:
        ValueError: If the provided units are not supported
    """
    if isinstance(units, ProjectUnits):
        return units

    if isinstance(units, str):
        try:
            return ProjectUnits(units.lower())
        except ValueError:
            raise ValueError(f"Unsupported unit: {units}")

    raise ValueError(f"Units must be ProjectUnits enum or string, got {type(units)}")


def convert(
    value: float,
    from_units: Union[ProjectUnits, str],
    to_units: Union[ProjectUnits, str],
) -> float:
    """
    Converts a length between two supported units.

    Args:
        value: The numeric value to convert
        from_units: Units of ``value``
        to_units: Units of the result

    Returns:
        The converted value

    Raises:
        ValueError: If either unit is not supported
    """
    source = _resolve_units(from_units)
    target = _resolve_units(to_units)
    if source is target:
        return value
    return value * _CONVERSION_TO_MM[source] / _CONVERSION_TO_MM[target]


def from_millimeters(value: float, target_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a millimeter value (e.g. a user-entered gap) to ``target_units``.
    """
    return convert(value, ProjectUnits.MILLIMETERS, target_units)


def to_millimeters(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value in ``current_units`` to millimeters for display.
    """
    return convert(value, current_units, ProjectUnits.MILLIMETERS)
