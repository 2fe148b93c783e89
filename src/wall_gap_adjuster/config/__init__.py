# File: src/wall_gap_adjuster/config/__init__.py

"""
Configuration package for the wall gap adjuster.
Provides a unified interface to:
- Tolerance settings for classification and grouping
- Unit conversion between the caller's working unit and millimeters
"""

from wall_gap_adjuster.config.settings import (
    ANGLE_TOLERANCE,
    POINT_TOLERANCE,
    DEFAULT_SETTINGS,
    JunctionSettings,
)

from wall_gap_adjuster.config.units import (
    ProjectUnits,
    convert,
    from_millimeters,
    to_millimeters,
)

__all__ = [
    "ANGLE_TOLERANCE",
    "POINT_TOLERANCE",
    "DEFAULT_SETTINGS",
    "JunctionSettings",
    "ProjectUnits",
    "convert",
    "from_millimeters",
    "to_millimeters",
]
