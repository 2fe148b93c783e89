# File: wall_gap_adjuster/config/settings.py

"""
Tolerance settings for junction classification and grouping.

All length tolerances are in the caller's working unit. Angle tolerance
is stored in radians; the environment override takes degrees.
"""

import math
import os
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# One degree, the angular slack used for parallel/perpendicular tests
ANGLE_TOLERANCE = math.radians(1.0)

# Colinearity / bounds slack for point-on-segment tests
POINT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class JunctionSettings:
    """Tolerances used by the classifiers and the junction grouping pass.

    Attributes:
        angle_tolerance: Max deviation (radians) for parallel/perpendicular.
        point_tolerance: Slack for point-on-segment and collinearity tests.
        corner_proximity_tolerance: Slack for the corner "point inside wall"
            check. Larger values treat near-miss wall ends as inside.
        endpoint_tolerance: Minimum distance for endpoint-to-endpoint
            grouping. The effective value is thickness-aware.
        t_intersection_tolerance: Minimum distance for endpoint-to-segment
            grouping (T candidates). Also thickness-aware.
        midspan_exclusion: Fraction of segment length at each end that does
            not count as mid-span when looking for T candidates.
    """

    angle_tolerance: float = ANGLE_TOLERANCE
    point_tolerance: float = POINT_TOLERANCE
    corner_proximity_tolerance: float = POINT_TOLERANCE
    endpoint_tolerance: float = 1e-3
    t_intersection_tolerance: float = 1e-3
    midspan_exclusion: float = 0.05

    def with_overrides(self, **kwargs) -> "JunctionSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "JunctionSettings":
        """Build settings from ``WALL_GAP_*`` environment variables.

        Recognized variables:
            WALL_GAP_ANGLE_TOLERANCE_DEG
            WALL_GAP_POINT_TOLERANCE
            WALL_GAP_CORNER_PROXIMITY_TOLERANCE
            WALL_GAP_ENDPOINT_TOLERANCE
            WALL_GAP_T_INTERSECTION_TOLERANCE
            WALL_GAP_MIDSPAN_EXCLUSION

        Missing variables keep their defaults.

        Raises:
            ValueError: If a variable is set but is not a float.
        """
        env = os.environ if environ is None else environ
        values = {}

        angle_deg = env.get("WALL_GAP_ANGLE_TOLERANCE_DEG")
        if angle_deg is not None:
            values["angle_tolerance"] = math.radians(float(angle_deg))

        for field_name in (
            "point_tolerance",
            "corner_proximity_tolerance",
            "endpoint_tolerance",
            "t_intersection_tolerance",
            "midspan_exclusion",
        ):
            raw = env.get(f"WALL_GAP_{field_name.upper()}")
            if raw is not None:
                values[field_name] = float(raw)

        if values:
            logger.info("Junction settings overridden from environment: %s", sorted(values))
        return cls(**values)


DEFAULT_SETTINGS = JunctionSettings()
