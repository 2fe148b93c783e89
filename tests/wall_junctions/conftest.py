# File: tests/wall_junctions/conftest.py

"""Shared test fixtures for wall junction tests.

Provides segment descriptors for the supported junction layouts
(corner, inline, T, tri) plus crossings, skewed walls and a closed room.
"""

import pytest
from typing import List

from wall_gap_adjuster.wall_junctions.junction_types import SegmentDescriptor


# =============================================================================
# Helper: Create a single wall descriptor
# =============================================================================


def create_descriptor(
    wall_id: str,
    start: tuple,
    end: tuple,
    thickness: float = 0.0,
) -> SegmentDescriptor:
    """Create a wall descriptor from 2D or 3D endpoints.

    Args:
        wall_id: Caller label.
        start: (x, y) or (x, y, z) start point.
        end: (x, y) or (x, y, z) end point.
        thickness: Full wall thickness.
    """
    return SegmentDescriptor.from_points(start, end, thickness=thickness, wall_id=wall_id)


# =============================================================================
# Fixtures: Junction Configurations
# =============================================================================


@pytest.fixture
def corner_walls() -> List[SegmentDescriptor]:
    """Two perpendicular walls sharing the end point (10, 0).

    Wall A: horizontal, thickness 2
    Wall B: vertical, thickness 4
    """
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=2.0),
        create_descriptor("wall_B", (10, 0), (10, 10), thickness=4.0),
    ]


@pytest.fixture
def inline_walls() -> List[SegmentDescriptor]:
    """Two collinear walls meeting end to end at (10, 0)."""
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=1.0),
        create_descriptor("wall_B", (10, 0), (20, 0), thickness=1.0),
    ]


@pytest.fixture
def t_shape_walls() -> List[SegmentDescriptor]:
    """Wall B ends on the middle of wall A at (5, 0).

    Wall A: main wall, thickness 2
    Wall B: cross wall, thickness 1
    """
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=2.0),
        create_descriptor("wall_B", (5, 0), (5, 10), thickness=1.0),
    ]


@pytest.fixture
def tri_shape_walls() -> List[SegmentDescriptor]:
    """Two inline walls plus a perpendicular wall, all meeting at (10, 0)."""
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=2.0),
        create_descriptor("wall_B", (10, 0), (20, 0), thickness=2.0),
        create_descriptor("wall_C", (10, 0), (10, 10), thickness=4.0),
    ]


@pytest.fixture
def crossing_walls() -> List[SegmentDescriptor]:
    """Two walls crossing through each other's middle at (5, 0)."""
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=2.0),
        create_descriptor("wall_B", (5, -5), (5, 5), thickness=2.0),
    ]


@pytest.fixture
def skew_walls() -> List[SegmentDescriptor]:
    """Two walls at 45 degrees that neither touch nor share a line."""
    return [
        create_descriptor("wall_A", (0, 0), (10, 0), thickness=1.0),
        create_descriptor("wall_B", (20, 5), (30, 15), thickness=1.0),
    ]


@pytest.fixture
def square_room_walls() -> List[SegmentDescriptor]:
    """Four zero-thickness walls forming a closed 10 x 10 room."""
    return [
        create_descriptor("south", (0, 0), (10, 0)),
        create_descriptor("east", (10, 0), (10, 10)),
        create_descriptor("north", (10, 10), (0, 10)),
        create_descriptor("west", (0, 10), (0, 0)),
    ]
