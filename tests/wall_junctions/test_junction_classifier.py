# File: tests/wall_junctions/test_junction_classifier.py

"""Tests for junction classification.

Tests cover:
- Each classifier on its own layout (corner, inline, T, tri)
- Rejections (crossings, detached walls, skewed walls)
- Dispatcher priority and wall count limits
- Independence from input order
- Tolerance overrides
"""

import math

import pytest

from wall_gap_adjuster.config.settings import DEFAULT_SETTINGS, JunctionSettings
from wall_gap_adjuster.wall_junctions.junction_classifier import (
    CLASSIFIER_PRIORITY,
    classify,
    resolve_inline_roles,
    resolve_t_roles,
    resolve_tri_roles,
    try_classify_corner,
    try_classify_inline,
    try_classify_t_shape,
    try_classify_tri_shape,
)
from wall_gap_adjuster.wall_junctions.junction_types import JunctionType

from tests.wall_junctions.conftest import create_descriptor


# =============================================================================
# Corner
# =============================================================================


class TestCornerClassifier:
    """Tests for try_classify_corner."""

    def test_shared_endpoint_is_corner(self, corner_walls):
        assert try_classify_corner(corner_walls, DEFAULT_SETTINGS) == (10.0, 0.0, 0.0)

    def test_gap_between_ends_still_corner(self):
        # Wall A stops 1 short of B's line; the point is outside A
        walls = [
            create_descriptor("A", (0, 0), (9, 0), thickness=2.0),
            create_descriptor("B", (10, 0), (10, 10), thickness=4.0),
        ]
        assert try_classify_corner(walls, DEFAULT_SETTINGS) == pytest.approx((10.0, 0.0, 0.0))

    def test_end_within_other_half_thickness(self):
        # A overshoots B's line by 0.5; B's half-thickness is 1
        walls = [
            create_descriptor("A", (0, 0), (10.5, 0), thickness=2.0),
            create_descriptor("B", (10, 0), (10, 10), thickness=2.0),
        ]
        assert try_classify_corner(walls, DEFAULT_SETTINGS) == pytest.approx((10.0, 0.0, 0.0))

    def test_end_beyond_other_half_thickness_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (12, 0), thickness=2.0),
            create_descriptor("B", (10, 0), (10, 10), thickness=2.0),
        ]
        assert try_classify_corner(walls, DEFAULT_SETTINGS) is None

    def test_crossing_rejected(self, crossing_walls):
        assert try_classify_corner(crossing_walls, DEFAULT_SETTINGS) is None

    def test_parallel_rejected(self, inline_walls):
        assert try_classify_corner(inline_walls, DEFAULT_SETTINGS) is None

    def test_requires_two_walls(self, tri_shape_walls):
        assert try_classify_corner(tri_shape_walls, DEFAULT_SETTINGS) is None


# =============================================================================
# Inline
# =============================================================================


class TestInlineClassifier:
    """Tests for try_classify_inline."""

    def test_end_to_end(self, inline_walls):
        assert try_classify_inline(inline_walls, DEFAULT_SETTINGS) == (10.0, 0.0, 0.0)

    def test_point_independent_of_orientation(self):
        walls = [
            create_descriptor("A", (10, 0), (0, 0)),
            create_descriptor("B", (20, 0), (10, 0)),
        ]
        assert try_classify_inline(walls, DEFAULT_SETTINGS) == (10.0, 0.0, 0.0)

    def test_separated_collinear_walls(self):
        # Point is the inner end of the lexicographically first wall
        walls = [
            create_descriptor("A", (0, 0), (10, 0)),
            create_descriptor("B", (12, 0), (20, 0)),
        ]
        assert try_classify_inline(walls, DEFAULT_SETTINGS) == (10.0, 0.0, 0.0)

    def test_parallel_offset_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (10, 0)),
            create_descriptor("B", (10, 1), (20, 1)),
        ]
        assert try_classify_inline(walls, DEFAULT_SETTINGS) is None

    def test_perpendicular_rejected(self, corner_walls):
        assert try_classify_inline(corner_walls, DEFAULT_SETTINGS) is None


# =============================================================================
# T-Shape
# =============================================================================


class TestTShapeClassifier:
    """Tests for try_classify_t_shape and T role resolution."""

    def test_cross_wall_ending_on_main(self, t_shape_walls):
        assert try_classify_t_shape(t_shape_walls, DEFAULT_SETTINGS) == (5.0, 0.0, 0.0)

    def test_cross_wall_stopping_short_within_half_thickness(self):
        walls = [
            create_descriptor("main", (0, 0), (10, 0), thickness=2.0),
            create_descriptor("cross", (5, 0.5), (5, 10), thickness=1.0),
        ]
        assert try_classify_t_shape(walls, DEFAULT_SETTINGS) == (5.0, 0.0, 0.0)

    def test_detached_cross_wall_rejected(self):
        walls = [
            create_descriptor("main", (0, 0), (10, 0), thickness=2.0),
            create_descriptor("cross", (5, 3), (5, 10), thickness=1.0),
        ]
        assert try_classify_t_shape(walls, DEFAULT_SETTINGS) is None

    def test_four_way_crossing_rejected(self, crossing_walls):
        assert try_classify_t_shape(crossing_walls, DEFAULT_SETTINGS) is None

    def test_point_on_neither_wall_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (4, 0), thickness=2.0),
            create_descriptor("B", (5, 1), (5, 10), thickness=2.0),
        ]
        assert try_classify_t_shape(walls, DEFAULT_SETTINGS) is None

    def test_main_wall_is_the_one_reaching_past_the_point(self, t_shape_walls):
        point = (5.0, 0.0, 0.0)
        assert resolve_t_roles(t_shape_walls, point) == (0, 1)
        assert resolve_t_roles(list(reversed(t_shape_walls)), point) == (1, 0)

    def test_main_wall_when_only_one_contains_point(self):
        walls = [
            create_descriptor("cross", (5, 0.5), (5, 10), thickness=1.0),
            create_descriptor("main", (0, 0), (10, 0), thickness=2.0),
        ]
        assert resolve_t_roles(walls, (5.0, 0.0, 0.0)) == (1, 0)


# =============================================================================
# Tri-Shape
# =============================================================================


class TestTriShapeClassifier:
    """Tests for try_classify_tri_shape and tri role resolution."""

    def test_inline_pair_with_cross(self, tri_shape_walls):
        assert try_classify_tri_shape(tri_shape_walls, DEFAULT_SETTINGS) == (10.0, 0.0, 0.0)

    def test_roles_found_in_any_position(self, tri_shape_walls):
        a, b, c = tri_shape_walls
        assert resolve_tri_roles([a, b, c]) == (0, 1, 2)
        assert resolve_tri_roles([a, c, b]) == (0, 2, 1)
        assert resolve_tri_roles([c, a, b]) == (1, 2, 0)

    def test_no_parallel_pair_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (10, 0)),
            create_descriptor("B", (0, 0), (5, 8.660254)),
            create_descriptor("C", (0, 0), (-5, 8.660254)),
        ]
        assert resolve_tri_roles(walls) is None
        assert try_classify_tri_shape(walls, DEFAULT_SETTINGS) is None

    def test_all_parallel_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (10, 0)),
            create_descriptor("B", (10, 0), (20, 0)),
            create_descriptor("C", (0, 5), (10, 5)),
        ]
        assert try_classify_tri_shape(walls, DEFAULT_SETTINGS) is None

    def test_cross_not_perpendicular_rejected(self):
        walls = [
            create_descriptor("A", (0, 0), (10, 0)),
            create_descriptor("B", (10, 0), (20, 0)),
            create_descriptor("C", (10, 0), (15, 8.660254)),
        ]
        assert try_classify_tri_shape(walls, DEFAULT_SETTINGS) is None

    def test_requires_three_walls(self, corner_walls):
        assert try_classify_tri_shape(corner_walls, DEFAULT_SETTINGS) is None


# =============================================================================
# Dispatcher
# =============================================================================


class TestClassify:
    """Tests for the classify dispatcher."""

    def test_priority_order(self):
        kinds = [kind for kind, _ in CLASSIFIER_PRIORITY]
        assert kinds == [
            JunctionType.CORNER,
            JunctionType.TRI_SHAPE,
            JunctionType.INLINE,
            JunctionType.T_SHAPE,
        ]

    def test_corner(self, corner_walls):
        junction = classify(corner_walls)
        assert junction.kind == JunctionType.CORNER
        assert junction.point == (10.0, 0.0, 0.0)
        assert junction.members == tuple(corner_walls)

    def test_corner_wins_over_t_shape(self, corner_walls):
        # An L also satisfies the T test; corner is tried first
        assert try_classify_t_shape(corner_walls, DEFAULT_SETTINGS) is not None
        assert classify(corner_walls).kind == JunctionType.CORNER

    def test_inline(self, inline_walls):
        junction = classify(inline_walls)
        assert junction.kind == JunctionType.INLINE
        assert junction.point == (10.0, 0.0, 0.0)

    def test_t_shape(self, t_shape_walls):
        junction = classify(t_shape_walls)
        assert junction.kind == JunctionType.T_SHAPE
        assert junction.point == (5.0, 0.0, 0.0)

    def test_tri_shape(self, tri_shape_walls):
        assert classify(tri_shape_walls).kind == JunctionType.TRI_SHAPE

    def test_skew_walls_unclassified(self, skew_walls):
        junction = classify(skew_walls)
        assert junction.kind == JunctionType.NONE
        assert junction.point is None
        assert not junction.is_valid()

    def test_crossing_unclassified(self, crossing_walls):
        assert classify(crossing_walls).kind == JunctionType.NONE

    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_unsupported_wall_count(self, count):
        walls = [create_descriptor(f"w{i}", (i, 0), (i, 10)) for i in range(count)]
        junction = classify(walls)
        assert junction.kind == JunctionType.NONE
        assert junction.point is None

    @pytest.mark.parametrize(
        "fixture_name",
        ["corner_walls", "inline_walls", "t_shape_walls", "crossing_walls", "skew_walls"],
    )
    def test_independent_of_input_order(self, request, fixture_name):
        walls = request.getfixturevalue(fixture_name)
        forward = classify(walls)
        backward = classify(list(reversed(walls)))
        assert forward.kind == backward.kind
        assert forward.point == backward.point

    def test_z_is_flattened(self):
        walls = [
            create_descriptor("A", (0, 0, 3), (10, 0, 3), thickness=2.0),
            create_descriptor("B", (10, 0, 3), (10, 10, 3), thickness=2.0),
        ]
        assert classify(walls).point == (10.0, 0.0, 0.0)

    def test_elevated_t_shape(self):
        walls = [
            create_descriptor("main", (0, 0, 3), (10, 0, 3), thickness=2.0),
            create_descriptor("cross", (5, 0, 3), (5, 10, 3), thickness=2.0),
        ]
        junction = classify(walls)
        assert junction.kind == JunctionType.T_SHAPE
        assert junction.point == (5.0, 0.0, 0.0)

    def test_elevated_crossing_unclassified(self):
        walls = [
            create_descriptor("A", (0, 0, 3), (10, 0, 3), thickness=2.0),
            create_descriptor("B", (5, -5, 3), (5, 5, 3), thickness=2.0),
        ]
        assert try_classify_corner(walls, DEFAULT_SETTINGS) is None
        assert classify(walls).kind == JunctionType.NONE

    def test_elevated_inline(self):
        walls = [
            create_descriptor("A", (0, 0, 3), (10, 0, 3)),
            create_descriptor("B", (10, 0, 3), (20, 0, 3)),
        ]
        junction = classify(walls)
        assert junction.kind == JunctionType.INLINE
        assert resolve_inline_roles(walls, junction.point) == (0, 1)

    def test_settings_kept_on_junction(self, corner_walls):
        loose = JunctionSettings(point_tolerance=0.1)
        assert classify(corner_walls, loose).settings is loose
        assert classify(corner_walls).settings == DEFAULT_SETTINGS

    def test_angle_tolerance_override(self):
        angle = math.radians(89.5)
        walls = [
            create_descriptor("A", (0, 0), (10, 0), thickness=1.0),
            create_descriptor("B", (10, 0), (10 + 10 * math.cos(angle), 10 * math.sin(angle)), thickness=1.0),
        ]
        assert classify(walls).kind == JunctionType.CORNER

        strict = JunctionSettings(angle_tolerance=math.radians(0.1))
        assert classify(walls, strict).kind == JunctionType.NONE


class TestInlineRoles:
    """Tests for resolve_inline_roles."""

    def test_first_containing_wall_is_reference(self, inline_walls):
        assert resolve_inline_roles(inline_walls, (10.0, 0.0, 0.0)) == (0, 1)

    def test_second_wall_reference_when_first_misses(self):
        walls = [
            create_descriptor("A", (12, 0), (20, 0)),
            create_descriptor("B", (0, 0), (10, 0)),
        ]
        assert resolve_inline_roles(walls, (10.0, 0.0, 0.0)) == (1, 0)

    def test_point_on_neither_wall(self, inline_walls):
        assert resolve_inline_roles(inline_walls, (30.0, 0.0, 0.0)) is None
