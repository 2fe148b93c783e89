# File: src/wall_gap_adjuster/utils/geometry.py

"""Vector and line primitives for wall centerline analysis.

Points and vectors are plain ``(x, y, z)`` float tuples. Segments are any
object exposing ``start`` and ``end`` points (see
``wall_junctions.junction_types.Segment``).

Junction tests (intersection, collinearity, containment, nearest
endpoint) work on the XY projection; wall elevation never affects them.

Every function here is total: degenerate input yields a neutral value
(``0.0``, ``False`` or ``None``) instead of raising.
"""

import math
from typing import Optional, Tuple, TYPE_CHECKING

from ..config.settings import ANGLE_TOLERANCE, POINT_TOLERANCE

if TYPE_CHECKING:
    from ..wall_junctions.junction_types import Segment

Vector = Tuple[float, float, float]
Point = Tuple[float, float, float]

_ZERO_LENGTH = 1e-12


# =============================================================================
# Vector Arithmetic
# =============================================================================


def subtract(a: Vector, b: Vector) -> Vector:
    """Component-wise ``a - b``."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def add(a: Vector, b: Vector) -> Vector:
    """Component-wise ``a + b``."""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def scale(v: Vector, factor: float) -> Vector:
    """Multiply a vector by a scalar."""
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vector) -> float:
    return math.sqrt(dot(v, v))


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return length(subtract(p1, p2))


def to_plan(v: Vector) -> Vector:
    """Drop the z component of a point or vector."""
    return (v[0], v[1], 0.0)


def plan_distance(p1: Point, p2: Point) -> float:
    """Distance between two points measured in XY only."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def normalize(v: Vector) -> Vector:
    """Unit vector in the direction of ``v``.

    Zero-length input returns the zero vector unchanged.
    """
    mag = length(v)
    if mag < _ZERO_LENGTH:
        return (0.0, 0.0, 0.0)
    return (v[0] / mag, v[1] / mag, v[2] / mag)


# =============================================================================
# Direction Tests
# =============================================================================


def angle_between(d1: Vector, d2: Vector) -> float:
    """Angle between two direction vectors in radians (0 to pi).

    Both directions are normalized first. Returns 0.0 when either vector
    has zero length.
    """
    u1 = normalize(d1)
    u2 = normalize(d2)

    if length(u1) < _ZERO_LENGTH or length(u2) < _ZERO_LENGTH:
        return 0.0

    cos_angle = max(-1.0, min(1.0, dot(u1, u2)))
    return math.acos(cos_angle)


def is_parallel(d1: Vector, d2: Vector, angle_tol: float = ANGLE_TOLERANCE) -> bool:
    """True if the directions are parallel or opposite within ``angle_tol``."""
    angle = angle_between(d1, d2)
    return abs(angle) < angle_tol or abs(angle - math.pi) < angle_tol


def is_perpendicular(d1: Vector, d2: Vector, angle_tol: float = ANGLE_TOLERANCE) -> bool:
    """True if the directions meet at 90 degrees within ``angle_tol``."""
    return abs(angle_between(d1, d2) - math.pi / 2.0) < angle_tol


# =============================================================================
# Line / Segment Tests
# =============================================================================


def infinite_line_intersection(s1: "Segment", s2: "Segment") -> Optional[Point]:
    """Intersection of two segments treated as infinite lines in plan.

    Solves the two-line parametric system in XY. The z of the result is
    always 0.0; callers are expected to work on a planar projection.

    Returns:
        The intersection point, or None when the lines are parallel or the
        solve produces a non-finite value.
    """
    p1, q1 = s1.start, s1.end
    p2, q2 = s2.start, s2.end
    v1 = subtract(q1, p1)
    v2 = subtract(q2, p2)
    w = subtract(p2, p1)

    denominator = v2[0] * v1[1] - v2[1] * v1[0]
    if denominator == 0.0:
        return None

    c = (v2[0] * w[1] - v2[1] * w[0]) / denominator
    x = p1[0] + c * v1[0]
    y = p1[1] + c * v1[1]

    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (x, y, 0.0)


def is_collinear(
    s1: "Segment",
    s2: "Segment",
    angle_tol: float = ANGLE_TOLERANCE,
    tol: float = POINT_TOLERANCE,
) -> bool:
    """True if both segments lie on the same infinite line in plan.

    Parallel offset lines are not collinear: the vector between the two
    start points must itself be parallel to the shared direction.
    """
    d1 = normalize(to_plan(subtract(s1.end, s1.start)))
    d2 = normalize(to_plan(subtract(s2.end, s2.start)))
    if not is_parallel(d1, d2, angle_tol):
        return False

    offset = to_plan(subtract(s2.start, s1.start))
    return length(cross(offset, d1)) <= tol


def point_on_segment(point: Point, segment: "Segment", tol: float = POINT_TOLERANCE) -> bool:
    """True if ``point`` lies on the bounded segment in plan.

    Both are projected onto XY first. The point must be colinear with the
    segment (cross product within ``tol``) and its projection must fall
    inside ``[-tol, |v|^2 + tol]`` where ``v`` is the segment vector. Both
    bounds are inclusive.
    """
    start = to_plan(segment.start)
    line_vec = subtract(to_plan(segment.end), start)
    point_vec = subtract(to_plan(point), start)

    if length(cross(line_vec, point_vec)) > tol:
        return False

    projection = dot(point_vec, line_vec)
    return -tol <= projection <= dot(line_vec, line_vec) + tol


def closest_endpoint(segment: "Segment", point: Point) -> Point:
    """Endpoint of ``segment`` nearest to ``point`` in plan. Ties go to the start."""
    if plan_distance(segment.start, point) <= plan_distance(segment.end, point):
        return segment.start
    return segment.end


def distance_to_nearest_endpoint(segment: "Segment", point: Point) -> float:
    return plan_distance(closest_endpoint(segment, point), point)


def point_to_segment_distance(point: Point, segment: "Segment") -> Tuple[float, float]:
    """Distance from a point to a bounded segment, and parameter t.

    Returns:
        (distance, t) where t is 0.0 at the start and 1.0 at the end,
        clamped to [0, 1].
    """
    start = segment.start
    seg_vec = subtract(segment.end, start)
    seg_len_sq = dot(seg_vec, seg_vec)

    if seg_len_sq < _ZERO_LENGTH:
        return distance(point, start), 0.0

    # Project point onto the infinite line, then clamp to the segment
    t = dot(subtract(point, start), seg_vec) / seg_len_sq
    t = max(0.0, min(1.0, t))

    closest = add(start, scale(seg_vec, t))
    return distance(point, closest), t
