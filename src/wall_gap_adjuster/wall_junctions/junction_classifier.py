# File: src/wall_gap_adjuster/wall_junctions/junction_classifier.py

"""Junction classification for 2 or 3 walls meeting at a point.

Each junction pattern has a classifier that answers "can these walls be
read as my pattern?" and, if so, returns the junction point:

1. Corner  - two perpendicular walls whose ends meet
2. Tri     - two inline walls plus a perpendicular cross wall
3. Inline  - two collinear walls end to end
4. T       - a perpendicular wall ending on another wall's span

``classify`` tries them in that order and returns the first match. The
role helpers (which wall is main/cross/reference) are shared with the
adjustment calculators so both sides agree on the same reading.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from ..config.settings import DEFAULT_SETTINGS, JunctionSettings
from ..utils.geometry import (
    Point,
    distance_to_nearest_endpoint,
    infinite_line_intersection,
    is_collinear,
    is_parallel,
    is_perpendicular,
    point_on_segment,
)
from ..utils.logging_config import get_logger
from .junction_types import (
    MAX_WALLS_FOR_JUNCTION,
    MIN_WALLS_FOR_JUNCTION,
    Junction,
    JunctionType,
    SegmentDescriptor,
)

logger = get_logger(__name__)

Classifier = Callable[[Sequence[SegmentDescriptor], JunctionSettings], Optional[Point]]


# =============================================================================
# Role Resolution
# =============================================================================


def resolve_t_roles(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Tuple[int, int]]:
    """Find the main and cross wall of a two-wall T reading.

    The main wall is the one whose bounded centerline contains ``point``.
    When both contain it (the cross wall ends exactly on the main
    centerline), the main wall is the one whose nearest end is farther
    from the point; ties keep the first wall as main.

    Returns:
        (main_index, cross_index), or None when the point is on neither wall.
    """
    seg1 = walls[0].segment
    seg2 = walls[1].segment
    on1 = point_on_segment(point, seg1, settings.point_tolerance)
    on2 = point_on_segment(point, seg2, settings.point_tolerance)

    if not on1 and not on2:
        return None

    if on1 and on2:
        reach1 = distance_to_nearest_endpoint(seg1, point)
        reach2 = distance_to_nearest_endpoint(seg2, point)
        return (0, 1) if reach1 >= reach2 else (1, 0)

    return (0, 1) if on1 else (1, 0)


def resolve_inline_roles(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Tuple[int, int]]:
    """Find the reference and adjusting wall of an inline junction.

    The reference wall is the first wall whose bounded centerline contains
    ``point``; the other wall is the one that moves.

    Returns:
        (reference_index, adjusting_index), or None when neither wall
        contains the point.
    """
    if point_on_segment(point, walls[0].segment, settings.point_tolerance):
        return (0, 1)
    if point_on_segment(point, walls[1].segment, settings.point_tolerance):
        return (1, 0)
    return None


def resolve_tri_roles(
    walls: Sequence[SegmentDescriptor],
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Tuple[int, int, int]]:
    """Split three walls into an inline pair and a cross wall.

    Exactly one pair may be parallel (within the angle tolerance).

    Returns:
        (inline_index_1, inline_index_2, cross_index), or None when zero or
        several pairs are parallel.
    """
    pairs = [(0, 1, 2), (0, 2, 1), (1, 2, 0)]
    parallel = [
        triple
        for triple in pairs
        if is_parallel(
            walls[triple[0]].segment.direction,
            walls[triple[1]].segment.direction,
            settings.angle_tolerance,
        )
    ]

    if len(parallel) != 1:
        return None
    return parallel[0]


# =============================================================================
# Classifiers
# =============================================================================


def try_classify_corner(
    walls: Sequence[SegmentDescriptor],
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Point]:
    """Corner: two perpendicular walls whose ends actually meet.

    For each wall, if the junction point falls inside its bounded
    centerline, the wall's nearest end must lie within the other wall's
    half-thickness of the point. A perpendicular crossing far from either
    wall end is not a corner.
    """
    if len(walls) != MIN_WALLS_FOR_JUNCTION:
        return None

    wall1, wall2 = walls
    if not is_perpendicular(
        wall1.segment.direction, wall2.segment.direction, settings.angle_tolerance
    ):
        return None

    point = infinite_line_intersection(wall1.segment, wall2.segment)
    if point is None:
        return None

    for wall, other in ((wall1, wall2), (wall2, wall1)):
        inside = point_on_segment(point, wall.segment, settings.corner_proximity_tolerance)
        if inside and distance_to_nearest_endpoint(wall.segment, point) > other.half_thickness:
            logger.debug(
                "Corner rejected: %s end is %.4f from junction (limit %.4f)",
                wall.wall_id or "wall",
                distance_to_nearest_endpoint(wall.segment, point),
                other.half_thickness,
            )
            return None

    return point


def try_classify_tri_shape(
    walls: Sequence[SegmentDescriptor],
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Point]:
    """Tri-shape: one inline pair plus a cross wall perpendicular to it."""
    if len(walls) != MAX_WALLS_FOR_JUNCTION:
        return None

    roles = resolve_tri_roles(walls, settings)
    if roles is None:
        return None

    inline1, inline2, cross = roles
    cross_segment = walls[cross].segment
    if not is_perpendicular(
        cross_segment.direction, walls[inline1].segment.direction, settings.angle_tolerance
    ):
        return None

    point = infinite_line_intersection(cross_segment, walls[inline1].segment)
    if point is None:
        point = infinite_line_intersection(cross_segment, walls[inline2].segment)
    return point


def try_classify_inline(
    walls: Sequence[SegmentDescriptor],
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Point]:
    """Inline: two walls on the same infinite line.

    Collinear lines have no single intersection, so the junction point is
    the second smallest of the four endpoints in (x, y, z) order. That
    picks the inner meeting end independently of input order.
    """
    if len(walls) != MIN_WALLS_FOR_JUNCTION:
        return None

    seg1 = walls[0].segment
    seg2 = walls[1].segment
    if not is_collinear(seg1, seg2, settings.angle_tolerance, settings.point_tolerance):
        return None

    endpoints = sorted([seg1.start, seg1.end, seg2.start, seg2.end])
    return endpoints[1]


def try_classify_t_shape(
    walls: Sequence[SegmentDescriptor],
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Optional[Point]:
    """T-shape: a perpendicular wall ending on the span of another wall.

    Rejected when the cross wall's nearest end is farther from the
    junction than the main wall's half-thickness (a true crossing, or a
    detached wall).
    """
    if len(walls) != MIN_WALLS_FOR_JUNCTION:
        return None

    wall1, wall2 = walls
    if not is_perpendicular(
        wall1.segment.direction, wall2.segment.direction, settings.angle_tolerance
    ):
        return None

    point = infinite_line_intersection(wall1.segment, wall2.segment)
    if point is None:
        return None

    roles = resolve_t_roles(walls, point, settings)
    if roles is None:
        return None

    main, cross = roles
    cross_reach = distance_to_nearest_endpoint(walls[cross].segment, point)
    if cross_reach > walls[main].half_thickness:
        logger.debug(
            "T-shape rejected: cross wall end %.4f from junction exceeds %.4f",
            cross_reach,
            walls[main].half_thickness,
        )
        return None

    return point


# =============================================================================
# Dispatcher
# =============================================================================

# Evaluation order; the first classifier returning a point wins
CLASSIFIER_PRIORITY: Tuple[Tuple[JunctionType, Classifier], ...] = (
    (JunctionType.CORNER, try_classify_corner),
    (JunctionType.TRI_SHAPE, try_classify_tri_shape),
    (JunctionType.INLINE, try_classify_inline),
    (JunctionType.T_SHAPE, try_classify_t_shape),
)


def classify(
    walls: Sequence[SegmentDescriptor],
    settings: Optional[JunctionSettings] = None,
) -> Junction:
    """Classify how 2 or 3 walls meet.

    Args:
        walls: Segment descriptors, in the caller's order.
        settings: Tolerances; DEFAULT_SETTINGS when omitted.

    Returns:
        A Junction. ``kind`` is JunctionType.NONE (with ``point`` None) for
        any other wall count or when no classifier accepts the walls.
    """
    settings = settings or DEFAULT_SETTINGS
    members = tuple(walls)

    if not MIN_WALLS_FOR_JUNCTION <= len(members) <= MAX_WALLS_FOR_JUNCTION:
        logger.debug("Cannot classify %d walls (need 2 or 3)", len(members))
        return Junction(kind=JunctionType.NONE, point=None, members=members, settings=settings)

    for kind, classifier in CLASSIFIER_PRIORITY:
        point = classifier(members, settings)
        if point is not None:
            logger.debug(
                "Classified %s as %s at (%.4f, %.4f, %.4f)",
                _describe(members),
                kind.value,
                point[0],
                point[1],
                point[2],
            )
            return Junction(kind=kind, point=point, members=members, settings=settings)
        logger.trace("%s classifier rejected %s", kind.value, _describe(members))

    logger.debug("No junction pattern matches %s", _describe(members))
    return Junction(kind=JunctionType.NONE, point=None, members=members, settings=settings)


def _describe(members: Sequence[SegmentDescriptor]) -> str:
    names: List[str] = [m.wall_id or f"#{i}" for i, m in enumerate(members)]
    return "[" + ", ".join(names) + "]"
