# File: src/wall_gap_adjuster/wall_junctions/junction_adjuster.py

"""Gap adjustment for classified wall junctions.

Given a classified Junction and a gap distance, compute the new wall
centerlines that open the gap while keeping the junction's shape:

    Inline:  the adjusting wall backs off by gap
    Corner:  wall 1 backs off by gap + half of wall 2's thickness,
             wall 2 backs off by half of wall 1's thickness
    T-shape: the main wall stays, the cross wall backs off by
             half of the main wall's thickness + gap
    Tri:     both inline walls back off by gap / 2, the cross wall by
             gap + the larger inline half-thickness

All four are built from ``push_back``. A member whose replacement would
collapse or reverse is left out of the result, which the caller reads as
"unchanged".
"""

import math
from typing import Callable, Dict, Optional, Sequence

from ..config.settings import DEFAULT_SETTINGS, JunctionSettings
from ..exceptions import InvalidGapDistanceError
from ..utils.geometry import Point, dot, normalize, plan_distance, scale, subtract, to_plan
from ..utils.logging_config import get_logger
from .junction_classifier import resolve_inline_roles, resolve_t_roles, resolve_tri_roles
from .junction_types import (
    AdjustmentResult,
    Junction,
    JunctionType,
    Segment,
    SegmentDescriptor,
)

logger = get_logger(__name__)

Calculator = Callable[
    [Sequence[SegmentDescriptor], Point, float, JunctionSettings],
    Dict[int, Segment],
]


# =============================================================================
# Push-back Primitive
# =============================================================================


def push_back(segment: Segment, junction: Point, distance_from_junction: float) -> Optional[Segment]:
    """Move the segment end nearest ``junction`` to a set distance from it.

    The far end stays fixed. In plan, the near end is replaced by
    ``junction + unit(far - near) * distance_from_junction``, so a positive
    distance pulls the wall back toward its far end. The near end keeps its
    own z, and start/end orientation is preserved.

    Args:
        segment: Wall centerline.
        junction: Junction point.
        distance_from_junction: Distance of the new near end from the junction.

    Returns:
        The replacement segment, or None when the new near end would reach
        or pass the far end.
    """
    near_is_start = plan_distance(segment.start, junction) <= plan_distance(segment.end, junction)
    near, far = (segment.start, segment.end) if near_is_start else (segment.end, segment.start)

    direction = normalize(to_plan(subtract(far, near)))
    reach = dot(to_plan(subtract(far, junction)), direction)
    if distance_from_junction >= reach:
        logger.debug(
            "Push-back by %.4f reaches past the far end of %s -> %s (%.4f), leaving it unchanged",
            distance_from_junction,
            segment.start,
            segment.end,
            reach,
        )
        return None

    offset = scale(direction, distance_from_junction)
    new_near = (junction[0] + offset[0], junction[1] + offset[1], near[2])

    if near_is_start:
        return Segment(new_near, far)
    return Segment(far, new_near)


def _put(result: Dict[int, Segment], index: int, segment: Optional[Segment]) -> None:
    if segment is not None:
        result[index] = segment


# =============================================================================
# Calculators
# =============================================================================


def calculate_inline(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    gap: float,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Dict[int, Segment]:
    """Reference wall unchanged, adjusting wall pushed back by ``gap``."""
    result: Dict[int, Segment] = {}

    roles = resolve_inline_roles(walls, point, settings)
    if roles is None:
        return result

    reference, adjusting = roles
    _put(result, adjusting, push_back(walls[adjusting].segment, point, gap))
    result[reference] = walls[reference].segment
    return result


def calculate_corner(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    gap: float,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Dict[int, Segment]:
    """Wall 1 backs off by gap + half of wall 2; wall 2 by half of wall 1."""
    result: Dict[int, Segment] = {}
    wall1, wall2 = walls

    _put(result, 0, push_back(wall1.segment, point, gap + wall2.half_thickness))
    _put(result, 1, push_back(wall2.segment, point, wall1.half_thickness))
    return result


def calculate_t_shape(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    gap: float,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Dict[int, Segment]:
    """Main wall unchanged, cross wall backs off by half of main + gap."""
    result: Dict[int, Segment] = {}

    roles = resolve_t_roles(walls, point, settings)
    if roles is None:
        return result

    main, cross = roles
    result[main] = walls[main].segment
    _put(
        result,
        cross,
        push_back(walls[cross].segment, point, walls[main].half_thickness + gap),
    )
    return result


def calculate_tri_shape(
    walls: Sequence[SegmentDescriptor],
    point: Point,
    gap: float,
    settings: JunctionSettings = DEFAULT_SETTINGS,
) -> Dict[int, Segment]:
    """Inline walls close in by gap / 2 each; cross wall clears the thicker one."""
    result: Dict[int, Segment] = {}

    roles = resolve_tri_roles(walls, settings)
    if roles is None:
        return result

    inline1, inline2, cross = roles
    largest_half = max(walls[inline1].half_thickness, walls[inline2].half_thickness)

    _put(result, cross, push_back(walls[cross].segment, point, gap + largest_half))
    _put(result, inline1, push_back(walls[inline1].segment, point, gap / 2.0))
    _put(result, inline2, push_back(walls[inline2].segment, point, gap / 2.0))
    return result


CALCULATORS: Dict[JunctionType, Calculator] = {
    JunctionType.INLINE: calculate_inline,
    JunctionType.CORNER: calculate_corner,
    JunctionType.T_SHAPE: calculate_t_shape,
    JunctionType.TRI_SHAPE: calculate_tri_shape,
}


# =============================================================================
# Main Entry Point
# =============================================================================


def validate_gap(gap: float) -> float:
    """Return ``gap`` as a float if it is finite and >= 0.

    Raises:
        InvalidGapDistanceError: For negative, NaN or infinite gaps.
    """
    try:
        value = float(gap)
    except (TypeError, ValueError) as exc:
        raise InvalidGapDistanceError(f"Gap distance must be a number, got {gap!r}") from exc

    if not math.isfinite(value):
        raise InvalidGapDistanceError("Gap distance must be a finite number")
    if value < 0:
        raise InvalidGapDistanceError(f"Gap distance must be >= 0, got {value}")
    return value


def adjust(
    junction: Junction,
    gap: float,
    settings: Optional[JunctionSettings] = None,
) -> AdjustmentResult:
    """Compute replacement centerlines that open ``gap`` at ``junction``.

    Args:
        junction: Result of ``classify``.
        gap: Gap distance in the same unit as the wall geometry. Zero is
            allowed and leaves the walls touching at the junction.
        settings: Tolerances; the ones the junction was classified with
            when omitted.

    Returns:
        AdjustmentResult keyed by member index. Empty for an invalid or
        unclassified junction.

    Raises:
        InvalidGapDistanceError: If ``gap`` is negative or not finite.
    """
    gap = validate_gap(gap)
    settings = settings or junction.settings

    if not junction.is_valid():
        logger.debug("Junction of kind %s is not adjustable", junction.kind.value)
        return AdjustmentResult(kind=junction.kind)

    calculator = CALCULATORS[junction.kind]
    segments = calculator(junction.members, junction.point, gap, settings)

    logger.debug(
        "Adjusted %s junction with gap %.4f: %d of %d walls in result",
        junction.kind.value,
        gap,
        len(segments),
        len(junction.members),
    )
    return AdjustmentResult(kind=junction.kind, segments=segments)
