# File: src/wall_gap_adjuster/wall_junctions/junction_resolver.py

"""Batch classification and gap adjustment over a whole wall set.

Given every wall of a layout, this module:
1. Groups walls that meet at a common point
2. Classifies each group
3. Adjusts each classified group and applies its replacement centerlines
   together before moving on to the next group

Later groups always see the centerlines already updated by earlier ones.
"""

from typing import List, Optional, Sequence, Tuple

from ..config.settings import DEFAULT_SETTINGS, JunctionSettings
from ..utils.logging_config import get_logger
from .junction_adjuster import adjust, validate_gap
from .junction_classifier import classify
from .junction_detector import find_junction_groups
from .junction_types import (
    Junction,
    JunctionGroup,
    JunctionOutcome,
    JunctionType,
    Segment,
    SegmentDescriptor,
    WallAdjustmentReport,
)

logger = get_logger(__name__)


def _members_for_group(
    walls: Sequence[SegmentDescriptor],
    current: Sequence[Segment],
    group: JunctionGroup,
) -> List[SegmentDescriptor]:
    """Descriptors for a group using the working (possibly updated) centerlines."""
    return [
        SegmentDescriptor(
            segment=current[index],
            thickness=walls[index].thickness,
            wall_id=walls[index].wall_id,
        )
        for index in group.wall_indices
    ]


def analyze_junctions(
    walls: Sequence[SegmentDescriptor],
    settings: Optional[JunctionSettings] = None,
) -> List[Tuple[JunctionGroup, Junction]]:
    """Group and classify every junction without adjusting anything.

    Returns:
        (group, junction) pairs in grouping order.
    """
    settings = settings or DEFAULT_SETTINGS
    groups = find_junction_groups(walls, settings)
    current = [wall.segment for wall in walls]

    return [
        (group, classify(_members_for_group(walls, current, group), settings))
        for group in groups
    ]


def adjust_walls(
    walls: Sequence[SegmentDescriptor],
    gap: float,
    settings: Optional[JunctionSettings] = None,
) -> WallAdjustmentReport:
    """Open ``gap`` at every supported junction of a wall set.

    Each junction is classified against the current centerlines and its
    whole AdjustmentResult is applied before the next junction is read.
    Unsupported junctions are reported with kind NONE and change nothing.

    Args:
        walls: Segment descriptors for every wall.
        gap: Gap distance in the wall geometry's unit.
        settings: Tolerances; DEFAULT_SETTINGS when omitted.

    Returns:
        WallAdjustmentReport with the final centerline of every wall.

    Raises:
        InvalidGapDistanceError: If ``gap`` is negative or not finite.
    """
    gap = validate_gap(gap)
    settings = settings or DEFAULT_SETTINGS

    current: List[Segment] = [wall.segment for wall in walls]
    outcomes: List[JunctionOutcome] = []

    for group in find_junction_groups(walls, settings):
        junction = classify(_members_for_group(walls, current, group), settings)
        result = adjust(junction, gap, settings)

        adjusted = []
        for local_index, segment in sorted(result.segments.items()):
            wall_index = group.wall_indices[local_index]
            if segment != current[wall_index]:
                current[wall_index] = segment
                adjusted.append(wall_index)

        if junction.kind == JunctionType.NONE:
            logger.warning(
                "%s (walls %s) is not a supported configuration",
                group.id,
                list(group.wall_indices),
            )

        outcomes.append(JunctionOutcome(
            junction_id=group.id,
            kind=junction.kind,
            point=junction.point,
            wall_indices=group.wall_indices,
            adjusted_indices=tuple(adjusted),
        ))

    report = WallAdjustmentReport(segments=current, outcomes=outcomes)
    summary = report.to_dict()["summary"]
    logger.info(
        "Adjusted %d junctions with gap %.4f: corner=%d, t_shape=%d, "
        "inline=%d, tri_shape=%d, unsupported=%d",
        summary["total_junctions"],
        gap,
        summary["corner"],
        summary["t_shape"],
        summary["inline"],
        summary["tri_shape"],
        summary["unsupported"],
    )
    return report
