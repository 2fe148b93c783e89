# File: src/wall_gap_adjuster/wall_junctions/__init__.py

"""Wall junction classification and gap adjustment.

Classifies how 2 or 3 wall centerlines meet (inline, corner, T-shape,
tri-shape) and computes new centerlines that open a gap at the junction.

Usage:
    from wall_gap_adjuster.wall_junctions import SegmentDescriptor, classify

    walls = [
        SegmentDescriptor.from_points((0, 0), (10, 0), thickness=2.0),
        SegmentDescriptor.from_points((10, 0), (10, 10), thickness=4.0),
    ]
    junction = classify(walls)
    result = junction.apply(gap=1.0)
    new_first_wall = result.resolve(0, walls[0].segment)
"""

from .junction_types import (
    JunctionType,
    Segment,
    SegmentDescriptor,
    Junction,
    AdjustmentResult,
    JunctionGroup,
    JunctionOutcome,
    WallAdjustmentReport,
)

from .junction_classifier import (
    classify,
    try_classify_corner,
    try_classify_tri_shape,
    try_classify_inline,
    try_classify_t_shape,
    CLASSIFIER_PRIORITY,
)

from .junction_adjuster import adjust, push_back

from .junction_detector import find_junction_groups

from .junction_resolver import analyze_junctions, adjust_walls

__all__ = [
    # Main entry points
    "classify",
    "adjust",
    "adjust_walls",
    # Types
    "JunctionType",
    "Segment",
    "SegmentDescriptor",
    "Junction",
    "AdjustmentResult",
    "JunctionGroup",
    "JunctionOutcome",
    "WallAdjustmentReport",
    # Classifiers
    "try_classify_corner",
    "try_classify_tri_shape",
    "try_classify_inline",
    "try_classify_t_shape",
    "CLASSIFIER_PRIORITY",
    # Adjustment
    "push_back",
    # Grouping
    "find_junction_groups",
    "analyze_junctions",
]
