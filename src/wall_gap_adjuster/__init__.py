"""Wall gap adjuster.

Classifies wall junctions from centerlines and thicknesses and computes
replacement centerlines that open a gap at each junction.
"""

from .wall_junctions import (
    JunctionType,
    Segment,
    SegmentDescriptor,
    Junction,
    AdjustmentResult,
    classify,
    adjust,
    adjust_walls,
    find_junction_groups,
)

__version__ = "0.1.0"
