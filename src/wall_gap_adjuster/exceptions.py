# File: src/wall_gap_adjuster/exceptions.py

"""Exceptions raised at the boundary of the wall gap engine.

The classification and adjustment functions never raise for geometric
reasons (parallel lines, unsupported layouts); those surface as
``JunctionType.NONE`` or as an omitted entry in an AdjustmentResult.
Exceptions are reserved for inputs that are invalid before any geometry
runs: degenerate segments, negative thickness, bad gap values.
"""

from typing import Optional


class WallAdjustmentError(Exception):
    """Base class for wall adjustment errors.

    Attributes:
        error_code: Stable machine-readable code (e.g. "INVALID_GAP_DISTANCE").
    """

    error_code: str = "WALL_ADJUSTMENT_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        if error_code:
            self.error_code = error_code


class DegenerateSegmentError(WallAdjustmentError, ValueError):
    """A segment was built with coincident or non-finite endpoints."""

    error_code = "DEGENERATE_SEGMENT"


class InvalidGapDistanceError(WallAdjustmentError, ValueError):
    """Gap distance is negative, NaN or infinite."""

    error_code = "INVALID_GAP_DISTANCE"


class InvalidWallSelectionError(WallAdjustmentError, ValueError):
    """Wall input cannot be turned into segment descriptors."""

    error_code = "INVALID_WALL_SELECTION"
