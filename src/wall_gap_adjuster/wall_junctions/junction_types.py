# File: src/wall_gap_adjuster/wall_junctions/junction_types.py

"""Data models for wall junction classification and gap adjustment.

Defines the value types passed between the classifiers, the adjustment
calculators and the caller. Every type here is immutable; a classify and
adjust call builds fresh instances and never mutates its inputs.

Key Types:
    JunctionType: How the walls meet (inline, corner, T, tri, or none)
    Segment: A bounded wall centerline
    SegmentDescriptor: A centerline plus wall thickness
    Junction: Classification result with its junction point and members
    AdjustmentResult: Replacement segments keyed by member index
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.settings import DEFAULT_SETTINGS, JunctionSettings
from ..exceptions import DegenerateSegmentError
from ..utils.geometry import Point, Vector, distance, normalize, subtract


# =============================================================================
# Enumerations
# =============================================================================


class JunctionType(Enum):
    """Classification of a 2 or 3 wall junction."""

    INLINE = "inline"
    """Two collinear walls meeting end to end."""

    CORNER = "corner"
    """Two perpendicular walls meeting near their ends (L-shape)."""

    T_SHAPE = "t_shape"
    """A perpendicular wall meeting the interior of another wall."""

    TRI_SHAPE = "tri_shape"
    """Two inline walls plus one perpendicular wall at a single point."""

    NONE = "none"
    """Not classified, or not a supported configuration."""


# Member count each supported junction type requires
EXPECTED_MEMBER_COUNT: Dict[JunctionType, int] = {
    JunctionType.INLINE: 2,
    JunctionType.CORNER: 2,
    JunctionType.T_SHAPE: 2,
    JunctionType.TRI_SHAPE: 3,
}

MIN_WALLS_FOR_JUNCTION = 2
MAX_WALLS_FOR_JUNCTION = 3


# =============================================================================
# Segments
# =============================================================================


def _as_point(value) -> Point:
    """Coerce a 2- or 3-sequence or an {x, y, z} dict to a float 3-tuple."""
    if isinstance(value, dict):
        return (float(value["x"]), float(value["y"]), float(value.get("z", 0.0)))
    coords = tuple(float(c) for c in value)
    if len(coords) == 2:
        return (coords[0], coords[1], 0.0)
    if len(coords) != 3:
        raise DegenerateSegmentError(f"Expected 2 or 3 coordinates, got {len(coords)}")
    return coords


@dataclass(frozen=True)
class Segment:
    """A bounded straight wall centerline.

    Attributes:
        start: First endpoint (x, y, z).
        end: Second endpoint (x, y, z). Must differ from ``start``.

    Raises:
        DegenerateSegmentError: If the endpoints coincide or are not finite.
    """

    start: Point
    end: Point

    def __post_init__(self):
        start = _as_point(self.start)
        end = _as_point(self.end)
        if not all(math.isfinite(c) for c in start + end):
            raise DegenerateSegmentError(f"Segment has non-finite endpoints: {start} -> {end}")
        if distance(start, end) < 1e-12:
            raise DegenerateSegmentError(f"Segment endpoints coincide at {start}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def vector(self) -> Vector:
        """Unnormalized ``end - start``."""
        return subtract(self.end, self.start)

    @property
    def direction(self) -> Vector:
        """Unit direction from start to end."""
        return normalize(self.vector)

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    @property
    def endpoints(self) -> Tuple[Point, Point]:
        return (self.start, self.end)

    def to_dict(self) -> Dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "start": _serialize_point(self.start),
            "end": _serialize_point(self.end),
        }


@dataclass(frozen=True)
class SegmentDescriptor:
    """A wall as seen by the engine: its centerline and thickness.

    Attributes:
        segment: Wall centerline.
        thickness: Full wall thickness, >= 0.
        wall_id: Optional caller label, carried through for logging and
            serialization only.
    """

    segment: Segment
    thickness: float
    wall_id: str = ""

    def __post_init__(self):
        if not math.isfinite(self.thickness) or self.thickness < 0:
            raise ValueError(f"Wall thickness must be finite and >= 0, got {self.thickness}")

    @property
    def half_thickness(self) -> float:
        return self.thickness / 2.0

    @classmethod
    def from_points(cls, start, end, thickness: float, wall_id: str = "") -> "SegmentDescriptor":
        """Build a descriptor straight from two endpoints."""
        return cls(segment=Segment(start, end), thickness=thickness, wall_id=wall_id)


# =============================================================================
# Classification and Adjustment Results
# =============================================================================


@dataclass(frozen=True)
class Junction:
    """Classification of a set of walls meeting at one point.

    Attributes:
        kind: Classified junction type (NONE if unsupported).
        point: Junction point, or None when classification failed.
        members: The walls in the order the caller supplied them.
        settings: Tolerances used to classify; adjustment reuses them.
    """

    kind: JunctionType
    point: Optional[Point]
    members: Tuple[SegmentDescriptor, ...] = ()
    settings: JunctionSettings = field(default=DEFAULT_SETTINGS, compare=False, repr=False)

    def is_valid(self) -> bool:
        """True when the junction can be adjusted."""
        if self.kind == JunctionType.NONE or self.point is None:
            return False
        return len(self.members) == EXPECTED_MEMBER_COUNT[self.kind]

    def apply(self, gap: float) -> "AdjustmentResult":
        """Run this junction type's adjustment calculator with ``gap``."""
        from .junction_adjuster import adjust

        return adjust(self, gap, self.settings)

    def to_dict(self) -> Dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "kind": self.kind.value,
            "point": _serialize_point(self.point) if self.point is not None else None,
            "members": [
                {
                    "index": index,
                    "wall_id": member.wall_id,
                    "thickness": member.thickness,
                    **member.segment.to_dict(),
                }
                for index, member in enumerate(self.members)
            ],
        }


@dataclass(frozen=True)
class AdjustmentResult:
    """Replacement centerlines produced by an adjustment calculator.

    Members missing from ``segments`` are left unchanged by the caller.

    Attributes:
        kind: Junction type the result was computed for.
        segments: Member index -> replacement segment.
    """

    kind: JunctionType = JunctionType.NONE
    segments: Dict[int, Segment] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, index: int) -> bool:
        return index in self.segments

    def is_empty(self) -> bool:
        return not self.segments

    def get_segment(self, index: int) -> Optional[Segment]:
        """Replacement for member ``index``, or None if it is unchanged."""
        return self.segments.get(index)

    def resolve(self, index: int, original: Segment) -> Segment:
        """Replacement for member ``index``, falling back to ``original``."""
        return self.segments.get(index, original)

    def to_dict(self) -> Dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "kind": self.kind.value,
            "segments": {
                str(index): segment.to_dict()
                for index, segment in sorted(self.segments.items())
            },
        }


# =============================================================================
# Grouping and Batch Results
# =============================================================================


@dataclass(frozen=True)
class JunctionGroup:
    """Walls found to meet at one point in a larger wall set.

    Attributes:
        id: Group identifier ("junction_0", ...).
        position: Average of the matched endpoint positions.
        wall_indices: Indices into the caller's wall list, in input order.
        has_midspan: True if one wall was matched along its mid-span.
    """

    id: str
    position: Point
    wall_indices: Tuple[int, ...]
    has_midspan: bool = False


@dataclass(frozen=True)
class JunctionOutcome:
    """What happened at one junction group during a batch adjustment."""

    junction_id: str
    kind: JunctionType
    point: Optional[Point]
    wall_indices: Tuple[int, ...]
    adjusted_indices: Tuple[int, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "junction_id": self.junction_id,
            "kind": self.kind.value,
            "point": _serialize_point(self.point) if self.point is not None else None,
            "wall_indices": list(self.wall_indices),
            "adjusted_indices": list(self.adjusted_indices),
        }


@dataclass
class WallAdjustmentReport:
    """Result of adjusting every junction in a wall set.

    Attributes:
        segments: Final centerline for every input wall, by input index.
        outcomes: One entry per junction group, in processing order.
    """

    segments: List[Segment] = field(default_factory=list)
    outcomes: List[JunctionOutcome] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "junctions": [outcome.to_dict() for outcome in self.outcomes],
            "summary": self._build_summary(),
        }

    def _build_summary(self) -> Dict:
        type_counts: Dict[str, int] = {}
        for outcome in self.outcomes:
            key = outcome.kind.value
            type_counts[key] = type_counts.get(key, 0) + 1

        return {
            "inline": type_counts.get("inline", 0),
            "corner": type_counts.get("corner", 0),
            "t_shape": type_counts.get("t_shape", 0),
            "tri_shape": type_counts.get("tri_shape", 0),
            "unsupported": type_counts.get("none", 0),
            "total_junctions": len(self.outcomes),
        }


# =============================================================================
# Serialization Helpers
# =============================================================================


def _serialize_point(point: Point) -> Dict:
    return {"x": point[0], "y": point[1], "z": point[2]}
