import math
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Optional, Literal

UnitName = Literal["feet", "meters", "millimeters", "inches"]

# Largest gap accepted at the API, in millimeters (10 m)
MAX_GAP_MM = 10000.0

class Point3D(BaseModel):
    """3D point coordinates."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")
    z: float = Field(default=0.0, description="Z coordinate")

    @field_validator('x', 'y', 'z')
    @classmethod
    def validate_coordinate(cls, v: float) -> float:
        """Reject NaN and infinite coordinates."""
        if not math.isfinite(v):
            raise ValueError("Coordinate must be a finite number")
        return v

    def as_tuple(self):
        return (self.x, self.y, self.z)

class WallModel(BaseModel):
    """A wall as a centerline plus thickness, in the request's units."""
    start: Point3D = Field(description="Centerline start point")
    end: Point3D = Field(description="Centerline end point")
    thickness: float = Field(description="Full wall thickness", ge=0)
    wall_id: str = Field(default="", max_length=100, description="Optional caller label")

    @model_validator(mode='after')
    def validate_wall(self) -> 'WallModel':
        """Centerline endpoints must differ."""
        if self.start.as_tuple() == self.end.as_tuple():
            raise ValueError("Wall start and end points must differ")
        return self

class ClassifyRequest(BaseModel):
    """Walls to classify as a single junction."""
    walls: List[WallModel] = Field(
        min_length=2,
        max_length=3,
        description="The 2 or 3 walls meeting at the junction"
    )

class AdjustRequest(ClassifyRequest):
    """Walls of a single junction plus the gap to open."""
    gap_mm: float = Field(
        ge=0,
        le=MAX_GAP_MM,
        description="Gap distance in millimeters"
    )
    units: UnitName = Field(
        default="millimeters",
        description="Unit of the wall coordinates and thicknesses"
    )

class BatchAdjustRequest(BaseModel):
    """A whole wall layout to adjust junction by junction."""
    walls: List[WallModel] = Field(min_length=1, description="Every wall in the layout")
    gap_mm: float = Field(ge=0, le=MAX_GAP_MM, description="Gap distance in millimeters")
    units: UnitName = Field(default="millimeters")

class SegmentModel(BaseModel):
    """A wall centerline in a response."""
    start: Point3D
    end: Point3D

class JunctionMemberModel(SegmentModel):
    """A classified junction member, in request order."""
    index: int
    wall_id: str = ""
    thickness: float

class ClassifyResponse(BaseModel):
    """Classification of one junction."""
    kind: Literal["inline", "corner", "t_shape", "tri_shape", "none"]
    point: Optional[Point3D] = Field(default=None, description="Junction point")
    members: List[JunctionMemberModel] = Field(default=[])
    message: Optional[str] = Field(default=None, description="Set when kind is 'none'")

class AdjustResponse(ClassifyResponse):
    """Classification plus replacement centerlines for one junction."""
    gap: float = Field(description="Gap applied, converted to the request's units")
    units: UnitName
    segments: Dict[str, SegmentModel] = Field(
        default={},
        description="Replacement centerline by member index; missing members are unchanged"
    )

class AdjustedWallModel(SegmentModel):
    """Final centerline of one wall after a batch adjustment."""
    index: int
    wall_id: str = ""

class JunctionOutcomeModel(BaseModel):
    """What happened at one junction of a batch."""
    junction_id: str
    kind: Literal["inline", "corner", "t_shape", "tri_shape", "none"]
    point: Optional[Point3D] = None
    wall_indices: List[int]
    adjusted_indices: List[int] = Field(default=[])

class BatchAdjustResponse(BaseModel):
    """Result of adjusting every junction in a wall layout."""
    gap: float
    units: UnitName
    walls: List[AdjustedWallModel]
    junctions: List[JunctionOutcomeModel]
    summary: Dict[str, int]
