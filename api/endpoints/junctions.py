# File: api/endpoints/junctions.py
from fastapi import APIRouter
from typing import List

from api.models.junction_models import (
    AdjustRequest,
    AdjustResponse,
    BatchAdjustRequest,
    BatchAdjustResponse,
    ClassifyRequest,
    ClassifyResponse,
    WallModel,
)
from api.utils.config import Config
from api.utils.errors import UNSUPPORTED_CONFIGURATION, InvalidWallInputError, handle_exception
from wall_gap_adjuster.config import from_millimeters
from wall_gap_adjuster.exceptions import DegenerateSegmentError, InvalidWallSelectionError
from wall_gap_adjuster.wall_junctions import (
    JunctionType,
    SegmentDescriptor,
    adjust,
    adjust_walls,
    classify,
)

import logging
logger = logging.getLogger("wall_gap.api")

router = APIRouter()


def to_descriptors(walls: List[WallModel]) -> List[SegmentDescriptor]:
    """Convert request walls into engine segment descriptors."""
    descriptors = []
    for index, wall in enumerate(walls):
        try:
            descriptors.append(SegmentDescriptor.from_points(
                wall.start.as_tuple(),
                wall.end.as_tuple(),
                thickness=wall.thickness,
                wall_id=wall.wall_id,
            ))
        except DegenerateSegmentError as e:
            raise InvalidWallSelectionError(f"Wall {index} has a degenerate centerline: {e}") from e
        except ValueError as e:
            raise InvalidWallInputError(index, str(e)) from e
    return descriptors


@router.post("/classify", response_model=ClassifyResponse)
async def classify_junction(request: ClassifyRequest):
    """
    Classify how 2 or 3 walls meet.

    Returns the junction type and point. Layouts that match no supported
    pattern come back with kind "none" rather than an error.
    """
    try:
        junction = classify(to_descriptors(request.walls), Config.junction_settings())
        response = junction.to_dict()
        if junction.kind == JunctionType.NONE:
            response["message"] = UNSUPPORTED_CONFIGURATION

        logger.info("Classified %d walls as %s", len(request.walls), junction.kind.value)
        return response
    except Exception as e:
        raise handle_exception(e, "classify")


@router.post("/adjust", response_model=AdjustResponse)
async def adjust_junction(request: AdjustRequest):
    """
    Classify a junction and compute replacement centerlines opening a gap.

    ``gap_mm`` is converted into ``units`` before adjustment. Members not
    listed in ``segments`` keep their original centerline.
    """
    try:
        settings = Config.junction_settings()
        gap = from_millimeters(request.gap_mm, request.units)

        junction = classify(to_descriptors(request.walls), settings)
        result = adjust(junction, gap, settings)

        response = junction.to_dict()
        response.update({
            "gap": gap,
            "units": request.units,
            "segments": result.to_dict()["segments"],
        })
        if junction.kind == JunctionType.NONE:
            response["message"] = UNSUPPORTED_CONFIGURATION

        logger.info(
            "Adjusted %s junction with %.3f mm gap: %d walls changed",
            junction.kind.value,
            request.gap_mm,
            len(result),
        )
        return response
    except Exception as e:
        raise handle_exception(e, "adjust")


@router.post("/batch", response_model=BatchAdjustResponse)
async def adjust_layout(request: BatchAdjustRequest):
    """
    Open a gap at every supported junction of a wall layout.

    Junctions are processed in order and each one sees the centerlines
    already updated by earlier junctions.
    """
    try:
        gap = from_millimeters(request.gap_mm, request.units)
        report = adjust_walls(to_descriptors(request.walls), gap, Config.junction_settings())
        report_dict = report.to_dict()

        walls = [
            {"index": index, "wall_id": wall.wall_id, **segment}
            for index, (wall, segment) in enumerate(zip(request.walls, report_dict["segments"]))
        ]
        return {
            "gap": gap,
            "units": request.units,
            "walls": walls,
            "junctions": report_dict["junctions"],
            "summary": report_dict["summary"],
        }
    except Exception as e:
        raise handle_exception(e, "batch adjust")
