# File: src/wall_gap_adjuster/wall_junctions/junction_detector.py

"""Junction grouping for a larger set of walls.

Finds which walls meet at a common point so each group can be handed to
``classify``. Groups are built by:
1. Extracting both endpoints of every wall
2. Matching nearby endpoints of different walls (corners, inline runs,
   three-way junctions)
3. Matching leftover free endpoints to another wall's mid-span (T candidates)
4. Keeping groups of 2 or 3 distinct walls

Matching tolerances are thickness-aware: the effective tolerance for a
pair is never less than the average of the two wall thicknesses, which
absorbs centerline offsets at real wall joins.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..config.settings import DEFAULT_SETTINGS, JunctionSettings
from ..utils.geometry import Point, distance, point_to_segment_distance
from ..utils.logging_config import get_logger
from .junction_types import (
    MAX_WALLS_FOR_JUNCTION,
    MIN_WALLS_FOR_JUNCTION,
    JunctionGroup,
    SegmentDescriptor,
)

logger = get_logger(__name__)


@dataclass
class _Endpoint:
    """One wall end (or mid-span contact) taking part in grouping."""

    wall_index: int
    end: str  # "start", "end" or "midspan"
    position: Point
    thickness: float


# =============================================================================
# Endpoint Extraction
# =============================================================================


def _extract_endpoints(walls: Sequence[SegmentDescriptor]) -> List[_Endpoint]:
    endpoints = []
    for index, wall in enumerate(walls):
        endpoints.append(_Endpoint(index, "start", wall.segment.start, wall.thickness))
        endpoints.append(_Endpoint(index, "end", wall.segment.end, wall.thickness))
    return endpoints


# =============================================================================
# Grouping / Union-Find
# =============================================================================


def _group_close_endpoints(
    endpoints: List[_Endpoint],
    tolerance: float,
) -> Dict[int, List[_Endpoint]]:
    """Group endpoints of different walls that lie within tolerance.

    The effective tolerance for a pair is
    ``max(tolerance, (thickness_i + thickness_j) / 2)``.

    Returns:
        Dict mapping a group root to the endpoints in that group.
    """
    n = len(endpoints)
    parent = list(range(n))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]  # Path compression
            i = parent[i]
        return i

    def union(i: int, j: int) -> None:
        ri, rj = find(i), find(j)
        if ri != rj:
            parent[ri] = rj

    for i in range(n):
        for j in range(i + 1, n):
            if endpoints[i].wall_index == endpoints[j].wall_index:
                continue

            pair_tol = max(tolerance, (endpoints[i].thickness + endpoints[j].thickness) / 2.0)
            if distance(endpoints[i].position, endpoints[j].position) <= pair_tol:
                union(i, j)

    groups: Dict[int, List[_Endpoint]] = {}
    for i in range(n):
        groups.setdefault(find(i), []).append(endpoints[i])
    return groups


# =============================================================================
# T Candidate Detection
# =============================================================================


def _attach_midspan_contacts(
    walls: Sequence[SegmentDescriptor],
    groups: Dict[int, List[_Endpoint]],
    tolerance: float,
    midspan_exclusion: float,
) -> None:
    """Attach walls whose mid-span a free endpoint touches (in place).

    Only endpoints alone in their group are considered. The first wall
    found within ``max(tolerance, (t_end + t_wall) / 2)`` whose contact
    parameter lies strictly inside ``(exclusion, 1 - exclusion)`` joins
    the endpoint's group as a mid-span contact.
    """
    for members in groups.values():
        if len(members) != 1:
            continue

        ep = members[0]
        for index, wall in enumerate(walls):
            if index == ep.wall_index:
                continue

            dist, t = point_to_segment_distance(ep.position, wall.segment)
            t_tol = max(tolerance, (ep.thickness + wall.thickness) / 2.0)

            if dist <= t_tol and midspan_exclusion < t < (1.0 - midspan_exclusion):
                logger.debug(
                    "Mid-span contact: wall %d %s meets wall %d at t=%.3f (dist=%.4f)",
                    ep.wall_index,
                    ep.end,
                    index,
                    t,
                    dist,
                )
                members.append(_Endpoint(index, "midspan", ep.position, wall.thickness))
                break


# =============================================================================
# Main Entry Point
# =============================================================================


def find_junction_groups(
    walls: Sequence[SegmentDescriptor],
    settings: Optional[JunctionSettings] = None,
) -> List[JunctionGroup]:
    """Find the junctions in a wall set.

    Args:
        walls: Segment descriptors for every wall.
        settings: Tolerances; DEFAULT_SETTINGS when omitted.

    Returns:
        Junction groups with 2 or 3 distinct walls, ordered by the first
        endpoint they contain. Larger groups are logged and skipped.
    """
    settings = settings or DEFAULT_SETTINGS

    if not walls:
        logger.info("No walls provided, no junctions to find")
        return []

    endpoints = _extract_endpoints(walls)
    groups = _group_close_endpoints(endpoints, settings.endpoint_tolerance)
    _attach_midspan_contacts(
        walls, groups, settings.t_intersection_tolerance, settings.midspan_exclusion
    )

    result: List[JunctionGroup] = []
    skipped = 0
    for members in sorted(groups.values(), key=lambda m: endpoints.index(m[0])):
        wall_indices = tuple(sorted({ep.wall_index for ep in members}))
        if len(wall_indices) < MIN_WALLS_FOR_JUNCTION:
            continue
        if len(wall_indices) > MAX_WALLS_FOR_JUNCTION:
            logger.warning(
                "Skipping junction of %d walls %s (at most %d supported)",
                len(wall_indices),
                list(wall_indices),
                MAX_WALLS_FOR_JUNCTION,
            )
            skipped += 1
            continue

        positions = [ep.position for ep in members if ep.end != "midspan"]
        position = (
            sum(p[0] for p in positions) / len(positions),
            sum(p[1] for p in positions) / len(positions),
            sum(p[2] for p in positions) / len(positions),
        )
        result.append(JunctionGroup(
            id=f"junction_{len(result)}",
            position=position,
            wall_indices=wall_indices,
            has_midspan=any(ep.end == "midspan" for ep in members),
        ))

    logger.info(
        "Found %d junctions among %d walls (%d oversized groups skipped)",
        len(result),
        len(walls),
        skipped,
    )
    return result
