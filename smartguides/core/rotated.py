# smartguides/core/rotated.py
"""
Rotated-edge alignment between boxes that share an orientation: coincident
parallel edges, the 2D correction that lands one edge on the other's line, and
the diagonal guide drawn through both.
"""

from __future__ import annotations

from smartguides.core.config import DIAGONAL_GUIDE_EXTENSION
from smartguides.core.geometry import (
    angles_match,
    is_axis_aligned,
    point_to_line_distance,
    rotated_edges,
    unit_direction,
)
from smartguides.core.types import (
    BoundingBox,
    DiagonalGuide,
    Point,
    RotatedAlignmentMatch,
    RotatedEdge,
)


def edge_alignment_offset(dragging_edge: RotatedEdge, target_edge: RotatedEdge) -> Point:
    """
    Vector that moves the dragging edge's midpoint onto the target edge's line,
    along the target's normal. Zero vector for a zero-length target edge.
    """
    direction = unit_direction(target_edge.start, target_edge.end)
    if direction is None:
        return Point(0.0, 0.0)
    perp_x = -direction.y
    perp_y = direction.x
    mid = dragging_edge.midpoint
    signed = (target_edge.start.x - mid.x) * perp_x + (target_edge.start.y - mid.y) * perp_y
    return Point(perp_x * signed, perp_y * signed)


def needs_rotated_detection(dragging_box: BoundingBox, target_box: BoundingBox) -> bool:
    """Skip when both boxes sit on multiples of 90°; the axis-aligned detector covers them."""
    return not (is_axis_aligned(dragging_box.rotation) and is_axis_aligned(target_box.rotation))


def find_rotated_edge_alignments(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
    threshold: float,
) -> list[RotatedAlignmentMatch]:
    """Parallel edge pairs whose lines are within threshold, in edge order."""
    if not needs_rotated_detection(dragging_box, target_box):
        return []
    if not angles_match(dragging_box.rotation, target_box.rotation):
        return []

    target_edges = rotated_edges(target_box)
    matches: list[RotatedAlignmentMatch] = []
    for drag_edge in rotated_edges(dragging_box):
        for target_edge in target_edges:
            if not angles_match(drag_edge.angle, target_edge.angle):
                continue
            distance = point_to_line_distance(drag_edge.midpoint, target_edge.start, target_edge.end)
            if distance <= threshold:
                matches.append(
                    RotatedAlignmentMatch(
                        dragging_edge=drag_edge,
                        target_edge=target_edge,
                        distance=distance,
                        offset=edge_alignment_offset(drag_edge, target_edge),
                    )
                )
    return matches


def create_diagonal_guide(
    dragging_edge: RotatedEdge,
    target_edge: RotatedEdge,
    extension: float = DIAGONAL_GUIDE_EXTENSION,
) -> DiagonalGuide:
    """
    Guide along the target edge's line spanning both edges' combined extent,
    overshooting each end by `extension`.
    """
    direction = unit_direction(target_edge.start, target_edge.end)
    if direction is None:
        return DiagonalGuide(start=target_edge.start, end=target_edge.end, angle=target_edge.angle)

    origin = target_edge.start
    ts = [
        (p.x - origin.x) * direction.x + (p.y - origin.y) * direction.y
        for p in (dragging_edge.start, dragging_edge.end, target_edge.start, target_edge.end)
    ]
    t_min = min(ts) - extension
    t_max = max(ts) + extension
    return DiagonalGuide(
        start=Point(origin.x + t_min * direction.x, origin.y + t_min * direction.y),
        end=Point(origin.x + t_max * direction.x, origin.y + t_max * direction.y),
        angle=target_edge.angle,
    )
