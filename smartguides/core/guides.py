# smartguides/core/guides.py
"""
Smart guide orchestration: scan every other box for axis-aligned and rotated-edge
alignments, pick the winner(s), snap the dragged box, then measure distances to
neighbors from the snapped position. Also the two-object selection measurement.
"""

from __future__ import annotations

import logging

from smartguides.core.alignment import (
    closest_match,
    find_horizontal_alignments,
    find_vertical_alignments,
    horizontal_guide,
    snap_offset,
    vertical_guide,
)
from smartguides.core.config import MAX_DISTANCE_DISPLAY, SMART_GUIDES_DEBUG
from smartguides.core.distance import (
    closest_per_axis,
    dominant_axis,
    find_closest_parallel_edges,
    neighbor_distances,
)
from smartguides.core.rotated import (
    create_diagonal_guide,
    find_rotated_edge_alignments,
)
from smartguides.core.types import (
    AlignmentGuide,
    AlignmentMatch,
    Axis,
    BoundingBox,
    DiagonalGuide,
    DistanceIndicator,
    Point,
    RotatedAlignmentMatch,
    SelectionDistanceResult,
    SmartGuideResult,
)

logger = logging.getLogger(__name__)

if SMART_GUIDES_DEBUG:
    logger.setLevel(logging.DEBUG)


def _use_rotated(
    rotated: RotatedAlignmentMatch | None,
    vertical: AlignmentMatch | None,
    horizontal: AlignmentMatch | None,
) -> bool:
    """Rotated wins when it is at least as close as both axis-aligned winners."""
    if rotated is None:
        return False
    if vertical is not None and rotated.distance > vertical.distance:
        return False
    if horizontal is not None and rotated.distance > horizontal.distance:
        return False
    return True


def calculate_smart_guides(
    dragging_box: BoundingBox,
    all_boxes: list[BoundingBox],
    threshold_units: float,
    max_distance: float = MAX_DISTANCE_DISPLAY,
) -> SmartGuideResult:
    """
    Snap correction, guides and neighbor distances for a box at its proposed position.
    all_boxes may include the dragged box itself; it is skipped by id.
    Iteration follows all_boxes order so ties resolve to the first box listed.
    """
    best_vertical: AlignmentMatch | None = None
    best_horizontal: AlignmentMatch | None = None
    best_rotated: RotatedAlignmentMatch | None = None

    targets = [b for b in all_boxes if b.id != dragging_box.id]
    for target in targets:
        best_vertical = closest_match(
            best_vertical, find_vertical_alignments(dragging_box, target, threshold_units)
        )
        best_horizontal = closest_match(
            best_horizontal, find_horizontal_alignments(dragging_box, target, threshold_units)
        )
        best_rotated = closest_match(
            best_rotated, find_rotated_edge_alignments(dragging_box, target, threshold_units)
        )

    guides: list[AlignmentGuide] = []
    diagonal_guides: list[DiagonalGuide] = []
    snap_x = 0.0
    snap_y = 0.0

    if _use_rotated(best_rotated, best_vertical, best_horizontal):
        snap_x = best_rotated.offset.x
        snap_y = best_rotated.offset.y
        diagonal_guides.append(create_diagonal_guide(best_rotated.dragging_edge, best_rotated.target_edge))
        logger.debug(
            f"Smart guides: {dragging_box.id} rotated snap to {best_rotated.target_edge.id}:"
            f"{best_rotated.target_edge.edge_type} (d={best_rotated.distance:.3f})"
        )
    else:
        if best_vertical is not None:
            snap_x = snap_offset(dragging_box, best_vertical)
            guides.append(vertical_guide(best_vertical))
        if best_horizontal is not None:
            snap_y = snap_offset(dragging_box, best_horizontal)
            guides.append(horizontal_guide(best_horizontal))
        if guides:
            logger.debug(f"Smart guides: {dragging_box.id} snap ({snap_x:.3f}, {snap_y:.3f}) guides={guides}")

    snapped = dragging_box.translated(snap_x, snap_y)
    distances: list[DistanceIndicator] = []
    for target in targets:
        distances.extend(neighbor_distances(snapped, target, max_distance=max_distance))

    return SmartGuideResult(
        snapped_x=dragging_box.left + snap_x,
        snapped_y=dragging_box.top + snap_y,
        guides=guides,
        diagonal_guides=diagonal_guides,
        distances=closest_per_axis(distances),
    )


def _rotated_selection_distance(box_a: BoundingBox, box_b: BoundingBox) -> SelectionDistanceResult | None:
    match = find_closest_parallel_edges(box_a, box_b)
    if match is None or match.gap.distance <= 0:
        return None
    gap = match.gap
    return SelectionDistanceResult(
        distance=gap.distance,
        axis=dominant_axis(gap.start, gap.end),
        line_start=gap.start,
        line_end=gap.end,
        direction=Point((gap.end.x - gap.start.x) / gap.distance, (gap.end.y - gap.start.y) / gap.distance),
        angle=match.edge_a.angle,
    )


def calculate_selection_distance(box_a: BoundingBox, box_b: BoundingBox) -> SelectionDistanceResult | None:
    """
    Edge-to-edge measurement between two selected objects, line running from a to b.
    Rotated boxes need matching orientation; axis-aligned boxes use the larger of
    the horizontal and vertical gaps (horizontal on ties). None when there is no gap.
    """
    if box_a.rotation != 0 or box_b.rotation != 0:
        return _rotated_selection_distance(box_a, box_b)

    h_gap = 0.0
    if box_a.right < box_b.left:
        h_gap = box_b.left - box_a.right
    elif box_b.right < box_a.left:
        h_gap = box_a.left - box_b.right

    v_gap = 0.0
    if box_a.bottom < box_b.top:
        v_gap = box_b.top - box_a.bottom
    elif box_b.bottom < box_a.top:
        v_gap = box_a.top - box_b.bottom

    if h_gap == 0 and v_gap == 0:
        return None

    axis: Axis = "x" if h_gap >= v_gap else "y"
    if axis == "x":
        overlap_top = max(box_a.top, box_b.top)
        overlap_bottom = min(box_a.bottom, box_b.bottom)
        if overlap_top < overlap_bottom:
            y = (overlap_top + overlap_bottom) / 2
        else:
            y = (box_a.center_y + box_b.center_y) / 2
        if box_a.right < box_b.left:
            start, end, direction = Point(box_a.right, y), Point(box_b.left, y), Point(1.0, 0.0)
        else:
            start, end, direction = Point(box_a.left, y), Point(box_b.right, y), Point(-1.0, 0.0)
        distance = h_gap
    else:
        overlap_left = max(box_a.left, box_b.left)
        overlap_right = min(box_a.right, box_b.right)
        if overlap_left < overlap_right:
            x = (overlap_left + overlap_right) / 2
        else:
            x = (box_a.center_x + box_b.center_x) / 2
        if box_a.bottom < box_b.top:
            start, end, direction = Point(x, box_a.bottom), Point(x, box_b.top), Point(0.0, 1.0)
        else:
            start, end, direction = Point(x, box_a.top), Point(x, box_b.bottom), Point(0.0, -1.0)
        distance = v_gap

    return SelectionDistanceResult(
        distance=distance,
        axis=axis,
        line_start=start,
        line_end=end,
        direction=direction,
    )
