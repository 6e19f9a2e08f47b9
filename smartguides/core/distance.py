# smartguides/core/distance.py
"""
Gaps between boxes. Axis-aligned boxes measure facing edges across a shared
range; rotated boxes with a common orientation measure the closest pair of
facing parallel edges segment-to-segment.
"""

from __future__ import annotations

from shapely.geometry import LineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry
from shapely.ops import nearest_points

from smartguides.core.config import MAX_DISTANCE_DISPLAY
from smartguides.core.geometry import angles_match, outward_normal, rotated_edges
from smartguides.core.types import (
    Axis,
    BoundingBox,
    DistanceIndicator,
    ParallelEdgeMatch,
    Point,
    RotatedEdge,
    SegmentGap,
)


def calculate_horizontal_distance(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
) -> DistanceIndicator | None:
    """Side-by-side gap along x; needs a shared y range and no x overlap."""
    overlap_top = max(dragging_box.top, target_box.top)
    overlap_bottom = min(dragging_box.bottom, target_box.bottom)
    if overlap_top >= overlap_bottom:
        return None

    if dragging_box.right < target_box.left:
        start, end = dragging_box.right, target_box.left
    elif dragging_box.left > target_box.right:
        start, end = target_box.right, dragging_box.left
    else:
        return None

    distance = end - start
    if distance <= 0:
        return None
    return DistanceIndicator(
        axis="x",
        from_pos=start,
        to_pos=end,
        label_position=(overlap_top + overlap_bottom) / 2,
        distance=distance,
    )


def calculate_vertical_distance(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
) -> DistanceIndicator | None:
    """Stacked gap along y; needs a shared x range and no y overlap."""
    overlap_left = max(dragging_box.left, target_box.left)
    overlap_right = min(dragging_box.right, target_box.right)
    if overlap_left >= overlap_right:
        return None

    if dragging_box.bottom < target_box.top:
        start, end = dragging_box.bottom, target_box.top
    elif dragging_box.top > target_box.bottom:
        start, end = target_box.bottom, dragging_box.top
    else:
        return None

    distance = end - start
    if distance <= 0:
        return None
    return DistanceIndicator(
        axis="y",
        from_pos=start,
        to_pos=end,
        label_position=(overlap_left + overlap_right) / 2,
        distance=distance,
    )


def _shape(start: Point, end: Point) -> LineString | ShapelyPoint:
    if start == end:
        return ShapelyPoint(start.x, start.y)
    return LineString([(start.x, start.y), (end.x, end.y)])


def _gap(on_a: ShapelyPoint, on_b: ShapelyPoint) -> SegmentGap:
    return SegmentGap(
        distance=on_a.distance(on_b),
        start=Point(float(on_a.x), float(on_a.y)),
        end=Point(float(on_b.x), float(on_b.y)),
    )


def _nearest_gap(a: BaseGeometry, b: BaseGeometry) -> SegmentGap:
    """Closest pair between two geometries, running from a to b."""
    return _gap(*nearest_points(a, b))


def segment_to_segment_distance(
    a_start: Point,
    a_end: Point,
    b_start: Point,
    b_end: Point,
) -> SegmentGap:
    """
    Gap between two (nearly) parallel segments, running from segment a to segment b.
    Where their projections on a overlap, the gap is the perpendicular
    separation at the middle of the overlap; otherwise the closest endpoint pair.
    """
    seg_a = _shape(a_start, a_end)
    seg_b = _shape(b_start, b_end)
    if not (isinstance(seg_a, LineString) and isinstance(seg_b, LineString)):
        return _nearest_gap(seg_a, seg_b)

    # project() clamps to the segment, so a disjoint b collapses to one end of a
    lo, hi = sorted(seg_a.project(ShapelyPoint(p.x, p.y)) for p in (b_start, b_end))
    if hi <= lo:
        return _nearest_gap(seg_a, seg_b)

    on_a = seg_a.interpolate((lo + hi) / 2)
    on_b = seg_b.interpolate(seg_b.project(on_a))
    return _gap(on_a, on_b)


def _faces(edge: RotatedEdge, other: RotatedEdge) -> bool:
    """True if `other` lies in front of `edge` (positive side of its outward normal)."""
    normal = outward_normal(edge)
    if normal is None:
        return False
    mid = edge.midpoint
    other_mid = other.midpoint
    return (other_mid.x - mid.x) * normal.x + (other_mid.y - mid.y) * normal.y > 0


def find_closest_parallel_edges(box_a: BoundingBox, box_b: BoundingBox) -> ParallelEdgeMatch | None:
    """
    Closest pair of parallel edges facing each other, or None when the boxes
    are not at the same orientation or no edge pair faces.
    """
    if not angles_match(box_a.rotation, box_b.rotation):
        return None

    edges_b = rotated_edges(box_b)
    best: ParallelEdgeMatch | None = None
    for edge_a in rotated_edges(box_a):
        for edge_b in edges_b:
            if not angles_match(edge_a.angle, edge_b.angle):
                continue
            if not (_faces(edge_a, edge_b) and _faces(edge_b, edge_a)):
                continue
            gap = segment_to_segment_distance(edge_a.start, edge_a.end, edge_b.start, edge_b.end)
            if best is None or gap.distance < best.gap.distance:
                best = ParallelEdgeMatch(edge_a=edge_a, edge_b=edge_b, gap=gap)
    return best


def dominant_axis(start: Point, end: Point) -> Axis:
    """Screen axis the segment is closer to; ties go to x."""
    return "x" if abs(end.x - start.x) >= abs(end.y - start.y) else "y"


def calculate_rotated_distance(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
) -> DistanceIndicator | None:
    """Gap between facing parallel edges of two boxes sharing an orientation."""
    match = find_closest_parallel_edges(dragging_box, target_box)
    if match is None or match.gap.distance <= 0:
        return None
    start, end = match.gap.start, match.gap.end
    axis = dominant_axis(start, end)
    if axis == "x":
        from_pos, to_pos = sorted((start.x, end.x))
        label_position = (start.y + end.y) / 2
    else:
        from_pos, to_pos = sorted((start.y, end.y))
        label_position = (start.x + end.x) / 2
    return DistanceIndicator(
        axis=axis,
        from_pos=from_pos,
        to_pos=to_pos,
        label_position=label_position,
        distance=match.gap.distance,
        start_point=start,
        end_point=end,
    )


def neighbor_distances(
    box: BoundingBox,
    target_box: BoundingBox,
    max_distance: float = MAX_DISTANCE_DISPLAY,
) -> list[DistanceIndicator]:
    """
    Reportable gaps between box and one neighbor, strictly under max_distance.
    Any rotation switches to the parallel-edge path with no axis-aligned fallback.
    """
    if box.rotation != 0 or target_box.rotation != 0:
        found = [calculate_rotated_distance(box, target_box)]
    else:
        found = [
            calculate_horizontal_distance(box, target_box),
            calculate_vertical_distance(box, target_box),
        ]
    return [d for d in found if d is not None and d.distance < max_distance]


def closest_per_axis(distances: list[DistanceIndicator]) -> list[DistanceIndicator]:
    """At most one indicator per axis, x first; earlier entries win ties."""
    out: list[DistanceIndicator] = []
    for axis in ("x", "y"):
        on_axis = [d for d in distances if d.axis == axis]
        if on_axis:
            out.append(min(on_axis, key=lambda d: d.distance))
    return out
