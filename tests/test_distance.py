# tests/test_distance.py
"""
Distance calculator: axis-aligned gaps, segment-to-segment distance (checked
against shapely), facing parallel edges of rotated boxes, per-axis filtering.
"""

from __future__ import annotations

import math

import pytest
from shapely.geometry import LineString

from smartguides.core.boxes import box_from_rectangle
from smartguides.core.config import MAX_DISTANCE_DISPLAY
from smartguides.core.distance import (
    calculate_horizontal_distance,
    calculate_rotated_distance,
    calculate_vertical_distance,
    closest_per_axis,
    find_closest_parallel_edges,
    neighbor_distances,
    segment_to_segment_distance,
)
from smartguides.core.types import BoundingBox, DistanceIndicator, Point


def _bounds(shape_id: str, left: float, right: float, top: float, bottom: float) -> BoundingBox:
    return BoundingBox(id=shape_id, left=left, right=right, top=top, bottom=bottom)


def test_horizontal_distance_both_sides() -> None:
    a = _bounds("a", 0, 10, 0, 10)
    b = _bounds("b", 25, 35, 5, 20)
    d = calculate_horizontal_distance(a, b)
    assert d is not None
    assert (d.axis, d.from_pos, d.to_pos, d.distance) == ("x", 10, 25, 15)
    assert d.label_position == pytest.approx(7.5)
    d = calculate_horizontal_distance(b, a)
    assert d is not None
    assert (d.from_pos, d.to_pos, d.distance) == (10, 25, 15)


def test_vertical_distance() -> None:
    a = _bounds("a", 0, 10, 0, 10)
    b = _bounds("b", 4, 30, 18, 28)
    d = calculate_vertical_distance(a, b)
    assert d is not None
    assert (d.axis, d.from_pos, d.to_pos, d.distance) == ("y", 10, 18, 8)
    assert d.label_position == pytest.approx(7)


def test_no_shared_range_means_no_axis_distance() -> None:
    a = _bounds("a", 0, 10, 0, 10)
    b = _bounds("b", 20, 30, 100, 110)
    assert calculate_horizontal_distance(a, b) is None
    assert calculate_vertical_distance(a, b) is None


def test_touching_or_overlapping_boxes_have_no_gap() -> None:
    a = _bounds("a", 0, 10, 0, 10)
    assert calculate_horizontal_distance(a, _bounds("b", 10, 20, 0, 10)) is None
    assert calculate_horizontal_distance(a, _bounds("b", 5, 20, 0, 10)) is None
    assert calculate_vertical_distance(a, _bounds("b", 0, 10, 10, 20)) is None


@pytest.mark.parametrize(
    "a,b",
    [
        ((0, 0, 10, 0), (2, 3, 8, 3)),  # overlapping projections
        ((0, 0, 10, 0), (15, 4, 25, 4)),  # disjoint, offset
        ((0, 0, 10, 10), (3, 0, 13, 10)),  # diagonal parallel
        ((0, 0, 10, 0), (-20, -2, -5, -2)),  # disjoint on the other side
        ((0, 0, 10, 0), (10, 5, 0, 5)),  # reversed direction
    ],
)
def test_segment_to_segment_distance_matches_shapely(a: tuple, b: tuple) -> None:
    gap = segment_to_segment_distance(Point(a[0], a[1]), Point(a[2], a[3]), Point(b[0], b[1]), Point(b[2], b[3]))
    expected = LineString([a[:2], a[2:]]).distance(LineString([b[:2], b[2:]]))
    assert gap.distance == pytest.approx(expected)
    assert math.hypot(gap.end.x - gap.start.x, gap.end.y - gap.start.y) == pytest.approx(gap.distance)


def test_segment_to_segment_overlap_measured_at_overlap_midpoint() -> None:
    gap = segment_to_segment_distance(Point(0, 0), Point(10, 0), Point(4, 2), Point(20, 2))
    assert gap.distance == pytest.approx(2)
    assert gap.start.x == pytest.approx(7) and gap.start.y == pytest.approx(0)
    assert gap.end.x == pytest.approx(7) and gap.end.y == pytest.approx(2)


def test_segment_to_segment_disjoint_uses_closest_endpoints() -> None:
    gap = segment_to_segment_distance(Point(0, 0), Point(10, 0), Point(15, 4), Point(25, 4))
    assert (gap.start.x, gap.start.y) == pytest.approx((10, 0))
    assert (gap.end.x, gap.end.y) == pytest.approx((15, 4))
    assert gap.distance == pytest.approx(math.hypot(5, 4))
    # partial overlap past the end of a: midpoint of the clamped overlap
    gap = segment_to_segment_distance(Point(0, 0), Point(10, 0), Point(8, -3), Point(30, -3))
    assert (gap.start.x, gap.start.y) == pytest.approx((9, 0))
    assert (gap.end.x, gap.end.y) == pytest.approx((9, -3))


def test_segment_to_segment_degenerate_segments() -> None:
    p = Point(0, 0)
    gap = segment_to_segment_distance(p, p, Point(3, 4), Point(3, 4))
    assert gap.distance == pytest.approx(5)
    gap = segment_to_segment_distance(p, p, Point(-5, 2), Point(5, 2))
    assert gap.distance == pytest.approx(2)


def _tilted(shape_id: str, cx: float, cy: float, rotation: float = 30.0) -> BoundingBox:
    return box_from_rectangle(shape_id, cx - 20, cy - 10, 40, 20, rotation=rotation)


def _below(gap: float) -> tuple[float, float]:
    rad = math.radians(30)
    v = (-math.sin(rad), math.cos(rad))
    return (20 + v[0] * (20 + gap), 10 + v[1] * (20 + gap))


def test_closest_parallel_edges_rotated_stack() -> None:
    a = _tilted("a", 20, 10)
    b = _tilted("b", *_below(6.0))
    match = find_closest_parallel_edges(a, b)
    assert match is not None
    assert match.edge_a.edge_type == "bottom"
    assert match.edge_b.edge_type == "top"
    assert match.gap.distance == pytest.approx(6.0)


def test_closest_parallel_edges_requires_same_orientation() -> None:
    a = _tilted("a", 20, 10)
    b = _tilted("b", *_below(6.0), rotation=50)
    assert find_closest_parallel_edges(a, b) is None


def test_backs_of_shapes_are_ignored() -> None:
    # overlapping boxes: no edge pair faces each other from outside
    a = _tilted("a", 20, 10)
    b = _tilted("b", 21, 11)
    assert find_closest_parallel_edges(a, b) is None


def test_rotated_distance_indicator() -> None:
    a = _tilted("a", 20, 10)
    b = _tilted("b", *_below(6.0))
    d = calculate_rotated_distance(a, b)
    assert d is not None
    assert d.distance == pytest.approx(6.0)
    assert d.start_point is not None and d.end_point is not None
    # connecting segment runs along the box normal (-sin30, cos30), closer to y
    assert d.axis == "y"
    assert d.to_pos - d.from_pos == pytest.approx(6.0 * math.cos(math.radians(30)))


def test_neighbor_distances_cap_is_strict() -> None:
    a = _bounds("a", 0, 10, 0, 10)
    at_cap = _bounds("b", 10 + MAX_DISTANCE_DISPLAY, 20 + MAX_DISTANCE_DISPLAY, 0, 10)
    under = _bounds("c", 9 + MAX_DISTANCE_DISPLAY, 20 + MAX_DISTANCE_DISPLAY, 0, 10)
    assert neighbor_distances(a, at_cap) == []
    assert [d.distance for d in neighbor_distances(a, under)] == [pytest.approx(MAX_DISTANCE_DISPLAY - 1)]
    assert neighbor_distances(a, at_cap, max_distance=500) != []


def test_neighbor_distances_rotated_without_match_has_no_fallback() -> None:
    tilted = _tilted("a", 20, 10)
    flat = _bounds("b", 100, 110, 0, 20)
    assert neighbor_distances(tilted, flat) == []


def test_closest_per_axis() -> None:
    ds = [
        DistanceIndicator(axis="y", from_pos=0, to_pos=9, label_position=0, distance=9),
        DistanceIndicator(axis="x", from_pos=0, to_pos=7, label_position=0, distance=7),
        DistanceIndicator(axis="x", from_pos=0, to_pos=3, label_position=1, distance=3),
        DistanceIndicator(axis="x", from_pos=0, to_pos=3, label_position=2, distance=3),
    ]
    out = closest_per_axis(ds)
    assert [(d.axis, d.distance) for d in out] == [("x", 3), ("y", 9)]
    assert out[0].label_position == 1
    assert closest_per_axis([]) == []
