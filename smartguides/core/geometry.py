# smartguides/core/geometry.py
"""
Geometry helpers: point rotation, angle normalization and matching, rotated
corners/edges of a box, point-to-line distance, box as polygon.
Screen convention: x grows right, y grows down, positive angles turn clockwise.
"""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import Polygon

from smartguides.core.config import ANGLE_TOLERANCE_DEG, AXIS_ALIGNED_STEP_DEG
from smartguides.core.types import BoundingBox, EdgeType, Point, RotatedEdge

EDGE_TYPES: tuple[EdgeType, ...] = ("top", "right", "bottom", "left")


def rotate_point(point: Point, center: Point, degrees: float) -> Point:
    """Rotate point about center by degrees (clockwise on screen)."""
    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos_a - dy * sin_a, center.y + dx * sin_a + dy * cos_a)


def normalize_angle(degrees: float) -> float:
    """Angle in [0, 180); a line and its 180° turn are the same orientation."""
    return ((degrees % 180.0) + 180.0) % 180.0


def angles_match(a: float, b: float, tolerance: float = ANGLE_TOLERANCE_DEG) -> bool:
    """True if the two orientations are within tolerance, including across the 0/180 wrap."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return diff <= tolerance or diff >= 180.0 - tolerance


def is_axis_aligned(rotation: float) -> bool:
    return rotation % AXIS_ALIGNED_STEP_DEG == 0


def rotated_corners(box: BoundingBox) -> list[Point]:
    """
    Corners of the box after rotating about its center.
    Order is always top-left, top-right, bottom-right, bottom-left (clockwise).
    """
    if box.rotation == 0:
        return [
            Point(box.left, box.top),
            Point(box.right, box.top),
            Point(box.right, box.bottom),
            Point(box.left, box.bottom),
        ]
    hw = box.width / 2.0
    hh = box.height / 2.0
    rad = math.radians(box.rotation)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    rot = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    local = np.array([[-hw, -hh], [hw, -hh], [hw, hh], [-hw, hh]])
    xy = local @ rot.T + np.array([box.center_x, box.center_y])
    return [Point(float(x), float(y)) for x, y in xy]


def rotated_edges(box: BoundingBox) -> list[RotatedEdge]:
    """
    The four edges from consecutive corners: top, right, bottom, left.
    Top/bottom share one orientation, left/right the other.
    """
    corners = rotated_corners(box)
    return [
        RotatedEdge(
            id=box.id,
            start=corners[i],
            end=corners[(i + 1) % 4],
            angle=normalize_angle(box.rotation + 90.0 * i),
            edge_type=EDGE_TYPES[i],
        )
        for i in range(4)
    ]


def point_to_line_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Perpendicular distance to the infinite line; plain point distance if the line has no length."""
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return math.hypot(point.x - line_start.x, point.y - line_start.y)
    return abs(dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x) / length


def unit_direction(start: Point, end: Point) -> Point | None:
    """Unit vector from start to end, or None for a zero-length segment."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    return Point(dx / length, dy / length)


def outward_normal(edge: RotatedEdge) -> Point | None:
    """
    Unit normal pointing away from the box. Corners run clockwise on screen,
    so (dy, -dx) of each edge direction faces outward.
    """
    d = unit_direction(edge.start, edge.end)
    if d is None:
        return None
    return Point(d.y, -d.x)


def box_polygon(box: BoundingBox) -> Polygon:
    """Rotated box as a shapely polygon."""
    return Polygon([(p.x, p.y) for p in rotated_corners(box)])
