# smartguides/core/types.py
"""
Dataclasses for boxes, edges, guides, distance indicators and engine results.
Every value is immutable and built fresh per call; "moving" a box returns a new box.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Literal


AlignmentType = Literal["left", "right", "top", "bottom", "centerX", "centerY"]
GuideType = Literal["vertical", "horizontal"]
Axis = Literal["x", "y"]
EdgeType = Literal["top", "right", "bottom", "left"]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned extent of a shape plus an optional rotation about its center.
    rotation is in degrees, clockwise from North; 0 means axis-aligned.
    Centers are derived from the edges so they cannot drift out of sync.
    """
    id: str
    left: float
    right: float
    top: float
    bottom: float
    rotation: float = 0.0

    def __post_init__(self) -> None:
        values = (self.left, self.right, self.top, self.bottom, self.rotation)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Bounding box {self.id!r} has non-finite coordinates: {values}")
        if self.left > self.right or self.top > self.bottom:
            raise ValueError(
                f"Bounding box {self.id!r} is inverted: "
                f"left={self.left}, right={self.right}, top={self.top}, bottom={self.bottom}"
            )

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def translated(self, dx: float, dy: float) -> BoundingBox:
        """Same box moved by (dx, dy)."""
        return replace(
            self,
            left=self.left + dx,
            right=self.right + dx,
            top=self.top + dy,
            bottom=self.bottom + dy,
        )


@dataclass(frozen=True)
class RotatedEdge:
    """One side of a (possibly rotated) box. angle is normalized to [0, 180)."""
    id: str
    start: Point
    end: Point
    angle: float
    edge_type: EdgeType

    @property
    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)


@dataclass(frozen=True)
class AlignmentGuide:
    type: GuideType
    position: float
    alignment_type: AlignmentType


@dataclass(frozen=True)
class DiagonalGuide:
    start: Point
    end: Point
    angle: float


@dataclass(frozen=True)
class DistanceIndicator:
    """
    Gap between the dragged box and one neighbor.
    from_pos/to_pos are the gap bounds on the axis; for rotated gaps they are the
    projection of the connecting segment and start_point/end_point carry the real line.
    """
    axis: Axis
    from_pos: float
    to_pos: float
    label_position: float
    distance: float
    start_point: Point | None = None
    end_point: Point | None = None


@dataclass(frozen=True)
class AlignmentMatch:
    type: AlignmentType
    target_value: float
    distance: float


@dataclass(frozen=True)
class RotatedAlignmentMatch:
    dragging_edge: RotatedEdge
    target_edge: RotatedEdge
    distance: float
    offset: Point


@dataclass(frozen=True)
class SegmentGap:
    """Closest connection between two segments: its length and endpoints."""
    distance: float
    start: Point
    end: Point


@dataclass(frozen=True)
class ParallelEdgeMatch:
    """Closest pair of facing parallel edges between two boxes."""
    edge_a: RotatedEdge
    edge_b: RotatedEdge
    gap: SegmentGap


@dataclass(frozen=True)
class SmartGuideResult:
    """
    Engine output for one drag step. snapped_x/snapped_y are the top-left corner
    of the dragged box after correction.
    """
    snapped_x: float
    snapped_y: float
    guides: list[AlignmentGuide] = field(default_factory=list)
    diagonal_guides: list[DiagonalGuide] = field(default_factory=list)
    distances: list[DistanceIndicator] = field(default_factory=list)


@dataclass(frozen=True)
class SelectionDistanceResult:
    """Edge-to-edge measurement between two selected objects."""
    distance: float
    axis: Axis
    line_start: Point
    line_end: Point
    direction: Point
    angle: float | None = None
