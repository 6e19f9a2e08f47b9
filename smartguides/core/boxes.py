# smartguides/core/boxes.py
"""
Build bounding boxes from rectangles (beds, fences), circles (plants) and
bed-local plant positions. Non-positive sizes are caller errors and raise ValueError.
"""

from __future__ import annotations

from smartguides.core.types import BoundingBox


def _require_positive(name: str, value: float, shape_id: str) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be > 0 for {shape_id!r}, got {value}")


def box_from_rectangle(
    shape_id: str,
    x: float,
    y: float,
    width: float,
    height: float,
    rotation: float = 0.0,
) -> BoundingBox:
    """Box with top-left (x, y); rotation turns it about its center."""
    _require_positive("width", width, shape_id)
    _require_positive("height", height, shape_id)
    return BoundingBox(
        id=shape_id,
        left=x,
        right=x + width,
        top=y,
        bottom=y + height,
        rotation=rotation,
    )


def box_from_circle(shape_id: str, center_x: float, center_y: float, radius: float) -> BoundingBox:
    """Square box around a circle. Circles have no orientation, so rotation stays 0."""
    _require_positive("radius", radius, shape_id)
    return BoundingBox(
        id=shape_id,
        left=center_x - radius,
        right=center_x + radius,
        top=center_y - radius,
        bottom=center_y + radius,
    )


def box_from_plant(
    shape_id: str,
    local_x: float,
    local_y: float,
    spacing: float,
    bed: BoundingBox,
) -> BoundingBox:
    """
    Plant positions are stored relative to their bed's top-left corner;
    the plant occupies a circle of diameter `spacing`.
    """
    _require_positive("spacing", spacing, shape_id)
    return box_from_circle(shape_id, bed.left + local_x, bed.top + local_y, spacing / 2.0)
