# smartguides/core/collision.py
"""
Spacing conflicts between plants (circles) and overlap between beds (rotated boxes).
Independent of snapping; used to flag placements the guides cannot prevent.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartguides.core.config import OVERLAP_AREA_TOLERANCE
from smartguides.core.geometry import box_polygon
from smartguides.core.types import BoundingBox


@dataclass(frozen=True)
class PlantPosition:
    """Absolute field position of a plant and half its spacing."""
    id: str
    x: float
    y: float
    radius: float


def _too_close(a: PlantPosition, b: PlantPosition) -> bool:
    dx = a.x - b.x
    dy = a.y - b.y
    combined = a.radius + b.radius
    return dx * dx + dy * dy < combined * combined


def detect_spacing_conflicts(plants: list[PlantPosition]) -> dict[str, list[str]]:
    """
    Map plant id -> ids of plants inside its spacing circle.
    Pairwise O(n²); fine for the plant counts of one garden.
    """
    conflicts: dict[str, list[str]] = {}
    for i, p1 in enumerate(plants):
        for p2 in plants[i + 1:]:
            if _too_close(p1, p2):
                conflicts.setdefault(p1.id, []).append(p2.id)
                conflicts.setdefault(p2.id, []).append(p1.id)
    return conflicts


def would_conflict(plant: PlantPosition, existing: list[PlantPosition]) -> bool:
    """True if plant would violate spacing with any other existing plant."""
    return any(_too_close(plant, other) for other in existing if other.id != plant.id)


def boxes_overlap(a: BoundingBox, b: BoundingBox, tolerance: float = OVERLAP_AREA_TOLERANCE) -> bool:
    """True if the rotated footprints share more than `tolerance` area; touching edges do not count."""
    inter = box_polygon(a).intersection(box_polygon(b))
    return not inter.is_empty and inter.area > tolerance


def find_overlapping_boxes(boxes: list[BoundingBox]) -> list[tuple[str, str]]:
    """Id pairs of overlapping boxes, in input order."""
    polys = [box_polygon(b) for b in boxes]
    out: list[tuple[str, str]] = []
    for i, a in enumerate(boxes):
        for j in range(i + 1, len(boxes)):
            inter = polys[i].intersection(polys[j])
            if not inter.is_empty and inter.area > OVERLAP_AREA_TOLERANCE:
                out.append((a.id, boxes[j].id))
    return out
