# smartguides/core/alignment.py
"""
Axis-aligned alignment: compare left/right/centerX (vertical guides) and
top/bottom/centerY (horizontal guides) of the dragged box against a target.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from smartguides.core.types import (
    AlignmentGuide,
    AlignmentMatch,
    AlignmentType,
    BoundingBox,
    RotatedAlignmentMatch,
)

Match = TypeVar("Match", AlignmentMatch, RotatedAlignmentMatch)


def _vertical_probes(box: BoundingBox) -> list[tuple[AlignmentType, float]]:
    return [("left", box.left), ("right", box.right), ("centerX", box.center_x)]


def _horizontal_probes(box: BoundingBox) -> list[tuple[AlignmentType, float]]:
    return [("top", box.top), ("bottom", box.bottom), ("centerY", box.center_y)]


def _match_probes(
    drag_probes: list[tuple[AlignmentType, float]],
    target_probes: list[tuple[AlignmentType, float]],
    threshold: float,
) -> list[AlignmentMatch]:
    matches: list[AlignmentMatch] = []
    for drag_type, drag_value in drag_probes:
        for _, target_value in target_probes:
            distance = abs(drag_value - target_value)
            if distance <= threshold:
                matches.append(AlignmentMatch(type=drag_type, target_value=target_value, distance=distance))
    return matches


def find_vertical_alignments(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
    threshold: float,
) -> list[AlignmentMatch]:
    """All left/right/centerX probe pairs within threshold, in probe order."""
    return _match_probes(_vertical_probes(dragging_box), _vertical_probes(target_box), threshold)


def find_horizontal_alignments(
    dragging_box: BoundingBox,
    target_box: BoundingBox,
    threshold: float,
) -> list[AlignmentMatch]:
    """All top/bottom/centerY probe pairs within threshold, in probe order."""
    return _match_probes(_horizontal_probes(dragging_box), _horizontal_probes(target_box), threshold)


def closest_match(
    best: Match | None,
    candidates: Iterable[Match],
) -> Match | None:
    """Running arg-min by distance; on exact ties the earlier match is kept."""
    for match in candidates:
        if best is None or match.distance < best.distance:
            best = match
    return best


def probe_value(box: BoundingBox, alignment_type: AlignmentType) -> float:
    if alignment_type == "left":
        return box.left
    if alignment_type == "right":
        return box.right
    if alignment_type == "centerX":
        return box.center_x
    if alignment_type == "top":
        return box.top
    if alignment_type == "bottom":
        return box.bottom
    return box.center_y


def snap_offset(dragging_box: BoundingBox, match: AlignmentMatch) -> float:
    """Shift along the match's axis that puts the dragged probe on the target value."""
    return match.target_value - probe_value(dragging_box, match.type)


def vertical_guide(match: AlignmentMatch) -> AlignmentGuide:
    return AlignmentGuide(type="vertical", position=match.target_value, alignment_type=match.type)


def horizontal_guide(match: AlignmentMatch) -> AlignmentGuide:
    return AlignmentGuide(type="horizontal", position=match.target_value, alignment_type=match.type)
