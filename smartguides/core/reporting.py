# smartguides/core/reporting.py
"""
JSON-ready dicts for engine results, keyed the way the canvas renderer reads them
(camelCase, points as {"x", "y"}).
"""

from __future__ import annotations

from smartguides.core.types import (
    AlignmentGuide,
    DiagonalGuide,
    DistanceIndicator,
    Point,
    SelectionDistanceResult,
    SmartGuideResult,
)


def _point(p: Point) -> dict:
    return {"x": float(p.x), "y": float(p.y)}


def guide_to_dict(guide: AlignmentGuide) -> dict:
    return {"type": guide.type, "position": guide.position, "alignmentType": guide.alignment_type}


def diagonal_guide_to_dict(guide: DiagonalGuide) -> dict:
    return {"start": _point(guide.start), "end": _point(guide.end), "angle": guide.angle}


def distance_to_dict(indicator: DistanceIndicator) -> dict:
    """Optional endpoints are only emitted for rotated gaps."""
    out = {
        "axis": indicator.axis,
        "from": indicator.from_pos,
        "to": indicator.to_pos,
        "labelPosition": indicator.label_position,
        "distance": indicator.distance,
    }
    if indicator.start_point is not None:
        out["startPoint"] = _point(indicator.start_point)
    if indicator.end_point is not None:
        out["endPoint"] = _point(indicator.end_point)
    return out


def smart_guide_result_to_dict(result: SmartGuideResult) -> dict:
    return {
        "snappedX": result.snapped_x,
        "snappedY": result.snapped_y,
        "guides": [guide_to_dict(g) for g in result.guides],
        "diagonalGuides": [diagonal_guide_to_dict(g) for g in result.diagonal_guides],
        "distances": [distance_to_dict(d) for d in result.distances],
    }


def selection_distance_to_dict(result: SelectionDistanceResult | None) -> dict | None:
    if result is None:
        return None
    out = {
        "distance": result.distance,
        "axis": result.axis,
        "lineStart": _point(result.line_start),
        "lineEnd": _point(result.line_end),
        "direction": _point(result.direction),
    }
    if result.angle is not None:
        out["angle"] = result.angle
    return out
