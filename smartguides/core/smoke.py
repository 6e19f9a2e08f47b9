# smartguides/core/smoke.py
"""
Single entrypoint to exercise the engine end-to-end on a small demo garden:
a drag step with guides and distances, and a two-bed selection measurement.
Does not run on import.
"""

from __future__ import annotations

import json
import logging
import os

from smartguides.core.boxes import box_from_circle, box_from_plant, box_from_rectangle
from smartguides.core.collision import find_overlapping_boxes
from smartguides.core.config import SNAP_THRESHOLD_PX
from smartguides.core.guides import calculate_selection_distance, calculate_smart_guides
from smartguides.core.reporting import selection_distance_to_dict, smart_guide_result_to_dict
from smartguides.core.units import format_distance, threshold_units

logger = logging.getLogger(__name__)


def main() -> None:
    """Run one drag step and one selection measurement; log the results as JSON."""
    _log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

    bed_a = box_from_rectangle("bed-a", 0.0, 0.0, 48.0, 96.0)
    bed_b = box_from_rectangle("bed-b", 72.0, 2.0, 48.0, 96.0)
    tilted = box_from_rectangle("bed-c", 0.0, 160.0, 96.0, 36.0, rotation=30.0)
    plant = box_from_plant("tomato-1", 12.0, 12.0, 18.0, bed_a)
    marker = box_from_circle("marker", 200.0, 40.0, 6.0)
    boxes = [bed_a, bed_b, tilted, plant, marker]

    overlaps = find_overlapping_boxes(boxes)
    if overlaps:
        logger.info(f"Overlapping shapes: {overlaps}")

    # bed-b mid-drag, slightly off the spot where its top lines up with bed-a
    proposed = box_from_rectangle("bed-b", 69.5, 3.0, 48.0, 96.0)
    threshold = threshold_units(SNAP_THRESHOLD_PX, zoom=2.0)
    result = calculate_smart_guides(proposed, boxes, threshold)
    logger.info(f"Drag result: {json.dumps(smart_guide_result_to_dict(result), indent=2)}")
    for d in result.distances:
        logger.info(f"Distance on {d.axis}: {format_distance(d.distance)}")

    selection = calculate_selection_distance(bed_a, bed_b)
    logger.info(f"Selection distance: {json.dumps(selection_distance_to_dict(selection), indent=2)}")


if __name__ == "__main__":
    main()
