# smartguides/core/config.py
"""
Central configuration for the smart guide engine.
All tunable values live here; no magic numbers in other modules.
Units are field units (inches in the garden planner) unless the name says otherwise.
"""

from __future__ import annotations
import os

# ----- Angle matching -----
ANGLE_TOLERANCE_DEG: float = 1.0
"""Two orientations within this many degrees (mod 180) count as parallel."""

AXIS_ALIGNED_STEP_DEG: float = 90.0
"""Rotations that are multiples of this are handled by the axis-aligned detector only."""

# ----- Guides -----
DIAGONAL_GUIDE_EXTENSION: float = 24.0
"""Diagonal guides overshoot both matched edges by this much (2 ft)."""

# ----- Distances -----
MAX_DISTANCE_DISPLAY: float = 120.0
"""Neighbor distances must be strictly below this to be reported (10 ft)."""

# ----- Snap threshold -----
SNAP_THRESHOLD_PX: float = 8.0
"""Default screen-space snap threshold; divide by zoom to get field units."""

MIN_ZOOM: float = 1e-3
"""Zoom is clamped to this before dividing so a collapsed view cannot blow up the threshold."""

# ----- Grid snapping -----
SNAP_INCREMENTS: tuple[int, ...] = (0, 1, 12)
"""Allowed grid increments in inches: off, 1 inch, 1 foot."""

SNAP_LABELS: dict[int, str] = {0: "Off", 1: '1"', 12: "1'"}

INCHES_PER_FOOT: int = 12

# ----- Collision -----
OVERLAP_AREA_TOLERANCE: float = 1e-6
"""Intersection area (units²) above which two boxes are reported as overlapping."""

# ----- Debug flags -----
SMART_GUIDES_DEBUG: bool = os.environ.get("SMART_GUIDES_DEBUG", "").lower() in ("1", "true", "yes")
"""Enable engine debug output. Set env SMART_GUIDES_DEBUG=1 to enable."""
