# smartguides/core/units.py
"""
Snap threshold conversion, grid snapping and distance labels.
Field units are inches; bed dimensions are often given in feet.
"""

from __future__ import annotations

import math

from smartguides.core.config import (
    INCHES_PER_FOOT,
    MIN_ZOOM,
    SNAP_INCREMENTS,
    SNAP_LABELS,
    SNAP_THRESHOLD_PX,
)


def _round_half_up(value: float) -> int:
    """Halves round up (2.5 -> 3), unlike round()."""
    return math.floor(value + 0.5)


def threshold_units(threshold_px: float = SNAP_THRESHOLD_PX, zoom: float = 1.0) -> float:
    """Screen-space snap threshold in field units: a fixed pixel distance shrinks as the view zooms in."""
    return threshold_px / max(zoom, MIN_ZOOM)


def _check_increment(increment: int) -> None:
    if increment not in SNAP_INCREMENTS:
        raise ValueError(f"Unsupported snap increment {increment!r}; expected one of {SNAP_INCREMENTS}")


def snap_to_grid(value: float, increment: int) -> float:
    """Round value to the nearest multiple of increment; 0 turns snapping off."""
    _check_increment(increment)
    if increment == 0:
        return value
    return _round_half_up(value / increment) * increment


def snap_position_to_grid(x: float, y: float, increment: int) -> tuple[float, float]:
    return (snap_to_grid(x, increment), snap_to_grid(y, increment))


def snap_feet_to_grid(feet: float, increment_inches: int) -> float:
    """Snap a length in feet using an inch increment."""
    _check_increment(increment_inches)
    if increment_inches == 0:
        return feet
    return snap_to_grid(feet * INCHES_PER_FOOT, increment_inches) / INCHES_PER_FOOT


def snap_label(increment: int) -> str:
    _check_increment(increment)
    return SNAP_LABELS[increment]


def format_distance(inches: float) -> str:
    """Readable distance: 7", 3', or 3' 4"."""
    if inches >= INCHES_PER_FOOT:
        feet = int(inches // INCHES_PER_FOOT)
        remaining = _round_half_up(inches % INCHES_PER_FOOT)
        if remaining == INCHES_PER_FOOT:
            feet += 1
            remaining = 0
        if remaining == 0:
            return f"{feet}'"
        return f"{feet}' {remaining}\""
    return f"{_round_half_up(inches)}\""
