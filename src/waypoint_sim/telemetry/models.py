"""Per-leg telemetry data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CompassDirection(str, Enum):
    """Cardinal direction of an axis-aligned leg (screen coordinates, +y = South)."""

    EAST = "East"
    WEST = "West"
    NORTH = "North"
    SOUTH = "South"
    STATIONARY = "Stationary"


def compass_direction(dx: float, dy: float) -> CompassDirection:
    """Classify a coordinate delta.

    The x component dominates: any horizontal movement is East/West even if
    the leg also moves vertically.
    """
    if dx > 0:
        return CompassDirection.EAST
    if dx < 0:
        return CompassDirection.WEST
    if dy > 0:
        return CompassDirection.SOUTH
    if dy < 0:
        return CompassDirection.NORTH
    return CompassDirection.STATIONARY


@dataclass(frozen=True)
class LegTelemetry:
    """Measurements for one completed leg between consecutive waypoints."""

    from_id: str
    to_id: str

    distance_m: float
    """Straight-line leg length in metres."""

    duration_s: float
    """Time since the previous boundary crossing (or run start). Floored at 1 ms."""

    average_speed_mps: float
    """``distance_m / duration_s``."""

    direction: CompassDirection

    label: str
    """Human-readable velocity, e.g. ``'10.0 m/s East'``."""
