"""LegTelemetryCollector — records one LegTelemetry per waypoint arrival."""

from __future__ import annotations

import logging

from waypoint_sim.route.models import Waypoint, planar_distance
from waypoint_sim.telemetry.models import LegTelemetry, compass_direction

_logger = logging.getLogger(__name__)

MIN_LEG_DURATION_S = 0.001


class LegTelemetryCollector:
    """Append-only log of completed legs.

    Args:
        grid_scale: Metres per grid unit used to convert leg lengths.
    """

    def __init__(self, grid_scale: float) -> None:
        self._grid_scale = grid_scale
        self._legs: list[LegTelemetry] = []
        self._last_boundary: float = 0.0

    def begin(self, now: float) -> None:
        """Clear recorded legs and start timing the first leg at *now*."""
        self._legs.clear()
        self._last_boundary = now

    def clear(self) -> None:
        self._legs.clear()
        self._last_boundary = 0.0

    def record(self, origin: Waypoint, target: Waypoint, now: float) -> LegTelemetry:
        """Append and return telemetry for the leg *origin* → *target* ending at *now*."""
        duration = max(MIN_LEG_DURATION_S, now - self._last_boundary)
        self._last_boundary = now

        distance = planar_distance(origin, target) * self._grid_scale
        speed = distance / duration
        direction = compass_direction(target.x - origin.x, target.y - origin.y)

        leg = LegTelemetry(
            from_id=origin.id,
            to_id=target.id,
            distance_m=distance,
            duration_s=duration,
            average_speed_mps=speed,
            direction=direction,
            label=f"{speed:.1f} m/s {direction.value}",
        )
        self._legs.append(leg)
        _logger.debug(
            "Leg %s→%s: %.1fm in %.3fs (%s)",
            leg.from_id, leg.to_id, leg.distance_m, leg.duration_s, leg.label,
        )
        return leg

    @property
    def legs(self) -> tuple[LegTelemetry, ...]:
        return tuple(self._legs)

    def __len__(self) -> int:
        return len(self._legs)
