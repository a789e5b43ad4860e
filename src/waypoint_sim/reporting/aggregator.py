"""Run result aggregation."""

from __future__ import annotations

from collections.abc import Sequence

from waypoint_sim.reporting.models import RunReport
from waypoint_sim.route.models import ActiveRoute
from waypoint_sim.telemetry.models import LegTelemetry


def leg_breakdown(route: ActiveRoute, grid_scale: float) -> str:
    """Return ``'A→B + B→C = 20m'`` for *route*.

    The total is the planned path length.  A single-waypoint route yields
    ``'= 0m'``.
    """
    parts = [f"{a.id}→{b.id}" for a, b in zip(route.waypoints, route.waypoints[1:])]
    return f"{' + '.join(parts)} = {route.length_m(grid_scale):.0f}m".lstrip()


class RunAggregator:
    """Combine odometer, timing and leg telemetry into a :class:`RunReport`."""

    def aggregate(
        self,
        route: ActiveRoute,
        grid_scale: float,
        elapsed_s: float,
        total_distance_m: float,
        legs: Sequence[LegTelemetry] = (),
    ) -> RunReport:
        """Build the final report.

        Displacement is measured between the route's first waypoint and its
        destination, not the vehicle's current position.  A non-positive
        *elapsed_s* (the zero-leg case) yields zero averages.
        """
        displacement = route.displacement_m(grid_scale)
        if elapsed_s > 0:
            average_speed = total_distance_m / elapsed_s
            average_velocity = displacement / elapsed_s
        else:
            elapsed_s = 0.0
            average_speed = average_velocity = 0.0

        return RunReport(
            elapsed_s=elapsed_s,
            total_distance_m=total_distance_m,
            displacement_m=displacement,
            destination_name=route.destination.display_name,
            average_speed=average_speed,
            average_velocity=average_velocity,
            leg_breakdown_text=leg_breakdown(route, grid_scale),
            legs=tuple(legs),
        )
