"""Built-in ten-waypoint snake layout.

::

    A ──────► B
              │
    E ◄── D ◄─C
    │
    F ──► G ──► H
                │
          J ◄── I

One grid square is ``DEFAULT_GRID_SCALE`` metres by default.
"""

from __future__ import annotations

from waypoint_sim.route.graph import WaypointGraph
from waypoint_sim.route.models import Waypoint

DEFAULT_DESTINATION = "J"

DEFAULT_WAYPOINTS: tuple[Waypoint, ...] = (
    Waypoint("A", 12, 3, name="House"),
    Waypoint("B", 21, 3, is_finish_option=True, name="Corner B"),
    Waypoint("C", 21, 7, is_finish_option=True, name="Hospital"),
    Waypoint("D", 12, 7, is_finish_option=True, name="School"),
    Waypoint("E", 3, 7, is_finish_option=True, name="Corner E"),
    Waypoint("F", 3, 11, is_finish_option=True, name="Tower"),
    Waypoint("G", 12, 11, is_finish_option=True, name="Farm"),
    Waypoint("H", 21, 11, is_finish_option=True, name="Corner H"),
    Waypoint("I", 21, 15, is_finish_option=True, name="Shop"),
    Waypoint("J", 12, 15, is_finish_option=True, name="Finish Line"),
)


def default_graph() -> WaypointGraph:
    """Return a :class:`WaypointGraph` over :data:`DEFAULT_WAYPOINTS`."""
    return WaypointGraph(DEFAULT_WAYPOINTS)
