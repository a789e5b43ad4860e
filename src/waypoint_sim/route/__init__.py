"""Waypoint graph and active-route selection."""

from waypoint_sim.route.defaults import DEFAULT_DESTINATION, DEFAULT_WAYPOINTS, default_graph
from waypoint_sim.route.graph import WaypointGraph
from waypoint_sim.route.models import ActiveRoute, Waypoint, planar_distance

__all__ = [
    "DEFAULT_DESTINATION",
    "DEFAULT_WAYPOINTS",
    "ActiveRoute",
    "Waypoint",
    "WaypointGraph",
    "default_graph",
    "planar_distance",
]
