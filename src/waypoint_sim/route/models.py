"""Waypoint graph data structures."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Waypoint:
    """A named point on the fixed route.

    Coordinates are in grid units; multiply by the scenario's
    ``grid_scale_m_per_unit`` to obtain metres.  ``+y`` points south
    (screen coordinates).
    """

    id: str
    """Unique key within a :class:`~waypoint_sim.route.graph.WaypointGraph`."""

    x: float
    """X coordinate (grid units)."""

    y: float
    """Y coordinate (grid units)."""

    is_finish_option: bool = False
    """True if the waypoint may be offered as a destination."""

    name: str = ""
    """Human-readable name.  Falls back to :attr:`id` via :attr:`display_name`."""

    @property
    def display_name(self) -> str:
        return self.name or self.id


def planar_distance(a: Waypoint, b: Waypoint) -> float:
    """Euclidean distance between two waypoints in grid units."""
    return math.hypot(b.x - a.x, b.y - a.y)


@dataclass(frozen=True)
class ActiveRoute:
    """Prefix of the waypoint sequence ending at the chosen destination.

    Index ``i`` in :attr:`waypoints` is also index ``i`` in the full graph,
    so friction-zone indices apply to either interchangeably.
    """

    waypoints: tuple[Waypoint, ...]

    def __post_init__(self) -> None:
        if not self.waypoints:
            raise ValueError("ActiveRoute requires at least one waypoint")

    def __len__(self) -> int:
        return len(self.waypoints)

    def __getitem__(self, index: int) -> Waypoint:
        return self.waypoints[index]

    @property
    def start(self) -> Waypoint:
        return self.waypoints[0]

    @property
    def destination(self) -> Waypoint:
        return self.waypoints[-1]

    @property
    def last_index(self) -> int:
        return len(self.waypoints) - 1

    @property
    def leg_count(self) -> int:
        return len(self.waypoints) - 1

    @property
    def is_degenerate(self) -> bool:
        """True for a single-waypoint route (zero legs)."""
        return len(self.waypoints) == 1

    def ids(self) -> list[str]:
        return [wp.id for wp in self.waypoints]

    def length_m(self, grid_scale: float) -> float:
        """Planned path length in metres (sum of all leg lengths)."""
        return sum(
            planar_distance(a, b) for a, b in zip(self.waypoints, self.waypoints[1:])
        ) * grid_scale

    def displacement_m(self, grid_scale: float) -> float:
        """Straight-line distance from start to destination in metres."""
        return planar_distance(self.start, self.destination) * grid_scale
