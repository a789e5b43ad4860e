"""WaypointGraph — the static, ordered route topology."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from waypoint_sim.route.models import ActiveRoute, Waypoint
from waypoint_sim.scenario.config import FrictionZone, InvalidConfiguration


class WaypointGraph:
    """Ordered, immutable sequence of uniquely-identified waypoints.

    The graph is a simple path: index order is route order.  Routes are
    always a prefix starting at index 0.

    Args:
        waypoints: Waypoints in route order.

    Raises:
        InvalidConfiguration: If *waypoints* is empty or contains duplicate ids.
    """

    def __init__(self, waypoints: Iterable[Waypoint]) -> None:
        self._waypoints: tuple[Waypoint, ...] = tuple(waypoints)
        if not self._waypoints:
            raise InvalidConfiguration("waypoint graph must contain at least one waypoint")
        self._index: dict[str, int] = {}
        for i, wp in enumerate(self._waypoints):
            if wp.id in self._index:
                raise InvalidConfiguration(f"duplicate waypoint id {wp.id!r}")
            self._index[wp.id] = i

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self._waypoints)

    def __getitem__(self, index: int) -> Waypoint:
        return self._waypoints[index]

    def __contains__(self, waypoint_id: object) -> bool:
        return waypoint_id in self._index

    def index_of(self, waypoint_id: str) -> int:
        """Return the route index of *waypoint_id*.

        Raises:
            InvalidConfiguration: If the id is unknown.
        """
        try:
            return self._index[waypoint_id]
        except KeyError:
            raise InvalidConfiguration(f"unknown waypoint {waypoint_id!r}") from None

    def get(self, waypoint_id: str) -> Waypoint:
        return self._waypoints[self.index_of(waypoint_id)]

    def finish_options(self) -> list[Waypoint]:
        """Waypoints that may be offered as destinations."""
        return [wp for wp in self._waypoints if wp.is_finish_option]

    def active_route(self, destination_id: str) -> ActiveRoute:
        """Return the prefix of the graph up to and including *destination_id*."""
        end = self.index_of(destination_id)
        return ActiveRoute(self._waypoints[: end + 1])

    def friction_zone(self, start_id: str, end_id: str) -> FrictionZone:
        """Resolve a friction zone given by waypoint ids into graph indices.

        The zone covers legs ``start_index`` (inclusive) to ``end_index``
        (exclusive), so ``friction_zone("B", "D")`` covers legs B→C and C→D.

        Raises:
            InvalidConfiguration: If either id is unknown or *end_id* does not
                come after *start_id*.
        """
        start = self.index_of(start_id)
        end = self.index_of(end_id)
        if end <= start:
            raise InvalidConfiguration(
                f"friction zone end {end_id!r} must come after start {start_id!r}"
            )
        return FrictionZone(start_index=start, end_index=end)
