"""SimulationService — runs a scenario headlessly for the Web API."""

from __future__ import annotations

import os

from waypoint_sim.physics.integrator import MAX_DT, PathIntegrator
from waypoint_sim.physics.runner import run_headless
from waypoint_sim.reporting.models import RunReport
from waypoint_sim.route.defaults import DEFAULT_DESTINATION, default_graph
from waypoint_sim.route.graph import WaypointGraph
from waypoint_sim.scenario.config import InvalidConfiguration, ScenarioConfig
from waypoint_sim.web.schemas import SimulateRequest

_CONFIG_FIELDS = (
    "target_speed",
    "mass",
    "friction_coefficient",
    "friction_active",
    "air_resistance_force",
    "grid_scale_m_per_unit",
    "engine_gain",
)


def default_destination() -> str:
    return os.environ.get("WAYPOINT_SIM_DESTINATION", DEFAULT_DESTINATION)


def check_step(dt: float) -> float:
    """Return *dt* if it is a usable fixed step, i.e. within ``(0, MAX_DT]``.

    Larger steps would be clamped by the integrator while the run clock
    still advanced by the full step, inflating every reported time.
    """
    if not 0 < dt <= MAX_DT:
        raise InvalidConfiguration(f"dt must be in (0, {MAX_DT}], got {dt}")
    return dt


class SimulationService:
    """Build a scenario from a request and run it to completion.

    Parameters
    ----------
    graph:
        Waypoint graph to simulate on.  Defaults to the built-in layout.
    """

    def __init__(self, graph: WaypointGraph | None = None) -> None:
        self._graph = graph or default_graph()

    @property
    def graph(self) -> WaypointGraph:
        return self._graph

    def build_config(self, req: SimulateRequest) -> ScenarioConfig:
        """Merge request fields over the environment defaults and validate.

        Raises
        ------
        InvalidConfiguration
            For unknown waypoint ids or any violated config invariant.
        """
        overrides = {name: getattr(req, name) for name in _CONFIG_FIELDS}
        config = ScenarioConfig.from_env(**overrides)

        if req.friction_start is not None or req.friction_end is not None:
            start_id = req.friction_start or self._id_at(config.friction_range_start_index)
            end_id = req.friction_end or self._id_at(config.friction_range_end_index)
            config = config.with_friction_zone(self._graph.friction_zone(start_id, end_id))

        return config.validate()

    def run(self, req: SimulateRequest) -> RunReport:
        """Run the scenario described by *req* with a fixed step.

        Raises
        ------
        ValueError
            If the configuration is invalid or the run does not finish within
            ``req.max_ticks`` ticks.
        """
        check_step(req.dt)
        config = self.build_config(req)
        route = self._graph.active_route(req.destination or default_destination())

        integrator = PathIntegrator()
        integrator.configure(config, route)
        report = run_headless(integrator, dt=req.dt, max_ticks=req.max_ticks)
        if report is None:
            raise ValueError(
                f"Run did not reach {route.destination.id!r} within {req.max_ticks} ticks"
            )
        return report

    def _id_at(self, index: int) -> str:
        if not 0 <= index < len(self._graph):
            raise InvalidConfiguration(
                f"friction index {index} is outside the {len(self._graph)}-waypoint graph"
            )
        return self._graph[index].id
