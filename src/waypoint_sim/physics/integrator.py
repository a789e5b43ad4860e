"""PathIntegrator — per-tick physics update and waypoint state machine.

States::

    IDLE --start()--> RUNNING --tick() at last waypoint--> FINISHED
      ^                                                       |
      +------------------------ reset() ----------------------+

Each integrator owns its state exclusively; run several for independent
simulations.  Ticks are driven by an external scheduler (see
:mod:`waypoint_sim.physics.runner`) and must not overlap with ``reset()``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from waypoint_sim.physics.forces import compute_forces
from waypoint_sim.physics.models import (
    ForceBreakdown,
    SimulationPhase,
    SimulationSnapshot,
    SimulationState,
    TickResult,
)
from waypoint_sim.reporting.aggregator import RunAggregator
from waypoint_sim.reporting.models import RunReport
from waypoint_sim.route.models import ActiveRoute
from waypoint_sim.scenario.config import InvalidConfiguration, ScenarioConfig
from waypoint_sim.telemetry.collector import LegTelemetryCollector
from waypoint_sim.telemetry.models import LegTelemetry

_logger = logging.getLogger(__name__)

MAX_DT = 0.1
"""Largest step (s) a single tick integrates, regardless of frame hitches."""


class PathIntegrator:
    """Advances a vehicle along an :class:`ActiveRoute`.

    Parameters
    ----------
    clock:
        Optional ``() -> seconds`` used to time legs and the run, e.g.
        ``time.monotonic``.  By default the integrator uses its own run
        clock: the sum of every ``dt`` passed to :meth:`tick` (before
        clamping), which equals wall time when the caller passes wall-clock
        deltas and stays deterministic under test.
    aggregator:
        Builds the :class:`RunReport`; defaults to :class:`RunAggregator`.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        aggregator: RunAggregator | None = None,
    ) -> None:
        self._clock = clock
        self._aggregator = aggregator or RunAggregator()
        self._config: ScenarioConfig | None = None
        self._route: ActiveRoute | None = None
        self._collector: LegTelemetryCollector | None = None
        self._phase = SimulationPhase.IDLE
        self._state = SimulationState()
        self._report: RunReport | None = None
        self._forces: ForceBreakdown | None = None
        self._run_time = 0.0
        self._start_time = 0.0

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def configure(self, config: ScenarioConfig, route: ActiveRoute) -> None:
        """Validate and store *config* and *route*, then :meth:`reset`.

        Raises:
            InvalidConfiguration: If *config* violates an invariant.
        """
        config.validate()
        self._config = config
        self._route = route
        self._collector = LegTelemetryCollector(config.grid_scale_m_per_unit)
        self.reset()

    def start(self) -> TickResult:
        """Begin a run at the first waypoint.  No-op unless IDLE.

        A single-waypoint route finishes immediately with a zero report.

        Raises:
            InvalidConfiguration: If :meth:`configure` has not been called.
        """
        if self._config is None or self._route is None or self._collector is None:
            raise InvalidConfiguration("configure() must be called before start()")
        if self._phase is not SimulationPhase.IDLE:
            return TickResult(state=self._state.copy())

        self._reset_state()
        self._start_time = self._now()
        self._collector.begin(self._start_time)
        self._phase = SimulationPhase.RUNNING
        _logger.info(
            "Run started: %s (%d legs, %.0fm planned)",
            " → ".join(self._route.ids()),
            self._route.leg_count,
            self.target_distance_m,
        )

        if self._route.is_degenerate:
            return TickResult(state=self._state.copy(), report=self._finish(elapsed_s=0.0))
        return TickResult(state=self._state.copy())

    def tick(self, dt: float) -> TickResult:
        """Advance the simulation by *dt* seconds (clamped to ``[0, MAX_DT]``).

        No-op unless RUNNING, and for a zero (or negative) *dt*, even on a
        zero-length leg or at the destination.
        """
        if self._phase is not SimulationPhase.RUNNING:
            return TickResult(state=self._state.copy())

        dt = max(0.0, dt)
        self._run_time += dt
        dt = min(dt, MAX_DT)
        if dt == 0.0:
            return TickResult(state=self._state.copy())

        config, route, state = self._config, self._route, self._state

        forces = compute_forces(config, state.speed_mps, state.current_leg_index)
        self._forces = forces
        state.speed_mps = max(0.0, state.speed_mps + forces.acceleration * dt)

        index = state.current_leg_index
        if index >= route.last_index:
            report = self._finish(elapsed_s=self._now() - self._start_time)
            return TickResult(state=state.copy(), report=report)

        target = route[index + 1]
        dx = target.x - state.position_x
        dy = target.y - state.position_y
        dist_grid = math.hypot(dx, dy)
        step_m = state.speed_mps * dt
        step_grid = step_m / config.grid_scale_m_per_unit

        if dx != 0 or dy != 0:
            state.heading_rad = math.atan2(dy, dx)

        state.cumulative_distance_m += step_m

        leg: LegTelemetry | None = None
        if step_grid >= dist_grid:
            # Snap to the waypoint; the remainder of the step is discarded.
            state.position_x = target.x
            state.position_y = target.y
            leg = self._collector.record(route[index], target, self._now())
            state.current_leg_index += 1
        else:
            ratio = step_grid / dist_grid
            state.position_x += dx * ratio
            state.position_y += dy * ratio

        return TickResult(state=state.copy(), leg=leg)

    def reset(self) -> None:
        """Return to IDLE with the vehicle parked at the first waypoint."""
        self._phase = SimulationPhase.IDLE
        self._report = None
        self._forces = None
        self._run_time = 0.0
        self._start_time = 0.0
        if self._collector is not None:
            self._collector.clear()
        self._reset_state()

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> SimulationPhase:
        return self._phase

    @property
    def config(self) -> ScenarioConfig | None:
        return self._config

    @property
    def route(self) -> ActiveRoute | None:
        return self._route

    @property
    def state(self) -> SimulationState:
        """Copy of the current state."""
        return self._state.copy()

    @property
    def legs(self) -> tuple[LegTelemetry, ...]:
        return self._collector.legs if self._collector is not None else ()

    @property
    def report(self) -> RunReport | None:
        """The run report once FINISHED, else ``None``."""
        return self._report

    @property
    def forces(self) -> ForceBreakdown | None:
        """Forces computed on the most recent tick."""
        return self._forces

    @property
    def in_friction_zone(self) -> bool:
        if self._config is None:
            return False
        return self._config.friction_coefficient_at(self._state.current_leg_index) > 0

    @property
    def live_displacement_m(self) -> float:
        """Straight-line distance from the first waypoint to the vehicle."""
        if self._route is None or self._config is None:
            return 0.0
        start = self._route.start
        return math.hypot(
            self._state.position_x - start.x, self._state.position_y - start.y
        ) * self._config.grid_scale_m_per_unit

    @property
    def target_distance_m(self) -> float:
        """Planned path length of the active route."""
        if self._route is None or self._config is None:
            return 0.0
        return self._route.length_m(self._config.grid_scale_m_per_unit)

    def snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            phase=self._phase,
            state=self._state.copy(),
            in_friction_zone=self.in_friction_zone,
            live_displacement_m=self.live_displacement_m,
            target_distance_m=self.target_distance_m,
            forces=self._forces,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _now(self) -> float:
        return self._clock() if self._clock is not None else self._run_time

    def _reset_state(self) -> None:
        if self._route is not None:
            start = self._route.start
            self._state = SimulationState(position_x=start.x, position_y=start.y)
        else:
            self._state = SimulationState()

    def _finish(self, elapsed_s: float) -> RunReport:
        self._state.is_finished = True
        self._phase = SimulationPhase.FINISHED
        self._report = self._aggregator.aggregate(
            route=self._route,
            grid_scale=self._config.grid_scale_m_per_unit,
            elapsed_s=elapsed_s,
            total_distance_m=self._state.cumulative_distance_m,
            legs=self._collector.legs,
        )
        _logger.info(
            "Run finished at %s: %.1fm in %.2fs (avg %.2f m/s)",
            self._report.destination_name,
            self._report.total_distance_m,
            self._report.elapsed_s,
            self._report.average_speed,
        )
        return self._report
