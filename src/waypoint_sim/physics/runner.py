"""Schedulers that drive a PathIntegrator's ``tick``."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from waypoint_sim.physics.integrator import PathIntegrator
from waypoint_sim.physics.models import SimulationPhase, SimulationSnapshot
from waypoint_sim.reporting.models import RunReport

_logger = logging.getLogger(__name__)


def run_headless(
    integrator: PathIntegrator,
    dt: float = 1.0 / 60.0,
    max_ticks: int = 1_000_000,
) -> RunReport | None:
    """Start *integrator* and tick it with a fixed *dt* until it finishes.

    Returns the :class:`RunReport`, or ``None`` if *max_ticks* ran out first
    (e.g. a target speed of 0 or friction the engine cannot overcome).
    """
    integrator.start()
    ticks = 0
    while integrator.phase is SimulationPhase.RUNNING and ticks < max_ticks:
        integrator.tick(dt)
        ticks += 1
    if integrator.report is None:
        _logger.warning("Run did not finish within %d ticks of %.4fs", max_ticks, dt)
    return integrator.report


class FixedRateRunner:
    """Ticks an integrator at *target_hz* using wall-clock deltas.

    After every tick the optional *on_tick* callback receives a
    :class:`SimulationSnapshot` (the read path for renderers).

    Parameters
    ----------
    integrator:
        A configured :class:`PathIntegrator`.
    target_hz:
        Tick frequency in Hz.
    on_tick:
        ``(SimulationSnapshot) -> None`` called between ticks.
    clock, sleep:
        Injected for testing; default to :func:`time.monotonic` and
        :func:`time.sleep`.
    """

    def __init__(
        self,
        integrator: PathIntegrator,
        target_hz: float = 60.0,
        on_tick: Callable[[SimulationSnapshot], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._integrator = integrator
        self._interval = 1.0 / target_hz
        self._on_tick = on_tick
        self._clock = clock
        self._sleep = sleep

    def run(self, timeout_s: float | None = None) -> RunReport | None:
        """Start the run and block until it finishes or *timeout_s* elapses."""
        self._integrator.start()
        started = last = self._clock()

        while self._integrator.phase is SimulationPhase.RUNNING:
            t0 = self._clock()
            self._integrator.tick(t0 - last)
            last = t0
            if self._on_tick is not None:
                self._on_tick(self._integrator.snapshot())

            if timeout_s is not None and t0 - started >= timeout_s:
                _logger.warning("Run timed out after %.1fs", t0 - started)
                break

            wait = self._interval - (self._clock() - t0)
            if wait > 0:
                self._sleep(wait)

        return self._integrator.report
