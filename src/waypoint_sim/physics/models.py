"""Simulation state data models."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from waypoint_sim.reporting.models import RunReport
from waypoint_sim.telemetry.models import LegTelemetry


class SimulationPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class SimulationState:
    """Instantaneous vehicle state.  Mutated only by the integrator's ``tick``."""

    position_x: float = 0.0
    """X position (grid units)."""

    position_y: float = 0.0
    """Y position (grid units)."""

    heading_rad: float = 0.0
    """Direction of travel, ``atan2(dy, dx)``.  Unchanged while stationary."""

    speed_mps: float = 0.0
    """Current speed in m/s. Never negative."""

    cumulative_distance_m: float = 0.0
    """Odometer. Non-decreasing."""

    current_leg_index: int = 0
    """Index of the waypoint the vehicle last reached."""

    is_finished: bool = False

    def copy(self) -> SimulationState:
        return dataclasses.replace(self)


@dataclass(frozen=True)
class ForceBreakdown:
    """Forces acting on the vehicle during one tick (newtons, m/s²)."""

    engine: float
    friction: float
    air: float
    resistive: float
    net: float
    acceleration: float
    friction_coefficient: float
    """Coefficient actually applied (0 outside the friction zone)."""


@dataclass(frozen=True)
class TickResult:
    """Outcome of one ``tick``.

    ``leg`` is set when a waypoint was reached during the tick; ``report``
    is set on the single tick that finishes the run.
    """

    state: SimulationState
    leg: LegTelemetry | None = None
    report: RunReport | None = None


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view for renderers, taken between ticks."""

    phase: SimulationPhase
    state: SimulationState
    in_friction_zone: bool
    live_displacement_m: float
    target_distance_m: float
    forces: ForceBreakdown | None = None
