"""Kinematic path-following integrator.

Public API
----------
PathIntegrator     - configure/start/tick/reset state machine
SimulationState    - instantaneous vehicle state
SimulationPhase    - IDLE / RUNNING / FINISHED
SimulationSnapshot - read-only view for renderers
TickResult         - outcome of a single tick
compute_forces     - engine/friction/air force model
FixedRateRunner    - wall-clock scheduler
run_headless       - fixed-step scheduler
"""

from waypoint_sim.physics.forces import compute_forces
from waypoint_sim.physics.integrator import MAX_DT, PathIntegrator
from waypoint_sim.physics.models import (
    ForceBreakdown,
    SimulationPhase,
    SimulationSnapshot,
    SimulationState,
    TickResult,
)
from waypoint_sim.physics.runner import FixedRateRunner, run_headless

__all__ = [
    "MAX_DT",
    "FixedRateRunner",
    "ForceBreakdown",
    "PathIntegrator",
    "SimulationPhase",
    "SimulationSnapshot",
    "SimulationState",
    "TickResult",
    "compute_forces",
    "run_headless",
]
