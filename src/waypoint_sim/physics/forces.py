"""Longitudinal force model."""

from __future__ import annotations

from waypoint_sim.physics.models import ForceBreakdown
from waypoint_sim.scenario.config import GRAVITY, ScenarioConfig


def compute_forces(config: ScenarioConfig, speed: float, leg_index: int) -> ForceBreakdown:
    """Return the forces acting at *speed* while travelling leg *leg_index*.

    The engine is a proportional controller on the speed error and never
    brakes.  Friction (µ·m·g) applies only inside the configured zone; air
    resistance is a constant drag everywhere.
    """
    mu = config.friction_coefficient_at(leg_index)
    engine = max(0.0, (config.target_speed - speed) * config.engine_gain)
    friction = mu * config.mass * GRAVITY
    air = config.air_resistance_force
    resistive = friction + air
    net = engine - resistive
    return ForceBreakdown(
        engine=engine,
        friction=friction,
        air=air,
        resistive=resistive,
        net=net,
        acceleration=net / config.mass,
        friction_coefficient=mu,
    )
