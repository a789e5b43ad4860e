"""Scenario configuration."""

from waypoint_sim.scenario.config import (
    DEFAULT_ENGINE_GAIN,
    GRAVITY,
    SLIDER_RANGES,
    FrictionZone,
    InvalidConfiguration,
    ScenarioConfig,
)

__all__ = [
    "DEFAULT_ENGINE_GAIN",
    "GRAVITY",
    "SLIDER_RANGES",
    "FrictionZone",
    "InvalidConfiguration",
    "ScenarioConfig",
]
