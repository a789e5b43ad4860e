"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class WaypointRecord(BaseModel):
    id: str
    name: str
    x: float
    y: float
    is_finish_option: bool


class WaypointsResponse(BaseModel):
    waypoints: list[WaypointRecord]
    finish_options: list[str]


class RouteResponse(BaseModel):
    destination: str
    waypoint_ids: list[str]
    leg_count: int
    target_distance_m: float
    displacement_m: float


class SimulateRequest(BaseModel):
    """Unset fields fall back to the ``WAYPOINT_SIM_*`` environment defaults."""

    destination: str | None = None
    target_speed: float | None = None
    mass: float | None = None
    friction_coefficient: float | None = None
    friction_active: bool | None = None
    friction_start: str | None = None
    friction_end: str | None = None
    air_resistance_force: float | None = None
    grid_scale_m_per_unit: float | None = None
    engine_gain: float | None = None
    dt: float = 1.0 / 60.0
    max_ticks: int = 200_000


class LegRecord(BaseModel):
    from_id: str
    to_id: str
    distance_m: float
    duration_s: float
    average_speed_mps: float
    direction: str
    label: str


class SimulateResponse(BaseModel):
    elapsed_s: float
    total_distance_m: float
    displacement_m: float
    destination_name: str
    average_speed: float
    average_velocity: float
    leg_breakdown_text: str
    legs: list[LegRecord]
