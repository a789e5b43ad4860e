"""FastAPI Web application exposing the simulator headlessly."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from waypoint_sim.scenario.config import ScenarioConfig
from waypoint_sim.web.schemas import (
    HealthResponse,
    LegRecord,
    RouteResponse,
    SimulateRequest,
    SimulateResponse,
    WaypointRecord,
    WaypointsResponse,
)
from waypoint_sim.web.service import SimulationService, default_destination

load_dotenv()  # loads .env from project root; must run before env vars are consumed

app = FastAPI(title="Waypoint Simulator", version="0.1.0")


def _service() -> SimulationService:
    return SimulationService()


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0")


@app.get("/api/waypoints", response_model=WaypointsResponse)
def list_waypoints() -> WaypointsResponse:
    graph = _service().graph
    return WaypointsResponse(
        waypoints=[
            WaypointRecord(
                id=wp.id,
                name=wp.display_name,
                x=wp.x,
                y=wp.y,
                is_finish_option=wp.is_finish_option,
            )
            for wp in graph
        ],
        finish_options=[wp.id for wp in graph.finish_options()],
    )


@app.get("/api/route", response_model=RouteResponse)
def get_route(destination: str = "", grid_scale: float | None = None) -> RouteResponse:
    """Return the active route for *destination* and its planned distances."""
    graph = _service().graph
    try:
        scale = (
            grid_scale if grid_scale is not None else ScenarioConfig.from_env().grid_scale_m_per_unit
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if scale <= 0:
        raise HTTPException(status_code=422, detail="grid_scale must be > 0")
    try:
        route = graph.active_route(destination or default_destination())
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return RouteResponse(
        destination=route.destination.id,
        waypoint_ids=route.ids(),
        leg_count=route.leg_count,
        target_distance_m=route.length_m(scale),
        displacement_m=route.displacement_m(scale),
    )


@app.post("/api/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest) -> SimulateResponse:
    """Run one scenario to completion and return its report."""
    try:
        report = _service().run(req)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return SimulateResponse(
        elapsed_s=report.elapsed_s,
        total_distance_m=report.total_distance_m,
        displacement_m=report.displacement_m,
        destination_name=report.destination_name,
        average_speed=report.average_speed,
        average_velocity=report.average_velocity,
        leg_breakdown_text=report.leg_breakdown_text,
        legs=[
            LegRecord(
                from_id=leg.from_id,
                to_id=leg.to_id,
                distance_m=leg.distance_m,
                duration_s=leg.duration_s,
                average_speed_mps=leg.average_speed_mps,
                direction=leg.direction.value,
                label=leg.label,
            )
            for leg in report.legs
        ],
    )
