"""SimulationService — config merging and friction-zone resolution."""

from __future__ import annotations

import pytest

from waypoint_sim.physics.integrator import MAX_DT
from waypoint_sim.route.graph import WaypointGraph
from waypoint_sim.route.models import Waypoint
from waypoint_sim.scenario.config import InvalidConfiguration
from waypoint_sim.web.schemas import SimulateRequest
from waypoint_sim.web.service import SimulationService, check_step


def _graph() -> WaypointGraph:
    return WaypointGraph([
        Waypoint("A", 0, 0),
        Waypoint("B", 10, 0),
        Waypoint("C", 10, 10),
        Waypoint("D", 0, 10),
    ])


def test_build_config_resolves_friction_ids():
    svc = SimulationService(_graph())
    cfg = svc.build_config(SimulateRequest(friction_start="A", friction_end="C"))
    assert (cfg.friction_range_start_index, cfg.friction_range_end_index) == (0, 2)


def test_build_config_keeps_env_zone_when_ids_absent(monkeypatch):
    monkeypatch.setenv("WAYPOINT_SIM_FRICTION_START", "2")
    monkeypatch.setenv("WAYPOINT_SIM_FRICTION_END", "3")
    cfg = SimulationService(_graph()).build_config(SimulateRequest())
    assert (cfg.friction_range_start_index, cfg.friction_range_end_index) == (2, 3)


def test_build_config_partial_zone_uses_default_end():
    cfg = SimulationService(_graph()).build_config(SimulateRequest(friction_start="A"))
    assert (cfg.friction_range_start_index, cfg.friction_range_end_index) == (0, 3)


def test_request_overrides_env(monkeypatch):
    monkeypatch.setenv("WAYPOINT_SIM_MASS", "80")
    cfg = SimulationService(_graph()).build_config(SimulateRequest(mass=40.0))
    assert cfg.mass == 40.0


def test_run_uses_custom_graph():
    svc = SimulationService(_graph())
    report = svc.run(SimulateRequest(destination="D", target_speed=10.0, grid_scale_m_per_unit=1.0))
    assert [leg.to_id for leg in report.legs] == ["B", "C", "D"]
    assert report.displacement_m == pytest.approx(10.0)


def test_run_rejects_non_positive_dt():
    with pytest.raises(InvalidConfiguration):
        SimulationService(_graph()).run(SimulateRequest(dt=0.0))


@pytest.mark.parametrize("dt", [0.0, -0.01, MAX_DT * 1.5, 1.0])
def test_check_step_rejects_unusable_steps(dt):
    with pytest.raises(InvalidConfiguration, match="dt"):
        check_step(dt)


def test_check_step_accepts_max_dt():
    assert check_step(MAX_DT) == MAX_DT


def test_run_rejects_step_above_max_dt():
    with pytest.raises(InvalidConfiguration):
        SimulationService(_graph()).run(SimulateRequest(destination="B", dt=1.0))
