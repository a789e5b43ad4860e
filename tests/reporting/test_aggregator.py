"""Tests for RunAggregator."""

from __future__ import annotations

import json
import math

import pytest

from waypoint_sim.reporting.aggregator import RunAggregator, leg_breakdown
from waypoint_sim.route.models import ActiveRoute, Waypoint
from waypoint_sim.telemetry.models import CompassDirection, LegTelemetry

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _route(*ids: str) -> ActiveRoute:
    coords = {"A": (0, 0), "B": (10, 0), "C": (10, 10)}
    return ActiveRoute(tuple(Waypoint(i, *coords[i], name=f"Node {i}") for i in ids))


def _leg(from_id: str, to_id: str) -> LegTelemetry:
    return LegTelemetry(
        from_id=from_id,
        to_id=to_id,
        distance_m=10.0,
        duration_s=1.0,
        average_speed_mps=10.0,
        direction=CompassDirection.EAST,
        label="10.0 m/s East",
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_aggregate_computes_averages():
    report = RunAggregator().aggregate(
        _route("A", "B", "C"), 1.0, 2.0, 20.0, [_leg("A", "B"), _leg("B", "C")]
    )
    assert report.elapsed_s == pytest.approx(2.0)
    assert report.total_distance_m == pytest.approx(20.0)
    assert report.displacement_m == pytest.approx(math.sqrt(200.0))
    assert report.average_speed == pytest.approx(10.0)
    assert report.average_velocity == pytest.approx(math.sqrt(200.0) / 2.0)
    assert report.destination_name == "Node C"
    assert len(report.legs) == 2


def test_displacement_uses_grid_scale():
    report = RunAggregator().aggregate(_route("A", "B"), 10.0, 1.0, 100.0)
    assert report.displacement_m == pytest.approx(100.0)


def test_zero_elapsed_gives_zero_averages():
    report = RunAggregator().aggregate(_route("A"), 1.0, 0.0, 0.0)
    assert report.elapsed_s == 0.0
    assert report.average_speed == 0.0
    assert report.average_velocity == 0.0
    assert report.displacement_m == 0.0
    assert report.legs == ()


def test_leg_breakdown_text():
    assert leg_breakdown(_route("A", "B", "C"), 1.0) == "A→B + B→C = 20m"
    assert leg_breakdown(_route("A", "B"), 10.0) == "A→B = 100m"
    assert leg_breakdown(_route("A"), 1.0) == "= 0m"


def test_report_json_serializable():
    report = RunAggregator().aggregate(_route("A", "B"), 1.0, 1.0, 10.0, [_leg("A", "B")])
    restored = json.loads(json.dumps(report.to_dict()))
    assert restored["destination_name"] == "Node B"
    assert restored["legs"][0]["direction"] == "East"
    assert restored["leg_breakdown_text"] == "A→B = 10m"
