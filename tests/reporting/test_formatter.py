"""Tests for MarkdownFormatter."""

from __future__ import annotations

from waypoint_sim.reporting.formatter import MarkdownFormatter
from waypoint_sim.reporting.models import RunReport
from waypoint_sim.telemetry.models import CompassDirection, LegTelemetry


def _make_report(legs=()) -> RunReport:
    return RunReport(
        elapsed_s=2.04,
        total_distance_m=20.1,
        displacement_m=14.14,
        destination_name="Hospital",
        average_speed=9.85,
        average_velocity=6.93,
        leg_breakdown_text="A→B + B→C = 20m",
        legs=tuple(legs),
    )


def _leg() -> LegTelemetry:
    return LegTelemetry("A", "B", 10.0, 1.02, 9.8, CompassDirection.EAST, "9.8 m/s East")


def test_format_header_and_totals():
    md = MarkdownFormatter().format(_make_report())
    assert md.startswith("# Run Complete")
    assert "**Destination**: Hospital" in md
    assert "**Time**: 2.04s" in md
    assert "| Total distance | 20m | Scalar |" in md
    assert "| Displacement | 14m | Vector |" in md
    assert "Path: A→B + B→C = 20m" in md
    assert "| Average velocity | 6.93 m/s |" in md


def test_format_leg_table():
    md = MarkdownFormatter().format(_make_report([_leg()]))
    assert "| A→B | 10m | 1.0s | 9.8 m/s East |" in md
    assert "No legs travelled." not in md


def test_format_without_legs():
    assert "No legs travelled." in MarkdownFormatter().format(_make_report())


def test_write(tmp_path):
    path = tmp_path / "report.md"
    MarkdownFormatter().write(_make_report([_leg()]), str(path))
    assert path.read_text(encoding="utf-8").startswith("# Run Complete")
