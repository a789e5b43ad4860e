"""Run aggregation and report output."""

from waypoint_sim.reporting.aggregator import RunAggregator, leg_breakdown
from waypoint_sim.reporting.formatter import MarkdownFormatter
from waypoint_sim.reporting.models import RunReport

__all__ = [
    "MarkdownFormatter",
    "RunAggregator",
    "RunReport",
    "leg_breakdown",
]
