"""Per-leg telemetry collection.

Public API
----------
LegTelemetry          - measurements for one completed leg
LegTelemetryCollector - records legs as waypoints are reached
CompassDirection      - East/West/North/South/Stationary
compass_direction     - classify a coordinate delta
"""

from waypoint_sim.telemetry.collector import LegTelemetryCollector
from waypoint_sim.telemetry.models import CompassDirection, LegTelemetry, compass_direction

__all__ = [
    "CompassDirection",
    "LegTelemetry",
    "LegTelemetryCollector",
    "compass_direction",
]
