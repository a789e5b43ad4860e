"""Run report data model."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from waypoint_sim.telemetry.models import LegTelemetry


@dataclass(frozen=True)
class RunReport:
    """Summary of one completed run.  Produced exactly once per run.

    ``average_speed`` uses the odometer distance; ``average_velocity`` uses
    the straight-line displacement.  Both are 0 when ``elapsed_s`` is 0.
    """

    elapsed_s: float
    total_distance_m: float
    displacement_m: float
    destination_name: str
    average_speed: float
    average_velocity: float
    leg_breakdown_text: str
    legs: tuple[LegTelemetry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        data = dataclasses.asdict(self)
        data["legs"] = [
            {**dataclasses.asdict(leg), "direction": leg.direction.value} for leg in self.legs
        ]
        return data
