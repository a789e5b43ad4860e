"""Markdown run report formatter."""

from __future__ import annotations

from pathlib import Path

from waypoint_sim.reporting.models import RunReport


class MarkdownFormatter:
    """Format a :class:`~waypoint_sim.reporting.models.RunReport` as Markdown."""

    def format(self, report: RunReport) -> str:
        """Return the full Markdown report as a string."""
        lines: list[str] = [
            "# Run Complete",
            "",
            f"**Destination**: {report.destination_name}  ",
            f"**Time**: {report.elapsed_s:.2f}s",
            "",
            "## Distance vs Displacement",
            "",
            "| Quantity | Value | Kind |",
            "|----------|-------|------|",
            f"| Total distance | {report.total_distance_m:.0f}m | Scalar |",
            f"| Displacement | {report.displacement_m:.0f}m | Vector |",
            "",
            f"Path: {report.leg_breakdown_text}",
            "",
            "## Speed vs Velocity",
            "",
            "| Quantity | Value |",
            "|----------|-------|",
            f"| Average speed | {report.average_speed:.2f} m/s |",
            f"| Average velocity | {report.average_velocity:.2f} m/s |",
            "",
            "## Node to Node",
            "",
        ]

        if report.legs:
            lines += [
                "| Leg | Distance | Time | Velocity |",
                "|-----|----------|------|----------|",
            ]
            for leg in report.legs:
                lines.append(
                    f"| {leg.from_id}→{leg.to_id} | {leg.distance_m:.0f}m "
                    f"| {leg.duration_s:.1f}s | {leg.label} |"
                )
        else:
            lines.append("No legs travelled.")
        lines.append("")

        return "\n".join(lines)

    def write(self, report: RunReport, path: str) -> None:
        """Write the formatted report to *path* (UTF-8)."""
        Path(path).write_text(self.format(report), encoding="utf-8")
