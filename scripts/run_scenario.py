"""Run one waypoint scenario headlessly and print the Markdown report.

Usage:
    uv run python scripts/run_scenario.py
    uv run python scripts/run_scenario.py --destination G --speed 40 --friction 0.5
    uv run python scripts/run_scenario.py --realtime --output report.md

Unset options fall back to WAYPOINT_SIM_* environment variables (a local
.env file is loaded first), then to the built-in defaults.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from waypoint_sim.physics.integrator import PathIntegrator  # noqa: E402
from waypoint_sim.physics.runner import FixedRateRunner, run_headless  # noqa: E402
from waypoint_sim.reporting.formatter import MarkdownFormatter  # noqa: E402
from waypoint_sim.scenario.config import InvalidConfiguration  # noqa: E402
from waypoint_sim.web.schemas import SimulateRequest  # noqa: E402
from waypoint_sim.web.service import SimulationService, check_step, default_destination  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Waypoint simulator — headless run")
    ap.add_argument("--destination", default=None, help="Destination waypoint id")
    ap.add_argument("--speed", type=float, default=None, help="Target speed (m/s)")
    ap.add_argument("--mass", type=float, default=None, help="Vehicle mass (kg)")
    ap.add_argument("--friction", type=float, default=None, help="Friction coefficient µ")
    ap.add_argument("--no-friction", action="store_true", help="Disable the friction zone")
    ap.add_argument("--friction-from", default=None, help="Friction zone start waypoint id")
    ap.add_argument("--friction-to", default=None, help="Friction zone end waypoint id")
    ap.add_argument("--air", type=float, default=None, help="Air resistance force (N)")
    ap.add_argument("--grid-scale", type=float, default=None, help="Metres per grid square")
    ap.add_argument("--dt", type=float, default=1.0 / 60.0, help="Fixed step (s) when headless")
    ap.add_argument("--realtime", action="store_true", help="Tick against the wall clock")
    ap.add_argument("--output", default="", help="Write the Markdown report to this path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every leg")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = SimulationService()
    req = SimulateRequest(
        destination=args.destination,
        target_speed=args.speed,
        mass=args.mass,
        friction_coefficient=args.friction,
        friction_active=False if args.no_friction else None,
        friction_start=args.friction_from,
        friction_end=args.friction_to,
        air_resistance_force=args.air,
        grid_scale_m_per_unit=args.grid_scale,
    )
    try:
        check_step(args.dt)
        config = service.build_config(req)
        route = service.graph.active_route(args.destination or default_destination())

        integrator = PathIntegrator()
        integrator.configure(config, route)
    except InvalidConfiguration as exc:
        print(f"  [!] Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.realtime:
        report = FixedRateRunner(integrator, target_hz=60).run(timeout_s=600)
    else:
        report = run_headless(integrator, dt=args.dt)

    if report is None:
        print("  [!] The vehicle never reached its destination.", file=sys.stderr)
        sys.exit(1)

    formatter = MarkdownFormatter()
    if args.output:
        formatter.write(report, args.output)
        print(f"Report written to {args.output}")
    else:
        print(formatter.format(report))


if __name__ == "__main__":
    main()
