"""Command line entry point for the fleet planner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import settings
from .data.repository import load_context, write_sample_datasets
from .exceptions import FleetPlanError
from .interactive import InteractiveSession
from .models.context import PlanningContext
from .services.costing import STRATEGY_NAMES
from .services.outputs.console import (
    render_cost,
    render_route,
    render_section,
    render_shipment,
    render_vehicle,
)
from .services.outputs.plan_formatter import assignment_to_text
from .services.planning.service import compute_cost, optimize_shipment

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_ASSIGNMENT = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fleetplan",
        description="Assign shipments to the cheapest feasible vehicle and route.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fleetplan sample
  fleetplan cost R1 V2 S1 --strategy fuelandtoll
  fleetplan optimize S1 --plan-file plan.txt --persist
        """,
    )
    parser.add_argument("--routes", type=Path, default=None, help="Routes dataset (CSV or XLSX)")
    parser.add_argument("--fleet", type=Path, default=None, help="Fleet dataset (CSV or XLSX)")
    parser.add_argument("--shipments", type=Path, default=None, help="Shipments dataset (CSV or XLSX)")
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List vehicles, routes and shipments")

    cost_parser = subparsers.add_parser("cost", help="Cost of one route/vehicle/shipment combination")
    cost_parser.add_argument("route_id")
    cost_parser.add_argument("vehicle_id")
    cost_parser.add_argument("shipment_id")
    cost_parser.add_argument("--strategy", default=None, help=f"One of: {', '.join(STRATEGY_NAMES)}")

    optimize_parser = subparsers.add_parser("optimize", help="Find the cheapest assignment for a shipment")
    optimize_parser.add_argument("shipment_id")
    optimize_parser.add_argument("--strategy", default=None, help=f"One of: {', '.join(STRATEGY_NAMES)}")
    optimize_parser.add_argument("--plan-file", type=Path, default=None, help="Where to write the plan text")
    optimize_parser.add_argument(
        "--persist", action="store_true", help="Also store summary/plan/candidates under the data root"
    )
    optimize_parser.add_argument(
        "--legacy-vehicle-resolution",
        action="store_true",
        default=None,
        help="Assign the first feasible vehicle for the winning route",
    )

    sample_parser = subparsers.add_parser("sample", help="Write sample routes.csv and fleet.csv")
    sample_parser.add_argument("--directory", type=Path, default=None)

    subparsers.add_parser("shell", help="Interactive menu (default)")
    return parser


def _list(context: PlanningContext) -> int:
    print(render_section("Vehicles", [render_vehicle(v) for v in context.fleet.values()], "no vehicles"))
    print(render_section("Routes", [render_route(r) for r in context.routes.values()], "no routes"))
    print(render_section("Shipments", [render_shipment(s) for s in context.shipments.values()], "no shipments"))
    return EXIT_OK


def _cost(context: PlanningContext, args: argparse.Namespace) -> int:
    try:
        cost = compute_cost(context, args.route_id, args.vehicle_id, args.shipment_id, args.strategy)
    except FleetPlanError as exc:
        print(f"Error computing cost: {exc.message}", file=sys.stderr)
        return EXIT_ERROR
    print(f"Computed Cost = {cost:.2f}")
    return EXIT_OK


def _optimize(context: PlanningContext, args: argparse.Namespace) -> int:
    if args.shipment_id not in context.shipments:
        print(f"Shipment not found: {args.shipment_id}", file=sys.stderr)
        return EXIT_ERROR
    if not context.fleet or not context.routes:
        print("Need at least one vehicle and one route for optimization.", file=sys.stderr)
        return EXIT_ERROR

    result = optimize_shipment(
        context,
        args.shipment_id,
        args.strategy,
        legacy_vehicle_resolution=args.legacy_vehicle_resolution,
        persist=args.persist,
    )
    if result is None:
        print("No valid route-vehicle combination found (maybe overweight).")
        return EXIT_NO_ASSIGNMENT

    plan_file: Path = args.plan_file or settings.plan_file
    try:
        plan_file.parent.mkdir(parents=True, exist_ok=True)
        plan_file.write_text(assignment_to_text(result), encoding="utf-8")
    except OSError as exc:
        logger.error(f"Failed to write plan file {plan_file}: {exc}")
        print(f"Error writing {plan_file}: {exc}", file=sys.stderr)
        return EXIT_ERROR
    print(f"Optimized plan written to {plan_file}")
    if result.run_directory is not None:
        print(f"Run outputs stored in {result.run_directory}")

    print("\n=== Best Assignment ===")
    print(render_vehicle(result.vehicle))
    print(render_route(result.route))
    print(render_shipment(result.shipment))
    print(render_cost(result.cost))
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "sample":
        routes_path, fleet_path = write_sample_datasets(args.directory)
        print(f"Sample CSV files created: {routes_path}, {fleet_path}")
        return EXIT_OK

    try:
        context = load_context(args.routes, args.fleet, args.shipments)
    except FleetPlanError as exc:
        print(f"Error loading datasets: {exc.message}", file=sys.stderr)
        return EXIT_ERROR

    match args.command:
        case "list":
            return _list(context)
        case "cost":
            return _cost(context, args)
        case "optimize":
            return _optimize(context, args)
        case _:
            InteractiveSession(context).run()
            return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
