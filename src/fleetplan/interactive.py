"""Menu-driven interactive session."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from .config import settings
from .data.repository import load_fleet, load_routes, write_sample_datasets
from .exceptions import FleetPlanError
from .models.context import PlanningContext
from .schemas.entities import RouteRecord, ShipmentRecord, VehicleRecord
from .services.outputs.console import (
    render_cost,
    render_route,
    render_section,
    render_shipment,
    render_vehicle,
)
from .services.outputs.plan_formatter import assignment_to_text
from .services.planning.service import compute_cost, optimize_shipment

logger = logging.getLogger(__name__)

MENU = """
Menu:
1. Add Vehicle
2. Add Route
3. Add Shipment
4. List Vehicles / Routes / Shipments
5. Compute Cost (route + vehicle + shipment)
6. Optimize (find cheapest route/vehicle for a shipment) & write plan file
7. Create sample CSVs (routes.csv & fleet.csv) and load them
0. Exit"""


class InteractiveSession:
    """Text menu over a planning context, mirroring the CLI sub-commands."""

    def __init__(
        self,
        context: PlanningContext,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        plan_file: Optional[Path] = None,
        sample_directory: Optional[Path] = None,
    ) -> None:
        self.context = context
        self._input = input_fn
        self._output = output_fn
        self.plan_file = plan_file or settings.plan_file
        self.sample_directory = sample_directory or settings.data_root
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_vehicle,
            "2": self.add_route,
            "3": self.add_shipment,
            "4": self.list_all,
            "5": self.compute_cost_for_pair,
            "6": self.optimize_and_write_plan,
            "7": self.create_sample_datasets,
        }

    def run(self) -> None:
        self._output(f"=== {settings.app_name} ===")
        while True:
            self._output(MENU)
            try:
                choice = self._input("Enter choice: ").strip()
            except EOFError:
                choice = "0"
            if choice == "0":
                self._output("Exiting...")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Try again.")
                continue
            try:
                action()
            except EOFError:
                self._output("Input closed; action cancelled.")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_number(self, prompt: str) -> float:
        """Empty input counts as zero; anything unparsable is asked again."""
        value = self._ask(prompt)
        while True:
            if not value:
                return 0.0
            try:
                return float(value)
            except ValueError:
                value = self._ask("Invalid number, try again: ")

    def _report_invalid(self, label: str, exc: ValidationError) -> None:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        self._output(f"{label} not added: {problems}")

    def add_vehicle(self) -> None:
        raw = {
            "vehicle_id": self._ask("Vehicle ID: "),
            "kind": self._ask("Type (truck/van): "),
            "name": self._ask("Vehicle Name: "),
            "driver_name": self._ask("Driver Name: "),
            "capacity_kg": self._ask_number("Capacity (kg): "),
            "mileage_km_per_l": self._ask_number("Mileage (km per liter): "),
            "fuel_rate": self._ask_number("Fuel rate per liter: "),
        }
        try:
            vehicle = VehicleRecord.model_validate(raw).to_domain()
        except ValidationError as exc:
            self._report_invalid("Vehicle", exc)
            return
        self.context.add_vehicle(vehicle)
        self._output("Vehicle added.")

    def add_route(self) -> None:
        raw = {
            "route_id": self._ask("Route ID: "),
            "source": self._ask("Source: "),
            "destination": self._ask("Destination: "),
            "distance_km": self._ask_number("Distance (km): "),
            "toll": self._ask_number("Route toll (currency): "),
        }
        try:
            route = RouteRecord.model_validate(raw).to_domain()
        except ValidationError as exc:
            self._report_invalid("Route", exc)
            return
        self.context.add_route(route)
        self._output("Route added.")

    def add_shipment(self) -> None:
        raw = {
            "shipment_id": self._ask("Shipment ID: "),
            "weight_kg": self._ask_number("Weight (kg): "),
            "distance_km": self._ask_number("Distance (km): "),
            "toll": self._ask_number("Shipment toll (currency): "),
            "cost_per_km_override": self._ask_number("CostPerKm override (0 to skip): "),
        }
        try:
            shipment = ShipmentRecord.model_validate(raw).to_domain()
        except ValidationError as exc:
            self._report_invalid("Shipment", exc)
            return
        self.context.add_shipment(shipment)
        self._output("Shipment added.")

    def list_all(self) -> None:
        self._output(
            render_section("Vehicles", [render_vehicle(v) for v in self.context.fleet.values()], "no vehicles")
        )
        self._output(
            render_section("Routes", [render_route(r) for r in self.context.routes.values()], "no routes")
        )
        self._output(
            render_section(
                "Shipments",
                [render_shipment(s) for s in self.context.shipments.values()],
                "no shipments",
            )
        )

    def compute_cost_for_pair(self) -> None:
        route_id = self._ask("Enter Route ID: ")
        vehicle_id = self._ask("Enter Vehicle ID: ")
        shipment_id = self._ask("Enter Shipment ID: ")
        strategy = self._ask("Strategy (fuel / fuelandtoll): ")
        try:
            cost = compute_cost(self.context, route_id, vehicle_id, shipment_id, strategy or None)
        except FleetPlanError as exc:
            self._output(f"Error computing cost: {exc.message}")
            return
        self._output(f"Computed Cost = {cost:.2f}")

    def optimize_and_write_plan(self) -> None:
        if not self.context.shipments:
            self._output("No shipments available to optimize.")
            return
        shipment_id = self._ask("Enter Shipment ID to optimize: ")
        if shipment_id not in self.context.shipments:
            self._output("Shipment not found.")
            return
        if not self.context.fleet or not self.context.routes:
            self._output("Need at least one vehicle and one route for optimization.")
            return

        strategy = self._ask("Strategy (fuel / fuelandtoll): ")
        result = optimize_shipment(self.context, shipment_id, strategy or None)
        if result is None:
            self._output("No valid route-vehicle combination found (maybe overweight).")
            return

        try:
            self.plan_file.parent.mkdir(parents=True, exist_ok=True)
            self.plan_file.write_text(assignment_to_text(result), encoding="utf-8")
        except OSError as exc:
            logger.error(f"Failed to write plan file {self.plan_file}: {exc}")
            self._output(f"Error writing {self.plan_file.name}: {exc}")
        else:
            self._output(f"Optimized plan written to {self.plan_file}")

        self._output("\n=== Best Assignment ===")
        self._output(render_vehicle(result.vehicle))
        self._output(render_route(result.route))
        self._output(render_shipment(result.shipment))
        self._output(render_cost(result.cost))

    def create_sample_datasets(self) -> None:
        routes_path, fleet_path = write_sample_datasets(self.sample_directory)
        self.context.routes.clear()
        self.context.routes.update(load_routes(routes_path))
        self.context.fleet.clear()
        self.context.fleet.update(load_fleet(fleet_path))
        self._output(f"Sample CSV files created ({routes_path.name}, {fleet_path.name}). They are now loaded.")
