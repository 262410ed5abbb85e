import json
from pathlib import Path

import pytest

from fleetplan.exceptions import NotFoundError, OverCapacityError
from fleetplan.models.context import PlanningContext
from fleetplan.models.domain import Route, RouteId, Shipment, ShipmentId, Vehicle, VehicleId, VehicleKind
from fleetplan.persistence.filesystem import FileStorage
from fleetplan.services.outputs import assignment_to_json, assignment_to_text, candidates_to_csv
from fleetplan.services.planning import service as planning_service


def _context(weight: float = 800.0, shipment_toll: float = 12.5) -> PlanningContext:
    context = PlanningContext()
    context.add_route(
        Route(route_id=RouteId("R1"), source="CityA", destination="CityB", distance_km=300.0, toll=50.0)
    )
    context.add_route(
        Route(route_id=RouteId("R2"), source="CityA", destination="CityC", distance_km=450.0, toll=75.0)
    )
    context.add_vehicle(
        Vehicle(
            vehicle_id=VehicleId("V1"),
            kind=VehicleKind.TRUCK,
            capacity_kg=5000.0,
            mileage_km_per_l=3.5,
            fuel_rate=90.0,
            name="VolvoTruck",
            driver_name="John",
        )
    )
    context.add_vehicle(
        Vehicle(
            vehicle_id=VehicleId("V2"),
            kind=VehicleKind.VAN,
            capacity_kg=1200.0,
            mileage_km_per_l=12.0,
            fuel_rate=90.0,
            name="TataAce",
            driver_name="Ramesh",
        )
    )
    context.add_shipment(Shipment(shipment_id=ShipmentId("S-1"), weight_kg=weight, toll=shipment_toll))
    return context


def test_compute_cost_selects_strategy_by_name():
    context = _context()

    fuel = planning_service.compute_cost(context, "R1", "V2", "S-1", "fuel")
    with_allowance = planning_service.compute_cost(context, "R1", "V2", "S-1", "FuelAndToll")

    assert with_allowance - fuel == pytest.approx(600.0)


def test_compute_cost_surfaces_lookup_and_capacity_errors():
    with pytest.raises(NotFoundError):
        planning_service.compute_cost(_context(), "R1", "V7", "S-1", "fuel")
    with pytest.raises(OverCapacityError):
        planning_service.compute_cost(_context(weight=2000.0), "R1", "V2", "S-1", "fuel")


def test_optimize_shipment_uses_default_strategy():
    result = planning_service.optimize_shipment(_context(), "S-1")

    assert result is not None
    assert result.strategy == "fuel"
    assert result.run_directory is None


def test_optimize_shipment_persists_outputs(monkeypatch, tmp_path: Path):
    original_storage = planning_service.FileStorage
    monkeypatch.setattr(planning_service, "FileStorage", lambda: original_storage(root=tmp_path))

    result = planning_service.optimize_shipment(_context(), "S-1", "fuelandtoll", persist=True)

    assert result is not None
    outputs_dir = tmp_path / "outputs"
    run_dirs = list(outputs_dir.iterdir())
    assert len(run_dirs) == 1
    run_dir = run_dirs[0]
    assert result.run_directory == run_dir
    assert run_dir.name.startswith("plan_S-1_")

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["vehicle_id"] == "V2"
    assert summary["route_id"] == "R1"
    assert summary["strategy_parameters"]["driver_allowance_per_hour"] == 100.0
    assert (run_dir / "plan.txt").read_text(encoding="utf-8").startswith("=== OPTIMIZED TRANSPORT PLAN ===")
    assert (run_dir / "candidates.csv").exists()


def test_optimize_shipment_does_not_persist_without_result(tmp_path: Path):
    storage = FileStorage(root=tmp_path)

    result = planning_service.optimize_shipment(_context(weight=9000.0), "S-1", persist=True, storage=storage)

    assert result is None
    assert not (tmp_path / "outputs").exists()


def test_plan_text_lists_fields_in_report_order():
    result = planning_service.optimize_shipment(_context(), "S-1", "fuel")

    lines = assignment_to_text(result).splitlines()

    assert lines == [
        "=== OPTIMIZED TRANSPORT PLAN ===",
        "Shipment ID      : S-1",
        "Assigned Vehicle : V2",
        "Route ID         : R1 (CityA -> CityB)",
        "Distance (km)    : 300.00",
        f"Estimated Cost   : {result.cost:.2f}",
        "Route Toll       : 50.00",
        "Shipment Toll    : 12.50",
        "===============================",
    ]


def test_plan_json_and_candidates_csv():
    result = planning_service.optimize_shipment(_context(), "S-1", "fuel")

    payload = assignment_to_json(result)
    assert list(payload)[:9] == [
        "shipment_id",
        "vehicle_id",
        "route_id",
        "source",
        "destination",
        "distance_km",
        "cost",
        "route_toll",
        "shipment_toll",
    ]
    assert len(payload["candidates"]) == 4

    rows = candidates_to_csv(result).splitlines()
    assert rows[0] == "rank,route_id,vehicle_id,cost,selected"
    assert rows[1].startswith("1,R1,V2,")
    assert rows[1].endswith(",True")
    assert all(row.endswith(",False") for row in rows[2:])
