from pathlib import Path

import pytest

from fleetplan import cli
from fleetplan.data.repository import write_sample_datasets


@pytest.fixture
def datasets(tmp_path: Path) -> list[str]:
    routes_path, fleet_path = write_sample_datasets(tmp_path)
    shipments_path = tmp_path / "shipments.csv"
    shipments_path.write_text("S1,800,150,0,0\nS2,6000,450,0,0\n", encoding="utf-8")
    return ["--routes", str(routes_path), "--fleet", str(fleet_path), "--shipments", str(shipments_path)]


def test_cost_command_prints_cost(datasets, capsys):
    exit_code = cli.main([*datasets, "cost", "R1", "V2", "S1"])

    assert exit_code == cli.EXIT_OK
    assert capsys.readouterr().out.strip() == "Computed Cost = 2192.86"


def test_cost_command_reports_over_capacity(datasets, capsys):
    exit_code = cli.main([*datasets, "cost", "R1", "V2", "S2", "--strategy", "fuelandtoll"])

    assert exit_code == cli.EXIT_ERROR
    assert "exceeds vehicle V2 capacity" in capsys.readouterr().err


def test_optimize_command_writes_plan(datasets, tmp_path: Path, capsys):
    plan_file = tmp_path / "out" / "plan.txt"

    exit_code = cli.main([*datasets, "optimize", "S1", "--plan-file", str(plan_file)])

    assert exit_code == cli.EXIT_OK
    plan = plan_file.read_text(encoding="utf-8")
    assert "Assigned Vehicle : V2" in plan
    assert "Route ID         : R3 (CityB -> CityC)" in plan
    assert "Optimized Cost : 1091.43" in capsys.readouterr().out


def test_optimize_command_reports_unwritable_plan_file(datasets, tmp_path: Path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    plan_file = blocker / "plan.txt"

    exit_code = cli.main([*datasets, "optimize", "S1", "--plan-file", str(plan_file)])

    assert exit_code == cli.EXIT_ERROR
    assert f"Error writing {plan_file}" in capsys.readouterr().err


def test_optimize_command_without_feasible_pair(datasets, tmp_path: Path, capsys):
    plan_file = tmp_path / "plan.txt"

    exit_code = cli.main([*datasets, "optimize", "S2", "--plan-file", str(plan_file)])

    assert exit_code == cli.EXIT_NO_ASSIGNMENT
    assert not plan_file.exists()
    assert "No valid route-vehicle combination" in capsys.readouterr().out


def test_optimize_command_unknown_shipment(datasets, capsys):
    assert cli.main([*datasets, "optimize", "S404"]) == cli.EXIT_ERROR
    assert "Shipment not found: S404" in capsys.readouterr().err


def test_list_command_renders_boxes(datasets, capsys):
    assert cli.main([*datasets, "list"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "--- Vehicles ---" in out
    assert "| vehicleId   : V3" in out
    assert "| from -> to  : CityA -> CityC" in out
    assert "| shipmentId  : S2" in out


def test_sample_command_writes_files(tmp_path: Path):
    assert cli.main(["sample", "--directory", str(tmp_path / "samples")]) == cli.EXIT_OK

    assert (tmp_path / "samples" / "routes.csv").exists()
    assert (tmp_path / "samples" / "fleet.csv").exists()
