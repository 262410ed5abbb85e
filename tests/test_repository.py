from pathlib import Path

import pytest
from openpyxl import Workbook

from fleetplan.data.repository import (
    FLEET_COLUMNS,
    load_context,
    load_fleet,
    load_routes,
    load_shipments,
    write_sample_datasets,
)
from fleetplan.exceptions import DatasetError
from fleetplan.models.domain import VehicleKind


def test_load_routes_keeps_file_order(tmp_path: Path):
    path = tmp_path / "routes.csv"
    path.write_text("R2,CityA,CityC,450,75\n\nR1, CityA , CityB ,300,50\n", encoding="utf-8")

    routes = load_routes(path)

    assert list(routes) == ["R2", "R1"]
    assert routes["R1"].source == "CityA"
    assert routes["R1"].distance_km == 300.0
    assert routes["R1"].toll == 50.0


def test_load_fleet_skips_short_and_invalid_rows(tmp_path: Path, caplog):
    path = tmp_path / "fleet.csv"
    path.write_text(
        "\n".join(
            [
                "V1,truck,VolvoTruck,John,5000,3.5,90",
                "V2,van,TataAce,Ramesh,1200",
                "V3,van,Broken,Anil,abc,4.5,90",
                "V4,van,Zero,Anil,1000,0,90",
                "V5,pickup,Hilux,Sara,900,10,80",
            ]
        ),
        encoding="utf-8",
    )

    fleet = load_fleet(path)

    assert list(fleet) == ["V1", "V5"]
    assert fleet["V1"].kind is VehicleKind.TRUCK
    assert fleet["V5"].kind is VehicleKind.VAN
    assert fleet["V1"].driver_name == "John"
    assert "fleet.csv:2" in caplog.text


def test_load_shipments(tmp_path: Path):
    path = tmp_path / "shipments.csv"
    path.write_text("S1,800,300,0,0\nS2,6000,450,15,2.5\n", encoding="utf-8")

    shipments = load_shipments(path)

    assert shipments["S1"].weight_kg == 800.0
    assert shipments["S2"].toll == 15.0
    assert shipments["S2"].cost_per_km_override == 2.5


def test_missing_files_load_as_empty(tmp_path: Path):
    context = load_context(
        routes_file=tmp_path / "routes.csv",
        fleet_file=tmp_path / "fleet.csv",
        shipments_file=tmp_path / "shipments.csv",
    )

    assert context.is_empty()


def test_load_fleet_from_workbook(tmp_path: Path):
    path = tmp_path / "fleet.xlsx"
    wb = Workbook()
    sheet = wb.active
    sheet.append(list(FLEET_COLUMNS))
    sheet.append(["V1", "Truck", "VolvoTruck", "John", 5000, 3.5, 90])
    sheet.append([None, None, None, None, None, None, None])
    sheet.append(["V2", "van", "TataAce", None, 1200, 12, 90])
    wb.save(path)

    fleet = load_fleet(path)

    assert list(fleet) == ["V1", "V2"]
    assert fleet["V1"].kind is VehicleKind.TRUCK
    assert fleet["V2"].mileage_km_per_l == 12.0
    assert fleet["V2"].driver_name == ""


def test_workbook_missing_columns_raises(tmp_path: Path):
    path = tmp_path / "routes.xlsx"
    wb = Workbook()
    wb.active.append(["route_id", "source"])
    wb.active.append(["R1", "CityA"])
    wb.save(path)

    with pytest.raises(DatasetError, match="missing columns"):
        load_routes(path)


def test_unsupported_format_raises(tmp_path: Path):
    path = tmp_path / "routes.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(DatasetError):
        load_routes(path)


def test_write_sample_datasets_round_trips_through_loaders(tmp_path: Path):
    routes_path, fleet_path = write_sample_datasets(tmp_path / "samples")

    assert routes_path.read_text(encoding="utf-8").splitlines()[0] == "R1,CityA,CityB,300,50"
    routes = load_routes(routes_path)
    fleet = load_fleet(fleet_path)
    assert list(routes) == ["R1", "R2", "R3"]
    assert list(fleet) == ["V1", "V2", "V3"]
    assert fleet["V3"].name == "MahindraLoad"
