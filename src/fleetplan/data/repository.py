"""Loaders for route, fleet and shipment datasets (CSV or Excel)."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, TypeVar

from openpyxl import load_workbook
from pydantic import BaseModel, ValidationError

from ..config import settings
from ..exceptions import DatasetError
from ..models.context import PlanningContext
from ..models.domain import Route, RouteId, Shipment, ShipmentId, Vehicle, VehicleId
from ..schemas.entities import RouteRecord, ShipmentRecord, VehicleRecord

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ("route_id", "source", "destination", "distance_km", "toll")
FLEET_COLUMNS = (
    "vehicle_id",
    "kind",
    "name",
    "driver_name",
    "capacity_kg",
    "mileage_km_per_l",
    "fuel_rate",
)
SHIPMENT_COLUMNS = ("shipment_id", "weight_kg", "distance_km", "toll", "cost_per_km_override")

SAMPLE_ROUTES = (
    ("R1", "CityA", "CityB", "300", "50"),
    ("R2", "CityA", "CityC", "450", "75"),
    ("R3", "CityB", "CityC", "150", "20"),
)
SAMPLE_FLEET = (
    ("V1", "truck", "VolvoTruck", "John", "5000", "3.5", "90"),
    ("V2", "van", "TataAce", "Ramesh", "1200", "12.0", "90"),
    ("V3", "truck", "MahindraLoad", "Anil", "4000", "4.5", "90"),
)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _iter_csv_rows(path: Path, columns: Sequence[str]) -> Iterator[tuple[int, dict]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        for line_no, tokens in enumerate(csv.reader(handle), start=1):
            tokens = [token.strip() for token in tokens]
            if not any(tokens):
                continue
            if len(tokens) < len(columns):
                logger.warning(
                    f"{path.name}:{line_no}: expected {len(columns)} columns, got {len(tokens)}; skipping"
                )
                continue
            yield line_no, dict(zip(columns, tokens))


def _iter_xlsx_rows(path: Path, columns: Sequence[str]) -> Iterator[tuple[int, dict]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            return
        header_map = {str(name).strip().lower(): idx for idx, name in enumerate(header) if name is not None}
        missing_columns = set(columns) - set(header_map)
        if missing_columns:
            raise DatasetError(
                f"Workbook '{path}' missing columns: {', '.join(sorted(missing_columns))}",
                path=str(path),
            )
        for line_no, row in enumerate(rows, start=2):
            if row is None or all(value is None or str(value).strip() == "" for value in row):
                continue
            # empty cells fall back to the record defaults
            yield line_no, {
                column: row[header_map[column]]
                for column in columns
                if header_map[column] < len(row) and row[header_map[column]] is not None
            }
    finally:
        wb.close()


def _iter_rows(path: Path, columns: Sequence[str]) -> Iterator[tuple[int, dict]]:
    suffix = path.suffix.lower()
    if suffix in {".csv", ".txt"}:
        return _iter_csv_rows(path, columns)
    if suffix in {".xlsx", ".xlsm"}:
        return _iter_xlsx_rows(path, columns)
    raise DatasetError(f"Unsupported dataset format '{path.suffix}' for {path}", path=str(path))


def _load_records(
    path: Path,
    columns: Sequence[str],
    record_type: type[RecordT],
) -> Iterator[RecordT]:
    if not path.exists():
        logger.info(f"Dataset not found, starting empty: {path}")
        return
    for line_no, row in _iter_rows(path, columns):
        try:
            yield record_type.model_validate(row)
        except ValidationError as exc:
            logger.warning(f"{path.name}:{line_no}: invalid record skipped ({exc.error_count()} errors)")


def load_routes(source: Optional[Path] = None) -> dict[RouteId, Route]:
    path = source or settings.routes_file
    routes: dict[RouteId, Route] = {}
    for record in _load_records(path, ROUTE_COLUMNS, RouteRecord):
        route = record.to_domain()
        routes[route.route_id] = route
    return routes


def load_fleet(source: Optional[Path] = None) -> dict[VehicleId, Vehicle]:
    path = source or settings.fleet_file
    fleet: dict[VehicleId, Vehicle] = {}
    for record in _load_records(path, FLEET_COLUMNS, VehicleRecord):
        vehicle = record.to_domain()
        fleet[vehicle.vehicle_id] = vehicle
    return fleet


def load_shipments(source: Optional[Path] = None) -> dict[ShipmentId, Shipment]:
    path = source or settings.shipments_file
    shipments: dict[ShipmentId, Shipment] = {}
    for record in _load_records(path, SHIPMENT_COLUMNS, ShipmentRecord):
        shipment = record.to_domain()
        shipments[shipment.shipment_id] = shipment
    return shipments


def load_context(
    routes_file: Optional[Path] = None,
    fleet_file: Optional[Path] = None,
    shipments_file: Optional[Path] = None,
) -> PlanningContext:
    context = PlanningContext(
        fleet=load_fleet(fleet_file),
        routes=load_routes(routes_file),
        shipments=load_shipments(shipments_file),
    )
    logger.info(
        f"Loaded {len(context.fleet)} vehicles, {len(context.routes)} routes, "
        f"{len(context.shipments)} shipments"
    )
    return context


def _write_rows(path: Path, rows: Sequence[Sequence[str]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerows(rows)


def write_sample_datasets(directory: Optional[Path] = None) -> tuple[Path, Path]:
    """Write the sample routes.csv and fleet.csv files; returns their paths."""
    target = directory or settings.data_root
    routes_path = target / "routes.csv"
    fleet_path = target / "fleet.csv"
    _write_rows(routes_path, SAMPLE_ROUTES)
    _write_rows(fleet_path, SAMPLE_FLEET)
    return routes_path, fleet_path
