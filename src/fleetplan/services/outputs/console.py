"""Box-style console rendering for entities and results."""

from __future__ import annotations

from typing import Iterable

from ...models.domain import Route, Shipment, Vehicle

_RULE = "+----------------------+"
_WIDE_RULE = "+-----------------------------+"


def _box(title: str, rows: Iterable[str], rule: str = _RULE) -> str:
    width = len(rule) - 2
    lines = [rule, f"|{title.center(width)}|", rule, *rows, rule]
    return "\n".join(lines)


def render_vehicle(vehicle: Vehicle) -> str:
    return _box(
        "Vehicle",
        [
            f"| vehicleId   : {vehicle.vehicle_id}",
            f"| kind        : {vehicle.kind.value}",
            f"| vehicleName : {vehicle.name}",
            f"| driverName  : {vehicle.driver_name}",
            f"| capacity    : {vehicle.capacity_kg:.1f} kg",
            f"| mileage     : {vehicle.mileage_km_per_l:.2f} km/l",
            f"| rate (L)    : {vehicle.fuel_rate:.2f}",
        ],
    )


def render_route(route: Route) -> str:
    return _box(
        "Route",
        [
            f"| routeId     : {route.route_id}",
            f"| from -> to  : {route.source} -> {route.destination}",
            f"| distance    : {route.distance_km:.1f} km",
            f"| toll        : {route.toll:.2f}",
        ],
    )


def render_shipment(shipment: Shipment) -> str:
    rows = [
        f"| shipmentId  : {shipment.shipment_id}",
        f"| weight      : {shipment.weight_kg:.1f} kg",
        f"| distance    : {shipment.distance_km:.1f} km",
        f"| toll        : {shipment.toll:.2f}",
    ]
    if shipment.cost_per_km_override > 0:
        rows.append(f"| costPerKm   : {shipment.cost_per_km_override:.2f}")
    return _box("Shipment", rows)


def render_cost(cost: float) -> str:
    return _box("LogisticsSystem", [f"| Optimized Cost : {cost:.2f}"], rule=_WIDE_RULE)


def render_section(title: str, blocks: list[str], empty_label: str) -> str:
    body = "\n".join(blocks) if blocks else f"[{empty_label}]"
    return f"\n--- {title} ---\n{body}"
