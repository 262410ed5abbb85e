"""In-memory collections the planner operates on."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import NotFoundError
from .domain import Route, RouteId, Shipment, ShipmentId, Vehicle, VehicleId


@dataclass(slots=True)
class PlanningContext:
    """Fleet, routes and shipments keyed by id, in insertion order."""

    fleet: dict[VehicleId, Vehicle] = field(default_factory=dict)
    routes: dict[RouteId, Route] = field(default_factory=dict)
    shipments: dict[ShipmentId, Shipment] = field(default_factory=dict)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.fleet[vehicle.vehicle_id] = vehicle

    def add_route(self, route: Route) -> None:
        self.routes[route.route_id] = route

    def add_shipment(self, shipment: Shipment) -> None:
        self.shipments[shipment.shipment_id] = shipment

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        try:
            return self.fleet[VehicleId(vehicle_id)]
        except KeyError:
            raise NotFoundError("Vehicle", vehicle_id) from None

    def get_route(self, route_id: str) -> Route:
        try:
            return self.routes[RouteId(route_id)]
        except KeyError:
            raise NotFoundError("Route", route_id) from None

    def get_shipment(self, shipment_id: str) -> Shipment:
        try:
            return self.shipments[ShipmentId(shipment_id)]
        except KeyError:
            raise NotFoundError("Shipment", shipment_id) from None

    def snapshot(self) -> "PlanningContext":
        """Point-in-time copy; entities are immutable so a shallow copy suffices."""
        return PlanningContext(
            fleet=dict(self.fleet),
            routes=dict(self.routes),
            shipments=dict(self.shipments),
        )

    def is_empty(self) -> bool:
        return not (self.fleet or self.routes or self.shipments)
