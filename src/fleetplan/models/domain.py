"""Domain models for vehicles, routes and shipments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType

VehicleId = NewType("VehicleId", str)
RouteId = NewType("RouteId", str)
ShipmentId = NewType("ShipmentId", str)


class VehicleKind(str, Enum):
    TRUCK = "truck"
    VAN = "van"

    @classmethod
    def from_label(cls, label: str) -> "VehicleKind":
        """Anything that is not a truck is treated as a van."""
        return cls.TRUCK if label.strip().lower() == cls.TRUCK.value else cls.VAN


# Multiplier applied to the rated mileage of each vehicle kind.
EFFICIENCY_FACTORS: dict[VehicleKind, float] = {
    VehicleKind.TRUCK: 0.9,
    VehicleKind.VAN: 1.05,
}


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


@dataclass(frozen=True, slots=True)
class Vehicle:
    """A fleet vehicle with its capacity and fuel economics."""

    vehicle_id: VehicleId
    kind: VehicleKind
    capacity_kg: float
    mileage_km_per_l: float
    fuel_rate: float
    name: str = ""
    driver_name: str = ""

    def __post_init__(self) -> None:
        _require(bool(self.vehicle_id), "vehicle_id must not be empty")
        if not isinstance(self.kind, VehicleKind):
            try:
                kind = VehicleKind(str(self.kind).strip().lower())
            except ValueError:
                raise ValueError(f"Vehicle {self.vehicle_id}: unknown kind {self.kind!r}") from None
            object.__setattr__(self, "kind", kind)
        _require(self.capacity_kg > 0, f"Vehicle {self.vehicle_id}: capacity must be > 0")
        _require(self.mileage_km_per_l > 0, f"Vehicle {self.vehicle_id}: mileage must be > 0")
        _require(self.fuel_rate >= 0, f"Vehicle {self.vehicle_id}: fuel rate must be >= 0")

    @property
    def efficiency_factor(self) -> float:
        return EFFICIENCY_FACTORS[self.kind]

    @property
    def effective_mileage(self) -> float:
        return self.mileage_km_per_l * self.efficiency_factor


@dataclass(frozen=True, slots=True)
class Route:
    """A precomputed origin to destination leg."""

    route_id: RouteId
    source: str
    destination: str
    distance_km: float
    toll: float = 0.0

    def __post_init__(self) -> None:
        _require(bool(self.route_id), "route_id must not be empty")
        _require(self.distance_km >= 0, f"Route {self.route_id}: distance must be >= 0")
        _require(self.toll >= 0, f"Route {self.route_id}: toll must be >= 0")


@dataclass(frozen=True, slots=True)
class Shipment:
    """A load waiting to be assigned to a vehicle and route."""

    shipment_id: ShipmentId
    weight_kg: float
    distance_km: float = 0.0
    toll: float = 0.0
    cost_per_km_override: float = 0.0

    def __post_init__(self) -> None:
        _require(bool(self.shipment_id), "shipment_id must not be empty")
        _require(self.weight_kg >= 0, f"Shipment {self.shipment_id}: weight must be >= 0")
        _require(self.distance_km >= 0, f"Shipment {self.shipment_id}: distance must be >= 0")
        _require(self.toll >= 0, f"Shipment {self.shipment_id}: toll must be >= 0")
        _require(
            self.cost_per_km_override >= 0,
            f"Shipment {self.shipment_id}: cost per km override must be >= 0",
        )

    def calculate_cost_simple(self) -> float:
        """Flat price from the shipment's own distance and per-km override."""
        return self.distance_km * self.cost_per_km_override

    def estimate_time_hours(self, average_speed_kmh: float) -> float:
        if average_speed_kmh <= 0:
            raise ValueError("average_speed_kmh must be > 0")
        return self.distance_km / average_speed_kmh
