"""Validated input records for vehicles, routes and shipments."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Route, RouteId, Shipment, ShipmentId, Vehicle, VehicleId, VehicleKind


class VehicleRecord(BaseModel):
    vehicle_id: str = Field(..., min_length=1)
    kind: VehicleKind = VehicleKind.VAN
    name: str = ""
    driver_name: str = ""
    capacity_kg: float = Field(..., gt=0)
    mileage_km_per_l: float = Field(..., gt=0)
    fuel_rate: float = Field(..., ge=0)

    @field_validator("vehicle_id", "name", "driver_name", mode="before")
    @classmethod
    def _strip(cls, value: object) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: object) -> VehicleKind:
        if isinstance(value, VehicleKind):
            return value
        return VehicleKind.from_label(str(value or ""))

    def to_domain(self) -> Vehicle:
        return Vehicle(
            vehicle_id=VehicleId(self.vehicle_id),
            kind=self.kind,
            capacity_kg=self.capacity_kg,
            mileage_km_per_l=self.mileage_km_per_l,
            fuel_rate=self.fuel_rate,
            name=self.name,
            driver_name=self.driver_name,
        )


class RouteRecord(BaseModel):
    route_id: str = Field(..., min_length=1)
    source: str = ""
    destination: str = ""
    distance_km: float = Field(..., ge=0)
    toll: float = Field(default=0.0, ge=0)

    @field_validator("route_id", "source", "destination", mode="before")
    @classmethod
    def _strip(cls, value: object) -> str:
        return "" if value is None else str(value).strip()

    def to_domain(self) -> Route:
        return Route(
            route_id=RouteId(self.route_id),
            source=self.source,
            destination=self.destination,
            distance_km=self.distance_km,
            toll=self.toll,
        )


class ShipmentRecord(BaseModel):
    shipment_id: str = Field(..., min_length=1)
    weight_kg: float = Field(..., ge=0)
    distance_km: float = Field(default=0.0, ge=0)
    toll: float = Field(default=0.0, ge=0)
    cost_per_km_override: float = Field(default=0.0, ge=0)

    @field_validator("shipment_id", mode="before")
    @classmethod
    def _strip(cls, value: object) -> str:
        return "" if value is None else str(value).strip()

    def to_domain(self) -> Shipment:
        return Shipment(
            shipment_id=ShipmentId(self.shipment_id),
            weight_kg=self.weight_kg,
            distance_km=self.distance_km,
            toll=self.toll,
            cost_per_km_override=self.cost_per_km_override,
        )
