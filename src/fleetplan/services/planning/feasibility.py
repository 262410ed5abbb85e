"""Capacity feasibility rule."""

from __future__ import annotations

from ...models.domain import Shipment, Vehicle


def is_feasible(vehicle: Vehicle, shipment: Shipment) -> bool:
    return shipment.weight_kg <= vehicle.capacity_kg
