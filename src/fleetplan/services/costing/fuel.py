"""Fuel-only cost model."""

from __future__ import annotations

from ...models.domain import Route, Shipment, Vehicle
from .base import CostStrategy, fuel_cost


class FuelCostStrategy(CostStrategy):
    """Fuel spend plus the shipment and route tolls."""

    name = "fuel"

    def compute_cost(self, route: Route, vehicle: Vehicle, shipment: Shipment) -> float:
        return fuel_cost(route, vehicle) + shipment.toll + route.toll
