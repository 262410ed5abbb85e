"""Base class for cost strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...models.domain import Route, Shipment, Vehicle


class CostStrategy(ABC):
    """Contract for pricing a shipment on a route with a given vehicle."""

    name: str

    @abstractmethod
    def compute_cost(self, route: Route, vehicle: Vehicle, shipment: Shipment) -> float:
        raise NotImplementedError

    def describe(self) -> dict:
        return {"strategy": self.name}


def fuel_cost(route: Route, vehicle: Vehicle) -> float:
    """Fuel spend for driving the route with the vehicle's kind-adjusted mileage."""

    litres = route.distance_km / vehicle.effective_mileage
    return litres * vehicle.fuel_rate
