"""Fuel cost model extended with a time-based driver allowance."""

from __future__ import annotations

from ...models.domain import Route, Shipment, Vehicle
from .base import CostStrategy, fuel_cost

DEFAULT_OVERWEIGHT_PENALTY = 1000.0


class FuelAndTollStrategy(CostStrategy):
    """Fuel, tolls and a driver allowance billed per hour on the road.

    Shipments heavier than the vehicle's capacity are charged a flat
    ``overweight_penalty``. The planner filters such pairs before pricing,
    so the penalty only shows up when the strategy is called directly.
    """

    name = "fuelandtoll"

    def __init__(
        self,
        driver_allowance_per_hour: float,
        average_speed_kmh: float,
        overweight_penalty: float = DEFAULT_OVERWEIGHT_PENALTY,
    ) -> None:
        if average_speed_kmh <= 0:
            raise ValueError("average_speed_kmh must be > 0")
        if driver_allowance_per_hour < 0:
            raise ValueError("driver_allowance_per_hour must be >= 0")
        if overweight_penalty < 0:
            raise ValueError("overweight_penalty must be >= 0")
        self.driver_allowance_per_hour = driver_allowance_per_hour
        self.average_speed_kmh = average_speed_kmh
        self.overweight_penalty = overweight_penalty

    def driver_allowance(self, route: Route) -> float:
        hours = route.distance_km / self.average_speed_kmh
        return hours * self.driver_allowance_per_hour

    def compute_cost(self, route: Route, vehicle: Vehicle, shipment: Shipment) -> float:
        penalty = self.overweight_penalty if shipment.weight_kg > vehicle.capacity_kg else 0.0
        return (
            fuel_cost(route, vehicle)
            + self.driver_allowance(route)
            + shipment.toll
            + route.toll
            + penalty
        )

    def describe(self) -> dict:
        return {
            "strategy": self.name,
            "driver_allowance_per_hour": self.driver_allowance_per_hour,
            "average_speed_kmh": self.average_speed_kmh,
            "overweight_penalty": self.overweight_penalty,
        }
