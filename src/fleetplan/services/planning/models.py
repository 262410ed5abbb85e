"""Planning result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ...models.domain import Route, RouteId, Shipment, Vehicle, VehicleId


@dataclass(frozen=True, slots=True)
class CandidateCost:
    route_id: RouteId
    vehicle_id: VehicleId
    cost: float


@dataclass(slots=True)
class AssignmentResult:
    shipment: Shipment
    route: Route
    vehicle: Vehicle
    cost: float
    strategy: str
    candidates: List[CandidateCost] = field(default_factory=list)
    evaluated: int = 0
    run_directory: Optional[Path] = None

    def key(self) -> tuple[str, str, str, float]:
        """Identity of the decision, ignoring diagnostics."""
        return (self.shipment.shipment_id, self.route.route_id, self.vehicle.vehicle_id, self.cost)
