"""Exceptions raised by the planner."""

from __future__ import annotations


class FleetPlanError(Exception):
    """Base exception for the fleet planner."""

    def __init__(self, message: str | None = None):
        self.message = message
        super().__init__(self.message)


class NotFoundError(FleetPlanError, LookupError):
    """Raised when a referenced vehicle, route or shipment id is unknown."""

    def __init__(self, entity: str, entity_id: str, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found: {entity_id}")


class OverCapacityError(FleetPlanError):
    """Raised when a shipment is heavier than the requested vehicle can carry."""

    def __init__(
        self,
        vehicle_id: str,
        shipment_id: str,
        weight_kg: float,
        capacity_kg: float,
        message: str | None = None,
    ):
        self.vehicle_id = vehicle_id
        self.shipment_id = shipment_id
        self.weight_kg = weight_kg
        self.capacity_kg = capacity_kg
        super().__init__(
            message
            or (
                f"Shipment {shipment_id} weight {weight_kg:.1f} kg exceeds "
                f"vehicle {vehicle_id} capacity {capacity_kg:.1f} kg."
            )
        )


class DatasetError(FleetPlanError):
    """Raised when a dataset file cannot be read at all."""

    def __init__(self, message: str | None = None, path: str | None = None):
        self.path = path
        super().__init__(message or f"Unable to read dataset: {path}")
