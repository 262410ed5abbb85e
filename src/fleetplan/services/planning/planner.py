"""Shipment to (vehicle, route) assignment search."""

from __future__ import annotations

import logging
from typing import Optional

from ...exceptions import NotFoundError, OverCapacityError
from ...models.context import PlanningContext
from ...models.domain import RouteId, Vehicle
from ..costing.base import CostStrategy
from .feasibility import is_feasible
from .models import AssignmentResult, CandidateCost

logger = logging.getLogger(__name__)


def compute_route_cost(
    context: PlanningContext,
    route_id: str,
    vehicle_id: str,
    shipment_id: str,
    strategy: CostStrategy,
) -> float:
    """Price one (route, vehicle, shipment) combination.

    Raises:
        NotFoundError: if any of the ids is missing from the context.
        OverCapacityError: if the shipment does not fit the vehicle.
    """
    route = context.get_route(route_id)
    vehicle = context.get_vehicle(vehicle_id)
    shipment = context.get_shipment(shipment_id)

    if not is_feasible(vehicle, shipment):
        raise OverCapacityError(
            vehicle_id=vehicle.vehicle_id,
            shipment_id=shipment.shipment_id,
            weight_kg=shipment.weight_kg,
            capacity_kg=vehicle.capacity_kg,
        )
    return strategy.compute_cost(route, vehicle, shipment)


def compute_costs_for_all_routes(
    context: PlanningContext,
    vehicle_id: str,
    shipment_id: str,
    strategy: CostStrategy,
) -> dict[RouteId, float]:
    """Cost of every route for one vehicle; infeasible pairings are left out."""
    costs: dict[RouteId, float] = {}
    for route_id in context.routes:
        try:
            costs[route_id] = compute_route_cost(context, route_id, vehicle_id, shipment_id, strategy)
        except (NotFoundError, OverCapacityError):
            continue
    return costs


def _collect_candidates(
    context: PlanningContext, shipment_id: str, strategy: CostStrategy
) -> tuple[list[CandidateCost], int]:
    candidates: list[CandidateCost] = []
    evaluated = 0
    for vehicle_id in context.fleet:
        for route_id in context.routes:
            evaluated += 1
            try:
                cost = compute_route_cost(context, route_id, vehicle_id, shipment_id, strategy)
            except (NotFoundError, OverCapacityError):
                continue
            candidates.append(CandidateCost(route_id=route_id, vehicle_id=vehicle_id, cost=cost))
    return candidates, evaluated


def _cheapest(candidates: list[CandidateCost]) -> CandidateCost:
    best = candidates[0]
    for candidate in candidates[1:]:
        # strict comparison keeps the earliest candidate on ties
        if candidate.cost < best.cost:
            best = candidate
    return best


def _resolve_vehicle(
    context: PlanningContext,
    candidates: list[CandidateCost],
    best: CandidateCost,
    legacy_vehicle_resolution: bool,
) -> Vehicle:
    on_route = {c.vehicle_id: c.cost for c in candidates if c.route_id == best.route_id}
    for vehicle_id, vehicle in context.fleet.items():
        if vehicle_id not in on_route:
            continue
        if legacy_vehicle_resolution or on_route[vehicle_id] == best.cost:
            return vehicle
    return context.fleet[best.vehicle_id]


def optimize_assignment(
    context: PlanningContext,
    shipment_id: str,
    strategy: CostStrategy,
    *,
    legacy_vehicle_resolution: bool = False,
) -> Optional[AssignmentResult]:
    """Find the cheapest feasible (route, vehicle) pair for a shipment.

    Every vehicle is tried on every route, in insertion order. The minimum
    cost fixes the winning route; the vehicle is then re-resolved by walking
    the fleet in order. By default the first vehicle matching the minimum cost
    on that route is chosen. With ``legacy_vehicle_resolution`` the first
    vehicle able to carry the shipment on that route is chosen instead, while
    the reported cost stays the minimum.

    Returns None when no pair is feasible.
    """
    snapshot = context.snapshot()
    candidates, evaluated = _collect_candidates(snapshot, shipment_id, strategy)
    logger.info(
        f"Shipment {shipment_id}: evaluated {evaluated} pairs with '{strategy.name}', "
        f"{len(candidates)} feasible"
    )
    if not candidates:
        logger.info(f"No feasible route/vehicle combination for shipment {shipment_id}")
        return None

    best = _cheapest(candidates)
    vehicle = _resolve_vehicle(snapshot, candidates, best, legacy_vehicle_resolution)

    return AssignmentResult(
        shipment=snapshot.shipments[shipment_id],
        route=snapshot.routes[best.route_id],
        vehicle=vehicle,
        cost=best.cost,
        strategy=strategy.name,
        candidates=candidates,
        evaluated=evaluated,
    )
