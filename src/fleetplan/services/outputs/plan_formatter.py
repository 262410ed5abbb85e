"""Serializers for optimized plans."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from ...schemas.plan import AssignmentReport, CandidateModel

if TYPE_CHECKING:
    from ..planning.models import AssignmentResult

PLAN_HEADER = "=== OPTIMIZED TRANSPORT PLAN ==="
PLAN_FOOTER = "==============================="


def assignment_to_report(result: AssignmentResult) -> AssignmentReport:
    return AssignmentReport(
        shipment_id=result.shipment.shipment_id,
        vehicle_id=result.vehicle.vehicle_id,
        route_id=result.route.route_id,
        source=result.route.source,
        destination=result.route.destination,
        distance_km=result.route.distance_km,
        cost=result.cost,
        route_toll=result.route.toll,
        shipment_toll=result.shipment.toll,
        strategy=result.strategy,
        evaluated=result.evaluated,
        candidates=[
            CandidateModel(route_id=c.route_id, vehicle_id=c.vehicle_id, cost=c.cost)
            for c in result.candidates
        ],
    )


def assignment_to_json(result: AssignmentResult) -> dict:
    return assignment_to_report(result).model_dump()


def assignment_to_text(result: AssignmentResult) -> str:
    route = result.route
    lines = [
        PLAN_HEADER,
        f"Shipment ID      : {result.shipment.shipment_id}",
        f"Assigned Vehicle : {result.vehicle.vehicle_id}",
        f"Route ID         : {route.route_id} ({route.source} -> {route.destination})",
        f"Distance (km)    : {route.distance_km:.2f}",
        f"Estimated Cost   : {result.cost:.2f}",
        f"Route Toll       : {route.toll:.2f}",
        f"Shipment Toll    : {result.shipment.toll:.2f}",
        PLAN_FOOTER,
    ]
    return "\n".join(lines) + "\n"


def candidates_to_csv(result: AssignmentResult) -> str:
    buffer = io.StringIO()
    fieldnames = ["rank", "route_id", "vehicle_id", "cost", "selected"]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    ranked = sorted(result.candidates, key=lambda c: c.cost)
    for rank, candidate in enumerate(ranked, start=1):
        writer.writerow(
            {
                "rank": rank,
                "route_id": candidate.route_id,
                "vehicle_id": candidate.vehicle_id,
                "cost": f"{candidate.cost:.2f}",
                "selected": candidate.route_id == result.route.route_id
                and candidate.vehicle_id == result.vehicle.vehicle_id,
            }
        )
    return buffer.getvalue()
