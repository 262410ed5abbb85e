"""Plan report schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class CandidateModel(BaseModel):
    route_id: str
    vehicle_id: str
    cost: float


class AssignmentReport(BaseModel):
    shipment_id: str
    vehicle_id: str
    route_id: str
    source: str
    destination: str
    distance_km: float
    cost: float
    route_toll: float
    shipment_toll: float
    strategy: str
    evaluated: int
    candidates: List[CandidateModel]
