"""Assignment planning exports."""

from .feasibility import is_feasible
from .models import AssignmentResult, CandidateCost
from .planner import compute_costs_for_all_routes, compute_route_cost, optimize_assignment
from .service import compute_cost, optimize_shipment

__all__ = [
    "AssignmentResult",
    "CandidateCost",
    "compute_cost",
    "compute_costs_for_all_routes",
    "compute_route_cost",
    "is_feasible",
    "optimize_assignment",
    "optimize_shipment",
]
