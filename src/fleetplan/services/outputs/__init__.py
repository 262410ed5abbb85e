"""Plan serializers and console renderers."""

from .console import render_cost, render_route, render_section, render_shipment, render_vehicle
from .plan_formatter import (
    assignment_to_json,
    assignment_to_report,
    assignment_to_text,
    candidates_to_csv,
)

__all__ = [
    "assignment_to_json",
    "assignment_to_report",
    "assignment_to_text",
    "candidates_to_csv",
    "render_cost",
    "render_route",
    "render_section",
    "render_shipment",
    "render_vehicle",
]
