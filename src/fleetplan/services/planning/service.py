"""Planning orchestration service."""

from __future__ import annotations

import logging
import re
from typing import Optional

from ...config import settings
from ...models.context import PlanningContext
from ...persistence.filesystem import FileStorage
from ..costing.dispatcher import get_strategy
from ..outputs.plan_formatter import assignment_to_json, assignment_to_text, candidates_to_csv
from .models import AssignmentResult
from .planner import compute_route_cost, optimize_assignment

logger = logging.getLogger(__name__)


def _strategy_name(name: str | None) -> str:
    return name or settings.default_strategy


def compute_cost(
    context: PlanningContext,
    route_id: str,
    vehicle_id: str,
    shipment_id: str,
    strategy_name: str | None = None,
) -> float:
    strategy = get_strategy(_strategy_name(strategy_name))
    return compute_route_cost(context, route_id, vehicle_id, shipment_id, strategy)


def optimize_shipment(
    context: PlanningContext,
    shipment_id: str,
    strategy_name: str | None = None,
    *,
    legacy_vehicle_resolution: bool | None = None,
    persist: bool = False,
    storage: FileStorage | None = None,
) -> Optional[AssignmentResult]:
    strategy = get_strategy(_strategy_name(strategy_name))
    if legacy_vehicle_resolution is None:
        legacy_vehicle_resolution = settings.legacy_vehicle_resolution

    result = optimize_assignment(
        context,
        shipment_id,
        strategy,
        legacy_vehicle_resolution=legacy_vehicle_resolution,
    )
    if result is None or not persist:
        return result

    storage = storage or FileStorage()
    payload = assignment_to_json(result)
    payload["strategy_parameters"] = strategy.describe()
    run_dir = storage.save_run(
        f"plan_{_safe_token(shipment_id)}",
        {
            "summary.json": payload,
            "plan.txt": assignment_to_text(result),
            "candidates.csv": candidates_to_csv(result),
        },
    )
    result.run_directory = run_dir
    logger.info(f"Plan for shipment {shipment_id} saved to {run_dir}")
    return result


def _safe_token(value: str) -> str:
    return re.sub(r"[^A-Za-z0-9-]+", "-", value).strip("-") or "shipment"
