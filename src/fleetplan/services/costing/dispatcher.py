"""Factory for cost strategies based on user selection."""

from __future__ import annotations

import logging
from typing import Any

from ...config import settings
from .base import CostStrategy
from .fuel import FuelCostStrategy
from .fuel_and_toll import FuelAndTollStrategy

logger = logging.getLogger(__name__)

STRATEGY_NAMES = (FuelCostStrategy.name, FuelAndTollStrategy.name)


def normalize_strategy_name(name: str | None) -> str:
    if not name:
        return ""
    return "".join(ch for ch in name.lower() if ch not in "-_ ")


def get_strategy(name: str | None, **kwargs: Any) -> CostStrategy:
    """Build the strategy for ``name``; unknown names fall back to fuel-only."""

    match normalize_strategy_name(name):
        case "fuelandtoll":
            return FuelAndTollStrategy(
                driver_allowance_per_hour=kwargs.get(
                    "driver_allowance_per_hour", settings.driver_allowance_per_hour
                ),
                average_speed_kmh=kwargs.get("average_speed_kmh", settings.average_speed_kmh),
                overweight_penalty=kwargs.get("overweight_penalty", settings.overweight_penalty),
            )
        case "fuel":
            return FuelCostStrategy()
        case _:
            logger.warning(f"Unknown cost strategy '{name}', falling back to '{FuelCostStrategy.name}'.")
            return FuelCostStrategy()
