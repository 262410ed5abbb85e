"""Cost strategy exports."""

from .base import CostStrategy
from .dispatcher import STRATEGY_NAMES, get_strategy, normalize_strategy_name
from .fuel import FuelCostStrategy
from .fuel_and_toll import FuelAndTollStrategy

__all__ = [
    "CostStrategy",
    "FuelCostStrategy",
    "FuelAndTollStrategy",
    "STRATEGY_NAMES",
    "get_strategy",
    "normalize_strategy_name",
]
