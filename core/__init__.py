"""
Core package — run configuration, row schema, and shared helpers.
No business logic lives here.
"""

from .schema import ROW_COLUMNS, CUMULATIVE_COLUMNS
from .config import (
    DEFAULT_SIZING_POLICY,
    DEFAULT_TARGET_BALANCE,
    SimulationParameters,
    SizingInputs,
    SizingPolicy,
)
from .utils import percent_of

__all__ = [
    "ROW_COLUMNS",
    "CUMULATIVE_COLUMNS",
    "DEFAULT_SIZING_POLICY",
    "DEFAULT_TARGET_BALANCE",
    "SimulationParameters",
    "SizingInputs",
    "SizingPolicy",
    "percent_of",
]
