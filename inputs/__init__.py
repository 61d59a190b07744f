"""
Input validation — range checks applied by the caller before running the core.
"""

from .validators import (
    MAX_DURATION_MONTHS,
    ValidationResult,
    validate_simulation_parameters,
    validate_sizing_inputs,
    validate_target_balance,
)

__all__ = [
    "MAX_DURATION_MONTHS",
    "ValidationResult",
    "validate_simulation_parameters",
    "validate_sizing_inputs",
    "validate_target_balance",
]
