"""
Input validation for the values a user types in before they reach the engine.

The engine, summary and sizing functions accept any number. This module is
where the dashboard decides what to refuse:
- Non-finite values
- Negative money amounts
- Percentages outside plausible bounds
- Month counts that are not whole numbers or make no sense
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from core.config import SimulationParameters, SizingInputs

logger = logging.getLogger(__name__)

MAX_DURATION_MONTHS = 600


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one input set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _non_finite(result: ValidationResult, **values: float) -> bool:
    bad = [name for name, v in values.items() if not np.isfinite(v)]
    if bad:
        result.errors.append(f"Non-finite values: {bad}")
    return bool(bad)


def _is_whole(value: float) -> bool:
    return float(value).is_integer()


def validate_simulation_parameters(params: SimulationParameters) -> ValidationResult:
    """
    Run all checks on a simulation parameter set.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    if _non_finite(
        result,
        initial_capital=params.initial_capital,
        monthly_contribution=params.monthly_contribution,
        monthly_interest_rate=params.monthly_interest_rate,
        withdrawal_rate=params.withdrawal_rate,
        withdrawal_start_month=params.withdrawal_start_month,
        duration_months=params.duration_months,
    ):
        logger.info("Simulation parameters rejected: %s", result.errors)
        return result  # the range checks below assume finite numbers

    # --- Money ---
    if params.initial_capital < 0:
        result.errors.append("Initial capital cannot be negative.")
    if params.monthly_contribution < 0:
        result.errors.append("Monthly contribution cannot be negative.")

    # --- Rates ---
    if params.monthly_interest_rate <= 0:
        result.warnings.append(
            "Monthly interest rate is zero or negative; the balance will not grow."
        )
    if not 0 <= params.withdrawal_rate <= 100:
        result.errors.append("Withdrawal rate must be between 0% and 100% of profit.")

    # --- Months ---
    if not _is_whole(params.duration_months):
        result.errors.append("Duration must be a whole number of months.")
    elif params.duration_months < 1:
        result.errors.append("Duration must be at least 1 month.")
    elif params.duration_months > MAX_DURATION_MONTHS:
        result.warnings.append(
            f"Duration of {params.duration_months} months exceeds {MAX_DURATION_MONTHS}."
        )

    if not _is_whole(params.withdrawal_start_month):
        result.errors.append("Withdrawal start month must be a whole number.")
    elif params.withdrawal_start_month < 1:
        result.warnings.append("Withdrawal start month < 1; withdrawals apply from month 1.")
    elif params.withdrawal_start_month > params.duration_months:
        result.warnings.append(
            "Withdrawal start month is after the last simulated month; no withdrawals."
        )

    if not result.is_valid:
        logger.info("Simulation parameters rejected: %s", result.errors)
    return result


def validate_sizing_inputs(inputs: SizingInputs) -> ValidationResult:
    result = ValidationResult()

    if _non_finite(
        result,
        balance=inputs.balance,
        risk_percentage=inputs.risk_percentage,
        payout_percentage=inputs.payout_percentage,
    ):
        logger.info("Sizing inputs rejected: %s", result.errors)
        return result

    if inputs.balance < 0:
        result.errors.append("Balance cannot be negative.")

    if inputs.risk_percentage < 0 or inputs.risk_percentage > 100:
        result.errors.append("Risk must be between 0% and 100% of the balance.")
    elif inputs.risk_percentage == 0:
        result.warnings.append("Risk is 0%; every entry will be zero.")

    if inputs.payout_percentage < 0:
        result.errors.append("Payout cannot be negative.")
    elif inputs.payout_percentage > 100:
        result.warnings.append(
            f"Payout of {inputs.payout_percentage}% is above 100%; check the broker's quote."
        )

    if not result.is_valid:
        logger.info("Sizing inputs rejected: %s", result.errors)
    return result


def validate_target_balance(target_balance: float) -> ValidationResult:
    result = ValidationResult()
    if _non_finite(result, target_balance=target_balance):
        return result
    if target_balance < 0:
        result.errors.append("Target balance cannot be negative.")
    return result
