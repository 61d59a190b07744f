"""
Run configuration — simulation parameters, sizing inputs and sizing policy.
Frozen dataclasses with the dashboard defaults; edits go through .replace().
"""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_TARGET_BALANCE = 50_000.0


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs to the month-by-month growth projection.

    Rates are percentages (45 means 45%), not decimals.
    """

    initial_capital: float = 500.0
    monthly_contribution: float = 500.0
    monthly_interest_rate: float = 45.0
    withdrawal_rate: float = 50.0  # share of each month's profit taken out
    withdrawal_start_month: int = 6  # 1-based, inclusive
    duration_months: int = 12

    def replace(self, **changes) -> "SimulationParameters":
        return replace(self, **changes)


@dataclass(frozen=True)
class SizingInputs:
    balance: float = 1000.0
    risk_percentage: float = 2.0
    payout_percentage: float = 87.0

    def replace(self, **changes) -> "SizingInputs":
        return replace(self, **changes)


@dataclass(frozen=True)
class SizingPolicy:
    """
    Fixed multiples behind the stop thresholds and the two ladders.
    The defaults are the house policy; change them only for what-if views.
    """

    stop_loss_multiple: float = 2.0
    stop_win_multiple: float = 3.0
    martingale_factor: float = 2.0
    martingale_depth: int = 2
    soros_depth: int = 2


DEFAULT_SIZING_POLICY = SizingPolicy()
