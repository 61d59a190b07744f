"""
Deterministic month-by-month growth projection.

Each month, in order:
  1. Contribution is added (never in month 1, whose money is the initial capital)
  2. Profit accrues on the invested base (start balance + contribution)
  3. From the withdrawal start month onward, a share of that month's profit is taken out
  4. What remains carries into the next month as its start balance

Nothing is validated here. Negative, zero and non-finite inputs flow through
the arithmetic; range checks belong to inputs.validators.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, List

from core.config import SimulationParameters
from core.utils import percent_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationRow:
    """One month of the projected ledger."""
    month: int  # 1-based
    start_balance: float
    contribution: float
    total_invested: float  # start_balance + contribution
    profit: float
    total_after_profit: float  # total_invested + profit
    withdrawal: float
    end_balance: float  # total_after_profit - withdrawal

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def project_month(
    month: int,
    start_balance: float,
    params: SimulationParameters,
) -> SimulationRow:
    """Compute a single ledger row from the balance carried into `month`."""
    contribution = 0.0 if month == 1 else params.monthly_contribution
    total_invested = start_balance + contribution

    profit = percent_of(total_invested, params.monthly_interest_rate)
    total_after_profit = total_invested + profit

    withdrawal = 0.0
    if month >= params.withdrawal_start_month:
        withdrawal = percent_of(profit, params.withdrawal_rate)

    return SimulationRow(
        month=month,
        start_balance=start_balance,
        contribution=contribution,
        total_invested=total_invested,
        profit=profit,
        total_after_profit=total_after_profit,
        withdrawal=withdrawal,
        end_balance=total_after_profit - withdrawal,
    )


def simulate(params: SimulationParameters) -> List[SimulationRow]:
    """
    Project the balance for months 1..duration_months.

    Returns an empty list when duration_months < 1 or is not finite.
    Row n+1 always starts from row n's end balance.
    """
    rows: List[SimulationRow] = []
    current_balance = params.initial_capital

    # a NaN or infinite horizon has no whole months to project
    n_months = int(params.duration_months) if math.isfinite(params.duration_months) else 0

    for month in range(1, n_months + 1):
        row = project_month(month, current_balance, params)
        rows.append(row)
        current_balance = row.end_balance

    logger.debug(
        "Simulated %d months, final balance %.2f",
        len(rows),
        rows[-1].end_balance if rows else 0.0,
    )
    return rows
