"""
Ledger summary — totals, ROI and goal detection over a simulated run.

Recomputed in full from the row sequence on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from engine.simulation import SimulationRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryMetrics:
    """Headline numbers for one projection."""
    final_balance: float = 0.0
    total_withdrawn: float = 0.0
    total_profit: float = 0.0
    total_contributed: float = 0.0
    roi: float = 0.0  # percent
    goal_reached_month: Optional[int] = None

    @property
    def goal_reached(self) -> bool:
        return self.goal_reached_month is not None

    def goal_message(self, target_balance: float) -> str:
        if self.goal_reached_month is None:
            return f"Goal of {target_balance:,.2f} not reached within the simulated horizon."
        return f"Goal of {target_balance:,.2f} reached in month {self.goal_reached_month}."

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Projected Balance", "Value": f"{self.final_balance:,.2f}"},
            {"Metric": "Total Withdrawn", "Value": f"{self.total_withdrawn:,.2f}"},
            {"Metric": "Operating Profit", "Value": f"{self.total_profit:,.2f}"},
            {"Metric": "Total Contributed", "Value": f"{self.total_contributed:,.2f}"},
            {"Metric": "ROI", "Value": f"{self.roi:.1f}%"},
            {
                "Metric": "Goal Month",
                "Value": str(self.goal_reached_month) if self.goal_reached else "N/A",
            },
        ]
        return pd.DataFrame(rows)


def find_goal_month(rows: Sequence[SimulationRow], target_balance: float) -> Optional[int]:
    """
    First month whose end balance meets or exceeds the target.

    Withdrawals can make the balance path non-monotonic, so this is a plain
    in-order scan, never a bisection.
    """
    for row in rows:
        if row.end_balance >= target_balance:
            return row.month
    return None


def summarize(
    rows: Sequence[SimulationRow],
    initial_capital: float,
    target_balance: float,
) -> SummaryMetrics:
    """
    Reduce a ledger to its summary metrics.

    Parameters
    ----------
    rows : sequence of SimulationRow
        Output of engine.simulate(), in month order
    initial_capital : float
        Capital at month 1 (part of the ROI denominator)
    target_balance : float
        Balance the goal detection looks for

    ROI is (final - committed) / committed * 100 with committed =
    initial_capital + total_contributed, and 0 when committed is 0.
    An empty ledger gives all-zero metrics and no goal month.
    """
    if len(rows) == 0:
        return SummaryMetrics()

    final_balance = rows[-1].end_balance
    total_withdrawn = sum(row.withdrawal for row in rows)
    total_profit = sum(row.profit for row in rows)
    total_contributed = sum(row.contribution for row in rows)

    committed = initial_capital + total_contributed
    roi = (final_balance - committed) / committed * 100 if committed != 0 else 0.0

    goal_month = find_goal_month(rows, target_balance)
    logger.debug("Goal %.2f reached in month %s", target_balance, goal_month)

    return SummaryMetrics(
        final_balance=final_balance,
        total_withdrawn=total_withdrawn,
        total_profit=total_profit,
        total_contributed=total_contributed,
        roi=roi,
        goal_reached_month=goal_month,
    )
