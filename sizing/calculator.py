"""
Position sizing — entry size, daily stops, and two stake progressions.

  Martingale: after each loss the next stake is multiplied (x2 by default),
              so gale 1 = 2x entry, gale 2 = 4x entry.
  Soros:      after each win the whole proceeds (stake + profit) become the
              next stake, compounding the payout across consecutive hands.

Both ladders have depth 2 under the default policy. Inputs are not range
checked: a zero or negative balance/risk simply yields a zero or negative entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from core.config import DEFAULT_SIZING_POLICY, SizingInputs, SizingPolicy
from core.utils import percent_of

logger = logging.getLogger(__name__)


def _nth(values: Tuple[float, ...], index: int) -> float:
    return values[index] if index < len(values) else 0.0


@dataclass(frozen=True)
class MartingaleLadder:
    """Stakes for successive recovery entries after losses (entry excluded)."""
    levels: Tuple[float, ...]

    @property
    def gale1(self) -> float:
        return _nth(self.levels, 0)

    @property
    def gale2(self) -> float:
        return _nth(self.levels, 1)


@dataclass(frozen=True)
class SorosLadder:
    """Stakes and profits for consecutive winning hands with full reinvestment."""
    hands: Tuple[float, ...]
    profits: Tuple[float, ...]

    @property
    def hand1(self) -> float:
        return _nth(self.hands, 0)

    @property
    def hand1_profit(self) -> float:
        return _nth(self.profits, 0)

    @property
    def hand2(self) -> float:
        return _nth(self.hands, 1)

    @property
    def hand2_profit(self) -> float:
        return _nth(self.profits, 1)

    @property
    def total_profit(self) -> float:
        return sum(self.profits)


@dataclass(frozen=True)
class SizingResult:
    entry_value: float
    potential_profit: float
    stop_loss: float
    stop_win: float
    martingale: MartingaleLadder
    soros: SorosLadder

    # flat accessors for the default depth-2 ladders
    @property
    def gale1(self) -> float:
        return self.martingale.gale1

    @property
    def gale2(self) -> float:
        return self.martingale.gale2

    @property
    def hand1(self) -> float:
        return self.soros.hand1

    @property
    def hand1_profit(self) -> float:
        return self.soros.hand1_profit

    @property
    def hand2(self) -> float:
        return self.soros.hand2

    @property
    def hand2_profit(self) -> float:
        return self.soros.hand2_profit

    @property
    def total_profit(self) -> float:
        return self.soros.total_profit

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Entry Value", "Value": f"{self.entry_value:,.2f}"},
            {"Metric": "Potential Profit", "Value": f"{self.potential_profit:,.2f}"},
            {"Metric": "Stop Loss (daily)", "Value": f"{-self.stop_loss:+,.2f}"},
            {"Metric": "Stop Win (target)", "Value": f"{self.stop_win:+,.2f}"},
        ]
        for i, level in enumerate(self.martingale.levels, start=1):
            rows.append({"Metric": f"Gale {i}", "Value": f"{level:,.2f}"})
        for i, hand in enumerate(self.soros.hands, start=1):
            rows.append({"Metric": f"Soros Hand {i}", "Value": f"{hand:,.2f}"})
        rows.append({"Metric": "Soros Total Profit", "Value": f"{self.total_profit:,.2f}"})
        return pd.DataFrame(rows)


def martingale_ladder(entry_value: float, *, factor: float = 2.0, depth: int = 2) -> MartingaleLadder:
    if depth < 0:
        raise ValueError(f"Martingale depth must be >= 0, got {depth}.")
    levels = []
    stake = entry_value
    for _ in range(depth):
        stake = stake * factor
        levels.append(stake)
    return MartingaleLadder(levels=tuple(levels))


def soros_ladder(entry_value: float, payout_percentage: float, *, depth: int = 2) -> SorosLadder:
    """
    Hand 1 is the entry; each following hand stakes the previous hand plus
    its profit.
    """
    if depth < 0:
        raise ValueError(f"Soros depth must be >= 0, got {depth}.")
    hands = []
    profits = []
    stake = entry_value
    for _ in range(depth):
        profit = percent_of(stake, payout_percentage)
        hands.append(stake)
        profits.append(profit)
        stake = stake + profit
    return SorosLadder(hands=tuple(hands), profits=tuple(profits))


def size_position(
    inputs: SizingInputs,
    policy: Optional[SizingPolicy] = None,
) -> SizingResult:
    """
    Size one entry from balance, risk % and payout %.

    Parameters
    ----------
    inputs : SizingInputs
        Balance plus risk and payout percentages (2 means 2%)
    policy : SizingPolicy, optional
        Stop multiples and ladder shape; defaults to the house policy
        (stop loss 2x, stop win 3x, Martingale x2 depth 2, Soros depth 2)
    """
    pol = policy if policy is not None else DEFAULT_SIZING_POLICY

    entry_value = percent_of(inputs.balance, inputs.risk_percentage)
    logger.debug("Entry value %.2f from balance %.2f", entry_value, inputs.balance)

    return SizingResult(
        entry_value=entry_value,
        potential_profit=percent_of(entry_value, inputs.payout_percentage),
        stop_loss=pol.stop_loss_multiple * entry_value,
        stop_win=pol.stop_win_multiple * entry_value,
        martingale=martingale_ladder(
            entry_value, factor=pol.martingale_factor, depth=pol.martingale_depth
        ),
        soros=soros_ladder(entry_value, inputs.payout_percentage, depth=pol.soros_depth),
    )
