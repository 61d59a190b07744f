from __future__ import annotations

from typing import Tuple

# Column order of a monthly ledger row, as rendered in tables and frames.
ROW_COLUMNS: Tuple[str, ...] = (
    "month",
    "start_balance",
    "contribution",
    "total_invested",
    "profit",
    "total_after_profit",
    "withdrawal",
    "end_balance",
)

# Running totals appended by engine.frames.rows_to_frame().
CUMULATIVE_COLUMNS: Tuple[str, ...] = (
    "cum_contribution",
    "cum_profit",
    "cum_withdrawal",
)
