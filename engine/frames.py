"""
DataFrame view of a simulated ledger — the shape tables and charts consume.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.schema import CUMULATIVE_COLUMNS, ROW_COLUMNS

from .simulation import SimulationRow


def rows_to_frame(rows: Sequence[SimulationRow]) -> pd.DataFrame:
    """
    One row per month, columns in ROW_COLUMNS order, plus running totals
    of contribution, profit and withdrawal.

    An empty ledger gives an empty frame with the full column set.
    """
    if len(rows) == 0:
        return pd.DataFrame(columns=list(ROW_COLUMNS) + list(CUMULATIVE_COLUMNS))

    df = pd.DataFrame([row.to_dict() for row in rows], columns=list(ROW_COLUMNS))
    df = df.sort_values("month").reset_index(drop=True)
    df["month"] = df["month"].astype(int)

    df["cum_contribution"] = df["contribution"].cumsum()
    df["cum_profit"] = df["profit"].cumsum()
    df["cum_withdrawal"] = df["withdrawal"].cumsum()
    return df
