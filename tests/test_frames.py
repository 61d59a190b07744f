"""Tests for engine.frames.rows_to_frame."""

from __future__ import annotations

import pytest

from core.schema import CUMULATIVE_COLUMNS, ROW_COLUMNS
from engine import rows_to_frame, simulate


def test_one_row_per_month(scenario_params):
    rows = simulate(scenario_params)
    df = rows_to_frame(rows)
    assert len(df) == 12
    assert list(df.columns) == list(ROW_COLUMNS) + list(CUMULATIVE_COLUMNS)
    assert df["month"].tolist() == list(range(1, 13))
    assert df["end_balance"].iloc[-1] == pytest.approx(rows[-1].end_balance)


def test_cumulative_columns(scenario_params):
    rows = simulate(scenario_params)
    df = rows_to_frame(rows)
    assert df["cum_contribution"].iloc[-1] == pytest.approx(500 * 11)
    assert df["cum_profit"].iloc[-1] == pytest.approx(sum(r.profit for r in rows))
    assert df["cum_withdrawal"].iloc[4] == 0
    assert df["cum_withdrawal"].iloc[-1] == pytest.approx(sum(r.withdrawal for r in rows))


def test_empty_ledger_keeps_columns():
    df = rows_to_frame([])
    assert df.empty
    assert list(df.columns) == list(ROW_COLUMNS) + list(CUMULATIVE_COLUMNS)
