"""
TradeVision — Compound Growth & Position Sizing Dashboard
=========================================================

Two independent tools over the same inputs:
  1. Growth Projection:  month-by-month balance with contributions and profit withdrawals
  2. Entry Calculator:   entry size, daily stops, Martingale and Soros ladders

Every widget change reruns the script, and every run recomputes from scratch.

Run: streamlit run app/streamlit_app.py   (or the `tradevision` console script)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_TARGET_BALANCE, SimulationParameters, SizingInputs

from engine.simulation import simulate
from engine.frames import rows_to_frame

from summary.metrics import summarize

from sizing.calculator import size_position

from inputs.validators import (
    validate_simulation_parameters,
    validate_sizing_inputs,
    validate_target_balance,
)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format as BRL with pt-BR separators: R$ 1.234,56."""
    sign = "-" if val < 0 else ""
    body = f"{abs(val):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {body}"


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _growth_chart(df, target_balance, height=360):
    """Balance and accumulated withdrawals as overlapping (unstacked) areas, plus the target rule."""
    long = df.melt(
        id_vars=["month"],
        value_vars=["end_balance", "cum_withdrawal"],
        var_name="series",
        value_name="value",
    )
    long["series"] = long["series"].map(
        {"end_balance": "Total Balance", "cum_withdrawal": "Accumulated Withdrawals"}
    )
    area = (
        alt.Chart(long).mark_area(opacity=0.3, line=True)
        .encode(
            x=alt.X("month:Q", title="Month", axis=alt.Axis(tickMinStep=1)),
            y=alt.Y("value:Q", title="Balance", stack=None, axis=alt.Axis(format="~s")),
            color=alt.Color("series:N", title="Series"),
        )
    )
    rule = (
        alt.Chart(pd.DataFrame({"target": [target_balance]}))
        .mark_rule(strokeDash=[6, 4], color="gold")
        .encode(y="target:Q")
    )
    return (area + rule).properties(height=height)


def _plot_growth(df, target_balance, height=360):
    if len(df) == 0:
        st.info("No data to plot.")
        return
    st.altair_chart(_growth_chart(df, target_balance, height=height), use_container_width=True)


def _plot_profit_vs_withdrawal(df, height=300):
    if len(df) == 0:
        return
    long = df.melt(
        id_vars=["month"],
        value_vars=["profit", "withdrawal"],
        var_name="series",
        value_name="value",
    )
    long["series"] = long["series"].map({"profit": "Monthly Profit", "withdrawal": "Withdrawal"})
    chart = (
        alt.Chart(long).mark_bar()
        .encode(
            x=alt.X("month:O", title="Month"),
            xOffset="series:N",
            y=alt.Y("value:Q", title="Amount", axis=alt.Axis(format="~s")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Page sections
# ---------------------------------------------------------------------------
def _sidebar_parameters():
    defaults = SimulationParameters()
    with st.sidebar:
        st.header("Simulation")
        params = SimulationParameters(
            initial_capital=st.number_input(
                "Initial Capital", min_value=0.0, value=defaults.initial_capital, step=100.0
            ),
            monthly_contribution=st.number_input(
                "Monthly Contribution", min_value=0.0, value=defaults.monthly_contribution, step=100.0
            ),
            monthly_interest_rate=st.number_input(
                "Monthly Interest (%)", value=defaults.monthly_interest_rate, step=1.0
            ),
            withdrawal_rate=st.number_input(
                "Withdrawal (% of profit)", min_value=0.0, max_value=100.0,
                value=defaults.withdrawal_rate, step=5.0,
            ),
            withdrawal_start_month=int(st.number_input(
                "Withdrawals Start at Month", min_value=1, value=defaults.withdrawal_start_month, step=1
            )),
            duration_months=int(st.number_input(
                "Duration (months)", min_value=1, max_value=600, value=defaults.duration_months, step=1
            )),
        )
        target_balance = st.number_input(
            "Target Balance", min_value=0.0, value=DEFAULT_TARGET_BALANCE, step=1000.0
        )
    return params, target_balance


def _render_projection(params, target_balance):
    vr = validate_simulation_parameters(params).merge(validate_target_balance(target_balance))
    if not vr.is_valid:
        st.error("Invalid parameters:\n" + vr.summary())
        return
    for w in vr.warnings:
        st.warning(w)

    rows = simulate(params)
    metrics = summarize(rows, params.initial_capital, target_balance)
    df = rows_to_frame(rows)

    if metrics.goal_reached:
        st.success(metrics.goal_message(target_balance))
    else:
        st.info(metrics.goal_message(target_balance))

    k1, k2, k3, k4 = st.columns(4)
    k1.metric("Projected Balance", _fmt_money(metrics.final_balance), f"ROI {metrics.roi:+.1f}%")
    k2.metric("Total Withdrawn", _fmt_money(metrics.total_withdrawn))
    k3.metric("Operating Profit", _fmt_money(metrics.total_profit))
    k4.metric("Total Invested", _fmt_money(params.initial_capital + metrics.total_contributed))

    left, right = st.columns(2)
    with left:
        st.markdown("**Balance Growth**")
        _plot_growth(df, target_balance)
    with right:
        st.markdown("**Profit vs Withdrawal**")
        _plot_profit_vs_withdrawal(df)

    st.markdown("#### Monthly Ledger")
    display = df.drop(columns=["cum_contribution", "cum_profit", "cum_withdrawal"]).copy()
    for c in display.columns:
        if c != "month":
            display[c] = display[c].apply(_fmt_money)
    st.dataframe(display, use_container_width=True, hide_index=True)


def _render_entry_calculator(default_balance):
    st.markdown("#### Entry Calculator")
    defaults = SizingInputs()
    c1, c2, c3 = st.columns(3)
    inputs = SizingInputs(
        balance=c1.number_input("Current Balance", value=float(default_balance), step=100.0),
        risk_percentage=c2.number_input("Risk (%)", value=defaults.risk_percentage, step=0.5),
        payout_percentage=c3.number_input("Payout (%)", value=defaults.payout_percentage, step=1.0),
    )

    vr = validate_sizing_inputs(inputs)
    if not vr.is_valid:
        st.error("Invalid inputs:\n" + vr.summary())
        return
    for w in vr.warnings:
        st.warning(w)

    result = size_position(inputs)

    e1, e2, e3 = st.columns(3)
    e1.metric("Entry Value", _fmt_money(result.entry_value), f"profit {_fmt_money(result.potential_profit)}")
    e2.metric("Stop Loss (daily)", _fmt_money(-result.stop_loss))
    e3.metric("Stop Win (target)", _fmt_money(result.stop_win))

    m_col, s_col = st.columns(2)
    with m_col:
        st.markdown("**Protection (Martingale)**")
        st.write(f"Gale 1 (2x): {_fmt_money(result.gale1)}")
        st.write(f"Gale 2 (4x): {_fmt_money(result.gale2)}")
        st.caption("Martingale grows the risk exponentially.")
    with s_col:
        st.markdown("**Leverage (Soros level 2)**")
        st.write(f"Hand 1 (entry): {_fmt_money(result.hand1)}")
        st.write(f"Hand 2 (profit + entry): {_fmt_money(result.hand2)}")
        st.write(f"Projected total profit: {_fmt_money(result.total_profit)}")


def render():
    st.set_page_config(page_title="TradeVision", layout="wide")
    st.title("TradeVision")

    params, target_balance = _sidebar_parameters()

    tab_growth, tab_entry = st.tabs(["Growth Projection", "Entry Calculator"])
    with tab_growth:
        _render_projection(params, target_balance)
    with tab_entry:
        _render_entry_calculator(params.initial_capital)


def main():
    """Console entry point: launch this file under `streamlit run`."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    render()
