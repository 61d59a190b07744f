"""Shared parameter fixtures for the test suites."""

from __future__ import annotations

import pytest

from core.config import SimulationParameters, SizingInputs


@pytest.fixture
def default_params() -> SimulationParameters:
    return SimulationParameters()


@pytest.fixture
def scenario_params() -> SimulationParameters:
    """The dashboard defaults: 500 capital, 500/month, 45%, 50% withdrawn from month 6."""
    return SimulationParameters(
        initial_capital=500.0,
        monthly_contribution=500.0,
        monthly_interest_rate=45.0,
        withdrawal_rate=50.0,
        withdrawal_start_month=6,
        duration_months=12,
    )


@pytest.fixture
def sizing_inputs() -> SizingInputs:
    return SizingInputs(balance=1000.0, risk_percentage=2.0, payout_percentage=87.0)
