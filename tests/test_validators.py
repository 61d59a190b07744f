"""Tests for inputs.validators — caller-side range checks."""

from __future__ import annotations

from core.config import SimulationParameters, SizingInputs
from inputs import (
    ValidationResult,
    validate_simulation_parameters,
    validate_sizing_inputs,
    validate_target_balance,
)


class TestSimulationParameters:
    def test_defaults_pass(self):
        vr = validate_simulation_parameters(SimulationParameters())
        assert vr.is_valid
        assert vr.warnings == []

    def test_non_finite_short_circuits(self):
        vr = validate_simulation_parameters(SimulationParameters(initial_capital=float("inf")))
        assert not vr.is_valid
        assert len(vr.errors) == 1
        assert "initial_capital" in vr.errors[0]

    def test_negative_money(self):
        vr = validate_simulation_parameters(
            SimulationParameters(initial_capital=-1, monthly_contribution=-1)
        )
        assert len(vr.errors) == 2

    def test_duration_below_one(self):
        vr = validate_simulation_parameters(SimulationParameters(duration_months=0))
        assert any("at least 1 month" in e for e in vr.errors)

    def test_fractional_duration(self):
        vr = validate_simulation_parameters(SimulationParameters(duration_months=2.5))
        assert any("whole number" in e for e in vr.errors)

    def test_long_duration_warns(self):
        vr = validate_simulation_parameters(SimulationParameters(duration_months=700))
        assert vr.is_valid
        assert any("exceeds" in w for w in vr.warnings)

    def test_withdrawal_rate_bounds(self):
        assert not validate_simulation_parameters(SimulationParameters(withdrawal_rate=120)).is_valid
        assert not validate_simulation_parameters(SimulationParameters(withdrawal_rate=-5)).is_valid
        assert validate_simulation_parameters(SimulationParameters(withdrawal_rate=100)).is_valid

    def test_withdrawal_start_after_horizon_warns(self):
        vr = validate_simulation_parameters(
            SimulationParameters(withdrawal_start_month=13, duration_months=12)
        )
        assert vr.is_valid
        assert any("no withdrawals" in w for w in vr.warnings)

    def test_withdrawal_start_below_one_warns(self):
        vr = validate_simulation_parameters(SimulationParameters(withdrawal_start_month=0))
        assert vr.is_valid
        assert any("month 1" in w for w in vr.warnings)

    def test_flat_interest_warns(self):
        vr = validate_simulation_parameters(SimulationParameters(monthly_interest_rate=0))
        assert vr.is_valid
        assert len(vr.warnings) == 1


class TestSizingInputs:
    def test_defaults_pass(self):
        vr = validate_sizing_inputs(SizingInputs())
        assert vr.is_valid and vr.warnings == []

    def test_negative_balance(self):
        assert not validate_sizing_inputs(SizingInputs(balance=-1)).is_valid

    def test_risk_bounds(self):
        assert not validate_sizing_inputs(SizingInputs(risk_percentage=101)).is_valid
        assert not validate_sizing_inputs(SizingInputs(risk_percentage=-1)).is_valid
        vr = validate_sizing_inputs(SizingInputs(risk_percentage=0))
        assert vr.is_valid and len(vr.warnings) == 1

    def test_payout_bounds(self):
        assert not validate_sizing_inputs(SizingInputs(payout_percentage=-1)).is_valid
        vr = validate_sizing_inputs(SizingInputs(payout_percentage=150))
        assert vr.is_valid and len(vr.warnings) == 1

    def test_nan(self):
        vr = validate_sizing_inputs(SizingInputs(payout_percentage=float("nan")))
        assert not vr.is_valid


class TestTargetBalance:
    def test_positive_target(self):
        assert validate_target_balance(50_000).is_valid

    def test_negative_target(self):
        assert not validate_target_balance(-1).is_valid

    def test_infinite_target(self):
        assert not validate_target_balance(float("inf")).is_valid


def test_merge_and_summary():
    a = ValidationResult(errors=["bad"])
    b = ValidationResult(warnings=["meh"])
    merged = a.merge(b)
    assert merged.errors == ["bad"] and merged.warnings == ["meh"]
    assert "ERRORS (1)" in merged.summary()
    assert "WARNINGS (1)" in merged.summary()
    assert ValidationResult().summary() == "✓ All checks passed."
