"""Tests for amortization and compounding primitives."""

from __future__ import annotations

import pytest

from payoffsage.engine.amortization import (
    annuity_payment,
    apply_payment,
    charged_amount,
    compound_monthly,
    future_value,
    is_negative_amortization,
    monthly_interest,
    monthly_rate,
)
from tests.conftest import assert_float_equal


def test_monthly_interest_matches_apr_over_twelve():
    assert_float_equal(monthly_interest(1000.0, 24.0), 20.0)
    assert_float_equal(monthly_interest(1000.0, 12.0), 10.0)
    assert monthly_interest(1000.0, 0.0) == 0.0


def test_apply_payment_splits_principal():
    principal, new_balance = apply_payment(1000.0, 50.0, 20.0)
    assert_float_equal(principal, 30.0)
    assert_float_equal(new_balance, 970.0)


def test_apply_payment_caps_principal_at_balance():
    principal, new_balance = apply_payment(40.0, 100.0, 0.5)
    assert principal == 40.0
    assert new_balance == 0.0


def test_payment_below_interest_leaves_balance_unchanged():
    """Negative amortization never increases or decreases the balance."""
    principal, new_balance = apply_payment(1000.0, 10.0, 20.0)
    assert principal == 0.0
    assert new_balance == 1000.0
    assert is_negative_amortization(10.0, 20.0)
    assert is_negative_amortization(20.0, 20.0)
    assert not is_negative_amortization(20.01, 20.0)


def test_charged_amount_never_overshoots_final_balance():
    assert charged_amount(10.0, 50.0, 0.1) == pytest.approx(10.1)
    assert charged_amount(1000.0, 50.0, 20.0) == 50.0


def test_compounding_helpers():
    rate = monthly_rate(6.0)
    assert rate == pytest.approx(0.005)
    assert compound_monthly(1000.0, rate, 100.0) == pytest.approx(1105.0)
    assert future_value(1000.0, rate, 12) == pytest.approx(1000.0 * 1.005**12)


def test_annuity_payment_reaches_target():
    rate = 0.005
    payment = annuity_payment(100000.0, rate, 240)
    balance = 0.0
    for _ in range(240):
        balance = compound_monthly(balance, rate, payment)
    assert_float_equal(balance, 100000.0, tolerance=0.5)


def test_annuity_payment_edge_cases():
    assert annuity_payment(-500.0, 0.005, 120) == 0.0
    assert annuity_payment(1200.0, 0.0, 12) == pytest.approx(100.0)
    assert annuity_payment(1200.0, 0.01, 0) == 0.0
