"""Tests for strategy comparison and payoff reporting helpers."""

from __future__ import annotations

import pytest

from payoffsage.engine import PayoffResult, SimulationError, simulate_payoff
from payoffsage.models import PayoffPolicy, Strategy
from payoffsage.services.debts import (
    compare_strategies,
    debt_breakdown,
    interest_saved_vs_minimum,
    schedule_summary,
)
from payoffsage.services.retirement import additional_monthly_contribution, allocation_for, resolve_model
from payoffsage.engine import project_retirement


def test_compare_recommends_avalanche_for_mixed_rates(mixed_debts):
    comparison = compare_strategies(mixed_debts, PayoffPolicy(extra_monthly_payment=250.0))

    assert isinstance(comparison.avalanche, PayoffResult)
    assert isinstance(comparison.snowball, PayoffResult)
    assert comparison.avalanche.strategy is Strategy.AVALANCHE
    assert comparison.snowball.strategy is Strategy.SNOWBALL
    assert comparison.recommended is Strategy.AVALANCHE
    assert comparison.interest_difference >= 0


def test_compare_to_dict(mixed_debts):
    data = compare_strategies(mixed_debts).to_dict()

    assert data["recommended"] == "avalanche"
    assert set(data["avalanche"]) == {"total_months", "total_interest", "total_paid", "payoff_order"}


def test_compare_with_failures(debt_factory):
    stuck = debt_factory(id="stuck", balance=10000.0, rate=24.0, minimum=150.0)

    comparison = compare_strategies([stuck])

    assert isinstance(comparison.avalanche, SimulationError)
    assert comparison.recommended is None
    assert comparison.interest_difference is None
    assert comparison.to_dict()["avalanche"]["error"] == "non_convergent"


def test_interest_saved_by_extra_payment(mixed_debts):
    saved = interest_saved_vs_minimum(mixed_debts, PayoffPolicy(extra_monthly_payment=200.0))

    assert saved is not None
    assert saved > 0


def test_interest_saved_is_none_when_minimums_never_finish(debt_factory):
    debt = debt_factory(balance=10000.0, rate=24.0, minimum=150.0)

    assert interest_saved_vs_minimum([debt], PayoffPolicy(extra_monthly_payment=100.0)) is None


def test_schedule_summary(debt_factory):
    from datetime import date

    result = simulate_payoff(
        [debt_factory(balance=300.0, rate=0.0, minimum=100.0)],
        PayoffPolicy(start_date=date(2024, 11, 1)),
    )

    label, interest, months = schedule_summary(result)

    assert label == "Jan 25"
    assert interest == 0.0
    assert months == 3


def test_schedule_summary_empty():
    result = simulate_payoff([], PayoffPolicy())
    assert schedule_summary(result) == (None, 0.0, 0)


def test_debt_breakdown_follows_payoff_order(mixed_debts):
    result = simulate_payoff(mixed_debts, PayoffPolicy(strategy="snowball", extra_monthly_payment=150.0))

    rows = debt_breakdown(mixed_debts, result)

    assert [row["debt_id"] for row in rows] == list(result.payoff_order)
    months = [row["payoff_month"] for row in rows]
    assert months == sorted(months)
    assert sum(row["interest_paid"] for row in rows) == pytest.approx(result.total_interest)


def test_additional_contribution(profile_factory):
    profile = profile_factory(current_savings=0.0, monthly_contribution=500.0)
    outcome = project_retirement(profile)
    result = outcome.partial if isinstance(outcome, SimulationError) else outcome

    extra = additional_monthly_contribution(profile, result)

    assert extra == pytest.approx(result.required_monthly_contribution - 500.0)


def test_resolve_model_rejects_unknown_name():
    assert resolve_model("present-value") is not None
    with pytest.raises(ValueError, match="Unknown nest egg model"):
        resolve_model("annuity")


@pytest.mark.parametrize(
    "risk_profile, stocks, bonds, cash",
    [
        ("conservative", 30, 50, 15),
        ("moderate", 60, 25, 10),
        ("aggressive", 80, 10, 5),
    ],
)
def test_allocation_for_risk_profile(risk_profile, stocks, bonds, cash):
    allocation = allocation_for(risk_profile)

    assert allocation == {"stocks": stocks, "bonds": bonds, "cash": cash, "realestate": 5}
    assert sum(allocation.values()) == 100


def test_allocation_is_a_copy():
    allocation_for("moderate")["stocks"] = 0
    assert allocation_for("Moderate")["stocks"] == 60


def test_allocation_rejects_unknown_profile():
    with pytest.raises(ValueError, match="Unknown risk profile"):
        allocation_for("reckless")
