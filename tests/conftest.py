"""Pytest configuration and shared fixtures for PayoffSage tests.

Provides debt/profile factories and float helpers, and points the data
directory at a temporary path so no test writes logs into the working tree.
"""

from __future__ import annotations

import pytest

from payoffsage.models import Debt, RetirementProfile


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep logs and charts under the per-test temporary directory."""
    monkeypatch.setenv("PAYOFFSAGE_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("PAYOFFSAGE_DEV_MODE", "false")
    for name in ("PAYOFFSAGE_MAX_MONTHS", "PAYOFFSAGE_DEFAULT_STRATEGY", "PAYOFFSAGE_ROLL_MINIMUMS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "instance"


@pytest.fixture
def debt_factory():
    """Factory for creating Debt records with sensible defaults.

    Usage:
        debt = debt_factory(id="card", balance=1200.0, rate=19.9)
    """
    counter = {"n": 0}

    def _create_debt(
        id=None,
        name=None,
        balance: float = 1000.0,
        rate: float = 12.0,
        minimum: float = 50.0,
        original_amount=None,
        lender: str = "Test Bank",
        due_day: int = 15,
    ) -> Debt:
        counter["n"] += 1
        debt_id = id if id is not None else f"debt-{counter['n']}"
        return Debt(
            id=debt_id,
            name=name or f"Debt {debt_id}",
            balance=balance,
            annual_interest_rate_percent=rate,
            minimum_payment=minimum,
            original_amount=original_amount,
            lender=lender,
            due_day=due_day,
        )

    return _create_debt


@pytest.fixture
def mixed_debts(debt_factory):
    """Three debts where avalanche and snowball priorities differ."""
    return [
        debt_factory(id="card", balance=5000.0, rate=22.0, minimum=120.0),
        debt_factory(id="car", balance=8000.0, rate=6.0, minimum=200.0),
        debt_factory(id="store", balance=900.0, rate=12.0, minimum=35.0),
    ]


@pytest.fixture
def profile_factory():
    """Factory for RetirementProfile records based on the planner defaults."""

    def _create_profile(**overrides) -> RetirementProfile:
        values = dict(
            current_age=35,
            retirement_age=65,
            life_expectancy=90,
            current_savings=150000.0,
            monthly_contribution=1500.0,
            desired_monthly_income=5000.0,
            expected_annual_return_percent=7.0,
            annual_inflation_percent=3.0,
            social_security_monthly_estimate=2000.0,
        )
        values.update(overrides)
        return RetirementProfile(**values)

    return _create_profile


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)
    """
    assert abs(actual - expected) <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {abs(actual - expected)})"
    )
