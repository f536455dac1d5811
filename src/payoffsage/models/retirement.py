"""Retirement planning inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ._parsing import parse_float, parse_int, pick


@dataclass(frozen=True, slots=True)
class RetirementProfile:
    """Savings, income target and market assumptions for one person."""

    current_age: int
    retirement_age: int
    life_expectancy: int
    current_savings: float
    monthly_contribution: float
    desired_monthly_income: float
    expected_annual_return_percent: float
    annual_inflation_percent: float = 0.0
    social_security_monthly_estimate: float = 0.0
    pension_monthly_estimate: float = 0.0

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def years_in_retirement(self) -> int:
        return self.life_expectancy - self.retirement_age

    @property
    def monthly_income_gap(self) -> float:
        """Income the portfolio must fund each month once retired."""
        return max(
            0.0,
            self.desired_monthly_income
            - self.social_security_monthly_estimate
            - self.pension_monthly_estimate,
        )


def profile_from_dict(payload: Mapping[str, Any]) -> RetirementProfile:
    """Build a ``RetirementProfile`` from a JSON-style mapping."""

    def number(*keys: str, field: str, default: Any = None) -> float:
        value = pick(payload, *keys, default=default)
        if value is None:
            raise ValueError(f"Missing {field}.")
        return parse_float(value, field=field)

    def whole(*keys: str, field: str) -> int:
        value = pick(payload, *keys)
        if value is None:
            raise ValueError(f"Missing {field}.")
        return parse_int(value, field=field)

    return RetirementProfile(
        current_age=whole("currentAge", "current_age", field="current age"),
        retirement_age=whole(
            "retirementAge", "retirement_age", "targetRetirementAge", field="retirement age"
        ),
        life_expectancy=whole("lifeExpectancy", "life_expectancy", field="life expectancy"),
        current_savings=number("currentSavings", "current_savings", field="current savings"),
        monthly_contribution=number(
            "monthlyContribution", "monthly_contribution", field="monthly contribution", default=0.0
        ),
        desired_monthly_income=number(
            "desiredMonthlyIncome", "desired_monthly_income", field="desired monthly income"
        ),
        expected_annual_return_percent=number(
            "expectedAnnualReturnPercent",
            "expected_annual_return_percent",
            "expectedReturn",
            field="expected return",
        ),
        annual_inflation_percent=number(
            "annualInflationPercent",
            "annual_inflation_percent",
            "inflationRate",
            field="inflation rate",
            default=0.0,
        ),
        social_security_monthly_estimate=number(
            "socialSecurityMonthlyEstimate",
            "social_security_monthly_estimate",
            "socialSecurityEstimate",
            field="social security estimate",
            default=0.0,
        ),
        pension_monthly_estimate=number(
            "pensionMonthlyEstimate",
            "pension_monthly_estimate",
            "pensionEstimate",
            field="pension estimate",
            default=0.0,
        ),
    )
