"""Retirement accumulation / drawdown projection."""

from __future__ import annotations

from typing import Optional, Protocol

from ..models.retirement import RetirementProfile
from .amortization import annuity_payment, compound_monthly, future_value, monthly_rate
from .errors import ErrorKind, SimulationError, invalid_input
from .results import RetirementResult, TrajectoryPoint

ACCUMULATION = "accumulation"
DRAWDOWN = "drawdown"

# Balances within half a cent of a target or of zero are treated as equal.
CENT_TOLERANCE = 0.005


class NestEggModel(Protocol):
    """Computes the balance needed at retirement to fund the withdrawals."""

    def required_nest_egg(
        self, *, annual_withdrawal: float, years: int, profile: RetirementProfile
    ) -> float:  # pragma: no cover - interface
        ...


class LevelWithdrawalModel:
    """Withdrawal multiplied by years in retirement; ignores drawdown returns."""

    def required_nest_egg(
        self, *, annual_withdrawal: float, years: int, profile: RetirementProfile
    ) -> float:
        return annual_withdrawal * years


class PresentValueModel:
    """Present value of end-of-year withdrawals discounted at the expected return.

    With this model a projection that hits the target exactly draws the
    balance down to zero at life expectancy.
    """

    def required_nest_egg(
        self, *, annual_withdrawal: float, years: int, profile: RetirementProfile
    ) -> float:
        rate = profile.expected_annual_return_percent / 100.0
        if rate == 0:
            return annual_withdrawal * years
        return annual_withdrawal * (1.0 - (1.0 + rate) ** -years) / rate


def real_return_percent(nominal_percent: float, inflation_percent: float) -> float:
    """Inflation-adjusted return (Fisher relation), as a percentage."""

    return ((1.0 + nominal_percent / 100.0) / (1.0 + inflation_percent / 100.0) - 1.0) * 100.0


def _validate(profile: RetirementProfile) -> Optional[SimulationError]:
    if profile.retirement_age <= profile.current_age:
        return invalid_input("Retirement age must be greater than current age.")
    if profile.life_expectancy <= profile.retirement_age:
        return invalid_input("Life expectancy must be greater than retirement age.")
    amounts = {
        "current savings": profile.current_savings,
        "monthly contribution": profile.monthly_contribution,
        "desired monthly income": profile.desired_monthly_income,
        "expected return": profile.expected_annual_return_percent,
        "inflation rate": profile.annual_inflation_percent,
        "social security estimate": profile.social_security_monthly_estimate,
        "pension estimate": profile.pension_monthly_estimate,
    }
    for label, value in amounts.items():
        if value < 0:
            return invalid_input(f"The {label} cannot be negative.")
    return None


def project_retirement(
    profile: RetirementProfile, nest_egg_model: Optional[NestEggModel] = None
) -> RetirementResult | SimulationError:
    """Project savings to retirement and draw them down to life expectancy.

    Accumulation compounds monthly; drawdown compounds yearly and withdraws the
    income gap at year end. The trajectory holds one point per age, starting
    with today's savings. Running out of money before life expectancy returns
    a ``DEPLETED`` error whose ``age`` is the first age with nothing left; the
    ``partial`` trajectory ends at that age with a zero balance.
    """

    problem = _validate(profile)
    if problem is not None:
        return problem

    model = nest_egg_model or LevelWithdrawalModel()
    rate = monthly_rate(profile.expected_annual_return_percent)
    annual_rate = profile.expected_annual_return_percent / 100.0
    months = profile.years_to_retirement * 12
    annual_withdrawal = profile.monthly_income_gap * 12

    balance = profile.current_savings
    trajectory = [TrajectoryPoint(age=profile.current_age, balance=balance, phase=ACCUMULATION)]
    for year in range(1, profile.years_to_retirement + 1):
        for _ in range(12):
            balance = compound_monthly(balance, rate, profile.monthly_contribution)
        trajectory.append(
            TrajectoryPoint(age=profile.current_age + year, balance=balance, phase=ACCUMULATION)
        )
    projected = balance

    required = model.required_nest_egg(
        annual_withdrawal=annual_withdrawal, years=profile.years_in_retirement, profile=profile
    )
    on_track = projected >= required - CENT_TOLERANCE
    if on_track:
        required_contribution = 0.0
    else:
        shortfall = required - future_value(profile.current_savings, rate, months)
        required_contribution = annuity_payment(shortfall, rate, months)

    if required > 0:
        percentage = min(projected / required * 100.0, 100.0)
    else:
        percentage = 100.0

    depleted_at: Optional[int] = None
    for year in range(1, profile.years_in_retirement + 1):
        balance = balance * (1.0 + annual_rate) - annual_withdrawal
        age = profile.retirement_age + year
        if balance < -CENT_TOLERANCE:
            depleted_at = age
            trajectory.append(TrajectoryPoint(age=age, balance=0.0, phase=DRAWDOWN))
            break
        balance = max(balance, 0.0)
        trajectory.append(TrajectoryPoint(age=age, balance=balance, phase=DRAWDOWN))

    result = RetirementResult(
        projected_balance_at_retirement=projected,
        required_nest_egg=required,
        required_monthly_contribution=required_contribution,
        on_track=on_track,
        trajectory=tuple(trajectory),
        monthly_income_gap=profile.monthly_income_gap,
        annual_withdrawal=annual_withdrawal,
        percentage_to_goal=percentage,
        real_return_percent=real_return_percent(
            profile.expected_annual_return_percent, profile.annual_inflation_percent
        ),
        years_to_retirement=profile.years_to_retirement,
        years_in_retirement=profile.years_in_retirement,
    )
    if depleted_at is not None:
        return SimulationError(
            kind=ErrorKind.DEPLETED,
            message=f"Savings run out at age {depleted_at}.",
            age=depleted_at,
            partial=result,
        )
    return result
