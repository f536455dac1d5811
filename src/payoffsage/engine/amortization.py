"""Amortization and compounding primitives shared by both simulators."""

from __future__ import annotations


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage (e.g. ``24.0``) into a monthly fraction."""

    return annual_rate_percent / 100.0 / 12.0


def monthly_interest(balance: float, annual_rate_percent: float) -> float:
    """Interest accrued on *balance* over one month."""

    return balance * monthly_rate(annual_rate_percent)


def apply_payment(balance: float, payment: float, interest: float) -> tuple[float, float]:
    """Split *payment* into principal and return ``(principal, new_balance)``.

    A payment that does not cover the month's interest leaves the balance
    untouched (principal is clamped to zero); see ``is_negative_amortization``.
    """

    principal = max(0.0, min(payment - interest, balance))
    new_balance = max(0.0, balance - principal)
    return principal, new_balance


def charged_amount(balance: float, payment: float, interest: float) -> float:
    """Amount actually paid this month; the final payment never overshoots."""

    return min(payment, balance + interest)


def is_negative_amortization(payment: float, interest: float) -> bool:
    """True when *payment* fails to reduce principal at all."""

    return payment <= interest


def compound_monthly(balance: float, rate: float, contribution: float = 0.0) -> float:
    """One accumulation step: grow by *rate* then add *contribution*."""

    return balance * (1.0 + rate) + contribution


def future_value(present: float, rate: float, months: int) -> float:
    """Future value of a lump sum under monthly compounding."""

    return present * (1.0 + rate) ** months


def annuity_payment(target: float, rate: float, months: int) -> float:
    """Level end-of-month payment whose future value reaches *target*.

    Non-positive targets need no payment. A zero rate degrades to a straight
    division over the horizon.
    """

    if target <= 0 or months <= 0:
        return 0.0
    if rate == 0:
        return target / months
    payment = target * rate / ((1.0 + rate) ** months - 1.0)
    return max(0.0, payment)
