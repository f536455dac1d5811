"""Debt and payoff policy inputs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional

from ._parsing import parse_bool, parse_date, parse_float, parse_int, pick

DEFAULT_MAX_MONTHS = 360


class Strategy(str, Enum):
    """Priority rule used to pick the debt that receives the extra payment."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"


@dataclass(frozen=True, slots=True)
class Debt:
    """A liability snapshot handed to the payoff simulator.

    Instances are never mutated by the engine; balances evolve in a private
    working map for the duration of a run.
    """

    id: Any
    name: str
    balance: float
    annual_interest_rate_percent: float
    minimum_payment: float
    original_amount: Optional[float] = None
    lender: str = ""
    due_day: int = 1

    @property
    def principal_at_origination(self) -> float:
        if self.original_amount is None:
            return self.balance
        return self.original_amount


@dataclass(frozen=True, slots=True)
class PayoffPolicy:
    """How extra money is applied across the debt set."""

    strategy: Strategy | str = Strategy.AVALANCHE
    extra_monthly_payment: float = 0.0
    roll_minimums_forward: bool = False
    max_months: int = DEFAULT_MAX_MONTHS
    start_date: Optional[date] = None


def debt_from_dict(payload: Mapping[str, Any]) -> Debt:
    """Build a ``Debt`` from a JSON-style mapping (camelCase or snake_case keys)."""

    debt_id = pick(payload, "id", "_id", "debtId", "debt_id")
    if debt_id is None:
        raise ValueError("Debt payload is missing an id.")
    balance = parse_float(
        pick(payload, "balance", "currentBalance", "current_balance"), field="balance"
    )
    original = pick(payload, "originalAmount", "original_amount")
    return Debt(
        id=debt_id,
        name=str(pick(payload, "name", default=debt_id)),
        balance=balance,
        annual_interest_rate_percent=parse_float(
            pick(
                payload,
                "annualInterestRatePercent",
                "annual_interest_rate_percent",
                "interestRate",
                "interest_rate",
                "apr",
                default=0.0,
            ),
            field="interest rate",
        ),
        minimum_payment=parse_float(
            pick(payload, "minimumPayment", "minimum_payment", default=0.0),
            field="minimum payment",
        ),
        original_amount=None if original is None else parse_float(original, field="original amount"),
        lender=str(pick(payload, "lender", default="") or ""),
        due_day=parse_int(pick(payload, "dueDay", "due_day", default=1), field="due day"),
    )


def policy_from_dict(payload: Mapping[str, Any]) -> PayoffPolicy:
    """Build a ``PayoffPolicy`` from a JSON-style mapping."""

    raw_strategy = str(pick(payload, "strategy", "method", default=Strategy.AVALANCHE.value))
    try:
        strategy = Strategy(raw_strategy.strip().lower())
    except ValueError as exc:
        raise ValueError(f"Invalid debt payoff strategy: {raw_strategy!r}") from exc
    start = pick(payload, "startDate", "start_date")
    return PayoffPolicy(
        strategy=strategy,
        extra_monthly_payment=parse_float(
            pick(payload, "extraMonthlyPayment", "extra_monthly_payment", "extra", default=0.0),
            field="extra payment",
        ),
        roll_minimums_forward=parse_bool(
            pick(payload, "rollMinimumsForward", "roll_minimums_forward", default=False)
        ),
        max_months=parse_int(
            pick(payload, "maxMonths", "max_months", default=DEFAULT_MAX_MONTHS), field="max months"
        ),
        start_date=None if start is None else parse_date(start),
    )
