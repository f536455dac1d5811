"""Result records and the aggregation step that assembles them."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Optional

from ..models.debt import Strategy


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    """One debt's payment in one simulated month."""

    month: int
    debt_id: Any
    payment: float
    principal: float
    interest: float
    remaining_balance: float
    debt_name: str = ""
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BalancePoint:
    """Total outstanding balance across all debts after a month."""

    month: int
    balance: float
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PayoffResult:
    total_months: int
    total_interest: float
    total_paid: float
    schedule: tuple[ScheduleEntry, ...]
    balance_series: tuple[BalancePoint, ...]
    payoff_order: tuple[Any, ...]
    strategy: Strategy
    complete: bool = True

    def entries_for(self, debt_id: Any) -> list[ScheduleEntry]:
        return [entry for entry in self.schedule if entry.debt_id == debt_id]

    def sub_schedules(self) -> dict[Any, list[ScheduleEntry]]:
        """Group the flat schedule by debt, preserving month order."""
        grouped: dict[Any, list[ScheduleEntry]] = {}
        for entry in self.schedule:
            grouped.setdefault(entry.debt_id, []).append(entry)
        return grouped

    def payoff_month(self, debt_id: Any) -> Optional[int]:
        """Month in which *debt_id* reached zero, ``0`` if it started paid off."""
        if debt_id not in self.payoff_order:
            return None
        for entry in self.schedule:
            if entry.debt_id == debt_id and entry.remaining_balance == 0:
                return entry.month
        return 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "complete": self.complete,
            "total_months": self.total_months,
            "total_interest": self.total_interest,
            "total_paid": self.total_paid,
            "payoff_order": list(self.payoff_order),
            "balance_series": [asdict(point) for point in self.balance_series],
            "schedule": [asdict(entry) for entry in self.schedule],
        }


@dataclass(frozen=True, slots=True)
class TrajectoryPoint:
    """Portfolio balance at a given age."""

    age: int
    balance: float
    phase: str


@dataclass(frozen=True, slots=True)
class RetirementResult:
    projected_balance_at_retirement: float
    required_nest_egg: float
    required_monthly_contribution: float
    on_track: bool
    trajectory: tuple[TrajectoryPoint, ...]
    monthly_income_gap: float = 0.0
    annual_withdrawal: float = 0.0
    percentage_to_goal: float = 0.0
    real_return_percent: float = 0.0
    years_to_retirement: int = 0
    years_in_retirement: int = 0

    def balance_at(self, age: int) -> Optional[float]:
        for point in self.trajectory:
            if point.age == age:
                return point.balance
        return None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "projected_balance_at_retirement": self.projected_balance_at_retirement,
            "required_nest_egg": self.required_nest_egg,
            "required_monthly_contribution": self.required_monthly_contribution,
            "on_track": self.on_track,
            "monthly_income_gap": self.monthly_income_gap,
            "annual_withdrawal": self.annual_withdrawal,
            "percentage_to_goal": self.percentage_to_goal,
            "real_return_percent": self.real_return_percent,
            "years_to_retirement": self.years_to_retirement,
            "years_in_retirement": self.years_in_retirement,
        }
        data["trajectory"] = [asdict(point) for point in self.trajectory]
        return data


def build_payoff_result(
    *,
    entries: Iterable[ScheduleEntry],
    balance_series: Iterable[BalancePoint],
    payoff_order: Iterable[Any],
    strategy: Strategy,
    complete: bool,
) -> PayoffResult:
    """Package simulator output; totals are sums of what was recorded."""

    schedule = tuple(entries)
    series = tuple(balance_series)
    return PayoffResult(
        total_months=len(series),
        total_interest=sum(entry.interest for entry in schedule),
        total_paid=sum(entry.payment for entry in schedule),
        schedule=schedule,
        balance_series=series,
        payoff_order=tuple(payoff_order),
        strategy=strategy,
        complete=complete,
    )
