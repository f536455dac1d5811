"""Debt payoff planning built on top of the simulation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..engine import PayoffResult, SimulationError, simulate_payoff
from ..engine.payoff import minimum_only_policy, with_strategy
from ..logging_config import get_logger
from ..models.debt import Debt, PayoffPolicy, Strategy

logger = get_logger(__name__)


@dataclass(slots=True)
class StrategyComparison:
    """Avalanche and snowball outcomes for the same debts and extra payment."""

    avalanche: PayoffResult | SimulationError
    snowball: PayoffResult | SimulationError

    @property
    def recommended(self) -> Optional[Strategy]:
        """Strategy with the lower total interest; avalanche wins ties."""
        if isinstance(self.avalanche, SimulationError):
            return None if isinstance(self.snowball, SimulationError) else Strategy.SNOWBALL
        if isinstance(self.snowball, SimulationError):
            return Strategy.AVALANCHE
        if self.snowball.total_interest < self.avalanche.total_interest:
            return Strategy.SNOWBALL
        return Strategy.AVALANCHE

    @property
    def interest_difference(self) -> Optional[float]:
        """Snowball interest minus avalanche interest."""
        if isinstance(self.avalanche, SimulationError) or isinstance(self.snowball, SimulationError):
            return None
        return self.snowball.total_interest - self.avalanche.total_interest

    def to_dict(self) -> dict[str, Any]:
        recommended = self.recommended
        return {
            "recommended": recommended.value if recommended else None,
            "interest_difference": self.interest_difference,
            "avalanche": _summary_or_error(self.avalanche),
            "snowball": _summary_or_error(self.snowball),
        }


def _summary_or_error(outcome: PayoffResult | SimulationError) -> dict[str, Any]:
    if isinstance(outcome, SimulationError):
        return outcome.to_dict()
    return {
        "total_months": outcome.total_months,
        "total_interest": outcome.total_interest,
        "total_paid": outcome.total_paid,
        "payoff_order": list(outcome.payoff_order),
    }


def compare_strategies(
    debts: Iterable[Debt], policy: PayoffPolicy | None = None
) -> StrategyComparison:
    """Run both strategies with the same extra payment and horizon."""

    debt_list = list(debts)
    base = policy or PayoffPolicy()
    comparison = StrategyComparison(
        avalanche=simulate_payoff(debt_list, with_strategy(base, Strategy.AVALANCHE)),
        snowball=simulate_payoff(debt_list, with_strategy(base, Strategy.SNOWBALL)),
    )
    logger.debug(
        "Compared payoff strategies",
        extra={"debts": len(debt_list), "recommended": comparison.recommended},
    )
    return comparison


def interest_saved_vs_minimum(debts: Iterable[Debt], policy: PayoffPolicy) -> Optional[float]:
    """Interest avoided by the extra payment compared with paying minimums only.

    Returns ``None`` when either run fails to finish, since the totals would
    not be comparable.
    """

    debt_list = list(debts)
    planned = simulate_payoff(debt_list, policy)
    baseline = simulate_payoff(debt_list, minimum_only_policy(policy))
    if isinstance(planned, SimulationError) or isinstance(baseline, SimulationError):
        return None
    return baseline.total_interest - planned.total_interest


def schedule_summary(result: PayoffResult) -> tuple[Optional[str], float, int]:
    """Return (payoff label, total interest, months)."""

    if not result.balance_series:
        return None, 0.0, 0
    return result.balance_series[-1].label, result.total_interest, result.total_months


def debt_breakdown(debts: Iterable[Debt], result: PayoffResult) -> list[dict[str, Any]]:
    """Per-debt totals in payoff order, for list/table views."""

    by_id = {debt.id: debt for debt in debts}
    grouped = result.sub_schedules()
    rows = []
    for debt_id in result.payoff_order:
        entries = grouped.get(debt_id, [])
        debt = by_id.get(debt_id)
        rows.append(
            {
                "debt_id": debt_id,
                "name": debt.name if debt else str(debt_id),
                "starting_balance": debt.balance if debt else 0.0,
                "payoff_month": result.payoff_month(debt_id),
                "interest_paid": sum(e.interest for e in entries),
                "total_paid": sum(e.payment for e in entries),
            }
        )
    return rows
