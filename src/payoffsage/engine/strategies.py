"""Priority ordering for avalanche and snowball payoff plans."""

from __future__ import annotations

from typing import Iterable

from ..models.debt import Debt, Strategy


def coerce_strategy(value: Strategy | str) -> Strategy:
    """Return *value* as a ``Strategy``; raises ``ValueError`` for unknown tags."""

    if isinstance(value, Strategy):
        return value
    return Strategy(str(value).strip().lower())


def order_debts(debts: Iterable[Debt], strategy: Strategy | str) -> list[Debt]:
    """Rank debts once, from the starting balances.

    Avalanche: highest APR first, smaller balance wins a rate tie.
    Snowball: smallest balance first, higher APR wins a balance tie.
    Python's sort is stable, so full ties keep their input order.
    """

    strategy = coerce_strategy(strategy)
    if strategy is Strategy.AVALANCHE:
        return sorted(debts, key=lambda d: (-d.annual_interest_rate_percent, d.balance))
    return sorted(debts, key=lambda d: (d.balance, -d.annual_interest_rate_percent))


def avalanche_order(debts: Iterable[Debt]) -> list[Debt]:
    return order_debts(debts, Strategy.AVALANCHE)


def snowball_order(debts: Iterable[Debt]) -> list[Debt]:
    return order_debts(debts, Strategy.SNOWBALL)
