"""Month-by-month multi-debt payoff simulation (avalanche / snowball)."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional

from ..models.debt import Debt, PayoffPolicy, Strategy
from .amortization import apply_payment, charged_amount, is_negative_amortization, monthly_interest
from .errors import ErrorKind, SimulationError, invalid_input
from .results import BalancePoint, PayoffResult, ScheduleEntry, build_payoff_result
from .strategies import coerce_strategy, order_debts


def month_label(start: Optional[date], month: int) -> Optional[str]:
    """Label for simulated *month* (1-based); month 1 is the start date's month."""

    if start is None:
        return None
    index = start.month - 1 + (month - 1)
    year = start.year + index // 12
    return date(year, index % 12 + 1, 1).strftime("%b %y")


def _validate(debts: list[Debt], policy: PayoffPolicy) -> Optional[SimulationError]:
    if policy.extra_monthly_payment < 0:
        return invalid_input("Extra monthly payment cannot be negative.")
    if policy.max_months < 1:
        return invalid_input("Simulation horizon must be at least one month.")
    seen: set[Any] = set()
    for debt in debts:
        if debt.id in seen:
            return invalid_input(f"Duplicate debt id {debt.id!r}.", debt_id=debt.id)
        seen.add(debt.id)
        if debt.balance < 0:
            return invalid_input(f"Debt {debt.name!r} has a negative balance.", debt_id=debt.id)
        if debt.annual_interest_rate_percent < 0:
            return invalid_input(f"Debt {debt.name!r} has a negative interest rate.", debt_id=debt.id)
        if debt.minimum_payment < 0:
            return invalid_input(f"Debt {debt.name!r} has a negative minimum payment.", debt_id=debt.id)
        if debt.balance > debt.principal_at_origination:
            return invalid_input(
                f"Debt {debt.name!r} balance exceeds its original amount.", debt_id=debt.id
            )
    return None


def _find_non_convergent(ordered: list[Debt], policy: PayoffPolicy) -> Optional[Debt]:
    """Return the first debt whose month-one payment cannot cover its interest.

    Only the priority debt receives the extra payment; every other debt must
    amortize on its minimum alone.
    """

    target_seen = False
    for debt in ordered:
        if debt.balance <= 0:
            continue
        payment = debt.minimum_payment
        if not target_seen:
            payment += policy.extra_monthly_payment
            target_seen = True
        interest = monthly_interest(debt.balance, debt.annual_interest_rate_percent)
        if is_negative_amortization(payment, interest):
            return debt
    return None


def simulate_payoff(
    debts: Iterable[Debt], policy: PayoffPolicy
) -> PayoffResult | SimulationError:
    """Simulate paying down *debts* under *policy*.

    Returns a ``PayoffResult`` when every balance reaches zero within
    ``policy.max_months``. Otherwise returns a ``SimulationError``:
    ``INVALID_INPUT`` for bad numbers, ``NON_CONVERGENT`` when some debt can
    never amortize, and ``INCOMPLETE`` (carrying the truncated result) when the
    horizon runs out first. Input debts are not modified.
    """

    debt_list = list(debts)
    try:
        strategy = coerce_strategy(policy.strategy)
    except ValueError:
        return invalid_input(f"Invalid debt payoff strategy: {policy.strategy!r}")
    problem = _validate(debt_list, policy)
    if problem is not None:
        return problem

    ordered = order_debts(debt_list, strategy)
    stuck = _find_non_convergent(ordered, policy)
    if stuck is not None:
        return SimulationError(
            kind=ErrorKind.NON_CONVERGENT,
            message=f"Payment on {stuck.name!r} does not exceed its monthly interest.",
            debt_id=stuck.id,
        )

    balances = {debt.id: debt.balance for debt in ordered}
    payoff_order: list[Any] = [debt.id for debt in ordered if debt.balance == 0]
    entries: list[ScheduleEntry] = []
    series: list[BalancePoint] = []
    freed_minimums = 0.0
    previous_total = sum(balances.values())
    month = 0

    while previous_total > 0 and month < policy.max_months:
        month += 1
        label = month_label(policy.start_date, month)
        extra_pool = policy.extra_monthly_payment
        if policy.roll_minimums_forward:
            extra_pool += freed_minimums
        target_paid = False

        for debt in ordered:
            balance = balances[debt.id]
            if balance <= 0:
                continue
            interest = monthly_interest(balance, debt.annual_interest_rate_percent)
            payment = debt.minimum_payment
            if not target_paid:
                payment += extra_pool
                target_paid = True
            if is_negative_amortization(payment, interest):
                return SimulationError(
                    kind=ErrorKind.NON_CONVERGENT,
                    message=f"Payment on {debt.name!r} does not cover interest in month {month}.",
                    debt_id=debt.id,
                    partial=build_payoff_result(
                        entries=entries,
                        balance_series=series,
                        payoff_order=payoff_order,
                        strategy=strategy,
                        complete=False,
                    ),
                )

            principal, new_balance = apply_payment(balance, payment, interest)
            balances[debt.id] = new_balance
            entries.append(
                ScheduleEntry(
                    month=month,
                    debt_id=debt.id,
                    payment=charged_amount(balance, payment, interest),
                    principal=principal,
                    interest=interest,
                    remaining_balance=new_balance,
                    debt_name=debt.name,
                    label=label,
                )
            )
            if new_balance == 0:
                payoff_order.append(debt.id)
                freed_minimums += debt.minimum_payment

        total = sum(balances.values())
        series.append(BalancePoint(month=month, balance=total, label=label))
        if total >= previous_total:
            stalled = next(d for d in ordered if balances[d.id] > 0)
            return SimulationError(
                kind=ErrorKind.NON_CONVERGENT,
                message=f"Balance stopped decreasing in month {month}.",
                debt_id=stalled.id,
                partial=build_payoff_result(
                    entries=entries,
                    balance_series=series,
                    payoff_order=payoff_order,
                    strategy=strategy,
                    complete=False,
                ),
            )
        previous_total = total

    complete = previous_total == 0
    result = build_payoff_result(
        entries=entries,
        balance_series=series,
        payoff_order=payoff_order,
        strategy=strategy,
        complete=complete,
    )
    if not complete:
        return SimulationError(
            kind=ErrorKind.INCOMPLETE,
            message=f"Debts remain after {policy.max_months} months.",
            partial=result,
        )
    return result


def minimum_only_policy(policy: PayoffPolicy) -> PayoffPolicy:
    """Same horizon and strategy as *policy* with no extra money applied."""

    return PayoffPolicy(
        strategy=policy.strategy,
        extra_monthly_payment=0.0,
        roll_minimums_forward=False,
        max_months=policy.max_months,
        start_date=policy.start_date,
    )


def with_strategy(policy: PayoffPolicy, strategy: Strategy) -> PayoffPolicy:
    return PayoffPolicy(
        strategy=strategy,
        extra_monthly_payment=policy.extra_monthly_payment,
        roll_minimums_forward=policy.roll_minimums_forward,
        max_months=policy.max_months,
        start_date=policy.start_date,
    )
