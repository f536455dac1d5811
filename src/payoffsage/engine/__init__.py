"""Deterministic, stateless financial projection kernel."""

from .errors import ErrorKind, SimulationError
from .payoff import simulate_payoff
from .results import (
    BalancePoint,
    PayoffResult,
    RetirementResult,
    ScheduleEntry,
    TrajectoryPoint,
)
from .retirement import LevelWithdrawalModel, NestEggModel, PresentValueModel, project_retirement
from .strategies import order_debts

__all__ = [
    "BalancePoint",
    "ErrorKind",
    "LevelWithdrawalModel",
    "NestEggModel",
    "PayoffResult",
    "PresentValueModel",
    "RetirementResult",
    "ScheduleEntry",
    "SimulationError",
    "TrajectoryPoint",
    "order_debts",
    "project_retirement",
    "simulate_payoff",
]
