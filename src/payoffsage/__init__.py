"""PayoffSage debt payoff and retirement projection package."""

from __future__ import annotations

from .engine import ErrorKind, SimulationError, project_retirement, simulate_payoff
from .models import Debt, PayoffPolicy, RetirementProfile, Strategy

__all__ = [
    "Debt",
    "ErrorKind",
    "PayoffPolicy",
    "RetirementProfile",
    "SimulationError",
    "Strategy",
    "project_retirement",
    "simulate_payoff",
]
