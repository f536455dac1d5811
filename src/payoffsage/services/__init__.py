"""Service module exports."""

from . import debts, retirement

__all__ = ["debts", "retirement"]
