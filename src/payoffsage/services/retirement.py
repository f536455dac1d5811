"""Retirement planning helpers around ``project_retirement``."""

from __future__ import annotations

from ..engine import RetirementResult
from ..engine.retirement import LevelWithdrawalModel, NestEggModel, PresentValueModel
from ..models.retirement import RetirementProfile

NEST_EGG_MODELS = {
    "level": LevelWithdrawalModel(),
    "present-value": PresentValueModel(),
}


def resolve_model(name: str) -> NestEggModel:
    try:
        return NEST_EGG_MODELS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown nest egg model: {name!r}") from exc


def additional_monthly_contribution(
    profile: RetirementProfile, result: RetirementResult
) -> float:
    """How much more than the current contribution is needed each month."""

    if result.on_track:
        return 0.0
    return max(0.0, result.required_monthly_contribution - profile.monthly_contribution)



# Suggested asset mix (percent of portfolio) per investor risk profile.
ALLOCATION_PROFILES: dict[str, dict[str, int]] = {
    "conservative": {"stocks": 30, "bonds": 50, "cash": 15, "realestate": 5},
    "moderate": {"stocks": 60, "bonds": 25, "cash": 10, "realestate": 5},
    "aggressive": {"stocks": 80, "bonds": 10, "cash": 5, "realestate": 5},
}


def allocation_for(risk_profile: str) -> dict[str, int]:
    """Return a copy of the suggested allocation for *risk_profile*."""

    try:
        return dict(ALLOCATION_PROFILES[risk_profile.strip().lower()])
    except KeyError as exc:
        raise ValueError(f"Unknown risk profile: {risk_profile!r}") from exc
