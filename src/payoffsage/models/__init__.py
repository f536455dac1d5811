"""Plain input records consumed by the projection engine."""

from .debt import DEFAULT_MAX_MONTHS, Debt, PayoffPolicy, Strategy, debt_from_dict, policy_from_dict
from .retirement import RetirementProfile, profile_from_dict

__all__ = [
    "DEFAULT_MAX_MONTHS",
    "Debt",
    "PayoffPolicy",
    "RetirementProfile",
    "Strategy",
    "debt_from_dict",
    "policy_from_dict",
    "profile_from_dict",
]
