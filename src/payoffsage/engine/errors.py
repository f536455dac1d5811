"""Tagged failure outcomes returned by the projection engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Reasons a simulation could not produce a clean result."""

    INVALID_INPUT = "invalid_input"
    NON_CONVERGENT = "non_convergent"
    INCOMPLETE = "incomplete"
    DEPLETED = "depleted"


@dataclass(frozen=True, slots=True)
class SimulationError:
    """Returned (not raised) when a run ends in a reportable failure.

    ``partial`` carries whatever the engine produced before stopping: the
    truncated ``PayoffResult`` for ``INCOMPLETE`` and the ``RetirementResult``
    up to the depletion age for ``DEPLETED``. ``age`` is the first age at
    which the balance is exhausted.
    """

    kind: ErrorKind
    message: str
    debt_id: Optional[Any] = None
    age: Optional[int] = None
    partial: Optional[Any] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"error": self.kind.value, "message": self.message}
        if self.debt_id is not None:
            data["debt_id"] = self.debt_id
        if self.age is not None:
            data["age"] = self.age
        if self.partial is not None:
            data["partial"] = self.partial.to_dict()
        return data


def invalid_input(message: str, *, debt_id: Any = None) -> SimulationError:
    return SimulationError(kind=ErrorKind.INVALID_INPUT, message=message, debt_id=debt_id)
