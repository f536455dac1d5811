"""Small coercion helpers for JSON-style payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

_MISSING = object()


def pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present, non-null value among *keys*."""

    for key in keys:
        value = payload.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def parse_float(value: Any, *, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError(f"Invalid {field}: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc


def parse_int(value: Any, *, field: str) -> int:
    number = parse_float(value, field=field)
    if not number.is_integer():
        raise ValueError(f"Invalid {field}: {value!r} is not a whole number")
    return int(number)


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise ValueError(f"Invalid date: {value!r}") from exc
