"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models.debt import DEFAULT_MAX_MONTHS, PayoffPolicy, Strategy

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


class BaseConfig:
    """Base configuration shared across environments.

    Only the command-line layer reads configuration; the engine receives every
    setting as an explicit argument.
    """

    APP_NAME = "PayoffSage"
    LOG_FILENAME = "payoffsage.log"

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("PAYOFFSAGE_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.MAX_MONTHS = _env_int("PAYOFFSAGE_MAX_MONTHS", DEFAULT_MAX_MONTHS)
        self.ROLL_MINIMUMS_FORWARD = _env_bool("PAYOFFSAGE_ROLL_MINIMUMS", default=False)
        raw_strategy = os.getenv("PAYOFFSAGE_DEFAULT_STRATEGY", Strategy.AVALANCHE.value)
        try:
            self.DEFAULT_STRATEGY = Strategy(raw_strategy.strip().lower())
        except ValueError as exc:
            raise ValueError(
                f"PAYOFFSAGE_DEFAULT_STRATEGY must be avalanche or snowball, got {raw_strategy!r}."
            ) from exc
        if self.MAX_MONTHS < 1:
            raise ValueError("PAYOFFSAGE_MAX_MONTHS must be at least 1.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and rendered charts live."""

        data_root = os.getenv("PAYOFFSAGE_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def default_policy(self, **overrides) -> PayoffPolicy:
        """Payoff policy seeded from configuration, with explicit overrides."""

        values = {
            "strategy": self.DEFAULT_STRATEGY,
            "extra_monthly_payment": 0.0,
            "roll_minimums_forward": self.ROLL_MINIMUMS_FORWARD,
            "max_months": self.MAX_MONTHS,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return PayoffPolicy(**values)


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    __test__ = False
    DEBUG = False
    TESTING = True
