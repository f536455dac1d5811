"""Configuration tests."""

from __future__ import annotations

import pytest

from payoffsage.config import BaseConfig, TestConfig
from payoffsage.models import Strategy


def test_defaults(isolated_data_dir):
    config = BaseConfig()

    assert config.DATA_DIR == isolated_data_dir.resolve()
    assert config.DATA_DIR.exists()
    assert config.MAX_MONTHS == 360
    assert config.DEFAULT_STRATEGY is Strategy.AVALANCHE
    assert config.ROLL_MINIMUMS_FORWARD is False
    assert config.DEV_MODE is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAYOFFSAGE_MAX_MONTHS", "480")
    monkeypatch.setenv("PAYOFFSAGE_DEFAULT_STRATEGY", "Snowball")
    monkeypatch.setenv("PAYOFFSAGE_ROLL_MINIMUMS", "on")

    config = TestConfig()

    assert config.TESTING is True
    assert config.MAX_MONTHS == 480
    assert config.DEFAULT_STRATEGY is Strategy.SNOWBALL
    assert config.ROLL_MINIMUMS_FORWARD is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("PAYOFFSAGE_MAX_MONTHS", "forever"),
        ("PAYOFFSAGE_MAX_MONTHS", "0"),
        ("PAYOFFSAGE_DEFAULT_STRATEGY", "hybrid"),
    ],
)
def test_invalid_environment(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        BaseConfig()


def test_default_policy_applies_overrides(monkeypatch):
    monkeypatch.setenv("PAYOFFSAGE_MAX_MONTHS", "240")
    config = BaseConfig()

    policy = config.default_policy(extra_monthly_payment=125.0, strategy=None)

    assert policy.max_months == 240
    assert policy.extra_monthly_payment == 125.0
    assert policy.strategy is Strategy.AVALANCHE
