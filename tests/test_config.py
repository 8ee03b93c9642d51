"""Tests for run configuration."""

import pytest

from regressionAPP.core.config import RunConfig
from regressionAPP.core.errors import InvalidConfigurationError


def test_defaults_are_valid():
    cfg = RunConfig()
    cfg.validate()
    assert cfg.size == 1000
    assert cfg.learning_rate == 1e-2
    assert cfg.max_steps == 10000
    assert cfg.eps == 1e-6
    assert cfg.theta0 == (0.0, 0.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 0},
        {"max_steps": -1},
        {"eps": -1.0},
        {"learning_rate": float("inf")},
        {"theta0": (1.0,)},
        {"oracle": "numeric"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(InvalidConfigurationError):
        RunConfig(**kwargs).validate()


def test_from_env(monkeypatch):
    monkeypatch.setenv("REGRESSION_SIZE", "250")
    monkeypatch.setenv("REGRESSION_LEARNING_RATE", "0.05")
    monkeypatch.setenv("REGRESSION_MAX_STEPS", "42")
    monkeypatch.setenv("REGRESSION_EPS", "1e-9")
    monkeypatch.setenv("REGRESSION_THETA0", "1.5,-2")
    monkeypatch.setenv("REGRESSION_SEED", "7")
    monkeypatch.setenv("REGRESSION_VECTORIZED", "true")

    cfg = RunConfig.from_env()

    assert cfg.size == 250
    assert cfg.learning_rate == 0.05
    assert cfg.max_steps == 42
    assert cfg.eps == 1e-9
    assert cfg.theta0 == (1.5, -2.0)
    assert cfg.seed == 7
    assert cfg.vectorized is True
    assert cfg.oracle == "analytic"


def test_from_env_without_variables(monkeypatch):
    for name in (
        "SIZE",
        "LEARNING_RATE",
        "MAX_STEPS",
        "EPS",
        "THETA0",
        "SEED",
        "T0_BASE",
        "T1",
        "ORACLE",
        "VECTORIZED",
    ):
        monkeypatch.delenv(f"REGRESSION_{name}", raising=False)

    assert RunConfig.from_env() == RunConfig()


def test_from_env_ground_truth_line(monkeypatch):
    monkeypatch.setenv("REGRESSION_T0_BASE", "4.5")
    monkeypatch.setenv("REGRESSION_T1", "-1.25")

    cfg = RunConfig.from_env()

    assert cfg.t0_base == 4.5
    assert cfg.t1 == -1.25


def test_zero_max_steps_is_valid():
    RunConfig(max_steps=0).validate()
