"""Tests for the optimization loop."""

import logging

import numpy as np
import pytest

from regressionAPP.core.batch_step import BatchGradientStep
from regressionAPP.core.dataset import Dataset, generate_dataset
from regressionAPP.core.engine import OptimizationEngine, RunStatus, optimize
from regressionAPP.core.errors import InvalidConfigurationError
from regressionAPP.core.functions import total_cost


@pytest.fixture
def line_dataset():
    x = np.linspace(0.0, 2.9, 30)
    return Dataset(x=x, y=4.0 - 1.5 * x, learning_rate=0.2)


def test_noise_free_data_recovers_true_line(line_dataset):
    res = optimize((0.0, 0.0), line_dataset, max_steps=5000, eps=1e-12)

    assert res.status is RunStatus.CONVERGED
    assert res.converged
    assert res.n_steps < 5000
    np.testing.assert_allclose(res.theta_star, [4.0, -1.5], atol=1e-6)
    assert res.cost_star == pytest.approx(0.0, abs=1e-9)


def test_noisy_data_converges_to_least_squares_line():
    ds = generate_dataset(1000, rng=123)
    engine = OptimizationEngine()

    res = engine.run(BatchGradientStep(options={"vectorized": True}), ds)

    assert res.status is RunStatus.CONVERGED
    slope, intercept = np.polyfit(ds.x, ds.y, 1)
    assert res.theta_star[0] == pytest.approx(intercept, abs=1e-2)
    assert res.theta_star[1] == pytest.approx(slope, abs=1e-2)
    assert res.theta_star[0] == pytest.approx(9.5, abs=0.1)
    assert res.theta_star[1] == pytest.approx(2.0, abs=0.1)


def test_cost_mostly_non_increasing_under_default_configuration():
    ds = generate_dataset(rng=0)

    res = OptimizationEngine().run(BatchGradientStep(options={"vectorized": True}), ds)

    assert res.status is RunStatus.CONVERGED

    costs = [total_cost(np.zeros(2), ds.x, ds.y)] + [it.cost for it in res.iterations]
    non_increasing = sum(b <= a for a, b in zip(costs, costs[1:]))
    assert non_increasing >= 0.95 * (len(costs) - 1)
    assert costs[-1] < costs[0]


def test_step_counter_stops_once_it_exceeds_max_steps():
    ds = generate_dataset(20, rng=1)

    res = optimize((0.0, 0.0), ds, max_steps=7, eps=0.0)

    assert res.status is RunStatus.MAX_STEPS_REACHED
    assert res.stopped_by == "max_steps_reached"
    assert res.n_steps == 8
    assert [it.index for it in res.iterations] == list(range(8))
    assert res.grad_evals == 8 * 20


def test_zero_max_steps_runs_a_single_pass():
    ds = generate_dataset(20, rng=1)

    res = optimize((0.0, 0.0), ds, max_steps=0, eps=0.0)

    assert res.status is RunStatus.MAX_STEPS_REACHED
    assert res.n_steps == 1
    assert res.iterations[-1].index == 0


@pytest.mark.parametrize("eps", [0.0, 1e-6])
def test_zero_learning_rate_converges_immediately(eps):
    ds = generate_dataset(10, rng=2, learning_rate=0.0)

    res = optimize((1.0, -1.0), ds, max_steps=100, eps=eps)

    assert res.status is RunStatus.CONVERGED
    assert res.n_steps == 1
    assert res.iterations[-1].index == 0
    np.testing.assert_array_equal(res.theta_star, [1.0, -1.0])


def test_callback_sees_each_completed_step(line_dataset):
    seen = []

    def callback(it):
        seen.append((it.index, it.theta.copy(), it.cost))

    res = optimize((0.0, 0.0), line_dataset, max_steps=25, eps=0.0, callback=callback)

    assert len(seen) == res.n_steps == 26
    for (index, theta, cost_k), it in zip(seen, res.iterations):
        assert index == it.index
        np.testing.assert_array_equal(theta, it.theta)
        assert cost_k == pytest.approx(total_cost(theta, line_dataset.x, line_dataset.y))
    np.testing.assert_array_equal(seen[-1][1], res.theta_star)


def test_iteration_records_step_details(line_dataset):
    res = optimize((0.0, 0.0), line_dataset, max_steps=3, eps=0.0)

    first = res.iterations[0]
    assert first.step_norm > 0.0
    assert first.meta["learning_rate"] == 0.2
    assert first.meta["gradient_sum"].shape == (2,)


def test_initial_theta_is_not_mutated(line_dataset):
    theta0 = np.array([0.0, 0.0])
    optimize(theta0, line_dataset, max_steps=5, eps=0.0)
    np.testing.assert_array_equal(theta0, [0.0, 0.0])


def test_engine_run_overrides_defaults(line_dataset):
    engine = OptimizationEngine(max_steps=1000, eps=1e-6)
    res = engine.run(BatchGradientStep(), line_dataset, max_steps=4, eps=0.0)
    assert res.n_steps == 5
    assert res.learning_rate == 0.2
    assert res.method_name == "Batch gradient descent"


@pytest.mark.parametrize("kwargs", [{"max_steps": -1}, {"max_steps": -3}, {"eps": -1e-6}, {"eps": float("nan")}])
def test_invalid_stopping_criteria_rejected(line_dataset, kwargs):
    with pytest.raises(InvalidConfigurationError):
        optimize((0.0, 0.0), line_dataset, **kwargs)


@pytest.mark.parametrize("theta0", [(0.0,), (0.0, 0.0, 0.0), (np.inf, 0.0)])
def test_invalid_initial_theta_rejected(line_dataset, theta0):
    with pytest.raises(InvalidConfigurationError):
        optimize(theta0, line_dataset)


def test_divergence_is_logged_once(caplog):
    ds = generate_dataset(50, rng=3, learning_rate=5.0)

    with caplog.at_level(logging.WARNING, logger="regressionAPP.core.engine"):
        res = optimize((0.0, 0.0), ds, max_steps=2000, eps=1e-6)

    assert res.status is RunStatus.MAX_STEPS_REACHED
    assert not np.isfinite(res.cost_star)
    warnings = [r for r in caplog.records if "non-finite" in r.getMessage()]
    assert len(warnings) == 1
