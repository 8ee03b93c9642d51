"""Tests for the batch gradient descent step."""

import numpy as np
import pytest

from regressionAPP.core.batch_step import BatchGradientStep
from regressionAPP.core.dataset import Dataset, generate_dataset
from regressionAPP.core.errors import InvalidConfigurationError
from regressionAPP.core.step_base import StepResult


def test_single_sample_accumulation():
    ds = Dataset(x=[3.0], y=[4.0], learning_rate=0.1)
    executor = BatchGradientStep()

    grad_sum = executor.accumulate(np.array([1.0, 2.0]), ds)

    np.testing.assert_allclose(grad_sum, [6.0, 18.0])
    assert executor.grad_evals == 1


def test_single_sample_update_is_in_place():
    ds = Dataset(x=[3.0], y=[4.0], learning_rate=0.1)
    theta = np.array([1.0, 2.0])

    res = BatchGradientStep().step(theta, ds)

    assert isinstance(res, StepResult)
    np.testing.assert_allclose(theta, [0.7, 1.1])
    np.testing.assert_allclose(res.theta_new, theta)
    np.testing.assert_allclose(res.gradient_sum, [6.0, 18.0])
    assert res.step_norm == pytest.approx(0.9)
    assert res.meta["learning_rate"] == 0.1


def test_update_is_averaged_over_dataset():
    # Дубль одного зразка не змінює кроку: ділення на 2N
    ds = Dataset(x=[3.0, 3.0], y=[4.0, 4.0], learning_rate=0.1)
    theta = np.array([1.0, 2.0])

    BatchGradientStep().step(theta, ds)

    np.testing.assert_allclose(theta, [0.7, 1.1])


def test_one_oracle_call_per_sample():
    ds = generate_dataset(37, rng=0)
    executor = BatchGradientStep()
    theta = np.zeros(2)

    executor.step(theta, ds)
    executor.step(theta, ds)

    assert executor.grad_evals == 2 * 37
    executor.reset()
    assert executor.grad_evals == 0


def test_vectorized_matches_per_sample_loop():
    ds = generate_dataset(200, rng=5)
    theta_loop = np.array([0.5, -1.0])
    theta_vec = theta_loop.copy()

    loop = BatchGradientStep()
    vec = BatchGradientStep(options={"vectorized": True})
    for _ in range(10):
        loop.step(theta_loop, ds)
        vec.step(theta_vec, ds)

    np.testing.assert_allclose(theta_vec, theta_loop, rtol=1e-10, atol=1e-12)
    assert vec.grad_evals == loop.grad_evals == 10 * 200


def test_custom_oracle_is_used():
    calls = []

    def zero_oracle(theta_0, theta_1, x, y):
        calls.append((theta_0, theta_1, x, y))
        return 0.0, 0.0, 0.0, 0.0

    ds = Dataset(x=[1.0, 2.0], y=[3.0, 5.0])
    theta = np.array([1.0, 1.0])

    res = BatchGradientStep(oracle=zero_oracle).step(theta, ds)

    assert len(calls) == 2
    np.testing.assert_array_equal(theta, [1.0, 1.0])
    assert res.step_norm == 0.0


@pytest.mark.parametrize(
    "theta",
    [
        np.zeros(3),
        np.zeros((2, 1)),
        np.array([1, 2]),
        [0.0, 0.0],
    ],
)
def test_step_rejects_bad_theta(theta):
    ds = Dataset(x=[1.0], y=[1.0])
    with pytest.raises(InvalidConfigurationError):
        BatchGradientStep().step(theta, ds)
