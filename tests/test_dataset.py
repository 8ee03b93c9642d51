"""Tests for synthetic dataset generation."""

import numpy as np
import pytest

from regressionAPP.core.dataset import Dataset, generate_dataset
from regressionAPP.core.errors import InvalidConfigurationError


@pytest.mark.parametrize("size", [1, 7, 1000])
def test_generated_dataset_has_size_and_bounded_x(size):
    ds = generate_dataset(size, rng=0)
    assert ds.size == size
    assert len(ds) == size
    assert ds.x.shape == ds.y.shape == (size,)
    assert np.all(ds.x >= 0.0)
    assert np.all(ds.x < 3.0)


def test_regenerating_keeps_structure():
    for seed in range(5):
        ds = generate_dataset(50, rng=seed)
        assert ds.size == 50
        assert np.all((ds.x >= 0.0) & (ds.x < 3.0))


def test_defaults():
    ds = generate_dataset(rng=1)
    assert ds.size == 1000
    assert ds.learning_rate == 1e-2


def test_same_seed_same_dataset():
    a = generate_dataset(100, rng=42)
    b = generate_dataset(100, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(a.x, b.x)
    np.testing.assert_array_equal(a.y, b.y)


def test_noise_only_in_intercept():
    ds = generate_dataset(500, rng=7, t0_base=9.0, t1=2.0)
    offset = ds.y - 2.0 * ds.x - 9.0
    assert np.all(offset >= -1e-12)
    assert np.all(offset < 1.0)
    # not exactly linear
    assert offset.std() > 0.1


def test_noise_free_dataset_is_exactly_linear():
    ds = generate_dataset(200, rng=7, t0_base=4.0, t1=-1.5, intercept_noise=0.0)
    np.testing.assert_allclose(ds.y, 4.0 - 1.5 * ds.x)


def test_empty_dataset_rejected():
    with pytest.raises(InvalidConfigurationError):
        generate_dataset(0)
    with pytest.raises(InvalidConfigurationError):
        Dataset(x=np.array([]), y=np.array([]))


def test_mismatched_lengths_rejected():
    with pytest.raises(InvalidConfigurationError):
        Dataset(x=[0.0, 1.0], y=[1.0])


def test_non_finite_learning_rate_rejected():
    with pytest.raises(InvalidConfigurationError):
        Dataset(x=[0.0], y=[1.0], learning_rate=float("nan"))


def test_dataset_is_read_only():
    ds = generate_dataset(10, rng=0)
    with pytest.raises(ValueError):
        ds.x[0] = 100.0
    with pytest.raises(AttributeError):
        ds.learning_rate = 1.0


def test_with_learning_rate_shares_samples():
    ds = generate_dataset(10, rng=0)
    other = ds.with_learning_rate(0.5)
    assert other.learning_rate == 0.5
    np.testing.assert_array_equal(other.x, ds.x)
    np.testing.assert_array_equal(other.y, ds.y)
