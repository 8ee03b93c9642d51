"""Tests for the parameter-change convergence test."""

import numpy as np

from regressionAPP.core.convergence import has_converged, parameter_change


def test_small_change_is_converged():
    prev = (1.0, 2.0)
    curr = (1.0 + 5e-7, 2.0 - 5e-7)
    assert has_converged(prev, curr, 1e-6)
    assert not has_converged(prev, curr, 1e-7)


def test_every_component_must_be_within_eps():
    assert not has_converged((0.0, 0.0), (0.0, 1e-3), 1e-6)
    assert not has_converged((0.0, 0.0), (1e-3, 0.0), 1e-6)


def test_threshold_is_inclusive():
    assert has_converged((1.0, 1.0), (1.0, 1.0), 0.0)
    assert has_converged((0.0, 0.0), (0.5, -0.5), 0.5)


def test_parameter_change_is_absolute():
    np.testing.assert_allclose(parameter_change((1.0, -1.0), (0.5, 1.0)), [0.5, 2.0])


def test_non_finite_change_is_not_converged():
    assert not has_converged((0.0, 0.0), (np.nan, 0.0), 1e-6)
    assert not has_converged((0.0, 0.0), (np.inf, 0.0), 1e-6)
