"""
convergence.py

Критерій збіжності: усі компоненти параметрів змінилися не більше ніж на eps.
"""

from __future__ import annotations

import numpy as np

from .functions import ArrayLike


def parameter_change(previous: ArrayLike, current: ArrayLike) -> np.ndarray:
    """|previous_i - current_i| для кожної компоненти."""
    return np.abs(np.asarray(previous, dtype=float) - np.asarray(current, dtype=float))


def has_converged(previous: ArrayLike, current: ArrayLike, eps: float) -> bool:
    """
    True, якщо |previous_i - current_i| <= eps для кожного i.

    На першій ітерації previous - це початкові параметри.
    """
    return bool(np.all(parameter_change(previous, current) <= eps))


__all__ = [
    "parameter_change",
    "has_converged",
]
