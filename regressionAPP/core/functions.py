"""
functions.py

Гіпотеза, функція вартості та оракули градієнта для лінійної регресії.

Формат:
    - гіпотеза f(θ0, θ1, x) = θ0 + θ1 * x;
    - вартість одного зразка cost(θ0, θ1, x, y) = (f(θ0, θ1, x) - y)^2;
    - оракул градієнта повертає чотири часткові похідні вартості
      (∂/∂θ0, ∂/∂θ1, ∂/∂x, ∂/∂y); оптимізатор використовує лише перші дві.
    - усі функції працюють і зі скалярами, і поелементно з numpy-масивами.
    - є реєстр ORACLES для вибору оракула в GUI / конфігурації.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

import numpy as np

ArrayLike = np.ndarray
Gradient4 = Tuple[float, float, float, float]
GradientOracle = Callable[[float, float, float, float], Gradient4]


# ---------------------------------------------------------------------------
# Гіпотеза та функція вартості
# ---------------------------------------------------------------------------

def hypothesis(theta_0, theta_1, x):
    """f(θ0, θ1, x) = θ0 + θ1 * x"""
    return theta_0 + theta_1 * x


def cost(theta_0, theta_1, x, y):
    """
    Квадратична похибка одного зразка:

        cost(θ0, θ1, x, y) = (f(θ0, θ1, x) - y)^2
    """
    f_x = hypothesis(theta_0, theta_1, x)
    return (f_x - y) * (f_x - y)


def total_cost(theta: ArrayLike, x: ArrayLike, y: ArrayLike) -> float:
    """Сумарна вартість Σ cost(θ0, θ1, x_i, y_i) по всьому набору даних."""
    theta_0, theta_1 = np.asarray(theta, dtype=float)
    return float(np.sum(cost(theta_0, theta_1, np.asarray(x), np.asarray(y))))


def fitted_values(theta: ArrayLike, x: ArrayLike) -> ArrayLike:
    """Прогнози f(θ0, θ1, x_i) для кожного x_i (у тому ж порядку)."""
    theta_0, theta_1 = np.asarray(theta, dtype=float)
    return hypothesis(theta_0, theta_1, np.asarray(x, dtype=float))


def cost_surface(x: ArrayLike, y: ArrayLike, theta_0: ArrayLike, theta_1: ArrayLike) -> ArrayLike:
    """
    J(θ0, θ1) = Σ_i (θ0 + θ1 x_i - y_i)^2 для масивів θ0, θ1 будь-якої форми
    (наприклад, сітки meshgrid). Рахується через суми по набору даних.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    theta_0 = np.asarray(theta_0, dtype=float)
    theta_1 = np.asarray(theta_1, dtype=float)

    n = x.size
    sx, sy = x.sum(), y.sum()
    sxx, sxy, syy = (x * x).sum(), (x * y).sum(), (y * y).sum()
    return (
        n * theta_0 ** 2
        + 2.0 * theta_0 * theta_1 * sx
        + theta_1 ** 2 * sxx
        - 2.0 * theta_0 * sy
        - 2.0 * theta_1 * sxy
        + syy
    )


# ---------------------------------------------------------------------------
# Оракули градієнта
# ---------------------------------------------------------------------------

def analytic_gradient(theta_0, theta_1, x, y) -> Gradient4:
    """
    Аналітичний градієнт cost за всіма чотирма аргументами.

    З r = f(θ0, θ1, x) - y:
        ∂cost/∂θ0 = 2r
        ∂cost/∂θ1 = 2r * x
        ∂cost/∂x  = 2r * θ1
        ∂cost/∂y  = -2r
    """
    r = hypothesis(theta_0, theta_1, x) - y
    return 2.0 * r, 2.0 * r * x, 2.0 * r * theta_1, -2.0 * r


ORACLES: Dict[str, GradientOracle] = {
    "analytic": analytic_gradient,
}


__all__ = [
    "ArrayLike",
    "Gradient4",
    "GradientOracle",
    "hypothesis",
    "cost",
    "total_cost",
    "fitted_values",
    "cost_surface",
    "analytic_gradient",
    "ORACLES",
]
