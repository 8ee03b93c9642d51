"""
batch_step.py

Повнопакетний (batch) крок градієнтного спуску як стратегія StepExecutor.

Ідея:
    acc = Σ_i (∂cost/∂θ0, ∂cost/∂θ1)(θ, x_i, y_i)
    θ0 <- θ0 - lr * acc[0] / (2N)
    θ1 <- θ1 - lr * acc[1] / (2N)
Ділення на 2N відповідає середньоквадратичній похибці: двійка скорочує
множник з похідної квадрата.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from .dataset import Dataset
from .functions import GradientOracle
from .step_base import StepExecutor, StepResult


class BatchGradientStep(StepExecutor):
    """
    Класичний batch gradient descent.

    Налаштування (options):
        vectorized : викликати оракул один раз з масивами x, y і сумувати
                     результат (default: False - цикл по зразках).
                     Оракул при цьому має працювати поелементно.
    """

    def __init__(
        self,
        oracle: Optional[GradientOracle] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(
            oracle=oracle,
            options=options,
            name=name or "Batch gradient descent",
        )

    def accumulate(self, theta: np.ndarray, dataset: Dataset) -> np.ndarray:
        """Сума перших двох похідних оракула по всіх зразках."""
        theta_0, theta_1 = float(theta[0]), float(theta[1])

        if self.options.get("vectorized", False):
            d_theta_0, d_theta_1, _, _ = self.eval_grad(
                theta_0, theta_1, dataset.x, dataset.y, count=dataset.size
            )
            return np.array(
                [np.sum(d_theta_0), np.sum(d_theta_1)],
                dtype=float,
            )

        result = np.zeros(2, dtype=float)
        for x_i, y_i in zip(dataset.x, dataset.y):
            # ∂/∂x та ∂/∂y відкидаються
            d_theta_0, d_theta_1, _, _ = self.eval_grad(theta_0, theta_1, float(x_i), float(y_i))
            result[0] += d_theta_0
            result[1] += d_theta_1
        return result

    def _step_impl(self, theta: np.ndarray, dataset: Dataset) -> StepResult:
        theta_old = theta.copy()
        grad_sum = self.accumulate(theta, dataset)

        theta -= dataset.learning_rate * grad_sum / (2 * dataset.size)

        step_norm = float(np.max(np.abs(theta - theta_old)))

        return StepResult(
            theta_new=theta.copy(),
            gradient_sum=grad_sum,
            step_norm=step_norm,
            meta={
                "learning_rate": dataset.learning_rate,
                "grad_evals": self.grad_evals,
            },
        )


__all__ = [
    "BatchGradientStep",
]
