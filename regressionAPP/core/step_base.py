"""
step_base.py

Базові класи та типи для кроку градієнтного спуску (Strategy).

Ідея:
    - Є абстрактний клас StepExecutor; конкретна стратегія
      (BatchGradientStep) реалізує _step_impl(), а движок викликає step().
    - Оракул градієнта передається ззовні: будь-який callable з контрактом
      GradientOracle (аналітичний, символьний, автодиференціювання, ...).

Формат:
    step(theta: np.ndarray, dataset: Dataset) -> StepResult
    theta оновлюється на місці.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from .dataset import Dataset
from .errors import InvalidConfigurationError
from .functions import Gradient4, GradientOracle, analytic_gradient


# ---------------------------------------------------------------------------
# Результат одного кроку
# ---------------------------------------------------------------------------

@dataclass
class StepResult:
    """
    Результат одного кроку спуску.

    Атрибути:
        theta_new     - копія параметрів після кроку (θ0, θ1)
        gradient_sum  - накопичений градієнт (Σ ∂/∂θ0, Σ ∂/∂θ1)
        step_norm     - max |θ_new - θ_old| по компонентах
        meta          - додаткова інформація
    """
    theta_new: np.ndarray
    gradient_sum: np.ndarray
    step_norm: float
    meta: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Базовий клас StepExecutor (Strategy)
# ---------------------------------------------------------------------------

class StepExecutor(ABC):
    """
    Абстрактний базовий клас кроку оптимізації.

    Використання:
        executor = BatchGradientStep(oracle=analytic_gradient)
        executor.reset()
        res = executor.step(theta, dataset)  # StepResult, theta змінено
    """

    def __init__(
        self,
        oracle: Optional[GradientOracle] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.oracle: GradientOracle = oracle or analytic_gradient
        self.options: Dict[str, Any] = options or {}
        self.name: str = name or self.__class__.__name__

        # Кількість обчислених градієнтів по зразках
        self.grad_evals: int = 0

    def eval_grad(self, theta_0, theta_1, x, y, count: int = 1) -> Gradient4:
        """
        Викликати оракул та збільшити лічильник на count.

        grad_evals рахує градієнти по зразках: поелементний виклик з масивами
        x, y довжини N передає count=N.
        """
        self.grad_evals += count
        return self.oracle(theta_0, theta_1, x, y)

    def reset(self) -> None:
        """Скинути лічильники перед новим запуском."""
        self.grad_evals = 0

    def step(self, theta: np.ndarray, dataset: Dataset) -> StepResult:
        """
        Виконати один крок із поточних параметрів theta (на місці).
        """
        if not isinstance(theta, np.ndarray) or theta.shape != (2,) or theta.dtype.kind != "f":
            raise InvalidConfigurationError(
                "theta повинен бути numpy-масивом float форми (2,)."
            )

        result = self._step_impl(theta, dataset)

        if not isinstance(result, StepResult):
            raise TypeError(
                f"{self.__class__.__name__}._step_impl() "
                f"повинен повертати StepResult, отримано: {type(result)}"
            )

        return result

    @abstractmethod
    def _step_impl(self, theta: np.ndarray, dataset: Dataset) -> StepResult:
        raise NotImplementedError


__all__ = [
    "StepResult",
    "StepExecutor",
]
