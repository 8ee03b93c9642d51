"""
engine.py

Ітераційний двигун градієнтного спуску.

Функціонал:
    - виконує цикл θ <- step(θ) для довільного StepExecutor;
    - формує трасу кроків (для таблиць і графіків);
    - перевіряє збіжність за зміною параметрів (eps);
    - обмежує кількість кроків (max_steps);
    - повертає і фінальні параметри, і причину зупинки (RunStatus);
    - підтримує callback для оновлення GUI / логів після кожного кроку.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .batch_step import BatchGradientStep
from .convergence import has_converged
from .dataset import Dataset
from .errors import InvalidConfigurationError
from .functions import ArrayLike, GradientOracle, analytic_gradient, total_cost
from .iteration_result import IterationResult
from .step_base import StepExecutor, StepResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10000
DEFAULT_EPS = 1e-6


class RunStatus(str, enum.Enum):
    """Стан автомата оптимізації; CONVERGED та MAX_STEPS_REACHED - термінальні."""
    RUNNING = "running"
    CONVERGED = "converged"
    MAX_STEPS_REACHED = "max_steps_reached"


@dataclass
class OptimizationRunResult:
    """
    Підсумок одного запуску оптимізації.

    Атрибути:
        method_name   - назва стратегії кроку (StepExecutor.name).
        iterations    - список IterationResult (траса процесу).
        theta_star    - фінальні параметри (θ0, θ1).
        cost_star     - сумарна вартість у theta_star.
        n_steps       - кількість виконаних кроків.
        grad_evals    - кількість викликів оракула градієнта.
        learning_rate - крок навчання набору даних.
        status        - причина зупинки (RunStatus).
    """
    method_name: str
    iterations: List[IterationResult]
    theta_star: np.ndarray
    cost_star: float
    n_steps: int
    grad_evals: int
    learning_rate: float
    status: RunStatus

    @property
    def converged(self) -> bool:
        return self.status is RunStatus.CONVERGED

    @property
    def stopped_by(self) -> str:
        return self.status.value


# Тип callback'а для GUI/логів
IterationCallback = Callable[[IterationResult], None]


def _validate_theta(theta0: ArrayLike) -> np.ndarray:
    theta = np.array(theta0, dtype=float)
    if theta.shape != (2,):
        raise InvalidConfigurationError(
            f"Початкові параметри повинні мати дві компоненти (θ0, θ1), отримано форму {theta.shape}."
        )
    if not np.all(np.isfinite(theta)):
        raise InvalidConfigurationError("Початкові параметри повинні бути скінченними.")
    return theta


class OptimizationEngine:
    """
    Движок, який керує ітераційним процесом для заданого StepExecutor.

    Налаштування за замовчуванням (можуть бути переозначені у run()):
        max_steps : межа лічильника кроків (default: 10000); без збіжності
                    виконується max_steps + 1 прохід, max_steps = 0 дає один
        eps       : поріг зміни кожного параметра (default: 1e-6)
    """

    def __init__(
        self,
        max_steps: int = DEFAULT_MAX_STEPS,
        eps: float = DEFAULT_EPS,
    ) -> None:
        self.max_steps_default = max_steps
        self.eps_default = eps

    def run(
        self,
        executor: StepExecutor,
        dataset: Dataset,
        theta0: ArrayLike = (0.0, 0.0),
        max_steps: Optional[int] = None,
        eps: Optional[float] = None,
        callback: Optional[IterationCallback] = None,
    ) -> OptimizationRunResult:
        """
        Запустити процес оптимізації з початкових параметрів theta0.
        """
        max_steps = max_steps if max_steps is not None else self.max_steps_default
        eps = eps if eps is not None else self.eps_default

        if max_steps < 0:
            raise InvalidConfigurationError(f"max_steps має бути >= 0, отримано {max_steps}.")
        if not eps >= 0.0:
            raise InvalidConfigurationError(f"eps має бути >= 0, отримано {eps}.")

        theta = _validate_theta(theta0)

        executor.reset()

        logger.info(
            "Start %s: N=%d, lr=%g, max_steps=%d, eps=%g, theta0=%s",
            executor.name,
            dataset.size,
            dataset.learning_rate,
            max_steps,
            eps,
            theta.tolist(),
        )

        iterations: List[IterationResult] = []
        status = RunStatus.RUNNING
        diverged_reported = False
        step = 0

        while status is RunStatus.RUNNING:
            previous = theta.copy()

            # Один повний прохід по набору даних; theta оновлюється на місці
            step_res: StepResult = executor.step(theta, dataset)

            cost_k = total_cost(theta, dataset.x, dataset.y)
            meta = dict(step_res.meta or {})
            meta["gradient_sum"] = step_res.gradient_sum

            rec = IterationResult(
                index=step,
                theta=step_res.theta_new.copy(),
                cost=cost_k,
                step_norm=float(step_res.step_norm),
                meta=meta,
            )
            iterations.append(rec)

            logger.debug(
                "Step #%d theta_0=%.10g theta_1=%.10g cost=%.6e",
                step,
                theta[0],
                theta[1],
                cost_k,
            )
            if callback is not None:
                callback(rec)

            if not np.isfinite(cost_k) and not diverged_reported:
                logger.warning(
                    "Cost became non-finite at step %d (lr=%g); consider a smaller learning rate",
                    step,
                    dataset.learning_rate,
                )
                diverged_reported = True

            if has_converged(previous, theta, eps):
                status = RunStatus.CONVERGED
            else:
                step += 1
                if step > max_steps:
                    status = RunStatus.MAX_STEPS_REACHED

        result = OptimizationRunResult(
            method_name=executor.name,
            iterations=iterations,
            theta_star=theta.copy(),
            cost_star=iterations[-1].cost,
            n_steps=len(iterations),
            grad_evals=executor.grad_evals,
            learning_rate=dataset.learning_rate,
            status=status,
        )

        logger.info(
            "Finished %s: status=%s, steps=%d, theta=%s, cost=%.6e",
            result.method_name,
            result.status.value,
            result.n_steps,
            result.theta_star.tolist(),
            result.cost_star,
        )

        return result


def optimize(
    theta: ArrayLike,
    dataset: Dataset,
    max_steps: int = DEFAULT_MAX_STEPS,
    eps: float = DEFAULT_EPS,
    oracle: GradientOracle = analytic_gradient,
    callback: Optional[IterationCallback] = None,
) -> OptimizationRunResult:
    """
    Batch gradient descent з параметрів theta до збіжності або max_steps.
    """
    engine = OptimizationEngine(max_steps=max_steps, eps=eps)
    return engine.run(
        BatchGradientStep(oracle=oracle),
        dataset,
        theta0=theta,
        callback=callback,
    )


__all__ = [
    "DEFAULT_MAX_STEPS",
    "DEFAULT_EPS",
    "RunStatus",
    "IterationResult",
    "OptimizationRunResult",
    "IterationCallback",
    "OptimizationEngine",
    "optimize",
]
