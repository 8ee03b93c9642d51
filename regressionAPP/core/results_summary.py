"""
results_summary.py

Зведена таблиця результатів кількох запусків градієнтного спуску
(наприклад, для різних learning rate на одному наборі даних).

Працює поверх об'єктів з інтерфейсом OptimizationRunResult:
    - method_name
    - learning_rate
    - theta_star
    - cost_star
    - n_steps
    - grad_evals
    - status
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(run_lr_small)
        summary.add_run(run_lr_large)
        rows = summary.as_rows()  # для GUI / pandas / CSV
    """
    runs: List[Any] = field(default_factory=list)

    def add_run(self, run: Any) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append(run)

    def __len__(self) -> int:
        return len(self.runs)

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків з полями:
            method, learning_rate, theta_star, cost_star,
            n_steps, grad_evals, status
        """
        rows: List[Dict[str, Any]] = []

        for run in self.runs:
            theta_star = getattr(run, "theta_star", None)
            cost_star = getattr(run, "cost_star", None)
            learning_rate = getattr(run, "learning_rate", None)
            n_steps = getattr(run, "n_steps", None)
            grad_evals = getattr(run, "grad_evals", None)
            status = getattr(run, "status", None)

            if isinstance(theta_star, np.ndarray):
                theta_star = theta_star.tolist()

            rows.append(
                {
                    "method": getattr(run, "method_name", "<unknown>"),
                    "learning_rate": float(learning_rate) if learning_rate is not None else None,
                    "theta_star": theta_star,
                    "cost_star": float(cost_star) if cost_star is not None else None,
                    "n_steps": int(n_steps) if n_steps is not None else None,
                    "grad_evals": int(grad_evals) if grad_evals is not None else None,
                    "status": getattr(status, "value", status),
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір "найкращого" запуску
    # ------------------------------------------------------------------

    def best_by_cost(self) -> Optional[Any]:
        """
        Запуск з найменшою скінченною cost_star; None, якщо таких немає.
        """
        best_run = None
        best_cost = None

        for run in self.runs:
            cost_star = getattr(run, "cost_star", None)
            if cost_star is None or not np.isfinite(cost_star):
                continue
            if best_cost is None or cost_star < best_cost:
                best_cost = float(cost_star)
                best_run = run

        return best_run

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.
        """
        import pandas as pd

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
