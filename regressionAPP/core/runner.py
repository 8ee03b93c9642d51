"""
runner.py

Фабрики та запуск за RunConfig: набір даних, стратегія кроку, движок,
а також прогін кількох learning rate на одному наборі даних.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from .batch_step import BatchGradientStep
from .config import RunConfig
from .dataset import Dataset, generate_dataset
from .engine import IterationCallback, OptimizationEngine, OptimizationRunResult
from .errors import InvalidConfigurationError
from .functions import ORACLES
from .results_summary import ResultsSummary

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_LEARNING_RATES: Tuple[float, ...] = (1e-3, 3e-3, 1e-2, 3e-2, 1e-1)


def create_dataset(cfg: RunConfig) -> Dataset:
    return generate_dataset(
        cfg.size,
        cfg.seed,
        learning_rate=cfg.learning_rate,
        t0_base=cfg.t0_base,
        t1=cfg.t1,
    )


def create_executor(cfg: RunConfig) -> BatchGradientStep:
    return BatchGradientStep(
        oracle=ORACLES[cfg.oracle],
        options={"vectorized": cfg.vectorized},
    )


def run_config(
    cfg: RunConfig,
    dataset: Optional[Dataset] = None,
    callback: Optional[IterationCallback] = None,
) -> Tuple[Dataset, OptimizationRunResult]:
    """
    Перевірити конфігурацію, (за потреби) згенерувати дані та запустити спуск.
    """
    cfg.validate()
    if dataset is None:
        dataset = create_dataset(cfg)

    engine = OptimizationEngine(max_steps=cfg.max_steps, eps=cfg.eps)
    result = engine.run(
        create_executor(cfg),
        dataset,
        theta0=cfg.theta0,
        callback=callback,
    )
    return dataset, result


def run_learning_rate_sweep(
    cfg: RunConfig,
    learning_rates: Iterable[float] = DEFAULT_SWEEP_LEARNING_RATES,
    dataset: Optional[Dataset] = None,
) -> ResultsSummary:
    """
    Запустити спуск для кожного learning rate на одному й тому ж наборі даних.

    Запуски з неприпустимим learning rate пропускаються з попередженням у лог.
    """
    cfg.validate()
    if dataset is None:
        dataset = create_dataset(cfg)

    engine = OptimizationEngine(max_steps=cfg.max_steps, eps=cfg.eps)
    summary = ResultsSummary()

    for lr in learning_rates:
        try:
            lr_dataset = dataset.with_learning_rate(lr)
        except InvalidConfigurationError as exc:
            logger.warning("Skipping learning rate %r: %s", lr, exc)
            continue

        result = engine.run(create_executor(cfg), lr_dataset, theta0=cfg.theta0)
        result.method_name = f"{result.method_name} (lr={lr:g})"
        summary.add_run(result)

    return summary


__all__ = [
    "DEFAULT_SWEEP_LEARNING_RATES",
    "create_dataset",
    "create_executor",
    "run_config",
    "run_learning_rate_sweep",
]
