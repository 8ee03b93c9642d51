"""
config.py

Параметри запуску: розмір набору даних, крок навчання, критерії зупинки,
початкові параметри та налаштування генератора.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .dataset import DEFAULT_LEARNING_RATE, DEFAULT_SIZE
from .engine import DEFAULT_EPS, DEFAULT_MAX_STEPS
from .errors import InvalidConfigurationError
from .functions import ORACLES

ENV_PREFIX = "REGRESSION_"


@dataclass
class RunConfig:
    size: int = DEFAULT_SIZE
    learning_rate: float = DEFAULT_LEARNING_RATE
    max_steps: int = DEFAULT_MAX_STEPS
    eps: float = DEFAULT_EPS
    theta0: Tuple[float, float] = (0.0, 0.0)
    seed: Optional[int] = None
    t0_base: float = 9.0
    t1: float = 2.0
    oracle: str = "analytic"
    vectorized: bool = False

    def validate(self) -> None:
        """Перевірити параметри; кидає InvalidConfigurationError."""
        if self.size < 1:
            raise InvalidConfigurationError(f"size має бути >= 1, отримано {self.size}.")
        if not math.isfinite(self.learning_rate):
            raise InvalidConfigurationError("learning_rate повинен бути скінченним числом.")
        if self.max_steps < 0:
            raise InvalidConfigurationError(f"max_steps має бути >= 0, отримано {self.max_steps}.")
        if not self.eps >= 0.0:
            raise InvalidConfigurationError(f"eps має бути >= 0, отримано {self.eps}.")
        if len(self.theta0) != 2:
            raise InvalidConfigurationError("theta0 повинен мати дві компоненти (θ0, θ1).")
        if self.oracle not in ORACLES:
            raise InvalidConfigurationError(
                f"Невідомий оракул градієнта '{self.oracle}'. Доступні: {sorted(ORACLES)}."
            )

    @staticmethod
    def from_env() -> RunConfig:
        env = os.environ
        seed = env.get(f"{ENV_PREFIX}SEED")
        theta0 = env.get(f"{ENV_PREFIX}THETA0", "0,0").split(",")
        return RunConfig(
            size=int(env.get(f"{ENV_PREFIX}SIZE", str(DEFAULT_SIZE))),
            learning_rate=float(env.get(f"{ENV_PREFIX}LEARNING_RATE", str(DEFAULT_LEARNING_RATE))),
            max_steps=int(env.get(f"{ENV_PREFIX}MAX_STEPS", str(DEFAULT_MAX_STEPS))),
            eps=float(env.get(f"{ENV_PREFIX}EPS", str(DEFAULT_EPS))),
            theta0=tuple(float(v) for v in theta0),
            seed=int(seed) if seed else None,
            t0_base=float(env.get(f"{ENV_PREFIX}T0_BASE", "9.0")),
            t1=float(env.get(f"{ENV_PREFIX}T1", "2.0")),
            oracle=env.get(f"{ENV_PREFIX}ORACLE", "analytic"),
            vectorized=env.get(f"{ENV_PREFIX}VECTORIZED", "0").lower() in ("1", "true", "yes"),
        )


__all__ = [
    "ENV_PREFIX",
    "RunConfig",
]
