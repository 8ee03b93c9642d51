"""
dataset.py

Синтетичний набір даних для лінійної регресії.

Ідея:
    y = t0 + t1 * x, де
        x   - обмежений псевдовипадковий дріб з [0, x_scale);
        t0  - t0_base + зсув з [0, intercept_noise), свій для кожного зразка;
        t1  - константа.
    Шум лише у вільному члені, тож точної (нульової) підгонки немає:
    оптимізатор сходиться до усередненої найкращої прямої.

Генератор випадкових чисел передається явно (numpy.random.Generator або seed),
тому набір даних відтворюваний.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from .errors import InvalidConfigurationError
from .functions import hypothesis

RngLike = Union[np.random.Generator, int, None]

DEFAULT_SIZE = 1000
DEFAULT_LEARNING_RATE = 1e-2


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Упорядкований набір пар (x, y) та крок навчання.

    Атрибути:
        x             - вхідні значення, масив форми (N,)
        y             - цільові значення, масив форми (N,)
        learning_rate - множник кроку для оновлення параметрів
    """
    x: np.ndarray
    y: np.ndarray
    learning_rate: float = DEFAULT_LEARNING_RATE

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=float)
        y = np.array(self.y, dtype=float)

        if x.ndim != 1 or y.ndim != 1:
            raise InvalidConfigurationError("x та y мають бути одновимірними масивами.")
        if x.shape != y.shape:
            raise InvalidConfigurationError(
                f"Довжини x ({x.size}) та y ({y.size}) не збігаються."
            )
        if x.size < 1:
            raise InvalidConfigurationError("Набір даних повинен містити хоча б один зразок (N >= 1).")
        if not np.isfinite(self.learning_rate):
            raise InvalidConfigurationError("learning_rate повинен бути скінченним числом.")

        # Після створення дані лише для читання
        x.flags.writeable = False
        y.flags.writeable = False
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "learning_rate", float(self.learning_rate))

    @property
    def size(self) -> int:
        return int(self.x.size)

    def __len__(self) -> int:
        return self.size

    def with_learning_rate(self, learning_rate: float) -> "Dataset":
        """Той самий набір зразків з іншим кроком навчання."""
        return Dataset(x=self.x, y=self.y, learning_rate=learning_rate)


def _as_generator(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_dataset(
    size: int = DEFAULT_SIZE,
    rng: RngLike = None,
    *,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    t0_base: float = 9.0,
    t1: float = 2.0,
    x_scale: float = 3.0,
    intercept_noise: float = 1.0,
    resolution: int = 100,
) -> Dataset:
    """
    Згенерувати Dataset розміру size.

    Parameters
    ----------
    size : int
        Кількість зразків N (N >= 1).
    rng : Generator | int | None
        Джерело випадковості або seed.
    t0_base, t1 : float
        Істинні параметри прямої (ground truth).
    x_scale : float
        x лежить у [0, x_scale).
    intercept_noise : float
        Ширина зсуву вільного члена; 0 дає набір без шуму.
    resolution : int
        Кількість рівнів дробу k / resolution, k ∈ [0, resolution).
    """
    if size < 1:
        raise InvalidConfigurationError(f"Розмір набору даних має бути >= 1, отримано {size}.")
    if resolution < 1:
        raise InvalidConfigurationError(f"resolution має бути >= 1, отримано {resolution}.")

    gen = _as_generator(rng)

    x = x_scale * gen.integers(0, resolution, size=size) / resolution
    t0 = t0_base + intercept_noise * gen.integers(0, resolution, size=size) / resolution
    y = hypothesis(t0, t1, x)

    return Dataset(x=x, y=y, learning_rate=learning_rate)


__all__ = [
    "RngLike",
    "DEFAULT_SIZE",
    "DEFAULT_LEARNING_RATE",
    "Dataset",
    "generate_dataset",
]
