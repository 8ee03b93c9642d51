"""
persistence.py

Текстові файли для побудови графіків (наприклад, у gnuplot):
    - набір даних: "x<TAB>y" на рядок, у порядку генерації;
    - підгонка:    "x<TAB>f(θ0, θ1, x)" для кожного x набору даних.
"""

from __future__ import annotations

import os
from typing import Union

import numpy as np

from .dataset import DEFAULT_LEARNING_RATE, Dataset
from .errors import InvalidConfigurationError
from .functions import ArrayLike, fitted_values

PathLike = Union[str, "os.PathLike[str]"]

DATASET_FILENAME = "dataset_gd.dat"
FIT_FILENAME = "out_gd.dat"


def save_dataset(path: PathLike, dataset: Dataset) -> None:
    """Записати пари (x, y) у двоколонковий текстовий файл."""
    np.savetxt(path, np.column_stack([dataset.x, dataset.y]), delimiter="\t", fmt="%.17g")


def save_fit(path: PathLike, dataset: Dataset, theta: ArrayLike) -> None:
    """Записати (x, f(θ0, θ1, x)) для кожного x набору даних."""
    y_fit = fitted_values(theta, dataset.x)
    np.savetxt(path, np.column_stack([dataset.x, y_fit]), delimiter="\t", fmt="%.17g")


def load_dataset(path: PathLike, learning_rate: float = DEFAULT_LEARNING_RATE) -> Dataset:
    """Прочитати набір даних, збережений save_dataset()."""
    data = np.loadtxt(path, dtype=float, ndmin=2)
    if data.size == 0 or data.shape[1] != 2:
        raise InvalidConfigurationError(f"Файл {path} не містить двоколонкових даних (x, y).")
    return Dataset(x=data[:, 0], y=data[:, 1], learning_rate=learning_rate)


__all__ = [
    "DATASET_FILENAME",
    "FIT_FILENAME",
    "save_dataset",
    "save_fit",
    "load_dataset",
]
