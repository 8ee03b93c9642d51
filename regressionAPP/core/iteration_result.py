"""
iteration_result.py

Структура даних для представлення результатів окремих кроків спуску.
Використовується як у движку, так і в GUI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np


@dataclass
class IterationResult:
    """
    Опис одного кроку оптимізаційного процесу.

    Атрибути:
        index      - номер кроку (0, 1, 2, ...)
        theta      - параметри (θ0, θ1) після кроку
        cost       - сумарна вартість Σ cost_i при цих параметрах
        step_norm  - max |Δθ_i| на цьому кроці
        meta       - довільна додаткова інформація (градієнт, lr, ...)
    """
    index: int
    theta: np.ndarray
    cost: float
    step_norm: float
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "IterationResult",
]
