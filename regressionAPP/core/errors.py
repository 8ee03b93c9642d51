"""
errors.py

Винятки ядра. Усі помилки конфігурації виявляються до старту оптимізації.
"""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Некоректні параметри запуску (N = 0, eps < 0, max_steps < 0, ...)."""


__all__ = ["InvalidConfigurationError"]
