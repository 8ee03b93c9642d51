"""
regressionAPP

Лінійна регресія f(θ0, θ1, x) = θ0 + θ1 * x методом batch gradient descent:
ядро (core) та GUI на PyQt6 (ui, app).
"""

__version__ = "1.0.0"
