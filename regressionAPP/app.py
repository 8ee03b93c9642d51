"""
app.py

Контролер GUI-застосунку лінійної регресії.

Зв'язує:
    - ui.MainWindow (PyQt6)
    - core.runner (набір даних + BatchGradientStep + OptimizationEngine)
    - core.persistence (файли dataset_gd.dat / out_gd.dat)

Функціонал:
    - реагує на сигнал MainWindow.runRequested(RunConfig, bool);
    - валідує конфігурацію, генерує дані та запускає спуск;
    - у callback додає рядки в таблицю кроків (після кожного повного проходу);
    - після завершення оновлює графіки та статистику;
    - у режимі порівняння показує зведену таблицю для кількох learning rate;
    - за командою меню зберігає дані та підгонку у текстові файли.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import numpy as np
from PyQt6.QtWidgets import QApplication, QFileDialog

from .core.config import RunConfig
from .core.dataset import Dataset
from .core.engine import OptimizationRunResult
from .core.errors import InvalidConfigurationError
from .core.iteration_result import IterationResult
from .core.persistence import DATASET_FILENAME, FIT_FILENAME, save_dataset, save_fit
from .core.runner import run_config, run_learning_rate_sweep
from .ui.dialogs import humanize_status, show_error, show_info, show_summary
from .ui.main_window import MainWindow
from .ui.styles import apply_app_style

logger = logging.getLogger(__name__)

# Як часто (у кроках) віддавати керування циклу подій під час запуску
UI_REFRESH_EVERY = 250


class RegressionController:
    """
    Зв'язує MainWindow та ядро.

    Схема:
        GUI --[RunConfig]--> Controller -- run_config() / run_learning_rate_sweep()
        Engine -- callback -> Controller -> MainWindow.add_iteration(...)
        Після завершення: MainWindow.show_run(...) + статистика
    """

    def __init__(self, window: MainWindow) -> None:
        self.window = window
        self.dataset: Optional[Dataset] = None
        self.result: Optional[OptimizationRunResult] = None

        self.window.runRequested.connect(self.on_run_requested)
        self.window.saveRequested.connect(self.on_save_requested)

    def _fail(self, title: str, message: str) -> None:
        show_error(self.window, message, title=title)
        self.window.statusBar().showMessage(f"Помилка: {message}")
        self.window.update_run_stats(None, None, None)

    def on_run_requested(self, cfg: RunConfig, sweep: bool) -> None:
        try:
            cfg.validate()
        except InvalidConfigurationError as exc:
            self._fail("Некоректні параметри", str(exc))
            return

        if sweep:
            self._run_sweep(cfg)
        else:
            self._run_single(cfg)

    # ------------------------------------------------------------------
    # Один запуск
    # ------------------------------------------------------------------

    def _run_single(self, cfg: RunConfig) -> None:
        def iteration_callback(it: IterationResult) -> None:
            self.window.add_iteration(it)
            if it.index % UI_REFRESH_EVERY == 0:
                QApplication.processEvents()

        try:
            dataset, result = run_config(cfg, callback=iteration_callback)
        except InvalidConfigurationError as exc:
            self._fail("Помилка під час оптимізації", str(exc))
            return

        self.dataset = dataset
        self.result = result

        self.window.show_run(dataset, result.iterations, np.array(cfg.theta0, dtype=float), result.theta_star)
        self.window.update_run_stats(result.n_steps, result.grad_evals, humanize_status(result.stopped_by))

        theta_0, theta_1 = result.theta_star
        self.window.statusBar().showMessage(
            f"{result.method_name}: {result.stopped_by}, кроків: {result.n_steps}, "
            f"θ* = ({theta_0:.6f}, {theta_1:.6f}), J* = {result.cost_star:.6e}"
        )

    # ------------------------------------------------------------------
    # Порівняння кількох learning rate
    # ------------------------------------------------------------------

    def _run_sweep(self, cfg: RunConfig) -> None:
        summary = run_learning_rate_sweep(cfg)

        if len(summary) == 0:
            self._fail("Немає даних", "Жоден запуск не завершився.")
            return

        show_summary(self.window, summary)

        best = summary.best_by_cost()
        if best is None:
            self.window.statusBar().showMessage("Усі запуски розбіглися (J* не скінченне).")
            return

        self.window.statusBar().showMessage(
            f"Найкращий: {best.method_name}, J* = {best.cost_star:.6e}, "
            f"θ* = {best.theta_star.tolist()}"
        )

    # ------------------------------------------------------------------
    # Збереження
    # ------------------------------------------------------------------

    def on_save_requested(self) -> None:
        if self.dataset is None or self.result is None:
            show_info(self.window, "Немає даних", "Спочатку виконайте запуск.")
            return

        directory = QFileDialog.getExistingDirectory(self.window, "Каталог для збереження")
        if not directory:
            return

        data_path = os.path.join(directory, DATASET_FILENAME)
        fit_path = os.path.join(directory, FIT_FILENAME)
        try:
            save_dataset(data_path, self.dataset)
            save_fit(fit_path, self.dataset, self.result.theta_star)
        except OSError as exc:
            self._fail("Помилка запису", str(exc))
            return

        logger.info("Saved %s and %s", data_path, fit_path)
        self.window.statusBar().showMessage(f"Збережено: {data_path}, {fit_path}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    apply_app_style(app)

    window = MainWindow()
    _controller = RegressionController(window)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
