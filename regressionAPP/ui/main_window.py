"""
Головне вікно:
    - зліва: панель параметрів запуску;
    - справа: карусель графіків над таблицею кроків.
"""

from __future__ import annotations
from typing import List, Optional

import numpy as np

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStatusBar,
    QLabel,
    QSplitter,
)

from ..core.config import RunConfig
from ..core.dataset import Dataset
from ..core.iteration_result import IterationResult
from .control_panel import ControlPanelWidget
from .dialogs import show_about
from .plot_view import PlotView
from .styles import apply_label_muted, MARGIN, SPACING
from .table_view import IterationsTableWidget


class MainWindow(QMainWindow):
    """
    Головне вікно GUI лінійної регресії.

    Сигнали:
        runRequested(RunConfig, bool)  – передається з панелі керування
        saveRequested()                – меню "Зберегти дані та підгонку"
    """

    runRequested = pyqtSignal(RunConfig, bool)
    saveRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.setWindowTitle("Лінійна регресія: градієнтний спуск")
        self.resize(1300, 840)

        self._create_actions()
        self._create_menu()
        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage("Готово")
        self._create_content()
        self._connect_signals()

    def _create_actions(self) -> None:
        self.action_save = QAction("Зберегти дані та підгонку", self, shortcut="Ctrl+S")
        self.action_exit = QAction("Вихід", self, shortcut="Ctrl+Q")
        self.action_about = QAction("Про програму", self)

    def _create_menu(self) -> None:
        menu = self.menuBar()
        file_menu = menu.addMenu("Файл")
        file_menu.addAction(self.action_save)
        file_menu.addSeparator()
        file_menu.addAction(self.action_exit)
        menu.addMenu("Довідка").addAction(self.action_about)

    def _create_content(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        self.control_panel = ControlPanelWidget(central)
        self.control_panel.setMinimumWidth(340)
        root.addWidget(self.control_panel, stretch=2)

        splitter = QSplitter(Qt.Orientation.Vertical, central)

        self.plot_view = PlotView(splitter)
        splitter.addWidget(self.plot_view)

        bottom = QWidget(splitter)
        bottom_layout = QVBoxLayout(bottom)
        bottom_layout.setContentsMargins(0, 0, 0, 0)
        bottom_layout.setSpacing(SPACING)

        self.iterations_table = IterationsTableWidget(bottom)
        bottom_layout.addWidget(self.iterations_table)
        bottom_layout.addLayout(self._build_stats_row())

        splitter.addWidget(bottom)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        root.addWidget(splitter, stretch=5)

        self.update_run_stats(None, None, None)

    def _build_stats_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(SPACING)

        self.label_steps = QLabel()
        self.label_grad_evals = QLabel()
        self.label_status = QLabel()

        for lbl in (self.label_steps, self.label_grad_evals, self.label_status):
            apply_label_muted(lbl)
            row.addWidget(lbl)

        row.addStretch()
        return row

    def _connect_signals(self) -> None:
        self.action_exit.triggered.connect(self.close)
        self.action_about.triggered.connect(lambda: show_about(self))
        self.action_save.triggered.connect(self.saveRequested)

        self.control_panel.exitRequested.connect(self.close)
        self.control_panel.clearRequested.connect(self._on_clear_requested)
        self.control_panel.runRequested.connect(self._on_run_requested)

    def _on_run_requested(self, cfg: RunConfig, sweep: bool) -> None:
        self.clear_results()
        self.statusBar().showMessage(
            f"Запуск: N={cfg.size}, lr={cfg.learning_rate:g}, θ₀={list(cfg.theta0)}"
        )
        self.runRequested.emit(cfg, sweep)

    def _on_clear_requested(self) -> None:
        self.clear_results()
        self.statusBar().showMessage("Очищено")

    # ------------------------------------------------------------------
    # PUBLIC API (для app.py)
    # ------------------------------------------------------------------
    def clear_results(self) -> None:
        self.iterations_table.clear_table()
        self.plot_view.show_placeholder()
        self.update_run_stats(None, None, None)

    def add_iteration(self, iteration: IterationResult) -> None:
        self.iterations_table.add_iteration(iteration)

    def show_run(
        self,
        dataset: Dataset,
        iterations: List[IterationResult],
        theta0: np.ndarray,
        theta_star: np.ndarray,
    ) -> None:
        """Оновити всі графіки після завершення запуску."""
        self.plot_view.plot_cost(iterations)
        self.plot_view.plot_trajectory(dataset, iterations, theta0)
        self.plot_view.plot_fit(dataset, theta_star)

    def update_run_stats(
        self,
        n_steps: Optional[int],
        grad_evals: Optional[int],
        status: Optional[str],
    ) -> None:
        self.label_steps.setText(f"кроків: {n_steps if n_steps is not None else '–'}")
        self.label_grad_evals.setText(
            f"виклики grad: {grad_evals if grad_evals is not None else '–'}"
        )
        self.label_status.setText(f"зупинка: {status or '–'}")
