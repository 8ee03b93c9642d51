"""
control_panel.py

Панель керування для GUI:
    - розмір набору даних N, seed генератора, істинні t0, t1;
    - learning rate, max_steps, eps;
    - початкові параметри (θ0, θ1);
    - опція "Порівняти кілька learning rate";
    - кнопки: Запустити, Очистити, Вихід.

Початкові значення полів беруться з RunConfig.from_env() (змінні REGRESSION_*).

Видає назовні:
    - сигнал runRequested(RunConfig, bool)
    - сигнал clearRequested()
    - сигнал exitRequested()
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QSpinBox,
    QDoubleSpinBox,
    QCheckBox,
)

from ..core.config import RunConfig
from .styles import (
    MARGIN,
    SPACING,
    apply_groupbox_flat_style,
    apply_button_secondary,
)


def _double_box(parent: QWidget, lo: float, hi: float, decimals: int, value: float) -> QDoubleSpinBox:
    box = QDoubleSpinBox(parent)
    box.setRange(lo, hi)
    box.setDecimals(decimals)
    box.setValue(value)
    return box


class ControlPanelWidget(QWidget):
    """
    Ліва панель керування.

    Сигнали:
        runRequested(RunConfig, bool)  – "Запустити"; bool - режим порівняння lr
        clearRequested()               – "Очистити"
        exitRequested()                – "Вихід"
    """

    runRequested = pyqtSignal(RunConfig, bool)
    clearRequested = pyqtSignal()
    exitRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        self.setObjectName("controlPanel")
        defaults = RunConfig.from_env()
        self._oracle = defaults.oracle

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        main_layout.setSpacing(SPACING)

        # ------------------------------------------------------------------
        # Набір даних
        # ------------------------------------------------------------------
        self.data_group = QGroupBox("Набір даних", self)
        apply_groupbox_flat_style(self.data_group)
        data_form = QFormLayout(self.data_group)

        self.input_size = QSpinBox(self.data_group)
        self.input_size.setRange(1, 1_000_000)
        self.input_size.setValue(defaults.size)

        self.input_seed = QSpinBox(self.data_group)
        self.input_seed.setRange(-1, 2**31 - 1)
        self.input_seed.setSpecialValueText("випадковий")
        self.input_seed.setValue(defaults.seed if defaults.seed is not None else -1)

        self.input_t0 = _double_box(self.data_group, -1e6, 1e6, 4, defaults.t0_base)
        self.input_t1 = _double_box(self.data_group, -1e6, 1e6, 4, defaults.t1)

        data_form.addRow("N:", self.input_size)
        data_form.addRow("seed:", self.input_seed)
        data_form.addRow("t₀ (база):", self.input_t0)
        data_form.addRow("t₁:", self.input_t1)

        main_layout.addWidget(self.data_group)

        # ------------------------------------------------------------------
        # Параметри спуску
        # ------------------------------------------------------------------
        self.params_group = QGroupBox("Градієнтний спуск", self)
        apply_groupbox_flat_style(self.params_group)
        params_form = QFormLayout(self.params_group)

        self.input_lr = _double_box(self.params_group, 0.0, 10.0, 6, defaults.learning_rate)
        self.input_eps = _double_box(self.params_group, 0.0, 1e3, 10, defaults.eps)

        self.input_max_steps = QSpinBox(self.params_group)
        self.input_max_steps.setRange(0, 1_000_000)
        self.input_max_steps.setValue(defaults.max_steps)

        theta_row = QHBoxLayout()
        theta_row.setSpacing(SPACING)
        self.input_theta0 = _double_box(self.params_group, -1e6, 1e6, 6, defaults.theta0[0])
        self.input_theta1 = _double_box(self.params_group, -1e6, 1e6, 6, defaults.theta0[1])
        theta_row.addWidget(QLabel("θ₀:", self.params_group))
        theta_row.addWidget(self.input_theta0)
        theta_row.addWidget(QLabel("θ₁:", self.params_group))
        theta_row.addWidget(self.input_theta1)

        self.check_vectorized = QCheckBox("Векторизований прохід по зразках", self.params_group)
        self.check_vectorized.setChecked(defaults.vectorized)
        self.check_sweep = QCheckBox("Порівняти кілька learning rate", self.params_group)

        params_form.addRow("learning rate:", self.input_lr)
        params_form.addRow("eps:", self.input_eps)
        params_form.addRow("max_steps:", self.input_max_steps)
        params_form.addRow("Старт:", theta_row)
        params_form.addRow(self.check_vectorized)
        params_form.addRow(self.check_sweep)

        main_layout.addWidget(self.params_group)

        # ------------------------------------------------------------------
        # Кнопки
        # ------------------------------------------------------------------
        buttons_row = QHBoxLayout()
        buttons_row.setContentsMargins(0, SPACING, 0, 0)
        buttons_row.setSpacing(SPACING)

        self.button_run = QPushButton("Запустити", self)
        self.button_clear = QPushButton("Очистити", self)
        self.button_exit = QPushButton("Вихід", self)

        apply_button_secondary(self.button_clear)
        apply_button_secondary(self.button_exit)

        buttons_row.addWidget(self.button_run)
        buttons_row.addWidget(self.button_clear)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.button_exit)

        main_layout.addLayout(buttons_row)
        main_layout.addStretch(1)

    def _connect_signals(self) -> None:
        self.button_run.clicked.connect(self._on_run_clicked)
        self.button_clear.clicked.connect(self.clearRequested)
        self.button_exit.clicked.connect(self.exitRequested)

    def build_config(self) -> RunConfig:
        """
        Зібрати RunConfig з поточного стану контролів.
        """
        seed = int(self.input_seed.value())
        return RunConfig(
            size=int(self.input_size.value()),
            learning_rate=float(self.input_lr.value()),
            max_steps=int(self.input_max_steps.value()),
            eps=float(self.input_eps.value()),
            theta0=(float(self.input_theta0.value()), float(self.input_theta1.value())),
            seed=None if seed < 0 else seed,
            t0_base=float(self.input_t0.value()),
            t1=float(self.input_t1.value()),
            oracle=self._oracle,
            vectorized=self.check_vectorized.isChecked(),
        )

    def _on_run_clicked(self) -> None:
        self.runRequested.emit(self.build_config(), self.check_sweep.isChecked())
