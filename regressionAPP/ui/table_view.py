"""
table_view.py

Таблиця кроків градієнтного спуску.

Колонки:
    k, θ₀, θ₁, J(θ), |Δθ|
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from ..core.iteration_result import IterationResult
from .styles import MARGIN, SPACING, apply_label_muted, apply_table_style

# Рядків більше цього не додаємо: при 10⁴ кроках таблиця стає непридатною
MAX_ROWS = 2000


class IterationsTableWidget(QWidget):
    """
    Обгортка над QTableWidget для траси IterationResult.

    Колонки:
        0: k      – номер кроку
        1: θ₀     – вільний член
        2: θ₁     – нахил
        3: J(θ)   – сумарна вартість
        4: |Δθ|   – max зміна параметрів на кроці
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._skipped = 0
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        header_row = QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)

        title = QLabel("Кроки спуску", self)
        self.label_hint = QLabel("k, θ₀, θ₁, J(θ), |Δθ|", self)
        apply_label_muted(self.label_hint)

        header_row.addWidget(title)
        header_row.addStretch(1)
        header_row.addWidget(self.label_hint)
        root.addLayout(header_row)

        self.table = QTableWidget(self)
        self.table.setColumnCount(5)
        self.table.setHorizontalHeaderLabels(["k", "θ₀", "θ₁", "J(θ)", "|Δθ|"])
        apply_table_style(self.table)

        self.table.horizontalHeader().setSectionResizeMode(
            0, QHeaderView.ResizeMode.ResizeToContents
        )
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)

        root.addWidget(self.table)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def clear_table(self) -> None:
        self._skipped = 0
        self.table.setRowCount(0)
        self.label_hint.setText("k, θ₀, θ₁, J(θ), |Δθ|")

    def add_iteration(self, iteration: IterationResult) -> None:
        """Додати один рядок за IterationResult."""
        row = self.table.rowCount()
        if row >= MAX_ROWS:
            self._skipped += 1
            self.label_hint.setText(f"показано перші {MAX_ROWS} кроків, пропущено {self._skipped}")
            return

        self.table.insertRow(row)

        def _item(text: Any, align: Qt.AlignmentFlag) -> QTableWidgetItem:
            it = QTableWidgetItem(str(text))
            it.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
            return it

        right = Qt.AlignmentFlag.AlignRight
        self.table.setItem(row, 0, _item(iteration.index, Qt.AlignmentFlag.AlignHCenter))
        self.table.setItem(row, 1, _item(f"{iteration.theta[0]:.8f}", right))
        self.table.setItem(row, 2, _item(f"{iteration.theta[1]:.8f}", right))
        self.table.setItem(row, 3, _item(f"{iteration.cost:.6e}", right))
        self.table.setItem(row, 4, _item(f"{iteration.step_norm:.3e}", right))
