"""
ui/dialogs.py

Стандартні діалоги для GUI-застосунку:

    - show_error     – повідомлення про помилку
    - show_info      – інформаційне повідомлення
    - show_about     – вікно "Про програму"
    - show_summary   – зведена таблиця запусків з різними learning rate
"""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QMessageBox,
    QDialog,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QDialogButtonBox,
    QHeaderView,
)

from .. import __version__
from ..core.results_summary import ResultsSummary
from .styles import MARGIN, SPACING, apply_label_muted, apply_table_style


def _message(parent: Optional[QWidget], icon: QMessageBox.Icon, title: str, message: str) -> None:
    dlg = QMessageBox(parent)
    dlg.setIcon(icon)
    dlg.setWindowTitle(title)
    dlg.setText(message)
    dlg.setStandardButtons(QMessageBox.StandardButton.Ok)
    dlg.exec()


def show_error(parent: Optional[QWidget], message: str, title: str = "Помилка") -> None:
    _message(parent, QMessageBox.Icon.Critical, title, message)


def show_info(parent: Optional[QWidget], title: str, message: str) -> None:
    _message(parent, QMessageBox.Icon.Information, title, message)


def show_about(parent: Optional[QWidget]) -> None:
    show_info(
        parent,
        "Про програму",
        (
            "Лінійна регресія методом batch gradient descent.\n\n"
            "Гіпотеза f(θ₀, θ₁, x) = θ₀ + θ₁·x підганяється до синтетичних даних "
            "з шумом у вільному члені. Показано таблицю кроків, графік J(k) "
            "та траєкторію параметрів на рівнях функції вартості.\n\n"
            f"Версія: {__version__}"
        ),
    )


def humanize_status(code: Optional[str]) -> str:
    """
    Перетворити машинний код причини зупинки на людське пояснення.
    """
    mapping = {
        "converged": "Зміна параметрів не перевищує eps",
        "max_steps_reached": "Досягнуто граничної кількості кроків",
        "running": "Не завершено",
    }
    if not code:
        return "Невідомо"
    return mapping.get(code, f"Інша причина ({code})")


class SummaryDialog(QDialog):
    """
    Зведена таблиця ResultsSummary: один рядок на learning rate.
    """

    COLUMNS = ["Запуск", "learning rate", "θ*", "J(θ*)", "Кроків", "Виклики grad", "Причина зупинки"]

    def __init__(self, parent: Optional[QWidget], summary: ResultsSummary) -> None:
        super().__init__(parent)
        self.summary = summary

        self.setWindowTitle("Порівняння learning rate")
        self.setModal(True)
        self.resize(880, 380)

        self._build_ui()
        self._populate()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        label = QLabel("Один набір даних, однакові θ₀, eps та max_steps", self)
        apply_label_muted(label)

        self.table = QTableWidget(self)
        self.table.setColumnCount(len(self.COLUMNS))
        self.table.setHorizontalHeaderLabels(self.COLUMNS)
        apply_table_style(self.table)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok, parent=self)
        buttons.accepted.connect(self.accept)

        layout.addWidget(label)
        layout.addWidget(self.table)
        layout.addWidget(buttons)

    def _populate(self) -> None:
        rows = self.summary.as_rows()
        self.table.setRowCount(len(rows))

        def _item(val: Any) -> QTableWidgetItem:
            it = QTableWidgetItem("" if val is None else str(val))
            it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)
            return it

        for row_idx, row in enumerate(rows):
            theta = row["theta_star"]
            theta_str = "" if theta is None else "[" + ", ".join(f"{v:.6f}" for v in theta) + "]"
            cost_str = "" if row["cost_star"] is None else f"{row['cost_star']:.6e}"

            values = [
                row["method"],
                f"{row['learning_rate']:g}",
                theta_str,
                cost_str,
                row["n_steps"],
                row["grad_evals"],
                humanize_status(row["status"]),
            ]
            for col, val in enumerate(values):
                self.table.setItem(row_idx, col, _item(val))


def show_summary(parent: Optional[QWidget], summary: ResultsSummary) -> None:
    dlg = SummaryDialog(parent, summary)
    dlg.exec()
