"""
Темна тема для застосунку лінійної регресії.

Qt-віджети стилізуються одним QSS, зібраним з блоків (селектор -> властивості);
графіки matplotlib беруть ті самі кольори з PALETTE через style_axes().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import (
    QApplication,
    QWidget,
    QTableWidget,
    QHeaderView,
    QGroupBox,
    QPushButton,
    QLabel,
)

MARGIN = 10
SPACING = 8
RADIUS = 5

FONT_FAMILY = "Inter"
FONT_SIZE = 10


@dataclass(frozen=True)
class AppPalette:
    background: str = "#111418"
    surface: str = "#181c22"
    surface_alt: str = "#20262e"

    text_main: str = "#e4e8ee"
    text_muted: str = "#8f9aab"
    text_inverse: str = "#111418"

    accent: str = "#f2a65a"  # фітована пряма, кнопки
    data: str = "#5fb3f7"    # точки набору даних

    border: str = "#2b313a"


PALETTE = AppPalette()

QssBlock = Tuple[str, Dict[str, str]]


def _qss(blocks: List[QssBlock]) -> str:
    parts = []
    for selector, props in blocks:
        body = "\n".join(f"    {name}: {value};" for name, value in props.items())
        parts.append(f"{selector} {{\n{body}\n}}")
    return "\n\n".join(parts)


def _frame(background: str) -> Dict[str, str]:
    return {
        "background-color": background,
        "border": f"1px solid {PALETTE.border}",
        "border-radius": f"{RADIUS}px",
    }


def build_app_stylesheet() -> str:
    p = PALETTE
    inputs = "QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox"
    focused = ", ".join(f"{w.strip()}:focus" for w in inputs.split(","))

    return _qss([
        ("QWidget", {
            "background-color": p.background,
            "color": p.text_main,
            "font-family": f'"{FONT_FAMILY}"',
            "font-size": f"{FONT_SIZE}pt",
        }),
        ("QGroupBox", {**_frame(p.surface), "margin-top": "14px"}),
        ("QGroupBox::title", {
            "subcontrol-origin": "margin",
            "left": "10px",
            "padding": "0 4px",
            "color": p.accent,
            "font-weight": "600",
        }),
        ("QMenuBar", {"background-color": p.surface, "border-bottom": f"1px solid {p.border}"}),
        ("QMenuBar::item:selected, QMenu::item:selected", {
            "background-color": p.accent,
            "color": p.text_inverse,
        }),
        ("QStatusBar", {
            "background-color": p.surface,
            "color": p.text_muted,
            "border-top": f"1px solid {p.border}",
        }),
        ("QPushButton", {
            **_frame(p.accent),
            "color": p.text_inverse,
            "border-color": p.accent,
            "padding": "6px 14px",
            "font-weight": "600",
        }),
        (inputs, {**_frame(p.surface_alt), "padding": "5px 8px"}),
        (focused, {"border-color": p.accent}),
        ("QTableWidget", {
            "background-color": p.surface,
            "border": f"1px solid {p.border}",
            "gridline-color": p.border,
            "alternate-background-color": p.surface_alt,
            "selection-background-color": p.accent,
            "selection-color": p.text_inverse,
        }),
        ("QHeaderView::section", {
            "background-color": p.surface_alt,
            "padding": "5px",
            "border": "none",
            "border-right": f"1px solid {p.border}",
            "font-weight": "600",
        }),
    ])


def apply_app_style(app: QApplication) -> None:
    qt_palette = app.palette()
    for role, color in (
        (QPalette.ColorRole.Window, PALETTE.background),
        (QPalette.ColorRole.Base, PALETTE.surface),
        (QPalette.ColorRole.Text, PALETTE.text_main),
    ):
        qt_palette.setColor(role, QColor(color))

    app.setPalette(qt_palette)
    app.setFont(QFont(FONT_FAMILY, FONT_SIZE))
    app.setStyleSheet(build_app_stylesheet())


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------

def apply_groupbox_flat_style(group: QGroupBox):
    group.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)


def apply_table_style(table: QTableWidget):
    header = table.horizontalHeader()
    header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
    header.setDefaultAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)


def apply_button_secondary(btn: QPushButton):
    btn.setStyleSheet(_qss([
        ("QPushButton", {
            "background-color": PALETTE.surface_alt,
            "color": PALETTE.text_main,
            "border": f"1px solid {PALETTE.border}",
        }),
        ("QPushButton:hover", {"border-color": PALETTE.accent}),
    ]))


def apply_label_muted(lbl: QLabel):
    lbl.setStyleSheet(f"color: {PALETTE.text_muted};")


def apply_card_style(widget: QWidget):
    widget.setStyleSheet(_qss([(f"QWidget#{widget.objectName()}", _frame(PALETTE.surface))]))


def style_axes(ax) -> None:
    """Темні осі matplotlib у кольорах PALETTE."""
    ax.set_facecolor(PALETTE.surface_alt)
    ax.tick_params(colors=PALETTE.text_muted, labelsize=9)
    for spine in ax.spines.values():
        spine.set_color(PALETTE.border)
    ax.grid(True, color=PALETTE.border, linestyle=":", linewidth=0.6, alpha=0.7)
    for text in (ax.title, ax.xaxis.label, ax.yaxis.label):
        text.set_color(PALETTE.text_main)
