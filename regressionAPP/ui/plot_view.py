"""
Віджет графіків процесу підгонки, один графік за раз у вигляді каруселі:
    - точки набору даних + фітована пряма;
    - графік J(k);
    - рівні J(θ₀, θ₁) + траєкторія параметрів.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QLabel,
    QStackedWidget,
    QComboBox,
)

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ..core.dataset import Dataset
from ..core.functions import cost_surface, fitted_values
from ..core.iteration_result import IterationResult
from .styles import MARGIN, SPACING, PALETTE, apply_card_style, style_axes

_CANVAS_BG = PALETTE.surface_alt
_MUTED = PALETTE.text_muted

# (ключ, назва у списку, заглушка до першого запуску)
_PAGES = (
    ("fit", "Дані та пряма f(x)", "Дані та пряма з'являться після запуску"),
    ("cost", "Вартість J(k)", "Графік J(k) з'явиться після запуску"),
    ("trajectory", "Рівні J(θ₀, θ₁) та траєкторія", "Траєкторія з'явиться після запуску"),
)


@dataclass
class PlotPage:
    figure: Figure
    canvas: FigureCanvas
    axes: Any


class PlotView(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("plotView")
        self.pages_order = [key for key, _, _ in _PAGES]
        self.pages: Dict[str, PlotPage] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        apply_card_style(self)

        nav = QHBoxLayout()
        nav.setSpacing(SPACING)
        nav.addWidget(QLabel("Графік:", self))

        self.combo_mode = QComboBox(self)
        self.combo_mode.addItems([title for _, title, _ in _PAGES])
        self.combo_mode.currentIndexChanged.connect(self.stacked_set_index)
        nav.addWidget(self.combo_mode, stretch=1)

        self.btn_prev = QPushButton("◀")
        self.btn_next = QPushButton("▶")
        for btn in (self.btn_prev, self.btn_next):
            btn.setFixedWidth(34)
        self.btn_prev.clicked.connect(lambda: self._shift(-1))
        self.btn_next.clicked.connect(lambda: self._shift(1))
        nav.addWidget(self.btn_prev)
        nav.addWidget(self.btn_next)

        layout.addLayout(nav)

        self.stacked = QStackedWidget(self)
        layout.addWidget(self.stacked, stretch=1)

        for key in self.pages_order:
            figure = Figure(facecolor=_CANVAS_BG)
            ax = figure.add_subplot(111)
            canvas = FigureCanvas(figure)
            self.pages[key] = PlotPage(figure, canvas, ax)
            self.stacked.addWidget(canvas)

        self.show_placeholder()

    # ------------------------------------------------------------------
    # Навігація
    # ------------------------------------------------------------------
    def stacked_set_index(self, index: int) -> None:
        self.stacked.setCurrentIndex(index)

    def _shift(self, delta: int) -> None:
        idx = (self.stacked.currentIndex() + delta) % len(self.pages_order)
        self.combo_mode.setCurrentIndex(idx)

    def _set_page(self, key: str) -> None:
        self.combo_mode.setCurrentIndex(self.pages_order.index(key))

    def _fresh_axes(self, key: str):
        ax = self.pages[key].axes
        ax.clear()
        style_axes(ax)
        return ax

    def _redraw(self, key: str) -> None:
        page = self.pages[key]
        page.figure.tight_layout()
        page.canvas.draw_idle()

    # ------------------------------------------------------------------
    # Публічні методи
    # ------------------------------------------------------------------
    def show_placeholder(self) -> None:
        for key, _, msg in _PAGES:
            ax = self._fresh_axes(key)
            ax.text(0.5, 0.5, msg, ha="center", va="center", transform=ax.transAxes, color=_MUTED)
            self.pages[key].canvas.draw_idle()

    def plot_fit(self, dataset: Dataset, theta: np.ndarray) -> None:
        ax = self._fresh_axes("fit")

        ax.scatter(dataset.x, dataset.y, s=8, color=PALETTE.data, alpha=0.6, label="дані")

        xs = np.linspace(float(dataset.x.min()), float(dataset.x.max()), 2)
        ax.plot(
            xs,
            fitted_values(theta, xs),
            color=PALETTE.accent,
            linewidth=2,
            label=f"f(x) = {theta[0]:.4f} + {theta[1]:.4f}·x",
        )
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title("Набір даних та підгонка")
        ax.legend(facecolor=_CANVAS_BG, edgecolor=PALETTE.border, labelcolor=PALETTE.text_main)

        self._redraw("fit")
        self._set_page("fit")

    def plot_cost(self, iterations: List[IterationResult]) -> None:
        if not iterations:
            self.show_placeholder()
            return

        ax = self._fresh_axes("cost")
        ks = [it.index for it in iterations]
        js = [it.cost for it in iterations]

        ax.plot(ks, js, linewidth=1.5, color=PALETTE.accent)
        if all(np.isfinite(j) and j > 0 for j in js):
            ax.set_yscale("log")
        ax.set_xlabel("k (номер кроку)")
        ax.set_ylabel("J(θₖ)")
        ax.set_title("Сумарна вартість по кроках")

        self._redraw("cost")

    def plot_trajectory(
        self,
        dataset: Dataset,
        iterations: List[IterationResult],
        theta0: np.ndarray,
        levels: int = 24,
        grid_size: int = 120,
    ) -> None:
        if not iterations:
            self.show_placeholder()
            return

        path = np.vstack([np.asarray(theta0, dtype=float)] + [it.theta for it in iterations])
        if not np.all(np.isfinite(path)):
            ax = self._fresh_axes("trajectory")
            ax.text(0.5, 0.5, "Параметри розбіглися (NaN/∞)", ha="center", va="center",
                    transform=ax.transAxes, color=_MUTED)
            self._redraw("trajectory")
            return

        lo = path.min(axis=0)
        hi = path.max(axis=0)
        pad = np.maximum(0.15 * (hi - lo), 0.5)

        t0_vals = np.linspace(lo[0] - pad[0], hi[0] + pad[0], grid_size)
        t1_vals = np.linspace(lo[1] - pad[1], hi[1] + pad[1], grid_size)
        T0, T1 = np.meshgrid(t0_vals, t1_vals)
        Z = cost_surface(dataset.x, dataset.y, T0, T1)

        ax = self._fresh_axes("trajectory")
        ax.contourf(T0, T1, np.log1p(Z), levels=levels, cmap="magma", alpha=0.5)
        ax.contour(T0, T1, np.log1p(Z), levels=levels, colors=_MUTED, linewidths=0.6)

        ax.plot(path[:, 0], path[:, 1], linewidth=1.2, color=PALETTE.accent)
        ax.scatter(path[0, 0], path[0, 1], color=PALETTE.data, marker="s", s=50, zorder=5)
        ax.scatter(path[-1, 0], path[-1, 1], color=PALETTE.accent, marker="*", s=120, zorder=6)

        ax.set_xlabel("θ₀")
        ax.set_ylabel("θ₁")
        ax.set_title("Рівні ln(1 + J) та траєкторія")

        self._redraw("trajectory")
