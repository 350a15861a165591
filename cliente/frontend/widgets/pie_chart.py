"""Grafico de torta simple dibujado con QPainter."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from shared.categories import category_label
from shared.protocol import CategoryTotal


class PieChartWidget(QWidget):
    """Torta con leyenda a la derecha para totales por categoria."""

    _LEGEND_WIDTH = 260
    _SWATCH = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._totals: list[CategoryTotal] = []
        self.setMinimumHeight(260)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_totals(self, totals: list[CategoryTotal]) -> None:
        """Define los datos y redibuja."""
        self._totals = list(totals)
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_chart(painter)
        finally:
            painter.end()

    def _paint_chart(self, painter: QPainter) -> None:
        grand_total = sum(total.total_quantity for total in self._totals)
        if grand_total <= 0:
            return

        side = min(self.width() - self._LEGEND_WIDTH, self.height()) - 16
        if side <= 0:
            return
        pie_rect = QRectF(8, (self.height() - side) / 2, side, side)

        # QPainter mide angulos en 1/16 de grado.
        start_angle = 90 * 16
        painter.setPen(QPen(QColor("#ffffff"), 2))
        for total in self._totals:
            span = -round(total.total_quantity / grand_total * 360 * 16)
            painter.setBrush(QColor(total.color))
            painter.drawPie(pie_rect, start_angle, span)
            start_angle += span

        painter.setFont(QFont("Segoe UI", 10))
        legend_x = pie_rect.right() + 24
        line_height = self._SWATCH + 10
        legend_y = (self.height() - line_height * len(self._totals)) / 2
        for index, total in enumerate(self._totals):
            y = legend_y + index * line_height
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(total.color))
            painter.drawRect(QRectF(legend_x, y, self._SWATCH, self._SWATCH))
            painter.setPen(QColor("#7F7F7F"))
            painter.drawText(
                QRectF(legend_x + self._SWATCH + 8, y - 2, self._LEGEND_WIDTH, line_height),
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                f"{total.total_quantity} {category_label(total.category)}",
            )
