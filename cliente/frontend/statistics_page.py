"""Pagina de estadisticas: distribucion de stock por categoria."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QDesktopServices, QShowEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from cliente.backend.product_list_state import ProductListState
from cliente.frontend.dialogs import show_error, show_info, show_warning
from cliente.frontend.pdf_export import write_lines_pdf
from cliente.frontend.styles import PAGE_STYLES
from cliente.frontend.widgets.pie_chart import PieChartWidget
from shared.errors import ServiceError, ValidationError
from shared.protocol import CategoryTotal

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class StatisticsPage(QWidget):
    """Grafico de torta por categoria con exportacion a PDF."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._state = ProductListState(name="estadisticas")
        self._totals: list[CategoryTotal] = []
        self.setObjectName("page")

        self._chart: PieChartWidget
        self._empty_label: QLabel
        self._export_button: QPushButton

        self._build_ui()
        self.setStyleSheet(PAGE_STYLES)
        state = self._state
        self.destroyed.connect(lambda _obj=None: state.close())

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(16)

        title_label = QLabel("Distribución por Categorías", self)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._chart = PieChartWidget(self)

        self._empty_label = QLabel("No se encontraron productos con cantidad válida.", self)
        self._empty_label.setObjectName("emptyLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._export_button = QPushButton("Exportar PDF", self)
        self._export_button.clicked.connect(self._on_export_clicked)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        buttons_layout.addWidget(self._export_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._chart, 1)
        root_layout.addWidget(self._empty_label)
        root_layout.addLayout(buttons_layout)

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.refresh()

    def refresh(self) -> None:
        """Recarga productos y recalcula los totales por categoria."""
        self._state.reopen()
        try:
            self._controller.refresh(self._state)
        except ServiceError as exc:
            show_warning(self, "Error al obtener los productos", str(exc))

        self._totals = self._controller.category_totals(self._state)
        self._chart.set_totals(self._totals)
        self._chart.setVisible(bool(self._totals))
        self._empty_label.setVisible(not self._totals)
        self._export_button.setEnabled(bool(self._totals))

    def _on_export_clicked(self) -> None:
        """Genera el PDF del reporte y lo abre para compartir."""
        try:
            path = self._controller.prepare_report_path(".pdf")
            lines = self._controller.build_statistics_report(self._totals)
            write_lines_pdf(path, lines)
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Error al exportar", str(exc))
            return

        show_info(self, "Reporte generado", f"Archivo guardado en:\n{path}")
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(path)))
