"""Pagina de catalogo con busqueda por nombre o precio."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QShowEvent
from PyQt6.QtWidgets import QLabel, QLineEdit, QListWidget, QVBoxLayout, QWidget

from cliente.backend.product_list_state import ProductListState
from cliente.frontend.dialogs import show_warning
from cliente.frontend.styles import PAGE_STYLES
from cliente.frontend.widgets.product_list import configure_product_list, populate_product_list
from shared.errors import ServiceError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class ProductListPage(QWidget):
    """Lista de solo lectura de la coleccion, recargada al mostrarse."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._state = ProductListState(name="productos")
        self.setObjectName("page")

        self._search_input: QLineEdit
        self._list: QListWidget
        self._empty_label: QLabel

        self._build_ui()
        self.setStyleSheet(PAGE_STYLES)
        state = self._state
        self.destroyed.connect(lambda _obj=None: state.close())

    def _build_ui(self) -> None:
        """Construye titulo, buscador y lista."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(12)

        title_label = QLabel("Talabartería Duarte", self)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._search_input = QLineEdit(self)
        self._search_input.setPlaceholderText("Buscar productos...")
        self._search_input.setClearButtonEnabled(True)
        self._search_input.textChanged.connect(self._on_search_changed)

        self._list = QListWidget(self)
        configure_product_list(self._list)

        self._empty_label = QLabel("No hay productos para mostrar.", self)
        self._empty_label.setObjectName("emptyLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.hide()

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._search_input)
        root_layout.addWidget(self._list, 1)
        root_layout.addWidget(self._empty_label)

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._state.close()
        super().closeEvent(event)

    def refresh(self) -> None:
        """Recarga productos; ante fallo conserva la lista anterior."""
        self._state.reopen()
        try:
            self._controller.refresh(self._state)
        except ServiceError as exc:
            show_warning(self, "Error al obtener los productos", str(exc))
        self._render()

    def _on_search_changed(self, text: str) -> None:
        self._state.set_query(text)
        self._render()

    def _render(self) -> None:
        visible = self._state.visible
        populate_product_list(self._list, visible)
        self._empty_label.setVisible(not visible)
