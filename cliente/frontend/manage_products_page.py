"""Pagina de gestion: busqueda, edicion y eliminacion de productos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QShowEvent
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.product_list_state import ProductListState
from cliente.frontend.dialogs import ask_confirmation, show_error, show_info, show_warning
from cliente.frontend.edit_product_dialog import EditProductDialog
from cliente.frontend.styles import PAGE_STYLES
from cliente.frontend.widgets.product_list import (
    configure_product_list,
    populate_product_list,
    selected_product_id,
)
from shared.errors import DraftValidationError, NotFound, ServiceError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController


class ManageProductsPage(QWidget):
    """Lista editable de productos con acciones por seleccion."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._state = ProductListState(name="gestion")
        self.setObjectName("page")

        self._search_input: QLineEdit
        self._list: QListWidget
        self._edit_button: QPushButton
        self._delete_button: QPushButton

        self._build_ui()
        self.setStyleSheet(PAGE_STYLES)
        state = self._state
        self.destroyed.connect(lambda _obj=None: state.close())

    def _build_ui(self) -> None:
        """Construye buscador, lista y botones de accion."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(12)

        title_label = QLabel("Gestión de productos", self)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._search_input = QLineEdit(self)
        self._search_input.setPlaceholderText("Buscar por nombre o precio")
        self._search_input.setClearButtonEnabled(True)
        self._search_input.textChanged.connect(self._on_search_changed)

        self._list = QListWidget(self)
        configure_product_list(self._list)
        self._list.currentItemChanged.connect(self._update_buttons)
        self._list.itemDoubleClicked.connect(self._on_edit_clicked)

        self._edit_button = QPushButton("Editar", self)
        self._delete_button = QPushButton("Eliminar", self)
        self._delete_button.setObjectName("dangerButton")
        self._edit_button.clicked.connect(self._on_edit_clicked)
        self._delete_button.clicked.connect(self._on_delete_clicked)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        buttons_layout.addWidget(self._edit_button)
        buttons_layout.addWidget(self._delete_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._search_input)
        root_layout.addWidget(self._list, 1)
        root_layout.addLayout(buttons_layout)
        self._update_buttons()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.refresh()

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

    def _on_edit_clicked(self, *_args: object) -> None:
        """Abre el dialogo de edicion hasta que el borrador sea valido o se cancele."""
        product_id = selected_product_id(self._list)
        product = self._state.find(product_id) if product_id else None
        if product is None:
            return

        dialog = EditProductDialog(product, parent=self)
        while dialog.exec() == QDialog.DialogCode.Accepted:
            try:
                self._controller.update_product(self._state, product.id, dialog.draft())
            except DraftValidationError as exc:
                dialog.show_validation_error(exc)
                continue
            except NotFound as exc:
                show_warning(self, "Producto no encontrado", str(exc))
            except ServiceError as exc:
                show_error(self, "Error", f"Hubo un problema al actualizar el producto.\n{exc}")
            else:
                show_info(self, "Éxito", "Producto actualizado con éxito")
            break

        self._render()

    def _on_delete_clicked(self) -> None:
        product_id = selected_product_id(self._list)
        product = self._state.find(product_id) if product_id else None
        if product is None:
            return

        if not ask_confirmation(
            self,
            "Eliminar producto",
            f"¿Eliminar \"{product.nombre or product.id}\"?",
        ):
            return

        try:
            self._controller.delete_product(self._state, product.id)
        except ServiceError as exc:
            show_error(self, "Error", f"Hubo un problema al eliminar el producto.\n{exc}")
        else:
            show_info(self, "Éxito", "Producto eliminado con éxito")
        self._render()

    def _render(self) -> None:
        populate_product_list(self._list, self._state.visible)
        self._update_buttons()

    def _update_buttons(self, *_args: object) -> None:
        has_selection = self._list.currentItem() is not None
        self._edit_button.setEnabled(has_selection)
        self._delete_button.setEnabled(has_selection)
