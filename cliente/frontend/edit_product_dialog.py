"""Dialogo modal para editar un producto existente."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from cliente.frontend.product_form import ProductFormFields
from cliente.frontend.styles import PAGE_STYLES
from shared.errors import DraftValidationError
from shared.protocol import Product, ProductDraft


class EditProductDialog(QDialog):
    """Edita campos del producto; la validacion se delega al llamador.

    Tras aceptar, el llamador lee ``draft()`` y, si la validacion lo
    rechaza con ``DraftValidationError``, usa
    ``show_validation_error`` y vuelve a ejecutar el dialogo.
    """

    def __init__(self, product: Product, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._product = product

        self.setWindowTitle("Editar producto")
        self.setModal(True)
        self.setMinimumSize(480, 420)

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(22, 22, 22, 22)
        root_layout.setSpacing(12)

        title_label = QLabel("Editar producto", self)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._form = ProductFormFields(self)
        self._form.load(ProductDraft.from_product(product))

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        cancel_button = QPushButton("Cancelar", self)
        cancel_button.setObjectName("secondaryButton")
        update_button = QPushButton("Actualizar Producto", self)
        cancel_button.clicked.connect(self.reject)
        update_button.clicked.connect(self.accept)
        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(update_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(self._form)
        root_layout.addStretch(1)
        root_layout.addLayout(buttons_layout)

        self.setStyleSheet(PAGE_STYLES + "QDialog { background-color: #ffffff; }")

    def draft(self) -> ProductDraft:
        """Borrador con la imagen original del producto."""
        return self._form.draft(image_url=self._product.image_url)

    def show_validation_error(self, exc: DraftValidationError) -> None:
        self._form.show_errors(list(exc.field_errors))
