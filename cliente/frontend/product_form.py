"""Campos de formulario de producto compartidos por alta y edicion."""

from __future__ import annotations

from PyQt6.QtWidgets import QComboBox, QGridLayout, QLabel, QLineEdit, QWidget

from shared.categories import CATEGORY_LABELS
from shared.protocol import (
    CANTIDAD_FIELD,
    CATEGORIA_FIELD,
    DESCRIPCION_FIELD,
    NOMBRE_FIELD,
    PRECIO_FIELD,
    FieldError,
    ProductDraft,
)


class ProductFormFields(QWidget):
    """Grilla de campos con mensaje de error bajo cada uno."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._inputs: dict[str, QLineEdit | QComboBox] = {}
        self._error_labels: dict[str, QLabel] = {}

        self._nombre_input = QLineEdit(self)
        self._nombre_input.setPlaceholderText("Ingrese el nombre")
        self._descripcion_input = QLineEdit(self)
        self._descripcion_input.setPlaceholderText("Ingrese la descripción")
        self._precio_input = QLineEdit(self)
        self._precio_input.setPlaceholderText("Ingrese el precio")
        self._cantidad_input = QLineEdit(self)
        self._cantidad_input.setPlaceholderText("Ingrese la cantidad")

        self._categoria_input = QComboBox(self)
        self._categoria_input.addItem("Seleccione una categoría", "")
        for slug, label in CATEGORY_LABELS.items():
            self._categoria_input.addItem(label, slug)

        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(14)
        layout.setVerticalSpacing(4)
        layout.setColumnStretch(1, 1)

        rows = (
            (NOMBRE_FIELD, "Nombre del producto:", self._nombre_input),
            (DESCRIPCION_FIELD, "Descripción del producto:", self._descripcion_input),
            (PRECIO_FIELD, "Precio:", self._precio_input),
            (CANTIDAD_FIELD, "Cantidad en stock:", self._cantidad_input),
            (CATEGORIA_FIELD, "Categoría:", self._categoria_input),
        )
        for index, (field, label_text, widget) in enumerate(rows):
            label = QLabel(label_text, self)
            label.setObjectName("fieldLabel")
            error_label = QLabel("", self)
            error_label.setObjectName("errorLabel")
            error_label.hide()

            layout.addWidget(label, index * 2, 0)
            layout.addWidget(widget, index * 2, 1)
            layout.addWidget(error_label, index * 2 + 1, 1)

            self._inputs[field] = widget
            self._error_labels[field] = error_label

    def draft(self, image_url: str | None = None) -> ProductDraft:
        """Lee el estado actual como borrador sin validar."""
        return ProductDraft(
            nombre=self._nombre_input.text(),
            descripcion=self._descripcion_input.text(),
            cantidad=self._cantidad_input.text(),
            precio=self._precio_input.text(),
            categoria=self._categoria_input.currentData() or "",
            image_url=image_url,
        )

    def load(self, draft: ProductDraft) -> None:
        """Carga un borrador en los campos."""
        self._nombre_input.setText(draft.nombre)
        self._descripcion_input.setText(draft.descripcion)
        self._cantidad_input.setText(draft.cantidad)
        self._precio_input.setText(draft.precio)
        index = self._categoria_input.findData(draft.categoria)
        self._categoria_input.setCurrentIndex(max(index, 0))
        self.clear_errors()

    def clear(self) -> None:
        self.load(ProductDraft())

    def show_errors(self, errors: list[FieldError]) -> None:
        """Muestra mensajes inline; oculta los de campos sin error."""
        self.clear_errors()
        for error in errors:
            label = self._error_labels.get(error.field)
            if label is None:
                continue
            label.setText(error.message)
            label.show()

    def clear_errors(self) -> None:
        for label in self._error_labels.values():
            label.clear()
            label.hide()
