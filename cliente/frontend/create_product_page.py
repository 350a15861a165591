"""Pagina de registro de productos nuevos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QFileDialog,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error, show_info, show_warning
from cliente.frontend.product_form import ProductFormFields
from cliente.frontend.styles import PAGE_STYLES
from cliente.frontend.widgets.product_image import load_product_pixmap, local_file_uri
from shared.errors import DraftValidationError, ImageRequiredError, ServiceError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController

_IMAGE_PREVIEW_SIZE = 200


class CreateProductPage(QWidget):
    """Formulario de alta con seleccion de imagen obligatoria."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._image_url: str | None = None
        self.setObjectName("page")

        self._form: ProductFormFields
        self._image_preview: QLabel

        self._build_ui()
        self.setStyleSheet(PAGE_STYLES)

    def _build_ui(self) -> None:
        """Construye tarjeta con campos, imagen y boton de registro."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)

        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(28, 28, 28, 28)
        card_layout.setSpacing(14)

        title_label = QLabel("Nuevo producto", card)
        title_label.setObjectName("pageTitle")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._form = ProductFormFields(card)

        pick_button = QPushButton("Seleccionar Imagen", card)
        pick_button.setObjectName("secondaryButton")
        pick_button.clicked.connect(self._on_pick_image_clicked)

        self._image_preview = QLabel(card)
        self._image_preview.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._image_preview.setFixedHeight(_IMAGE_PREVIEW_SIZE)
        self._image_preview.hide()

        submit_button = QPushButton("Registrar Producto", card)
        submit_button.clicked.connect(self._on_submit_clicked)

        buttons_layout = QHBoxLayout()
        buttons_layout.addWidget(pick_button)
        buttons_layout.addStretch(1)
        buttons_layout.addWidget(submit_button)

        card_layout.addWidget(title_label)
        card_layout.addWidget(self._form)
        card_layout.addWidget(self._image_preview)
        card_layout.addLayout(buttons_layout)
        card_layout.addStretch(1)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        scroll.setWidget(card)
        root_layout.addWidget(scroll)

    def _on_pick_image_clicked(self) -> None:
        """Abre el selector de archivos y guarda la URI elegida tal cual."""
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Seleccionar imagen",
            "",
            "Imagenes (*.png *.jpg *.jpeg *.bmp *.webp)",
        )
        if not path:
            return

        self._image_url = local_file_uri(path)
        pixmap = load_product_pixmap(self._image_url, _IMAGE_PREVIEW_SIZE)
        if pixmap is not None:
            self._image_preview.setPixmap(pixmap)
            self._image_preview.show()

    def _on_submit_clicked(self) -> None:
        """Valida y registra; ante error remoto conserva el borrador."""
        draft = self._form.draft(image_url=self._image_url)
        try:
            self._controller.create_product(draft, require_image=True)
        except ImageRequiredError as exc:
            show_warning(self, "Imagen requerida", str(exc))
            return
        except DraftValidationError as exc:
            self._form.show_errors(list(exc.field_errors))
            return
        except ServiceError as exc:
            show_error(self, "Error", f"No se pudo registrar el producto.\n{exc}")
            return

        self._reset()
        show_info(self, "Éxito", "Producto registrado correctamente")

    def _reset(self) -> None:
        self._form.clear()
        self._image_url = None
        self._image_preview.clear()
        self._image_preview.hide()
