"""Llenado de QListWidget con tarjetas de producto."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QListWidget, QListWidgetItem

from cliente.backend.product_card_formatter import describe_product
from shared.protocol import Product

from .product_image import load_product_pixmap

ICON_SIZE = 72


def configure_product_list(list_widget: QListWidget) -> None:
    """Aplica tamano de icono y espaciado comun de las listas de productos."""
    list_widget.setIconSize(QSize(ICON_SIZE, ICON_SIZE))
    list_widget.setSpacing(2)
    list_widget.setWordWrap(True)


def populate_product_list(list_widget: QListWidget, products: Sequence[Product]) -> None:
    """Reemplaza los items de la lista por los productos indicados."""
    list_widget.clear()
    for product in products:
        item = QListWidgetItem(describe_product(product))
        item.setData(Qt.ItemDataRole.UserRole, product.id)
        pixmap = load_product_pixmap(product.image_url, ICON_SIZE)
        if pixmap is not None:
            item.setIcon(QIcon(pixmap))
        list_widget.addItem(item)


def selected_product_id(list_widget: QListWidget) -> str | None:
    item = list_widget.currentItem()
    if item is None:
        return None
    return item.data(Qt.ItemDataRole.UserRole)
