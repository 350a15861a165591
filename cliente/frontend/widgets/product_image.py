"""Carga de imagenes de producto desde URIs locales."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QPixmap


def load_product_pixmap(image_url: str | None, size: int) -> QPixmap | None:
    """Retorna pixmap escalado para URIs ``file://`` o rutas locales.

    Las URLs remotas (incluida la imagen por defecto) no se descargan.
    """
    if not image_url:
        return None

    url = QUrl(image_url)
    if url.isLocalFile():
        local_path = url.toLocalFile()
    elif not url.scheme():
        local_path = image_url
    else:
        return None

    pixmap = QPixmap(local_path)
    if pixmap.isNull():
        return None

    return pixmap.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )


def local_file_uri(path: str) -> str:
    """Convierte una ruta elegida en disco a URI ``file://``."""
    return QUrl.fromLocalFile(path).toString()
