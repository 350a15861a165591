"""Exportacion de lineas de texto a un PDF compartible."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import QMarginsF
from PyQt6.QtGui import QFont, QFontMetrics, QPageLayout, QPageSize, QPainter, QPdfWriter

from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)


def write_lines_pdf(path: Path, lines: Sequence[str]) -> Path:
    """Escribe las lineas en un PDF A4, una por renglon, paginando si hace falta."""
    writer = QPdfWriter(str(path))
    writer.setPageLayout(
        QPageLayout(
            QPageSize(QPageSize.PageSizeId.A4),
            QPageLayout.Orientation.Portrait,
            QMarginsF(20, 20, 20, 20),
            QPageLayout.Unit.Millimeter,
        )
    )
    writer.setTitle(lines[0] if lines else "Reporte")

    painter = QPainter()
    if not painter.begin(writer):
        raise ServiceError(f"No fue posible crear el PDF: {path}")

    try:
        font = QFont("Georgia", 11)
        painter.setFont(font)
        line_height = QFontMetrics(font, writer).lineSpacing()
        page_height = writer.height()

        y = line_height
        for line in lines:
            if y > page_height:
                writer.newPage()
                y = line_height
            painter.drawText(0, y, line)
            y += line_height
    finally:
        painter.end()

    LOGGER.info("Reporte PDF generado: %s", path)
    return path
