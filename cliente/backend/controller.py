"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from parametros import DEFAULT_REPORT_FILENAME_STEM, OUTPUT_DIR
from shared.errors import NotFound, StoreUnavailable
from shared.protocol import CategoryTotal, Product, ProductDraft

from .gateway import ProductGateway
from .product_filters import aggregate_by_category
from .product_list_state import ProductListState
from .report_formatter import format_category_report
from .validators import validate_draft, validate_output_dir

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y operaciones sobre la coleccion de productos."""

    def __init__(
        self,
        gateway: ProductGateway,
        output_dir: Path = OUTPUT_DIR,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._gateway = gateway
        self._output_dir = output_dir
        self._clock = clock

    def refresh(self, state: ProductListState) -> list[Product]:
        """Recarga la coleccion completa en el snapshot de la pantalla.

        Si la llamada falla, el snapshot queda intacto y el error se propaga.
        Si la pantalla ya se cerro, el resultado se descarta.
        """
        products = self._gateway.list_products()
        if not state.is_active:
            LOGGER.info("Resultado descartado, pantalla cerrada: %s", state.name)
            return products

        state.replace_all(products)
        LOGGER.info("Pantalla %s actualizada con %s productos", state.name, len(products))
        return products

    def create_product(self, draft: ProductDraft, require_image: bool = True) -> Product:
        """Valida y persiste un producto nuevo."""
        validated = validate_draft(draft, require_image=require_image)
        product_id = self._gateway.create_product(validated)
        LOGGER.info("Producto registrado: id=%s, nombre=%s", product_id, validated.nombre)
        return validated.as_product(product_id)

    def update_product(
        self,
        state: ProductListState,
        product_id: str,
        draft: ProductDraft,
    ) -> Product:
        """Actualiza un producto aplicando el cambio localmente antes del almacen.

        Ante ``StoreUnavailable`` se restaura la version anterior; ante
        ``NotFound`` se descarta la entrada obsoleta. En ambos casos el error
        se propaga para que la pantalla lo informe.
        """
        validated = validate_draft(draft, require_image=False)
        updated = validated.as_product(product_id)
        previous = state.put(updated)

        try:
            self._gateway.update_product(product_id, validated)
        except NotFound:
            LOGGER.warning("Producto inexistente al actualizar, se quita de la vista: %s", product_id)
            state.remove(product_id)
            raise
        except StoreUnavailable:
            LOGGER.warning("Actualizacion fallida, se revierte: %s", product_id)
            if previous is not None:
                state.put(previous)
            raise

        LOGGER.info("Producto actualizado: id=%s", product_id)
        return updated

    def delete_product(self, state: ProductListState, product_id: str) -> None:
        """Elimina un producto de la vista y del almacen, revirtiendo si falla."""
        removed = state.remove(product_id)

        try:
            self._gateway.delete_product(product_id)
        except StoreUnavailable:
            LOGGER.warning("Eliminacion fallida, se restaura: %s", product_id)
            if removed is not None:
                index, product = removed
                state.insert(index, product)
            raise

        LOGGER.info("Producto eliminado: id=%s", product_id)

    @staticmethod
    def category_totals(state: ProductListState) -> list[CategoryTotal]:
        """Resumen de stock por categoria del snapshot actual."""
        return aggregate_by_category(state.products)

    def build_statistics_report(self, totals: list[CategoryTotal]) -> list[str]:
        """Lineas de texto del reporte de estadisticas."""
        return format_category_report(totals, generated_at=self._clock())

    def prepare_report_path(self, suffix: str = ".pdf") -> Path:
        """Valida el directorio de salida y retorna ruta unica del reporte."""
        validate_output_dir(self._output_dir)
        stamp = self._clock().strftime("%Y%m%d_%H%M%S")
        return self._output_dir / f"{DEFAULT_REPORT_FILENAME_STEM}_{stamp}{suffix}"

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Cierra la aplicacion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()
