"""Gateway de acceso a la coleccion de productos."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import Protocol

from shared.errors import NotFound
from shared.protocol import Product, ValidatedProduct

LOGGER = logging.getLogger(__name__)


class ProductGateway(Protocol):
    """Interfaz de acceso del cliente a la coleccion remota de productos."""

    def list_products(self) -> list[Product]:
        """Obtiene la coleccion completa."""

    def create_product(self, product: ValidatedProduct) -> str:
        """Persiste un producto nuevo y retorna el id asignado por el almacen."""

    def update_product(self, product_id: str, product: ValidatedProduct) -> None:
        """Sobrescribe el documento completo del id indicado."""

    def delete_product(self, product_id: str) -> None:
        """Elimina el documento; eliminar un id inexistente no es error."""


class InMemoryProductGateway:
    """Implementacion en memoria del gateway, con ids generados localmente."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._documents: dict[str, Product] = {product.id: product.copy() for product in products}

    def list_products(self) -> list[Product]:
        """Retorna copias de todos los productos en orden de insercion."""
        return [product.copy() for product in self._documents.values()]

    def create_product(self, product: ValidatedProduct) -> str:
        """Agrega un documento con id nuevo."""
        product_id = uuid.uuid4().hex[:20]
        self._documents[product_id] = product.as_product(product_id)
        LOGGER.info("Producto creado en memoria: id=%s", product_id)
        return product_id

    def update_product(self, product_id: str, product: ValidatedProduct) -> None:
        """Reemplaza el documento existente o lanza ``NotFound``."""
        if product_id not in self._documents:
            raise NotFound(product_id)
        self._documents[product_id] = product.as_product(product_id)

    def delete_product(self, product_id: str) -> None:
        """Elimina el documento si existe."""
        removed = self._documents.pop(product_id, None)
        if removed is None:
            LOGGER.info("Eliminar producto inexistente ignorado: id=%s", product_id)
