"""Snapshot de productos por pantalla con vista filtrada derivada."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shared.protocol import Product

from .product_filters import filter_products

LOGGER = logging.getLogger(__name__)


class ProductListState:
    """Copia local de la coleccion que mantiene cada pantalla.

    La vista visible se recalcula de forma explicita con ``recalculate``
    cada vez que cambian los productos o el texto de busqueda. Una vez
    cerrada (``close``), la pantalla deja de aceptar resultados tardios.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._products: list[Product] = []
        self._visible: list[Product] = []
        self._query = ""
        self._active = True

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def visible(self) -> list[Product]:
        return list(self._visible)

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_active(self) -> bool:
        return self._active

    def close(self) -> None:
        """Marca la pantalla como desmontada."""
        self._active = False
        LOGGER.debug("Pantalla cerrada: %s", self.name)

    def reopen(self) -> None:
        """Vuelve a aceptar resultados tras mostrarse de nuevo."""
        self._active = True

    def replace_all(self, products: Sequence[Product]) -> None:
        self._products = list(products)
        self.recalculate()

    def set_query(self, query: str) -> None:
        self._query = query
        self.recalculate()

    def recalculate(self) -> None:
        """Deriva la vista visible a partir de productos y busqueda."""
        self._visible = filter_products(self._products, self._query)

    def find(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def put(self, product: Product) -> Product | None:
        """Reemplaza el producto con el mismo id y retorna el anterior."""
        for index, current in enumerate(self._products):
            if current.id == product.id:
                self._products[index] = product
                self.recalculate()
                return current
        return None

    def remove(self, product_id: str) -> tuple[int, Product] | None:
        """Quita el producto y retorna su posicion original para revertir."""
        for index, current in enumerate(self._products):
            if current.id == product_id:
                del self._products[index]
                self.recalculate()
                return index, current
        return None

    def insert(self, index: int, product: Product) -> None:
        self._products.insert(min(index, len(self._products)), product)
        self.recalculate()
