"""Filtrado y agregacion en memoria sobre listas de productos."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from shared.categories import palette_color
from shared.protocol import CategoryTotal, Product


def filter_products(products: Sequence[Product], query: str) -> list[Product]:
    """Filtra por coincidencia parcial en nombre (sin mayusculas) o en precio.

    Con ``query`` vacio retorna todos los productos en su orden original.
    """
    if not query:
        return list(products)

    needle = query.casefold()
    return [
        product
        for product in products
        if _matches_name(product.nombre, needle) or needle in format_price_text(product.precio)
    ]


def aggregate_by_category(products: Sequence[Product]) -> list[CategoryTotal]:
    """Suma ``cantidad`` por categoria en orden de primera aparicion."""
    totals: dict[str, int | float] = {}
    for product in products:
        if not isinstance(product.categoria, str) or not product.categoria:
            continue
        cantidad = parse_quantity(product.cantidad)
        if cantidad is None:
            continue
        totals[product.categoria] = totals.get(product.categoria, 0) + cantidad

    return [
        CategoryTotal(category=category, total_quantity=total, color=palette_color(index))
        for index, (category, total) in enumerate(totals.items())
    ]


def format_price_text(precio: Any) -> str:
    """Forma decimal del precio usada para busqueda (``10.0`` -> ``"10"``)."""
    if precio is None or isinstance(precio, bool):
        return ""
    if isinstance(precio, float):
        if precio.is_integer():
            return str(int(precio))
        return repr(precio)
    return str(precio).casefold()


def parse_quantity(value: Any) -> int | float | None:
    """Convierte una cantidad almacenada a numero positivo, o ``None``."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None

    if not math.isfinite(number) or number <= 0:
        return None
    if number.is_integer():
        return int(number)
    return number


def _matches_name(nombre: Any, needle: str) -> bool:
    if not isinstance(nombre, str):
        return False
    return needle in nombre.casefold()
