"""Formateador puro del texto de tarjeta de producto."""

from __future__ import annotations

from typing import Any

from shared.categories import category_label
from shared.protocol import Product

from .product_filters import format_price_text

_SIN_NOMBRE = "(sin nombre)"


def describe_product(product: Product) -> str:
    """Texto multilinea de la tarjeta; tolera campos ausentes o de otro tipo."""
    lines = [_clean_text(product.nombre) or _SIN_NOMBRE]

    descripcion = _clean_text(product.descripcion)
    if descripcion:
        lines.append(descripcion)

    lines.append(f"Precio: ${format_price_text(product.precio) or '-'}")
    cantidad = _clean_text(product.cantidad)
    lines.append(f"Cantidad en stock: {cantidad or '-'}")

    if isinstance(product.categoria, str) and product.categoria:
        lines.append(f"Categoría: {category_label(product.categoria)}")
    return "\n".join(lines)


def _clean_text(value: Any) -> str:
    """Convierte cualquier valor almacenado a texto sin espacios extremos."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
