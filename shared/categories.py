"""Fuente unica de categorias de producto y paleta de graficos."""

from __future__ import annotations

CATEGORY_LABELS: dict[str, str] = {
    "vestimenta": "Accesorios de vestimenta",
    "bolsos": "Bolsos/Carteras",
    "montura": "Articulos de montura",
    "caballos": "Herramientas/Accesorios para caballos",
    "herramientas": "Accesorios para herramientas",
    "hogar": "Decoracion para el hogar",
    "calzado": "Calzado",
    "personales": "Accesorios personales",
}

AVAILABLE_CATEGORIES: tuple[str, ...] = tuple(CATEGORY_LABELS)

# Tonos de cuero, en orden de asignacion.
CHART_PALETTE: tuple[str, ...] = (
    "#8B4513",
    "#A0522D",
    "#D2691E",
    "#C19A6B",
    "#F4A460",
    "#DEB887",
    "#D2B48C",
    "#CD853F",
)


def is_valid_category(value: str | None) -> bool:
    """Indica si el slug pertenece al conjunto cerrado de categorias."""
    return value in CATEGORY_LABELS


def category_label(slug: str | None) -> str:
    """Retorna nombre visible de una categoria o el slug tal cual."""
    if not slug:
        return "Sin categoria"
    return CATEGORY_LABELS.get(slug, slug)


def palette_color(index: int) -> str:
    """Color de grafico para la posicion indicada, ciclando la paleta."""
    return CHART_PALETTE[index % len(CHART_PALETTE)]
