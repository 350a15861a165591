"""Tests para categorias y paleta compartidas."""

from __future__ import annotations

import unittest

from shared.categories import (
    AVAILABLE_CATEGORIES,
    CHART_PALETTE,
    category_label,
    is_valid_category,
    palette_color,
)


class CategoriesTests(unittest.TestCase):
    """Valida el conjunto cerrado de categorias."""

    def test_fixed_set(self) -> None:
        self.assertEqual(
            AVAILABLE_CATEGORIES,
            (
                "vestimenta",
                "bolsos",
                "montura",
                "caballos",
                "herramientas",
                "hogar",
                "calzado",
                "personales",
            ),
        )

    def test_is_valid_category(self) -> None:
        self.assertTrue(is_valid_category("calzado"))
        self.assertFalse(is_valid_category("Calzado"))
        self.assertFalse(is_valid_category(""))
        self.assertFalse(is_valid_category(None))

    def test_category_label(self) -> None:
        self.assertEqual(category_label("bolsos"), "Bolsos/Carteras")
        self.assertEqual(category_label(None), "Sin categoria")

    def test_palette_cycles(self) -> None:
        self.assertEqual(len(CHART_PALETTE), 8)
        self.assertEqual(palette_color(8), palette_color(0))
        self.assertEqual(palette_color(3), "#C19A6B")


if __name__ == "__main__":
    unittest.main()
