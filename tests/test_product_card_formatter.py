"""Tests para el texto de tarjeta de producto."""

from __future__ import annotations

import unittest

from cliente.backend.product_card_formatter import describe_product
from shared.protocol import Product


class ProductCardFormatterTests(unittest.TestCase):
    """Valida tarjetas para documentos completos y con datos sucios."""

    def test_complete_product(self) -> None:
        """Debe incluir nombre, descripcion, precio, stock y categoria visible."""
        text = describe_product(
            Product(
                id="p1",
                nombre="Bolso",
                descripcion="Cuero curtido",
                precio=300.0,
                cantidad=3,
                categoria="bolsos",
            )
        )

        self.assertEqual(
            text.split("\n"),
            [
                "Bolso",
                "Cuero curtido",
                "Precio: $300",
                "Cantidad en stock: 3",
                "Categoría: Bolsos/Carteras",
            ],
        )

    def test_numeric_name_and_description_do_not_raise(self) -> None:
        """Nombre y descripcion numericos se muestran como texto."""
        text = describe_product(Product(id="d2", nombre=123, descripcion=7, precio=10.5))

        lines = text.split("\n")
        self.assertEqual(lines[0], "123")
        self.assertEqual(lines[1], "7")
        self.assertIn("Precio: $10.5", lines)

    def test_missing_fields_use_placeholders(self) -> None:
        text = describe_product(Product(id="d3"))

        self.assertEqual(
            text.split("\n"),
            ["(sin nombre)", "Precio: $-", "Cantidad en stock: -"],
        )

    def test_non_text_category_is_omitted(self) -> None:
        text = describe_product(Product(id="d4", nombre="Lazo", categoria={"a": "b"}))
        self.assertNotIn("Categoría", text)


if __name__ == "__main__":
    unittest.main()
