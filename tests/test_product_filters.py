"""Tests para filtrado y agregacion de productos."""

from __future__ import annotations

import unittest

from cliente.backend.firestore_codec import decode_fields
from cliente.backend.product_filters import (
    aggregate_by_category,
    filter_products,
    format_price_text,
    parse_quantity,
)
from shared.categories import CHART_PALETTE
from shared.protocol import Product


def _product(product_id: str, **fields: object) -> Product:
    return Product(id=product_id, **fields)


class FilterProductsTests(unittest.TestCase):
    """Valida busqueda por nombre o precio."""

    def setUp(self) -> None:
        self.products = [
            _product("1", nombre="Cinturón de cuero", precio=150.0),
            _product("2", nombre="Bolso de mano", precio=320.5),
            _product("3", nombre="Silla de montar", precio=1500),
            _product("4", nombre=None, precio=99.0),
        ]

    def test_empty_query_returns_all_in_order(self) -> None:
        """Con busqueda vacia debe retornar la lista completa sin reordenar."""
        result = filter_products(self.products, "")

        self.assertEqual([p.id for p in result], ["1", "2", "3", "4"])
        self.assertIsNot(result, self.products)

    def test_name_match_is_case_insensitive(self) -> None:
        """Debe encontrar por subcadena del nombre ignorando mayusculas."""
        result = filter_products(self.products, "BOLSO")
        self.assertEqual([p.id for p in result], ["2"])

    def test_price_match_uses_decimal_text(self) -> None:
        """Debe encontrar por subcadena del precio en forma decimal."""
        self.assertEqual([p.id for p in filter_products(self.products, "320.5")], ["2"])
        self.assertEqual([p.id for p in filter_products(self.products, "15")], ["1", "3"])

    def test_integral_float_price_has_no_trailing_zero(self) -> None:
        """``150.0`` debe buscarse como ``150``, no como ``150.0``."""
        self.assertEqual(filter_products(self.products, "150.0"), [])

    def test_missing_name_still_matches_by_price(self) -> None:
        """Un producto sin nombre no debe fallar y puede coincidir por precio."""
        result = filter_products(self.products, "99")
        self.assertEqual([p.id for p in result], ["4"])

    def test_result_is_subset_and_every_item_matches(self) -> None:
        """Cada resultado debe pertenecer a la entrada y coincidir con la busqueda."""
        query = "de"
        result = filter_products(self.products, query)

        for product in result:
            self.assertIn(product, self.products)
            name_match = product.nombre is not None and query in product.nombre.casefold()
            self.assertTrue(name_match or query in format_price_text(product.precio))

    def test_missing_price_does_not_raise(self) -> None:
        """Un producto sin precio solo puede coincidir por nombre."""
        products = [_product("x", nombre="Rienda")]
        self.assertEqual(filter_products(products, "rien"), products)
        self.assertEqual(filter_products(products, "1"), [])


class FormatPriceTextTests(unittest.TestCase):
    """Valida la forma de texto del precio."""

    def test_formats(self) -> None:
        self.assertEqual(format_price_text(10.0), "10")
        self.assertEqual(format_price_text(10.5), "10.5")
        self.assertEqual(format_price_text(7), "7")
        self.assertEqual(format_price_text(None), "")


class AggregateByCategoryTests(unittest.TestCase):
    """Valida suma de stock por categoria."""

    def test_empty_input(self) -> None:
        self.assertEqual(aggregate_by_category([]), [])

    def test_sums_in_first_seen_order(self) -> None:
        """Debe sumar por categoria respetando el orden de llegada."""
        products = [
            _product("1", categoria="bolsos", cantidad=3),
            _product("2", categoria="calzado", cantidad=2),
            _product("3", categoria="bolsos", cantidad=5),
        ]

        result = aggregate_by_category(products)

        self.assertEqual(
            [(total.category, total.total_quantity) for total in result],
            [("bolsos", 8), ("calzado", 2)],
        )
        self.assertEqual([total.color for total in result], list(CHART_PALETTE[:2]))

    def test_excludes_invalid_quantities_and_missing_category(self) -> None:
        """Cantidades invalidas o categorias vacias deben quedar fuera."""
        products = [
            _product("1", categoria="hogar", cantidad=-1),
            _product("2", categoria="hogar", cantidad="abc"),
            _product("3", categoria="hogar", cantidad=0),
            _product("4", categoria="", cantidad=4),
            _product("5", categoria=None, cantidad=4),
            _product("6", categoria="montura", cantidad=True),
        ]

        self.assertEqual(aggregate_by_category(products), [])

    def test_numeric_strings_are_counted(self) -> None:
        """Cantidades guardadas como texto numerico deben sumarse."""
        products = [
            _product("1", categoria="calzado", cantidad="4"),
            _product("2", categoria="calzado", cantidad=1),
        ]

        result = aggregate_by_category(products)

        self.assertEqual(result[0].total_quantity, 5)

    def test_non_text_category_from_store_is_skipped(self) -> None:
        """Una categoria guardada como mapa o lista no debe romper la agregacion."""
        stored = [
            Product.from_document(
                "d1",
                decode_fields(
                    {
                        "categoria": {"mapValue": {"fields": {"a": {"stringValue": "b"}}}},
                        "cantidad": {"integerValue": "3"},
                    }
                ),
            ),
            Product.from_document(
                "d2",
                decode_fields(
                    {
                        "categoria": {"arrayValue": {"values": [{"stringValue": "hogar"}]}},
                        "cantidad": {"integerValue": "2"},
                    }
                ),
            ),
            Product.from_document(
                "d3",
                decode_fields(
                    {
                        "categoria": {"stringValue": "hogar"},
                        "cantidad": {"integerValue": "4"},
                    }
                ),
            ),
        ]

        result = aggregate_by_category(stored)

        self.assertIsNone(stored[0].categoria)
        self.assertEqual(
            [(total.category, total.total_quantity) for total in result],
            [("hogar", 4)],
        )

    def test_non_text_category_built_directly_is_skipped(self) -> None:
        products = [_product("1", categoria=["bolsos"], cantidad=1)]
        self.assertEqual(aggregate_by_category(products), [])

    def test_palette_cycles_after_eight_categories(self) -> None:
        """El noveno grupo debe reutilizar el primer color."""
        products = [_product(str(i), categoria=f"cat{i}", cantidad=1) for i in range(9)]

        result = aggregate_by_category(products)

        self.assertEqual(result[8].color, CHART_PALETTE[0])
        self.assertEqual(result[7].color, CHART_PALETTE[7])


class ParseQuantityTests(unittest.TestCase):
    """Valida conversion tolerante de cantidades."""

    def test_values(self) -> None:
        self.assertEqual(parse_quantity(3), 3)
        self.assertEqual(parse_quantity("2.5"), 2.5)
        self.assertEqual(parse_quantity(" 6 "), 6)
        self.assertIsNone(parse_quantity(float("nan")))
        self.assertIsNone(parse_quantity(None))
        self.assertIsNone(parse_quantity(False))


if __name__ == "__main__":
    unittest.main()
