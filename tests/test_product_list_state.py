"""Tests del snapshot por pantalla."""

from __future__ import annotations

import unittest

from cliente.backend.product_list_state import ProductListState
from shared.protocol import Product


class ProductListStateTests(unittest.TestCase):
    """Valida recalculo explicito de la vista y operaciones de reversion."""

    def setUp(self) -> None:
        self.state = ProductListState(name="test")
        self.state.replace_all(
            [
                Product(id="a", nombre="Rienda", precio=40.0),
                Product(id="b", nombre="Cabezada", precio=75.0),
                Product(id="c", nombre="Rebenque", precio=40.5),
            ]
        )

    def test_query_recalculates_visible(self) -> None:
        self.state.set_query("re")
        self.assertEqual([p.id for p in self.state.visible], ["c"])

        self.state.set_query("")
        self.assertEqual([p.id for p in self.state.visible], ["a", "b", "c"])

    def test_query_survives_replace_all(self) -> None:
        """La busqueda activa debe aplicarse a la lista recien cargada."""
        self.state.set_query("40")
        self.state.replace_all([Product(id="z", nombre="Lazo", precio=140.0)])

        self.assertEqual([p.id for p in self.state.visible], ["z"])

    def test_put_returns_previous_version(self) -> None:
        previous = self.state.put(Product(id="b", nombre="Bozal", precio=75.0))

        self.assertEqual(previous.nombre, "Cabezada")
        self.assertEqual(self.state.find("b").nombre, "Bozal")

    def test_put_unknown_id_is_noop(self) -> None:
        self.assertIsNone(self.state.put(Product(id="x")))
        self.assertEqual(len(self.state.products), 3)

    def test_remove_and_insert_restore_order(self) -> None:
        index, removed = self.state.remove("b")
        self.assertEqual([p.id for p in self.state.visible], ["a", "c"])

        self.state.insert(index, removed)

        self.assertEqual([p.id for p in self.state.visible], ["a", "b", "c"])

    def test_remove_unknown_id(self) -> None:
        self.assertIsNone(self.state.remove("x"))

    def test_close_and_reopen(self) -> None:
        self.state.close()
        self.assertFalse(self.state.is_active)
        self.state.reopen()
        self.assertTrue(self.state.is_active)


if __name__ == "__main__":
    unittest.main()
