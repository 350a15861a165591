"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication

from cliente.backend.controller import AppController
from cliente.backend.firestore_gateway import FirestoreProductGateway
from cliente.backend.gateway import InMemoryProductGateway, ProductGateway
from cliente.frontend.dialogs import show_error
from cliente.frontend.main_window import MainWindow
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)


def build_gateway(demo: bool) -> ProductGateway:
    """Crea el gateway remoto, o uno en memoria para modo demo."""
    if demo:
        LOGGER.info("Modo demo: coleccion en memoria.")
        return InMemoryProductGateway()
    return FirestoreProductGateway()


def main(argv: list[str] | None = None) -> int:
    """Ejecuta la aplicacion grafica."""
    parser = argparse.ArgumentParser(description="Inventario Talabartería Duarte")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Usa una coleccion en memoria en lugar de Firestore.",
    )
    args, qt_args = parser.parse_known_args(sys.argv[1:] if argv is None else argv)

    app = QApplication([sys.argv[0], *qt_args])
    icon_path = Path(__file__).resolve().parent / "utilities" / "icono.ico"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))
    else:
        LOGGER.warning("No se encontro icono de aplicacion en: %s", icon_path)

    try:
        gateway = build_gateway(args.demo)
    except ServiceError as exc:
        LOGGER.error("No fue posible iniciar el gateway: %s", exc)
        show_error(None, "Configuración incompleta", str(exc))
        return 1

    controller = AppController(gateway=gateway)
    window = MainWindow(controller=controller)
    if not app.windowIcon().isNull():
        window.setWindowIcon(app.windowIcon())
    window.show()

    LOGGER.info("Aplicacion iniciada.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
