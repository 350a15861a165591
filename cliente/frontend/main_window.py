"""Ventana principal de Talabarteria Duarte."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QButtonGroup,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.create_product_page import CreateProductPage
from cliente.frontend.manage_products_page import ManageProductsPage
from cliente.frontend.product_list_page import ProductListPage
from cliente.frontend.statistics_page import StatisticsPage


class MainWindow(QMainWindow):
    """Ventana con barra de navegacion y una pagina por pantalla."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._stack: QStackedWidget
        self._nav_group: QButtonGroup
        self._exit_button: QPushButton

        self.setWindowTitle("Talabartería Duarte")
        screen = QGuiApplication.primaryScreen()
        geo = screen.availableGeometry()  # tamaño usable (sin taskbar/dock)
        w = int(geo.width() * 0.55)
        h = int(geo.height() * 0.85)
        self.resize(w, h)
        self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye la barra de navegacion y el stack de paginas."""
        central = QWidget(self)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self._stack = QStackedWidget(central)
        pages: tuple[tuple[str, QWidget], ...] = (
            ("Productos", ProductListPage(controller=self._controller, parent=self._stack)),
            ("Nuevo", CreateProductPage(controller=self._controller, parent=self._stack)),
            ("Gestión", ManageProductsPage(controller=self._controller, parent=self._stack)),
            ("Estadísticas", StatisticsPage(controller=self._controller, parent=self._stack)),
        )

        nav_bar = QFrame(central)
        nav_bar.setObjectName("navBar")
        nav_layout = QHBoxLayout(nav_bar)
        nav_layout.setContentsMargins(16, 10, 16, 10)
        nav_layout.setSpacing(8)

        brand_label = QLabel("Talabartería Duarte", nav_bar)
        brand_label.setObjectName("brandLabel")
        nav_layout.addWidget(brand_label)
        nav_layout.addStretch(1)

        self._nav_group = QButtonGroup(self)
        self._nav_group.setExclusive(True)
        for index, (title, page) in enumerate(pages):
            self._stack.addWidget(page)
            button = self._build_nav_button(title)
            self._nav_group.addButton(button, index)
            nav_layout.addWidget(button)
        self._nav_group.idClicked.connect(self._stack.setCurrentIndex)

        self._exit_button = self._build_nav_button("Salir")
        self._exit_button.setCheckable(False)
        self._exit_button.setObjectName("exitButton")
        self._exit_button.clicked.connect(self._on_exit_clicked)
        nav_layout.addSpacing(12)
        nav_layout.addWidget(self._exit_button)

        root_layout.addWidget(nav_bar)
        root_layout.addWidget(self._stack, 1)
        self.setCentralWidget(central)

        self._nav_group.button(0).setChecked(True)
        self._stack.setCurrentIndex(0)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la barra de navegacion."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #f5f5f5;
            }
            QFrame#navBar {
                background-color: #6b4226;
            }
            QLabel#brandLabel {
                color: #f4e1c9;
                font-family: "Georgia";
                font-size: 18px;
                font-weight: 700;
            }
            QPushButton#navButton {
                background-color: transparent;
                border: none;
                border-radius: 8px;
                color: #f4e1c9;
                font-family: "Segoe UI";
                font-size: 14px;
                font-weight: 600;
                min-height: 36px;
                padding: 4px 14px;
            }
            QPushButton#navButton:hover {
                background-color: #8B4513;
            }
            QPushButton#navButton:checked {
                background-color: #d4a373;
                color: #3b2410;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                border: none;
                border-radius: 8px;
                color: #1f2937;
                font-family: "Segoe UI";
                font-size: 14px;
                min-height: 36px;
                padding: 4px 14px;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    @staticmethod
    def _build_nav_button(text: str) -> QPushButton:
        """Construye un boton de la barra de navegacion."""
        button = QPushButton(text)
        button.setObjectName("navButton")
        button.setCheckable(True)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
