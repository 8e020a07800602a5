"""Ventana principal del inventario."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import ProductPanelController
from cliente.frontend.product_panel import ProductPanel
from parametros import APP_TITLE


class MainWindow(QMainWindow):
    """Ventana principal que contiene el panel de productos."""

    def __init__(self, controller: ProductPanelController) -> None:
        super().__init__()
        self._controller = controller
        self._product_panel: ProductPanel

        self.setWindowTitle(APP_TITLE)
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            geo = screen.availableGeometry()  # tamaño usable (sin taskbar/dock)
            w = int(geo.width() * 0.65)
            h = int(geo.height() * 0.75)
            self.resize(w, h)
            self.setMinimumSize(int(w * 0.70), int(h * 0.70))
        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye la tarjeta central con titulo y panel."""
        page = QWidget(self)
        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(32, 32, 32, 32)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 20, 16, 16)
        card_layout.setSpacing(8)

        title_label = QLabel(APP_TITLE, card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 22, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._product_panel = ProductPanel(controller=self._controller, parent=card)

        card_layout.addWidget(title_label)
        card_layout.addWidget(self._product_panel, stretch=1)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        self.setCentralWidget(page)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
            }
            QLabel#titleLabel {
                color: #111827;
            }
            QLabel#fieldLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
            }
            QGroupBox {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 12px;
                font-weight: 700;
                border: 1px solid #d1d5db;
                border-radius: 10px;
                margin-top: 14px;
                padding: 14px 10px 10px 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 12px;
                padding: 0 4px;
            }
            QLineEdit, QComboBox {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 6px 8px;
            }
            QLineEdit:focus, QComboBox:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QTableWidget {
                border: 1px solid #d1d5db;
                border-radius: 8px;
                font-family: "Segoe UI";
                font-size: 13px;
                selection-background-color: #dbeafe;
                selection-color: #111827;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                min-width: 100px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton:pressed {
                background-color: #1e40af;
            }
            """
        )
