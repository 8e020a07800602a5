"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication

from cliente.backend.controller import ProductPanelController
from cliente.frontend.main_window import MainWindow
from parametros import APP_ICON
from servidor.services.inventory_manager import InMemoryInventoryManager

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Ejecuta la aplicacion grafica."""
    app = QApplication(sys.argv)
    if APP_ICON.exists():
        app.setWindowIcon(QIcon(str(APP_ICON)))
    else:
        LOGGER.warning("No se encontro icono de aplicacion en: %s", APP_ICON)

    manager = InMemoryInventoryManager()
    controller = ProductPanelController(manager=manager)
    window = MainWindow(controller=controller)
    if not app.windowIcon().isNull():
        window.setWindowIcon(app.windowIcon())
    window.show()

    LOGGER.info("Aplicacion iniciada.")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
