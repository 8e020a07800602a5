"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QInputDialog, QMessageBox, QWidget


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo informativo."""
    QMessageBox.information(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def prompt_text(parent: QWidget | None, title: str, label: str) -> str | None:
    """Pide un texto al usuario; retorna None si cancela."""
    text, accepted = QInputDialog.getText(parent, title, label)
    if not accepted:
        return None
    return text
