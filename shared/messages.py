"""Mensajes de usuario compartidos entre cliente y servidor."""

from __future__ import annotations

INVALID_RESTOCK_MESSAGE = "The quantity must be more than 0."


def purchase_range_message(current_quantity: int) -> str:
    """Mensaje de rango valido para compras."""
    return f"Please enter a valid quantity (1 – {current_quantity})."
