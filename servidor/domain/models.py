"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Product:
    """Representa un producto en inventario."""

    id: str
    type: str
    name: str
    quantity: int
    price: float
