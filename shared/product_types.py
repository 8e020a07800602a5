"""Fuente unica y helpers para los tipos de producto."""

from __future__ import annotations

from shared.errors import ValidationError

AVAILABLE_PRODUCT_TYPES: tuple[str, ...] = (
    "Clothing",
    "Toy",
)


def is_known_product_type(value: str) -> bool:
    """Indica si el valor corresponde a un tipo de producto disponible."""
    key = (value or "").strip().casefold()
    return any(key == product_type.casefold() for product_type in AVAILABLE_PRODUCT_TYPES)


def normalize_product_type(value: str) -> str:
    """Retorna la forma canonica del tipo, sin distinguir mayusculas."""
    key = (value or "").strip().casefold()
    for product_type in AVAILABLE_PRODUCT_TYPES:
        if key == product_type.casefold():
            return product_type

    raise ValidationError("Please select a valid product type.")
