"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class InvalidNumberError(ValidationError):
    """Texto que no se puede interpretar como numero."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class ProductNotFoundError(ServiceError):
    """El identificador no corresponde a ningun producto del inventario."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id
