"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math
import re

from parametros import MAX_PRODUCT_NAME_LENGTH
from shared.errors import InvalidNumberError, ValidationError
from shared.messages import INVALID_RESTOCK_MESSAGE, purchase_range_message

INVALID_NUMBER_MESSAGE = "Please enter a valid number."
INVALID_NAME_MESSAGE = "Please enter a valid product name."
INVALID_QUANTITY_MESSAGE = "Quantity must be 0 or greater."
INVALID_PRICE_MESSAGE = "Price must be greater than 0."

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def parse_int(text: str | None) -> int:
    """Convierte texto a entero o lanza InvalidNumberError.

    Solo acepta digitos ASCII con signo opcional; ``int()`` aceptaria
    tambien guiones bajos ("1_0").
    """
    normalized = (text or "").strip()
    if not _INTEGER_PATTERN.fullmatch(normalized):
        raise InvalidNumberError(INVALID_NUMBER_MESSAGE)
    return int(normalized)


def parse_price(text: str | None) -> float:
    """Convierte texto a float finito o lanza InvalidNumberError."""
    normalized = (text or "").strip()
    if not _DECIMAL_PATTERN.fullmatch(normalized):
        raise InvalidNumberError(INVALID_NUMBER_MESSAGE)

    value = float(normalized)
    if not math.isfinite(value):
        raise InvalidNumberError(INVALID_NUMBER_MESSAGE)
    return value


def validate_product_name(name: str | None) -> str:
    """Valida el nombre del producto y lo retorna sin espacios extremos."""
    clean_name = (name or "").strip()
    if not clean_name or len(clean_name) > MAX_PRODUCT_NAME_LENGTH:
        raise ValidationError(INVALID_NAME_MESSAGE)
    if any(not char.isprintable() for char in clean_name):
        raise ValidationError(INVALID_NAME_MESSAGE)
    return clean_name


def validate_product_quantity(text: str | None) -> int:
    """Cantidad inicial: entero mayor o igual a 0."""
    quantity = parse_int(text)
    if quantity < 0:
        raise ValidationError(INVALID_QUANTITY_MESSAGE)
    return quantity


def validate_product_price(text: str | None) -> float:
    """Precio: numero mayor a 0."""
    price = parse_price(text)
    if price <= 0:
        raise ValidationError(INVALID_PRICE_MESSAGE)
    return price


def validate_restock_amount(text: str | None) -> int:
    """Reposicion: entero mayor a 0."""
    amount = parse_int(text)
    if amount <= 0:
        raise ValidationError(INVALID_RESTOCK_MESSAGE)
    return amount


def validate_purchase_amount(text: str | None, current_quantity: int) -> int:
    """Compra: entero entre 1 y el stock actual."""
    amount = parse_int(text)
    if amount < 1 or amount > current_quantity:
        raise ValidationError(purchase_range_message(current_quantity))
    return amount
