"""Administracion en memoria de la coleccion de productos."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Protocol

from parametros import PRODUCT_ID_PREFIX
from servidor.domain.models import Product
from shared.errors import ProductNotFoundError, ValidationError
from shared.messages import INVALID_RESTOCK_MESSAGE, purchase_range_message
from shared.product_types import is_known_product_type, normalize_product_type

LOGGER = logging.getLogger(__name__)


class InventoryManager(Protocol):
    """Interfaz de acceso del panel a la coleccion de productos."""

    def add_product(
        self,
        product_type: str,
        name: str,
        quantity: int,
        price: float,
    ) -> Product | None:
        """Crea un producto; retorna None si no fue posible."""

    def remove_product(self, product_id: str) -> None:
        """Elimina un producto por ID."""

    def add_quantity(self, product_id: str, amount: int) -> None:
        """Incrementa el stock de un producto."""

    def reduce_quantity(self, product_id: str, amount: int) -> None:
        """Descuenta stock de un producto."""

    def get_product(self, product_id: str) -> Product:
        """Retorna el producto con el ID indicado."""

    def get_all_products(self) -> list[Product] | None:
        """Retorna todos los productos."""


class InMemoryInventoryManager:
    """Implementacion local que guarda productos en un diccionario.

    Los IDs son correlativos (``P0001``, ``P0002``, ...) y no se reutilizan
    despues de eliminar un producto. Los productos entregados hacia afuera son
    copias, por lo que nadie fuera del manager puede mutar el stock.
    """

    def __init__(self, id_prefix: str = PRODUCT_ID_PREFIX) -> None:
        self._id_prefix = id_prefix
        self._next_number = 1
        self._products: dict[str, Product] = {}

    def add_product(
        self,
        product_type: str,
        name: str,
        quantity: int,
        price: float,
    ) -> Product | None:
        """Registra un producto nuevo o retorna None si los datos no cumplen invariantes."""
        clean_name = (name or "").strip()
        if not is_known_product_type(product_type):
            LOGGER.warning("Tipo de producto desconocido: %r", product_type)
            return None
        if not clean_name:
            LOGGER.warning("Nombre de producto vacio.")
            return None
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            LOGGER.warning("Cantidad invalida para %s: %r", clean_name, quantity)
            return None
        if (
            isinstance(price, bool)
            or not isinstance(price, (int, float))
            or not math.isfinite(price)
            or price <= 0
        ):
            LOGGER.warning("Precio invalido para %s: %r", clean_name, price)
            return None

        product = Product(
            id=self._generate_id(),
            type=normalize_product_type(product_type),
            name=clean_name,
            quantity=quantity,
            price=float(price),
        )
        self._products[product.id] = product
        LOGGER.info(
            "Producto agregado: id=%s, type=%s, name=%s, quantity=%s, price=%.2f",
            product.id,
            product.type,
            product.name,
            product.quantity,
            product.price,
        )
        return replace(product)

    def remove_product(self, product_id: str) -> None:
        """Elimina el producto; un ID inexistente no tiene efecto."""
        removed = self._products.pop(product_id, None)
        if removed is None:
            LOGGER.debug("remove_product() ignorado, ID inexistente: %s", product_id)
            return

        LOGGER.info("Producto eliminado: id=%s, name=%s", removed.id, removed.name)

    def add_quantity(self, product_id: str, amount: int) -> None:
        """Suma ``amount`` unidades al stock."""
        product = self._get_stored(product_id)
        if amount <= 0:
            raise ValidationError(INVALID_RESTOCK_MESSAGE)

        product.quantity += amount
        LOGGER.info(
            "Stock repuesto: id=%s, +%s, quantity=%s",
            product_id,
            amount,
            product.quantity,
        )

    def reduce_quantity(self, product_id: str, amount: int) -> None:
        """Descuenta ``amount`` unidades sin dejar el stock negativo."""
        product = self._get_stored(product_id)
        if amount <= 0 or amount > product.quantity:
            raise ValidationError(purchase_range_message(product.quantity))

        product.quantity -= amount
        LOGGER.info(
            "Stock descontado: id=%s, -%s, quantity=%s",
            product_id,
            amount,
            product.quantity,
        )

    def get_product(self, product_id: str) -> Product:
        """Retorna una copia del producto o lanza ProductNotFoundError."""
        return replace(self._get_stored(product_id))

    def get_all_products(self) -> list[Product] | None:
        """Retorna copias de todos los productos en orden de alta."""
        return [replace(product) for product in self._products.values()]

    def _get_stored(self, product_id: str) -> Product:
        """Obtiene la instancia interna del producto."""
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def _generate_id(self) -> str:
        """Genera el siguiente ID correlativo."""
        product_id = f"{self._id_prefix}{self._next_number:04d}"
        self._next_number += 1
        return product_id
