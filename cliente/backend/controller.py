"""Controlador del panel de productos."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from servidor.domain.models import Product
from servidor.services.inventory_manager import InventoryManager
from shared.errors import ServiceError, ValidationError
from shared.product_types import AVAILABLE_PRODUCT_TYPES, normalize_product_type
from shared.protocol import (
    ActionResult,
    ActionStatus,
    AddProductRequest,
    Command,
    ProductRow,
    RemoveProductRequest,
    StockChangeRequest,
)

from .product_table import build_product_rows
from .validators import (
    validate_product_name,
    validate_product_price,
    validate_product_quantity,
    validate_purchase_amount,
    validate_restock_amount,
)

LOGGER = logging.getLogger(__name__)

ADD_FAILED_MESSAGE = "Failed to add product. Please check that all fields are valid."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error. Please try again."

SUCCESS_MESSAGES: dict[Command, str] = {
    Command.ADD: "Product added successfully!",
    Command.REMOVE: "Product removed successfully!",
    Command.RESTOCK: "Product restocked successfully!",
    Command.PURCHASE: "Product purchased successfully!",
}


class ProductPanelController:
    """Coordina acciones del panel de productos con el inventory manager.

    No guarda estado entre acciones: cada comando valida su entrada, delega en
    el manager y deja que la vista se reconstruya con ``refresh_rows``.
    """

    def __init__(self, manager: InventoryManager) -> None:
        self._manager = manager
        self._handlers: dict[Command, tuple[type, Callable[[Any], Product | bool]]] = {
            Command.ADD: (AddProductRequest, self._handle_add),
            Command.REMOVE: (RemoveProductRequest, self._handle_remove),
            Command.RESTOCK: (StockChangeRequest, self._handle_restock),
            Command.PURCHASE: (StockChangeRequest, self._handle_purchase),
        }

    @staticmethod
    def list_product_types() -> tuple[str, ...]:
        """Tipos disponibles para el selector del formulario."""
        return AVAILABLE_PRODUCT_TYPES

    def dispatch(
        self,
        command: Command,
        request: AddProductRequest | RemoveProductRequest | StockChangeRequest,
    ) -> ActionResult:
        """Ejecuta un comando y traduce su resultado a un ActionResult."""
        expected_type, handler = self._handlers[command]
        if not isinstance(request, expected_type):
            raise TypeError(
                f"{command.name} espera {expected_type.__name__}, "
                f"recibio {type(request).__name__}"
            )

        try:
            outcome = handler(request)
        except (ValidationError, ServiceError) as exc:
            LOGGER.warning("Accion %s rechazada: %s", command.name, exc)
            return ActionResult(command=command, status=ActionStatus.ERROR, message=str(exc))
        except Exception:
            LOGGER.exception("Fallo inesperado en accion %s.", command.name)
            return ActionResult(
                command=command,
                status=ActionStatus.ERROR,
                message=UNEXPECTED_ERROR_MESSAGE,
            )

        if outcome is False:
            LOGGER.debug("Accion %s ignorada: sin seleccion o prompt cancelado.", command.name)
            return ActionResult(command=command, status=ActionStatus.IGNORED)

        return ActionResult(
            command=command,
            status=ActionStatus.SUCCESS,
            message=SUCCESS_MESSAGES[command],
            product=outcome if isinstance(outcome, Product) else None,
        )

    def on_add_product(self, request: AddProductRequest) -> Product:
        """Valida el formulario y agrega el producto."""
        product_type = normalize_product_type(request.product_type)
        name = validate_product_name(request.name)
        quantity = validate_product_quantity(request.quantity)
        price = validate_product_price(request.price)

        added = self._manager.add_product(product_type, name, quantity, price)
        if added is None:
            raise ServiceError(ADD_FAILED_MESSAGE)

        LOGGER.info("Accion ejecutada: agregar producto id=%s", added.id)
        return added

    def on_remove_product(self, product_id: str | None) -> bool:
        """Elimina el producto seleccionado; False si no hay seleccion."""
        selected_id = self._selected_id(product_id)
        if selected_id is None:
            return False

        self._manager.remove_product(selected_id)
        LOGGER.info("Accion ejecutada: eliminar producto id=%s", selected_id)
        return True

    def on_restock_product(self, product_id: str | None, quantity_text: str | None) -> bool:
        """Repone stock del producto seleccionado."""
        selected_id = self._selected_id(product_id)
        if selected_id is None or not (quantity_text or "").strip():
            return False

        amount = validate_restock_amount(quantity_text)
        self._manager.add_quantity(selected_id, amount)
        LOGGER.info("Accion ejecutada: reponer producto id=%s, +%s", selected_id, amount)
        return True

    def on_purchase_product(self, product_id: str | None, quantity_text: str | None) -> bool:
        """Compra unidades del producto seleccionado.

        El tope se calcula con el stock vigente en el manager y no con la fila
        de la tabla, que puede estar desactualizada.
        """
        selected_id = self._selected_id(product_id)
        if selected_id is None or not (quantity_text or "").strip():
            return False

        current_quantity = self._manager.get_product(selected_id).quantity
        amount = validate_purchase_amount(quantity_text, current_quantity)
        self._manager.reduce_quantity(selected_id, amount)
        LOGGER.info("Accion ejecutada: comprar producto id=%s, -%s", selected_id, amount)
        return True

    def refresh_rows(self) -> list[ProductRow] | None:
        """Relee todos los productos; None deja la tabla sin cambios."""
        products = self._manager.get_all_products()
        if products is None:
            LOGGER.warning("El manager no retorno productos; se mantiene la tabla.")
            return None

        return build_product_rows(products)

    def _handle_add(self, request: AddProductRequest) -> Product:
        return self.on_add_product(request)

    def _handle_remove(self, request: RemoveProductRequest) -> bool:
        return self.on_remove_product(request.product_id)

    def _handle_restock(self, request: StockChangeRequest) -> bool:
        return self.on_restock_product(request.product_id, request.quantity)

    def _handle_purchase(self, request: StockChangeRequest) -> bool:
        return self.on_purchase_product(request.product_id, request.quantity)

    @staticmethod
    def _selected_id(product_id: str | None) -> str | None:
        """Normaliza el ID seleccionado; None o vacio significa sin seleccion."""
        if product_id is None:
            return None
        selected_id = str(product_id).strip()
        return selected_id or None
