"""DTOs entre el panel de productos y su controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from servidor.domain.models import Product

PRODUCT_TABLE_COLUMNS: tuple[str, ...] = ("ID", "Type", "Name", "Quantity", "Price")


class Command(Enum):
    """Acciones que el usuario puede disparar desde el panel."""

    ADD = "add"
    REMOVE = "remove"
    RESTOCK = "restock"
    PURCHASE = "purchase"


class ActionStatus(Enum):
    """Resultado de una accion despachada."""

    SUCCESS = "success"
    ERROR = "error"
    IGNORED = "ignored"


@dataclass(slots=True)
class AddProductRequest:
    """Datos crudos del formulario de alta de producto."""

    product_type: str
    name: str
    quantity: str
    price: str


@dataclass(slots=True)
class RemoveProductRequest:
    """Solicitud para eliminar la fila seleccionada (None si no hay seleccion)."""

    product_id: str | None


@dataclass(slots=True)
class StockChangeRequest:
    """Solicitud de reposicion o compra sobre la fila seleccionada.

    ``quantity`` es el texto ingresado en el prompt; ``None`` indica que el
    usuario cancelo.
    """

    product_id: str | None
    quantity: str | None


@dataclass(slots=True)
class ActionResult:
    """Respuesta de ``dispatch`` lista para notificar al usuario."""

    command: Command
    status: ActionStatus
    message: str = ""
    product: Product | None = None

    @property
    def ok(self) -> bool:
        """True solo cuando la accion se aplico."""
        return self.status is ActionStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class ProductRow:
    """Fila de la tabla de productos, con celdas ya formateadas."""

    id: str
    type: str
    name: str
    quantity: str
    price: str

    def cells(self) -> tuple[str, ...]:
        """Retorna celdas en el orden de ``PRODUCT_TABLE_COLUMNS``."""
        return (self.id, self.type, self.name, self.quantity, self.price)
