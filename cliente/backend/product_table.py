"""Proyeccion pura de productos a filas de la tabla."""

from __future__ import annotations

from collections.abc import Iterable

from servidor.domain.models import Product
from shared.protocol import ProductRow


def format_price(value: float) -> str:
    """Formatea precio con dos decimales."""
    return f"{value:.2f}"


def build_product_row(product: Product) -> ProductRow:
    """Convierte un producto en una fila de texto."""
    return ProductRow(
        id=str(product.id),
        type=product.type,
        name=product.name,
        quantity=str(product.quantity),
        price=format_price(product.price),
    )


def build_product_rows(products: Iterable[Product]) -> list[ProductRow]:
    """Construye las filas de la tabla de productos, respetando el orden."""
    return [build_product_row(product) for product in products]
