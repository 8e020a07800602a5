"""Tests para validaciones de entradas del panel."""

from __future__ import annotations

import unittest

from cliente.backend.validators import (
    INVALID_NAME_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    INVALID_PRICE_MESSAGE,
    INVALID_QUANTITY_MESSAGE,
    parse_int,
    parse_price,
    validate_product_name,
    validate_product_price,
    validate_product_quantity,
    validate_purchase_amount,
    validate_restock_amount,
)
from parametros import MAX_PRODUCT_NAME_LENGTH
from shared.errors import InvalidNumberError, ValidationError
from shared.messages import INVALID_RESTOCK_MESSAGE


class NumberParsingTests(unittest.TestCase):
    """Valida el parseo estricto de enteros y decimales."""

    def test_parse_int_accepts_signed_digits(self) -> None:
        """Debe aceptar digitos con signo opcional y espacios extremos."""
        self.assertEqual(parse_int(" 42 "), 42)
        self.assertEqual(parse_int("+7"), 7)
        self.assertEqual(parse_int("-3"), -3)

    def test_parse_int_rejects_underscores(self) -> None:
        """Separadores "_" no forman un entero valido."""
        for value in ("1_0", "1_000", "_1", "1_"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError) as ctx:
                    parse_int(value)
                self.assertEqual(str(ctx.exception), INVALID_NUMBER_MESSAGE)

    def test_parse_int_rejects_malformed_text(self) -> None:
        """Texto vacio, decimales o espacios internos no son enteros."""
        for value in (None, "", "1.5", "1 0", "0x10", "+", "١٢"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError):
                    parse_int(value)

    def test_parse_price_accepts_decimal_forms(self) -> None:
        """Debe aceptar enteros, decimales y exponentes."""
        self.assertEqual(parse_price("19.99"), 19.99)
        self.assertEqual(parse_price("5"), 5.0)
        self.assertEqual(parse_price(".5"), 0.5)
        self.assertEqual(parse_price("1e2"), 100.0)

    def test_parse_price_rejects_underscores(self) -> None:
        """Separadores "_" no forman un precio valido."""
        for value in ("1_9.99", "19.9_9", "1_0"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError) as ctx:
                    parse_price(value)
                self.assertEqual(str(ctx.exception), INVALID_NUMBER_MESSAGE)

    def test_parse_price_rejects_non_finite(self) -> None:
        """nan, inf y desbordes no son precios validos."""
        for value in ("nan", "inf", "-inf", "Infinity", "1e400", "precio", "."):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError):
                    parse_price(value)


class ProductFieldValidatorsTests(unittest.TestCase):
    """Valida nombre, cantidad y precio del formulario de alta."""

    def test_validate_product_name_strips_spaces(self) -> None:
        """Debe retornar el nombre sin espacios extremos."""
        self.assertEqual(validate_product_name("  Robot  "), "Robot")
        self.assertEqual(validate_product_name("Camiseta Niño"), "Camiseta Niño")

    def test_validate_product_name_rejects_blank_and_too_long(self) -> None:
        """Nombre vacio, solo espacios o demasiado largo no es valido."""
        for value in ("", "   ", None, "x" * (MAX_PRODUCT_NAME_LENGTH + 1), "Ro\tbot"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    validate_product_name(value)
                self.assertEqual(str(ctx.exception), INVALID_NAME_MESSAGE)

    def test_validate_product_quantity_accepts_zero(self) -> None:
        """La cantidad inicial puede ser 0."""
        self.assertEqual(validate_product_quantity("0"), 0)
        self.assertEqual(validate_product_quantity(" 12 "), 12)

    def test_validate_product_quantity_negative(self) -> None:
        """Cantidad negativa debe usar el mensaje de rango."""
        with self.assertRaises(ValidationError) as ctx:
            validate_product_quantity("-1")
        self.assertNotIsInstance(ctx.exception, InvalidNumberError)
        self.assertEqual(str(ctx.exception), INVALID_QUANTITY_MESSAGE)

    def test_validate_product_quantity_non_integer(self) -> None:
        """Texto no entero debe reportar numero invalido."""
        for value in ("abc", "1.5", "", "10 u", "1_0"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError) as ctx:
                    validate_product_quantity(value)
                self.assertEqual(str(ctx.exception), INVALID_NUMBER_MESSAGE)

    def test_validate_product_price(self) -> None:
        """Precio debe ser numero finito mayor a 0."""
        self.assertAlmostEqual(validate_product_price("19.99"), 19.99)
        for value in ("0", "-3.5"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    validate_product_price(value)
                self.assertNotIsInstance(ctx.exception, InvalidNumberError)
                self.assertEqual(str(ctx.exception), INVALID_PRICE_MESSAGE)


class StockAmountValidatorsTests(unittest.TestCase):
    """Valida cantidades de reposicion y compra."""

    def test_restock_requires_positive_integer(self) -> None:
        """Reponer 0 o negativo debe fallar con mensaje especifico."""
        self.assertEqual(validate_restock_amount("4"), 4)
        for value in ("0", "-5"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    validate_restock_amount(value)
                self.assertEqual(str(ctx.exception), INVALID_RESTOCK_MESSAGE)

    def test_restock_rejects_malformed_numbers(self) -> None:
        """Texto no numerico o con "_" debe reportar numero invalido."""
        for value in ("x", "1_000"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError):
                    validate_restock_amount(value)

    def test_purchase_range_uses_current_quantity(self) -> None:
        """Compra fuera de 1..stock debe informar el rango vigente."""
        self.assertEqual(validate_purchase_amount("3", 3), 3)
        for value in ("0", "4", "-1"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    validate_purchase_amount(value, 3)
                self.assertIn("1 – 3", str(ctx.exception))

    def test_purchase_with_empty_stock(self) -> None:
        """Sin stock no hay ninguna cantidad valida."""
        with self.assertRaises(ValidationError) as ctx:
            validate_purchase_amount("1", 0)
        self.assertIn("1 – 0", str(ctx.exception))

    def test_purchase_non_numeric(self) -> None:
        """Texto no numerico en compra es numero invalido."""
        for value in ("cinco", "1_0"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidNumberError):
                    validate_purchase_amount(value, 10)


if __name__ == "__main__":
    unittest.main()
