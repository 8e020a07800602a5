"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
UTILITIES_DIR = BASE_DIR / "cliente" / "utilities"
APP_ICON = UTILITIES_DIR / "icono.ico"
APP_TITLE = "Inventory Manager"

PRODUCT_ID_PREFIX = "P"
MAX_PRODUCT_NAME_LENGTH = 100

LOG_LEVEL = os.environ.get("INVENTORY_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
