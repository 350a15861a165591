"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
OUTPUT_DIR = DATA_DIR / "output"
DEFAULT_REPORT_FILENAME_STEM = "estadisticas_categorias"

load_dotenv(BASE_DIR / ".env")

PRODUCTS_COLLECTION = "productos"
DEFAULT_IMAGE_URL = "https://example.com/default-image.png"

FIRESTORE_PROJECT_ID = os.getenv("FIRESTORE_PROJECT_ID", "")
FIRESTORE_API_KEY = os.getenv("FIRESTORE_API_KEY", "")
FIRESTORE_BASE_URL = os.getenv(
    "FIRESTORE_BASE_URL",
    "https://firestore.googleapis.com/v1",
)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
