"""Conversion entre valores Python y valores tipados de Firestore REST."""

from __future__ import annotations

import logging
from typing import Any

from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)


def encode_fields(data: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Codifica un diccionario plano al mapa ``fields`` de un documento."""
    return {key: encode_value(value) for key, value in data.items()}


def decode_fields(fields: dict[str, dict[str, Any]] | None) -> dict[str, Any]:
    """Decodifica el mapa ``fields`` de un documento a valores Python."""
    return {key: decode_value(value) for key, value in (fields or {}).items()}


def encode_value(value: Any) -> dict[str, Any]:
    """Codifica un valor Python como ``Value`` de Firestore."""
    if value is None:
        return {"nullValue": None}
    # bool antes que int: bool es subclase de int.
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return {"integerValue": str(value)}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    if isinstance(value, dict):
        return {"mapValue": {"fields": encode_fields(value)}}
    if isinstance(value, (list, tuple)):
        return {"arrayValue": {"values": [encode_value(item) for item in value]}}

    raise ServiceError(f"Tipo no soportado para Firestore: {type(value).__name__}")


def decode_value(value: dict[str, Any]) -> Any:
    """Decodifica un ``Value`` de Firestore a su equivalente Python."""
    if "stringValue" in value:
        return value["stringValue"]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "nullValue" in value:
        return None
    if "timestampValue" in value:
        return value["timestampValue"]
    if "referenceValue" in value:
        return value["referenceValue"]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields"))
    if "arrayValue" in value:
        return [decode_value(item) for item in value["arrayValue"].get("values", [])]

    LOGGER.warning("Valor Firestore no reconocido, se ignora: %s", list(value))
    return None


def document_id(document_name: str) -> str:
    """Extrae el id final de ``projects/.../documents/productos/<id>``."""
    return document_name.rstrip("/").rsplit("/", 1)[-1]
