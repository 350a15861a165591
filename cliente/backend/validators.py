"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math
from pathlib import Path

from parametros import DEFAULT_IMAGE_URL
from shared.categories import is_valid_category
from shared.errors import DraftValidationError, ImageRequiredError, ValidationError
from shared.protocol import (
    CANTIDAD_FIELD,
    CATEGORIA_FIELD,
    DESCRIPCION_FIELD,
    NOMBRE_FIELD,
    PRECIO_FIELD,
    FieldError,
    ProductDraft,
    ValidatedProduct,
)


def validate_output_dir(path: Path) -> None:
    """Valida que la ruta de salida sea utilizable para exportar reportes."""
    if path.exists() and not path.is_dir():
        raise ValidationError(f"La ruta no es un directorio: {path}")

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ValidationError(f"No se pudo crear/acceder al directorio: {path}") from exc


def validate_draft(draft: ProductDraft, require_image: bool = False) -> ValidatedProduct:
    """Valida un borrador de producto y retorna sus valores convertidos.

    La falta de imagen se informa con ``ImageRequiredError`` antes de revisar
    los campos, igual que el formulario de registro de la tienda. Los errores
    de campo se acumulan en un unico ``DraftValidationError``.
    """
    image_url = (draft.image_url or "").strip()
    if require_image and not image_url:
        raise ImageRequiredError()

    field_errors = collect_field_errors(draft)
    if field_errors:
        raise DraftValidationError(field_errors)

    return ValidatedProduct(
        nombre=draft.nombre.strip(),
        descripcion=draft.descripcion.strip(),
        cantidad=_parse_cantidad(draft.cantidad),
        precio=_parse_precio(draft.precio),
        categoria=draft.categoria.strip(),
        image_url=image_url or DEFAULT_IMAGE_URL,
    )


def collect_field_errors(draft: ProductDraft) -> list[FieldError]:
    """Retorna los errores de campo del borrador sin lanzar excepciones."""
    errors: list[FieldError] = []

    if not draft.nombre.strip():
        errors.append(FieldError(NOMBRE_FIELD, "El nombre del producto es obligatorio"))

    if not draft.descripcion.strip():
        errors.append(
            FieldError(DESCRIPCION_FIELD, "La descripción del producto es obligatoria")
        )

    if not draft.cantidad.strip():
        errors.append(FieldError(CANTIDAD_FIELD, "La cantidad es obligatoria"))
    elif _parse_cantidad(draft.cantidad) is None:
        errors.append(FieldError(CANTIDAD_FIELD, "La cantidad debe ser un número positivo"))

    if not draft.precio.strip():
        errors.append(FieldError(PRECIO_FIELD, "El precio es obligatorio"))
    elif _parse_precio(draft.precio) is None:
        errors.append(FieldError(PRECIO_FIELD, "El precio debe ser un número positivo"))

    categoria = draft.categoria.strip()
    if not categoria:
        errors.append(FieldError(CATEGORIA_FIELD, "La categoría es obligatoria"))
    elif not is_valid_category(categoria):
        errors.append(FieldError(CATEGORIA_FIELD, f"Categoría desconocida: {categoria}"))

    return errors


def _parse_cantidad(raw: str) -> int | None:
    """Entero estrictamente positivo, o ``None``."""
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def _parse_precio(raw: str) -> float | None:
    """Decimal finito y positivo (acepta coma decimal), o ``None``."""
    try:
        value = float(raw.strip().replace(",", "."))
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value
