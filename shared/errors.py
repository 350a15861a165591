"""Excepciones compartidas del proyecto."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.protocol import FieldError


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class DraftValidationError(ValidationError):
    """Uno o mas campos del formulario de producto son invalidos."""

    def __init__(self, field_errors: Sequence[FieldError]) -> None:
        self.field_errors: tuple[FieldError, ...] = tuple(field_errors)
        message = "; ".join(error.message for error in self.field_errors)
        super().__init__(message or "Datos de producto invalidos.")

    @property
    def fields(self) -> list[str]:
        """Nombres de campos con error, en orden de formulario."""
        return [error.field for error in self.field_errors]


class ImageRequiredError(ValidationError):
    """Se intento registrar un producto sin imagen seleccionada."""

    def __init__(self) -> None:
        super().__init__("Por favor, selecciona una imagen para el producto.")


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class StoreUnavailable(ServiceError):
    """Fallo transitorio de transporte o del almacen remoto."""


class NotFound(ServiceError):
    """El documento ya no existe en la coleccion remota."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"El producto {product_id} ya no existe.")
