"""DTOs compartidos entre pantallas y almacen de productos."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from parametros import DEFAULT_IMAGE_URL

NOMBRE_FIELD = "nombre"
DESCRIPCION_FIELD = "descripcion"
PRECIO_FIELD = "precio"
CANTIDAD_FIELD = "cantidad"
CATEGORIA_FIELD = "categoria"
IMAGE_URL_FIELD = "imageUrl"


@dataclass(slots=True)
class Product:
    """Documento de la coleccion de productos tal como se leyo del almacen.

    Los documentos antiguos pueden traer campos ausentes o con tipos
    inesperados (por ejemplo ``cantidad`` como texto); se conservan crudos
    y cada consumidor decide como tolerarlos.
    """

    id: str
    nombre: str | None = None
    descripcion: str | None = None
    precio: Any = None
    cantidad: Any = None
    categoria: str | None = None
    image_url: str = DEFAULT_IMAGE_URL

    @classmethod
    def from_document(cls, doc_id: str, fields: dict[str, Any]) -> Product:
        """Construye un producto desde los campos de un documento."""
        image_url = fields.get(IMAGE_URL_FIELD)
        return cls(
            id=doc_id,
            nombre=fields.get(NOMBRE_FIELD),
            descripcion=fields.get(DESCRIPCION_FIELD),
            precio=fields.get(PRECIO_FIELD),
            cantidad=fields.get(CANTIDAD_FIELD),
            categoria=_category_or_none(fields.get(CATEGORIA_FIELD)),
            image_url=image_url if isinstance(image_url, str) and image_url else DEFAULT_IMAGE_URL,
        )

    def to_document(self) -> dict[str, Any]:
        """Retorna la forma de registro persistida (sin id)."""
        return {
            NOMBRE_FIELD: self.nombre,
            DESCRIPCION_FIELD: self.descripcion,
            PRECIO_FIELD: self.precio,
            CANTIDAD_FIELD: self.cantidad,
            CATEGORIA_FIELD: self.categoria or "",
            IMAGE_URL_FIELD: self.image_url,
        }

    def copy(self) -> Product:
        """Copia superficial, util para snapshots de rollback."""
        return replace(self)


@dataclass(slots=True)
class ProductDraft:
    """Datos crudos del formulario antes de validar."""

    nombre: str = ""
    descripcion: str = ""
    cantidad: str = ""
    precio: str = ""
    categoria: str = ""
    image_url: str | None = None

    @classmethod
    def from_product(cls, product: Product) -> ProductDraft:
        """Prepara un borrador editable a partir de un producto existente."""
        return cls(
            nombre=_text_or_empty(product.nombre),
            descripcion=_text_or_empty(product.descripcion),
            cantidad=_text_or_empty(product.cantidad),
            precio=_text_or_empty(product.precio),
            categoria=product.categoria if isinstance(product.categoria, str) else "",
            image_url=product.image_url,
        )


@dataclass(slots=True, frozen=True)
class ValidatedProduct:
    """Producto validado con campos numericos ya convertidos."""

    nombre: str
    descripcion: str
    cantidad: int
    precio: float
    categoria: str
    image_url: str = DEFAULT_IMAGE_URL

    def to_document(self) -> dict[str, Any]:
        """Retorna el documento completo listo para persistir."""
        return {
            NOMBRE_FIELD: self.nombre,
            DESCRIPCION_FIELD: self.descripcion,
            PRECIO_FIELD: self.precio,
            CANTIDAD_FIELD: self.cantidad,
            CATEGORIA_FIELD: self.categoria,
            IMAGE_URL_FIELD: self.image_url,
        }

    def as_product(self, product_id: str) -> Product:
        """Asocia el id asignado por el almacen."""
        return Product(
            id=product_id,
            nombre=self.nombre,
            descripcion=self.descripcion,
            precio=self.precio,
            cantidad=self.cantidad,
            categoria=self.categoria,
            image_url=self.image_url,
        )


@dataclass(slots=True, frozen=True)
class FieldError:
    """Error asociado a un campo puntual del formulario."""

    field: str
    message: str


@dataclass(slots=True, frozen=True)
class CategoryTotal:
    """Suma de stock de una categoria para el grafico de estadisticas."""

    category: str
    total_quantity: int | float
    color: str


def _text_or_empty(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _category_or_none(value: Any) -> str | None:
    """Solo se aceptan slugs de texto; cualquier otro tipo queda sin categoria."""
    if isinstance(value, str) and value:
        return value
    return None
