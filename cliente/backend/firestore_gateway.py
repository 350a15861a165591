"""Gateway de productos sobre la API REST de Firestore."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from parametros import (
    FIRESTORE_API_KEY,
    FIRESTORE_BASE_URL,
    FIRESTORE_PROJECT_ID,
    HTTP_TIMEOUT_SECONDS,
    PRODUCTS_COLLECTION,
)
from shared.errors import NotFound, ServiceError, StoreUnavailable
from shared.protocol import Product, ValidatedProduct

from .firestore_codec import decode_fields, document_id, encode_fields

LOGGER = logging.getLogger(__name__)


class FirestoreProductGateway:
    """Acceso a la coleccion ``productos`` via Firestore REST v1.

    Cada operacion es una llamada remota independiente; no hay cache local
    ni reintentos automaticos. Los errores de transporte y las respuestas
    no exitosas se traducen a ``StoreUnavailable``; un 404 al actualizar se
    traduce a ``NotFound``.
    """

    _PAGE_SIZE = 300

    def __init__(
        self,
        project_id: str = FIRESTORE_PROJECT_ID,
        api_key: str = FIRESTORE_API_KEY,
        base_url: str = FIRESTORE_BASE_URL,
        collection: str = PRODUCTS_COLLECTION,
        id_token: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if not project_id.strip():
            raise ServiceError("Falta configurar FIRESTORE_PROJECT_ID.")

        self._collection_url = (
            f"{base_url.rstrip('/')}/projects/{project_id.strip()}"
            f"/databases/(default)/documents/{collection}"
        )
        self._api_key = api_key.strip()
        headers = {"Authorization": f"Bearer {id_token}"} if id_token else {}
        self._client = client or httpx.Client(timeout=HTTP_TIMEOUT_SECONDS, headers=headers)

    def close(self) -> None:
        """Libera el cliente HTTP subyacente."""
        self._client.close()

    def list_products(self) -> list[Product]:
        """Descarga la coleccion completa siguiendo la paginacion."""
        products: list[Product] = []
        page_token: str | None = None

        while True:
            params: dict[str, Any] = {"pageSize": self._PAGE_SIZE}
            if page_token:
                params["pageToken"] = page_token

            response = self._send("GET", self._collection_url, params=params)
            self._ensure_success(response, "listar productos")
            payload = self._json(response)

            for document in payload.get("documents", []):
                products.append(
                    Product.from_document(
                        document_id(document["name"]),
                        decode_fields(document.get("fields")),
                    )
                )

            page_token = payload.get("nextPageToken")
            if not page_token:
                break

        LOGGER.info("Productos obtenidos: %s", len(products))
        return products

    def create_product(self, product: ValidatedProduct) -> str:
        """Crea un documento y retorna el id asignado por Firestore."""
        response = self._send(
            "POST",
            self._collection_url,
            json={"fields": encode_fields(product.to_document())},
        )
        self._ensure_success(response, "crear producto")
        product_id = document_id(self._json(response)["name"])
        LOGGER.info("Documento creado con ID: %s", product_id)
        return product_id

    def update_product(self, product_id: str, product: ValidatedProduct) -> None:
        """Sobrescribe el documento completo, exigiendo que exista."""
        response = self._send(
            "PATCH",
            self._document_url(product_id),
            params={"currentDocument.exists": "true"},
            json={"fields": encode_fields(product.to_document())},
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFound(product_id)
        self._ensure_success(response, "actualizar producto")
        LOGGER.info("Documento actualizado: %s", product_id)

    def delete_product(self, product_id: str) -> None:
        """Elimina el documento; Firestore responde exito aunque no exista."""
        response = self._send("DELETE", self._document_url(product_id))
        if response.status_code == httpx.codes.NOT_FOUND:
            LOGGER.info("Eliminar producto inexistente ignorado: id=%s", product_id)
            return
        self._ensure_success(response, "eliminar producto")
        LOGGER.info("Documento eliminado: %s", product_id)

    def _document_url(self, product_id: str) -> str:
        return f"{self._collection_url}/{product_id}"

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Ejecuta la llamada HTTP traduciendo fallos de transporte."""
        if self._api_key:
            params = dict(kwargs.pop("params", None) or {})
            params["key"] = self._api_key
            kwargs["params"] = params

        try:
            return self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            LOGGER.exception("Fallo de transporte en %s %s", method, url)
            raise StoreUnavailable("No fue posible conectar con la base de datos.") from exc

    @staticmethod
    def _ensure_success(response: httpx.Response, action: str) -> None:
        if response.is_success:
            return
        LOGGER.error(
            "Respuesta no exitosa al %s: status=%s body=%s",
            action,
            response.status_code,
            response.text[:500],
        )
        raise StoreUnavailable(f"Hubo un problema al {action} (HTTP {response.status_code}).")

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            return response.json()
        except ValueError as exc:
            LOGGER.exception("Respuesta JSON invalida desde Firestore.")
            raise StoreUnavailable("Respuesta invalida de la base de datos.") from exc
