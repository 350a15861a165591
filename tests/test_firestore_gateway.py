"""Tests del gateway Firestore usando transporte HTTP simulado."""

from __future__ import annotations

import json
import unittest

import httpx

from cliente.backend.firestore_codec import encode_fields
from cliente.backend.firestore_gateway import FirestoreProductGateway
from parametros import DEFAULT_IMAGE_URL
from shared.errors import NotFound, ServiceError, StoreUnavailable
from shared.protocol import ValidatedProduct

BASE_URL = "https://firestore.test/v1"
COLLECTION_PATH = "/v1/projects/duarte/databases/(default)/documents/productos"
DOC_PREFIX = "projects/duarte/databases/(default)/documents/productos/"


def _validated() -> ValidatedProduct:
    return ValidatedProduct(
        nombre="Cinturón",
        descripcion="Cuero trenzado",
        cantidad=4,
        precio=120.0,
        categoria="vestimenta",
    )


class FirestoreProductGatewayTests(unittest.TestCase):
    """Valida traduccion de llamadas REST y de errores."""

    def setUp(self) -> None:
        self.requests: list[httpx.Request] = []

    def _gateway(self, handler, api_key: str = "") -> FirestoreProductGateway:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(recording_handler))
        return FirestoreProductGateway(
            project_id="duarte",
            api_key=api_key,
            base_url=BASE_URL,
            client=client,
        )

    def test_list_products_follows_pagination(self) -> None:
        """Debe pedir paginas hasta que no haya nextPageToken."""

        def handler(request: httpx.Request) -> httpx.Response:
            if "pageToken" not in request.url.params:
                return httpx.Response(
                    200,
                    json={
                        "documents": [
                            {
                                "name": DOC_PREFIX + "a1",
                                "fields": encode_fields({"nombre": "Bolso", "cantidad": 2}),
                            }
                        ],
                        "nextPageToken": "next",
                    },
                )
            return httpx.Response(
                200,
                json={
                    "documents": [
                        {
                            "name": DOC_PREFIX + "b2",
                            "fields": encode_fields({"nombre": "Bota", "imageUrl": "file:///b.png"}),
                        }
                    ]
                },
            )

        products = self._gateway(handler).list_products()

        self.assertEqual([p.id for p in products], ["a1", "b2"])
        self.assertEqual(products[0].cantidad, 2)
        self.assertEqual(products[0].image_url, DEFAULT_IMAGE_URL)
        self.assertEqual(products[1].image_url, "file:///b.png")
        self.assertEqual(len(self.requests), 2)
        self.assertEqual(self.requests[0].url.path, COLLECTION_PATH)

    def test_list_empty_collection(self) -> None:
        products = self._gateway(lambda request: httpx.Response(200, json={})).list_products()
        self.assertEqual(products, [])

    def test_create_product_returns_assigned_id(self) -> None:
        """Debe enviar el documento completo y leer el id del nombre."""

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(200, json={"name": DOC_PREFIX + "nuevo42", **body})

        product_id = self._gateway(handler).create_product(_validated())

        self.assertEqual(product_id, "nuevo42")
        sent = json.loads(self.requests[0].content)["fields"]
        self.assertEqual(sent["cantidad"], {"integerValue": "4"})
        self.assertEqual(sent["precio"], {"doubleValue": 120.0})
        self.assertEqual(sent["imageUrl"], {"stringValue": DEFAULT_IMAGE_URL})
        self.assertEqual(self.requests[0].method, "POST")

    def test_update_sends_full_document_with_exists_precondition(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(200, json={}))

        gateway.update_product("abc", _validated())

        request = self.requests[0]
        self.assertEqual(request.method, "PATCH")
        self.assertEqual(request.url.path, COLLECTION_PATH + "/abc")
        self.assertEqual(request.url.params["currentDocument.exists"], "true")
        self.assertNotIn("updateMask.fieldPaths", request.url.params)

    def test_update_missing_document_raises_not_found(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(404, json={"error": {}}))

        with self.assertRaises(NotFound) as ctx:
            gateway.update_product("ghost", _validated())

        self.assertEqual(ctx.exception.product_id, "ghost")

    def test_delete_missing_document_is_success(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(404))
        gateway.delete_product("ghost")
        self.assertEqual(self.requests[0].method, "DELETE")

    def test_server_error_raises_store_unavailable(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(503, text="backend down"))

        with self.assertRaises(StoreUnavailable):
            gateway.list_products()
        with self.assertRaises(StoreUnavailable):
            gateway.delete_product("abc")

    def test_transport_error_raises_store_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("sin red", request=request)

        with self.assertRaises(StoreUnavailable) as ctx:
            self._gateway(handler).create_product(_validated())

        self.assertIsInstance(ctx.exception.__cause__, httpx.ConnectError)

    def test_invalid_json_raises_store_unavailable(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(200, text="<html>"))
        with self.assertRaises(StoreUnavailable):
            gateway.list_products()

    def test_api_key_is_sent_as_query_param(self) -> None:
        gateway = self._gateway(lambda request: httpx.Response(200, json={}), api_key="k-123")

        gateway.list_products()

        self.assertEqual(self.requests[0].url.params["key"], "k-123")
        self.assertEqual(self.requests[0].url.params["pageSize"], "300")

    def test_missing_project_id_is_rejected(self) -> None:
        with self.assertRaises(ServiceError):
            FirestoreProductGateway(project_id=" ", client=httpx.Client())


if __name__ == "__main__":
    unittest.main()
