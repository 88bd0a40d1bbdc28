import json
import os
import pytest
from typing import Any, Dict, Generator, List, Tuple

import httpx
from fastapi.testclient import TestClient

# Désactive l'init fastapi-limiter (évite toute connexion Redis pendant les tests)
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

from paypal_backend.app_setup.factory import create_app
from paypal_backend.config import Settings
from paypal_backend.orders.paypal_client import PayPalClient
from paypal_backend.orders.views import get_paypal_client


# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class PayPalStub:
    """
    Faux PayPal branché via httpx.MockTransport.
    - Réponses configurables par endpoint (status, body)
    - Enregistre chaque requête sortante dans `calls`
    """

    def __init__(self):
        self.calls: List[httpx.Request] = []
        self.token_response: Tuple[int, Any] = (200, {"access_token": "A21-test-token", "token_type": "Bearer"})
        self.order_response: Tuple[int, Any] = (
            201,
            {
                "id": "O1",
                "status": "CREATED",
                "links": [
                    {"rel": "self", "href": "https://api-m.sandbox.paypal.com/v2/checkout/orders/O1", "method": "GET"},
                    {"rel": "approve", "href": "https://x/approve", "method": "GET"},
                ],
            },
        )
        self.capture_response: Tuple[int, Any] = (201, {"status": "COMPLETED", "id": "O1"})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        path = request.url.path
        if path == "/v1/oauth2/token":
            status, body = self.token_response
        elif path == "/v2/checkout/orders":
            status, body = self.order_response
        elif path.endswith("/capture"):
            status, body = self.capture_response
        else:
            status, body = 404, {"name": "RESOURCE_NOT_FOUND"}
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, content=body or b"")

    def client(self, settings: Settings) -> PayPalClient:
        return PayPalClient.from_settings(settings, transport=httpx.MockTransport(self.handler))

    def paths(self) -> List[str]:
        return [r.url.path for r in self.calls]

    def json_of(self, index: int) -> Dict[str, Any]:
        return json.loads(self.calls[index].content or b"{}")


@pytest.fixture
def settings() -> Settings:
    return Settings(env="sandbox", client_id="client-id", secret="client-secret")


@pytest.fixture
def paypal_stub() -> PayPalStub:
    return PayPalStub()


@pytest.fixture
def make_app(paypal_stub):
    """Construit une app avec des Settings donnés et le faux PayPal en dépendance."""
    def _make(settings: Settings):
        app = create_app(settings)
        app.dependency_overrides[get_paypal_client] = lambda: paypal_stub.client(settings)
        return app
    return _make


@pytest.fixture
def app(make_app, settings):
    return make_app(settings)


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
