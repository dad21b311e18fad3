import asyncio
from typing import List

import pytest
from pydantic.v1 import Field

from litestar.testing import TestClient

from shopzap.api.litestar import LitestarAPI
from shopzap.config import ShopzapConfig
from shopzap.context import MemoryContextStore
from shopzap.directory import BaseDirectory, MemoryDirectory
from shopzap.exceptions import DirectoryError
from shopzap.models import StoreRecord


class BrokenDirectory(BaseDirectory):
    _allowed_methods = ['LOOKUP']

    def execute_query(self, query):
        raise DirectoryError("connection refused")


class ThreadCheckingContextStore(MemoryContextStore):
    on_event_loop: List[bool] = Field(default_factory=list, exclude=True)

    def _check_thread(self):
        try:
            asyncio.get_running_loop()
            self.on_event_loop.append(True)
        except RuntimeError:
            self.on_event_loop.append(False)

    def get(self, key):
        self._check_thread()
        return super().get(key)

    def set(self, key, value, ttl):
        self._check_thread()
        super().set(key, value, ttl)

    def delete(self, key):
        self._check_thread()
        super().delete(key)


@pytest.fixture
def directory():
    directory = MemoryDirectory()
    directory.put(StoreRecord(id="1", username="dore", name="Dore Store"))
    return directory


@pytest.fixture
def client(directory):
    api = LitestarAPI(
        name="Test Routing",
        version="0.0.1",
        directory=directory,
        origin="https://shopzap.io"
    )
    with TestClient(app=api.generate_app()) as client:
        yield client


def test_ping(client):
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.json() is True


def test_resolve_username(client):
    response = client.get("/store/dore")

    assert response.status_code == 200
    data = response.json()
    assert data["redirect_needed"] is False
    assert data["final_username"] == "dore"
    assert data["store"]["id"] == "1"
    assert data["canonical_url"] == "https://shopzap.io/store/dore"


def test_resolve_legacy_name(client):
    response = client.get("/store/Dore Store")

    assert response.status_code == 200
    data = response.json()
    assert data["redirect_needed"] is True
    assert data["final_username"] == "dore"
    assert data["matched_by"] == "name"


def test_resolve_not_found(client):
    response = client.get("/store/dorestore")

    assert response.status_code == 404
    assert response.json() == {"detail": "Store not found"}


def test_resolve_unavailable():
    api = LitestarAPI(name="Broken", directory=BrokenDirectory())

    with TestClient(app=api.generate_app()) as client:
        response = client.get("/store/dore")

    assert response.status_code == 503
    assert "connection refused" not in response.text


def test_route_path_redirect(client):
    response = client.get(
        "/route", params={"path": "/store/Dore%20Store/cart"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["redirect_needed"] is True
    assert data["redirect_path"] == "/store/dore/cart"


def test_route_path_canonical(client):
    response = client.get("/route", params={"path": "/store/dore/cart"})

    assert response.status_code == 200
    assert response.json()["redirect_path"] is None


def test_route_host(client):
    response = client.get("/route", params={"host": "dore.shopzap.io"})

    assert response.status_code == 200
    assert response.json()["final_username"] == "dore"
    assert "redirect_path" not in response.json()


def test_route_requires_path_or_host(client):
    response = client.get("/route")

    assert response.status_code == 400


def test_checkout_context(client):
    response = client.post(
        "/checkout/sess-1/context", json={"path": "/store/Dore Store/checkout"}
    )

    assert response.status_code == 201
    assert response.json()["store_username"] == "dore"
    assert response.json()["original_path"] == "/store/Dore Store/checkout"

    response = client.get("/checkout/sess-1/context")

    assert response.status_code == 200
    assert response.json()["store_id"] == "1"

    response = client.delete("/checkout/sess-1/context")

    assert response.status_code == 204

    response = client.get("/checkout/sess-1/context")

    assert response.status_code == 404


def test_checkout_context_invalid_path(client):
    response = client.post("/checkout/sess-1/context", json={"path": "/cart"})

    assert response.status_code == 400


def test_checkout_context_unknown_store(client):
    response = client.post(
        "/checkout/sess-1/context", json={"path": "/store/nobody"}
    )

    assert response.status_code == 404


def test_from_config():
    api = LitestarAPI.from_config(ShopzapConfig())

    assert isinstance(api.directory, MemoryDirectory)
    assert api.name == "ShopZap Store Routing"


def test_checkout_context_runs_off_event_loop(directory):
    context_store = ThreadCheckingContextStore()
    api = LitestarAPI(
        name="Test Routing",
        directory=directory,
        context_store=context_store
    )

    with TestClient(app=api.generate_app()) as client:
        client.post("/checkout/sess-1/context", json={"path": "/store/dore"})
        client.get("/checkout/sess-1/context")
        client.delete("/checkout/sess-1/context")

    assert len(context_store.on_event_loop) == 3
    assert not any(context_store.on_event_loop)
