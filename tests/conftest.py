"""
Pytest configuration and fixtures for Custom Example tests.
"""

import json

import httpx
import pytest

from customexample.client import RemoteStoreClient
from customexample.settings import ENV_PREFIX, reload_settings


class FakeStore:
    """In-memory todo store served through httpx.MockTransport.

    Attributes:
        items: Current remote collection
        requests: Every request received, in order
        status: Status code override per path, e.g. {"/create": 500}
        normalize: Applied to submitted lists before they are stored
        fail_with: Transport exception raised for every request when set
    """

    def __init__(self, items=None):
        self.items = list(items or [])
        self.requests = []
        self.status = {}
        self.normalize = list
        self.fail_with = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("connection refused", request=request)

        path = request.url.path
        status = self.status.get(path, 200)
        if status != 200:
            return httpx.Response(status, text="internal error")

        if path == "/get":
            return httpx.Response(200, json=self.items)
        if path in ("/create", "/update"):
            self.items = self.normalize(json.loads(request.content))
            return httpx.Response(200, json=self.items)
        if path == "/delete":
            self.items = []
            return httpx.Response(200, json=self.items)
        return httpx.Response(404, text="not found")

    def client(self) -> RemoteStoreClient:
        transport = httpx.MockTransport(self.handler)
        return RemoteStoreClient(httpx.Client(transport=transport))


@pytest.fixture
def store():
    """Provide an empty fake todo store."""
    return FakeStore()


@pytest.fixture
def client(store):
    """Provide a RemoteStoreClient wired to the fake store."""
    with store.client() as client:
        yield client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove provider variables from the environment and reset settings."""
    for name in ("USERNAME", "PASSWORD", "BASEURL", "LOG_LEVEL"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    reload_settings()
    yield
    reload_settings()
