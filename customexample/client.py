"""HTTP client for the remote todo store.

The store exposes the whole collection at four endpoints under one base URL,
exchanging JSON arrays of strings. Every failure is raised as a
RemoteStoreError subclass labelled with the operation that produced it, so
callers can report which stage failed. Nothing is retried.
"""

import json
import logging
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, ProtocolError, TransportError
from .models import TodoList

logger = logging.getLogger(__name__)

_todo_list_adapter = TypeAdapter(list[str])

JSON_HEADERS = {"Content-Type": "application/json"}


class TodoStore(Protocol):
    """Interface of the remote store, so policies can wrap the HTTP client."""

    def fetch(self, baseurl: str) -> TodoList: ...

    def create(self, baseurl: str, items: TodoList) -> TodoList: ...

    def update(self, baseurl: str, items: TodoList) -> TodoList: ...

    def delete(self, baseurl: str) -> TodoList: ...

    def close(self) -> None: ...

    def __enter__(self) -> "TodoStore": ...

    def __exit__(self, *exc_info) -> None: ...


def endpoint(baseurl: str, path: str) -> str:
    """Join the base URL and an endpoint path without doubling slashes."""
    return f"{baseurl.rstrip('/')}/{path}"


def decode_todo_list(stage: str, body: bytes) -> TodoList:
    """Decode a response body as a JSON array of strings.

    Raises:
        DecodeError: If the body is not valid JSON or not an array of strings
    """
    try:
        return _todo_list_adapter.validate_json(body, strict=True)
    except (ValidationError, UnicodeDecodeError) as e:
        raise DecodeError(stage, str(e)) from e


class RemoteStoreClient:
    """Remote store client over httpx.

    No timeout is configured by default: a stalled server blocks the call
    until the transport gives up. Pass ``timeout`` to bound each request.

    Args:
        http_client: Preconfigured httpx.Client, mainly for tests
        timeout: Optional per-request timeout in seconds; configure it on
            http_client instead when passing one

    Raises:
        ValueError: If both http_client and timeout are given
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        if http_client is not None and timeout is not None:
            raise ValueError("timeout cannot be combined with a preconfigured http_client")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "RemoteStoreClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _send(
        self,
        stage: str,
        method: str,
        url: str,
        body: bytes | None = None,
    ) -> httpx.Response:
        headers = JSON_HEADERS if body is not None else None
        logger.debug(f"{stage}: {method} {url}")
        try:
            return self._http.request(method, url, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"{stage}: {method} {url} failed: {e}")
            raise TransportError(stage, str(e)) from e

    def _expect_ok(self, stage: str, response: httpx.Response) -> None:
        if response.status_code != httpx.codes.OK:
            logger.warning(
                f"{stage}: {response.request.method} {response.request.url} "
                f"returned {response.status_code}"
            )
            raise ProtocolError(stage, response.status_code)

    def fetch(self, baseurl: str) -> TodoList:
        """GET /get. The status code is not checked."""
        response = self._send("fetch", "GET", endpoint(baseurl, "get"))
        return decode_todo_list("fetch", response.content)

    def create(self, baseurl: str, items: TodoList) -> TodoList:
        """POST /create with the full list; the server echo is returned."""
        return self._replace("create", "POST", baseurl, items)

    def update(self, baseurl: str, items: TodoList) -> TodoList:
        """PUT /update with the full list; the server echo is returned."""
        return self._replace("update", "PUT", baseurl, items)

    def delete(self, baseurl: str) -> TodoList:
        """DELETE /delete; returns the store's confirmation of its new state."""
        response = self._send("delete", "DELETE", endpoint(baseurl, "delete"))
        self._expect_ok("delete", response)
        return decode_todo_list("delete", response.content)

    def _replace(
        self, stage: str, method: str, baseurl: str, items: TodoList
    ) -> TodoList:
        body = json.dumps(items).encode("utf-8")
        response = self._send(stage, method, endpoint(baseurl, stage), body)
        self._expect_ok(stage, response)
        return decode_todo_list(stage, response.content)
