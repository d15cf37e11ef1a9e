"""Tests for the read-only todo data source."""

import httpx
import pytest

from customexample import base
from customexample.client import RemoteStoreClient
from customexample.errors import ContractError
from customexample.projector import TodoDataSource


def test_read_returns_remote_list(store, client):
    """read() returns exactly what GET /get returned."""
    store.items = ["buy milk", "walk dog"]
    data_source = TodoDataSource(client)
    data_source.configure("http://api.test")

    result = data_source.read()

    assert result.ok
    assert result.todo_list == ["buy milk", "walk dog"]
    assert str(store.requests[-1].url) == "http://api.test/get"


def test_read_failure_is_diagnostic(store, client):
    """Transport failures come back as diagnostics."""
    store.fail_with = httpx.ConnectError
    data_source = TodoDataSource(client)
    data_source.configure("http://api.test")

    result = data_source.read()

    assert not result.ok
    assert result.todo_list is None
    assert result.diagnostics.summaries() == ["Unable to hit /get endpoint"]


def test_has_no_mutating_operations(client):
    """The data source only observes remote state."""
    data_source = TodoDataSource(client)

    for name in ("create", "update", "delete"):
        assert not hasattr(data_source, name)


def test_configure_contract_matches_resource(client):
    """None is a no-op, non-strings are contract errors."""
    data_source = TodoDataSource(client)
    data_source.configure(None)
    assert data_source.configured is False

    with pytest.raises(ContractError):
        data_source.configure(8080)


def test_metadata_and_schema(client):
    data_source = TodoDataSource(client)

    assert data_source.metadata("customexample") == "customexample_todo"
    assert data_source.schema()["attributes"]["todo_list"]["computed"] is True


def test_close_releases_only_owned_client(monkeypatch, store):
    """close() closes a client the data source built, never one passed in."""
    calls = []
    monkeypatch.setattr(RemoteStoreClient, "close", lambda client: calls.append(client))

    with TodoDataSource(store.client()):
        pass
    assert calls == []

    monkeypatch.setattr(base, "RemoteStoreClient", store.client)
    with TodoDataSource() as owning:
        pass
    assert calls == [owning.client]
