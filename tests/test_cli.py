"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from customexample import cli
from customexample.settings import reload_settings

runner = CliRunner()

CREDENTIALS = ["--username", "alice", "--password", "hunter2", "--baseurl", "http://api.test"]


@pytest.fixture(autouse=True)
def fake_client(monkeypatch, store):
    """Route every CLI command to the fake store."""
    monkeypatch.setattr(cli, "RemoteStoreClient", store.client)


def test_config_masks_password():
    result = runner.invoke(cli.app, CREDENTIALS + ["config"])

    assert result.exit_code == 0
    assert "alice" in result.output
    assert "http://api.test" in result.output
    assert "hunter2" not in result.output


def test_config_reports_every_missing_field():
    """Without declarations or environment all three fields are reported."""
    result = runner.invoke(cli.app, ["config"])

    assert result.exit_code == 1
    assert "Missing username" in result.output
    assert "Missing Password" in result.output
    assert "Missing baseurl" in result.output


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("CUSTOM_EXAMPLE_USERNAME", "bob")
    monkeypatch.setenv("CUSTOM_EXAMPLE_PASSWORD", "s3cret")
    monkeypatch.setenv("CUSTOM_EXAMPLE_BASEURL", "http://env.test")
    reload_settings()

    result = runner.invoke(cli.app, ["config"])

    assert result.exit_code == 0
    assert "http://env.test" in result.output
    assert "s3cret" not in result.output


def test_apply_prints_server_echo(store):
    store.normalize = sorted

    result = runner.invoke(cli.app, CREDENTIALS + ["apply", "walk dog", "buy milk"])

    assert result.exit_code == 0
    assert store.requests[-1].method == "POST"
    assert result.output.index("buy milk") < result.output.index("walk dog")


def test_apply_update_uses_put(store):
    result = runner.invoke(cli.app, CREDENTIALS + ["apply", "--update", "a"])

    assert result.exit_code == 0
    assert store.requests[-1].method == "PUT"


def test_get_lists_items(store):
    store.items = ["buy milk"]

    result = runner.invoke(cli.app, CREDENTIALS + ["get"])

    assert result.exit_code == 0
    assert "1. buy milk" in result.output


def test_destroy_empties_list(store):
    store.items = ["a"]

    result = runner.invoke(cli.app, CREDENTIALS + ["destroy"])

    assert result.exit_code == 0
    assert store.items == []
    assert "Todo list is empty" in result.output


def test_remote_failure_exits_with_error(store):
    store.status["/create"] = 500

    result = runner.invoke(cli.app, CREDENTIALS + ["apply", "a"])

    assert result.exit_code == 1
    assert "Unexpected status from /create endpoint" in result.output


def test_version():
    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert "customexample version" in result.output
