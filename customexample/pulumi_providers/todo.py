"""Pulumi dynamic provider for the remote todo list."""

from collections.abc import Callable
from typing import Any, Optional

import pulumi
from pulumi import Input, Output
from pulumi.dynamic import CreateResult, DiffResult, ReadResult, ResourceProvider, UpdateResult

from customexample.client import RemoteStoreClient, TodoStore
from customexample.diagnostics import DiagnosticsError
from customexample.models import OperationResult
from customexample.projector import TodoDataSource
from customexample.reconciler import TodoResource

ClientFactory = Callable[[], TodoStore]


def _checked(result: OperationResult) -> list[str]:
    if not result.ok:
        raise DiagnosticsError(result.diagnostics)
    return result.todo_list


class TodoListProvider(ResourceProvider):
    """Dynamic provider that reconciles a todo list against the remote store.

    The resource id is the store's baseurl; the collection has no per-item
    identity, so every operation replaces or reads the whole list.

    Args:
        client_factory: Builds the store client for each operation
    """

    def __init__(self, client_factory: ClientFactory | None = None):
        super().__init__()
        self.client_factory = client_factory or RemoteStoreClient

    def _run(
        self, baseurl: str, operation: Callable[[TodoResource], OperationResult]
    ) -> list[str]:
        """Run one reconciler operation on a client closed afterwards."""
        with self.client_factory() as client:
            resource = TodoResource(client)
            resource.configure(baseurl)
            return _checked(operation(resource))

    @staticmethod
    def _outs(
        baseurl: str, todo_list: list[str], declared: list[str] | None
    ) -> dict[str, Any]:
        # todo_list is the server echo, declared_todo_list the last input
        return {
            "baseurl": baseurl,
            "todo_list": todo_list,
            "declared_todo_list": declared,
        }

    def create(self, props: dict[str, Any]) -> CreateResult:
        """
        Send the declared list to /create.

        Args:
            props: Resource properties (baseurl, todo_list)

        Returns:
            CreateResult whose todo_list output is the server's echo
        """
        baseurl = props["baseurl"]
        declared = list(props["todo_list"])
        echo = self._run(baseurl, lambda resource: resource.create(declared))
        return CreateResult(id_=baseurl, outs=self._outs(baseurl, echo, declared))

    def read(self, id: str, props: dict[str, Any]) -> ReadResult:
        """Refresh the todo_list output from /get."""
        baseurl = props.get("baseurl") or id
        current = self._run(baseurl, lambda resource: resource.read())
        declared = props.get("declared_todo_list")
        return ReadResult(id_=id, outs=self._outs(baseurl, current, declared))

    def update(
        self, id: str, old_props: dict[str, Any], new_props: dict[str, Any]
    ) -> UpdateResult:
        """Send the new declared list to /update."""
        baseurl = new_props["baseurl"]
        declared = list(new_props["todo_list"])
        echo = self._run(baseurl, lambda resource: resource.update(declared))
        return UpdateResult(outs=self._outs(baseurl, echo, declared))

    def delete(self, id: str, props: dict[str, Any]) -> None:
        """Clear the remote list through /delete."""
        self._run(props.get("baseurl") or id, lambda resource: resource.delete())

    def diff(
        self, id: str, old_props: dict[str, Any], new_props: dict[str, Any]
    ) -> DiffResult:
        """
        Compare the previously declared list with the new one.

        old_props are the stored outputs, whose todo_list is the server echo,
        so the comparison uses declared_todo_list. A different baseurl
        points at another store and requires replacement.
        """
        changes = []
        replaces = []

        if old_props.get("baseurl") != new_props.get("baseurl"):
            replaces.append("baseurl")

        old_declared = old_props.get("declared_todo_list")
        if old_declared is None:
            old_declared = old_props.get("todo_list")
        if list(old_declared or []) != list(new_props.get("todo_list") or []):
            changes.append("todo_list")

        return DiffResult(
            changes=len(changes) > 0 or len(replaces) > 0,
            replaces=replaces,
            stables=[],
            delete_before_replace=True,
        )


class TodoItems(pulumi.dynamic.Resource):
    """
    A Pulumi dynamic resource owning the remote todo list.

    Args:
        name: Resource name
        baseurl: Resolved base URL of the todo store
        todo_list: Declared items
        opts: Standard Pulumi resource options
    """

    baseurl: Output[str]
    todo_list: Output[list[str]]
    declared_todo_list: Output[list[str]]

    def __init__(
        self,
        name: str,
        baseurl: Input[str],
        todo_list: Input[list[str]],
        opts: Optional[pulumi.ResourceOptions] = None,
        client_factory: ClientFactory | None = None,
    ):
        super().__init__(
            TodoListProvider(client_factory),
            name,
            {"baseurl": baseurl, "todo_list": todo_list, "declared_todo_list": None},
            opts,
        )


def get_todo(baseurl: str, client: TodoStore | None = None) -> list[str]:
    """
    Read the current remote list without taking ownership of it.

    Raises:
        DiagnosticsError: If the store cannot be read
    """
    with TodoDataSource(client) as data_source:
        data_source.configure(baseurl)
        return _checked(data_source.read())
