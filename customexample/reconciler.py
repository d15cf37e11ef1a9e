"""Todo list resource: maps declared items onto the remote store.

Every operation issues exactly one HTTP call and commits the remote store's
response as the new state. The list that was sent is never committed: the
server's echo is authoritative and may reorder or deduplicate items. On any
failure the previously committed state is left untouched and the diagnostics
are returned to the caller, which decides whether to retry.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .base import RemoteTodoBase
from .client import TodoStore
from .diagnostics import Diagnostics
from .models import OperationResult, TodoList

logger = logging.getLogger(__name__)

_declared_adapter = TypeAdapter(list[str])


class TodoResource(RemoteTodoBase):
    """Managed todo list resource with create/read/update/delete semantics."""

    type_suffix = "_add_todo_items"

    def __init__(self, client: TodoStore | None = None):
        super().__init__(client)
        self.committed: TodoList | None = None

    def schema(self) -> dict[str, Any]:
        return {
            "description": "Manages the todo list.",
            "attributes": {
                "todo_list": {"type": "list(string)", "required": True},
            },
        }

    def create(self, declared: Any) -> OperationResult:
        """POST the declared items and commit the server's echo."""
        return self._replace("create", declared)

    def read(self) -> OperationResult:
        """Refresh from GET /get. Prior state plays no part in the result."""
        return self._commit(self._read())

    def update(self, declared: Any) -> OperationResult:
        """PUT the declared items and commit the server's echo."""
        return self._replace("update", declared)

    def delete(self) -> OperationResult:
        """DELETE /delete and commit whatever state the store confirms."""
        return self._commit(
            self._call("delete", lambda: self.client.delete(self.baseurl))
        )

    def _replace(self, stage: str, declared: Any) -> OperationResult:
        items, diags = self._marshal(declared)
        if diags.has_error():
            return OperationResult.failure(diags)

        if stage == "create":
            result = self._call(stage, lambda: self.client.create(self.baseurl, items))
        else:
            result = self._call(stage, lambda: self.client.update(self.baseurl, items))
        return self._commit(result)

    def _marshal(self, declared: Any) -> tuple[TodoList, Diagnostics]:
        diags = Diagnostics()
        try:
            items = _declared_adapter.validate_python(declared, strict=True)
        except ValidationError as e:
            diags.add_error("Unable to Marshal the items", str(e))
            return [], diags
        return items, diags

    def _commit(self, result: OperationResult) -> OperationResult:
        if result.ok:
            self.committed = list(result.todo_list)
            logger.info(f"Committed todo list with {len(self.committed)} item(s)")
        return result
