"""Read-only todo data source."""

from typing import Any

from .base import RemoteTodoBase
from .models import OperationResult


class TodoDataSource(RemoteTodoBase):
    """Observes the remote todo list without owning it."""

    type_suffix = "_todo"

    def schema(self) -> dict[str, Any]:
        return {
            "description": "Fetches the todo list.",
            "attributes": {
                "todo_list": {"type": "list(string)", "computed": True},
            },
        }

    def read(self) -> OperationResult:
        """GET /get and return the decoded list."""
        return self._read()
