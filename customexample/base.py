"""Shared plumbing for the todo resource and data source."""

import logging
from collections.abc import Callable

from .client import RemoteStoreClient, TodoStore
from .diagnostics import Diagnostics
from .errors import ContractError, DecodeError, ProtocolError, TransportError
from .models import (
    Absent,
    BaseURL,
    OperationResult,
    TodoList,
    WrongShape,
    parse_provider_data,
)

logger = logging.getLogger(__name__)

# Endpoint path per client stage
STAGE_PATHS = {
    "fetch": "get",
    "create": "create",
    "update": "update",
    "delete": "delete",
}


class RemoteTodoBase:
    """Configure contract and remote call handling shared by all todo types.

    Args:
        client: Remote store implementation, defaults to RemoteStoreClient
    """

    type_suffix: str = ""

    def __init__(self, client: TodoStore | None = None):
        self._owns_client = client is None
        self.client: TodoStore = client or RemoteStoreClient()
        self.baseurl = ""
        self.configured = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the store client if this object created it."""
        if self._owns_client:
            self.client.close()

    def metadata(self, provider_type_name: str) -> str:
        """Return the type name this object is registered under."""
        return f"{provider_type_name}{self.type_suffix}"

    def configure(self, provider_data: object) -> None:
        """
        Accept the resolved baseurl from the provider.

        None is a no-op: the object stays usable with an empty baseurl and
        fails at its first remote call.

        Raises:
            ContractError: If the provider data is not a string
        """
        data = parse_provider_data(provider_data)
        if isinstance(data, Absent):
            return
        if isinstance(data, WrongShape):
            raise ContractError(
                f"Expected string as baseurl, got: {data.type_name}. "
                "Please report this issue to the provider developers."
            )
        if isinstance(data, BaseURL):
            self.baseurl = data.value
            self.configured = True
            logger.debug(f"{type(self).__name__} configured for {self.baseurl}")

    def _call(self, stage: str, call: Callable[[], TodoList]) -> OperationResult:
        """Run one client call and turn any stage failure into a diagnostic."""
        path = STAGE_PATHS[stage]
        diags = Diagnostics()
        todo_list: TodoList | None = None
        try:
            todo_list = call()
        except TransportError as e:
            diags.add_error(f"Unable to hit /{path} endpoint", str(e))
        except ProtocolError as e:
            diags.add_error(
                f"Unexpected status from /{path} endpoint",
                f"Expected status code 200, got: {e.status_code}",
            )
        except DecodeError as e:
            diags.add_error("Unable to Read/Unmarshal Todo List", str(e))

        if diags.has_error():
            logger.error(f"{stage} against {self.baseurl or '<unset>'} failed: {diags}")
            return OperationResult.failure(diags)
        return OperationResult.success(todo_list)

    def _read(self) -> OperationResult:
        return self._call("fetch", lambda: self.client.fetch(self.baseurl))
