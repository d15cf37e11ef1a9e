"""Custom Example provider: metadata, schema, configuration and factories."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .diagnostics import Diagnostics
from .models import DeclaredConfig
from .projector import TodoDataSource
from .reconciler import TodoResource
from .resolver import EnvLookup, resolve

logger = logging.getLogger(__name__)

TYPE_NAME = "customexample"


@dataclass
class ConfigureResponse:
    """Result of configuring the provider.

    Attributes:
        diagnostics: Problems found while resolving the configuration
        resource_data: Value handed to every resource's configure()
        data_source_data: Value handed to every data source's configure()
    """

    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    resource_data: Any = None
    data_source_data: Any = None


class CustomExampleProvider:
    """Provider entry point used by the hosting orchestrator.

    Args:
        version: Provider version reported in metadata
    """

    def __init__(self, version: str = "dev"):
        self.version = version

    def metadata(self) -> dict[str, str]:
        return {"type_name": TYPE_NAME, "version": self.version}

    def schema(self) -> dict[str, Any]:
        return {
            "attributes": {
                "username": {"type": "string", "optional": True},
                "password": {"type": "string", "optional": True, "sensitive": True},
                "baseurl": {"type": "string", "optional": True},
            },
        }

    def configure(
        self, declared: DeclaredConfig, env: EnvLookup | None = None
    ) -> ConfigureResponse:
        """
        Resolve the provider block and expose the baseurl to dependents.

        Username and password are checked for presence only; no session is
        established with them.
        """
        response = ConfigureResponse()
        result = resolve(declared, env)
        response.diagnostics.append_all(result.diagnostics)
        if response.diagnostics.has_error():
            return response

        response.resource_data = result.config.baseurl
        response.data_source_data = result.config.baseurl
        return response

    def resources(self) -> list[Callable[[], TodoResource]]:
        return [TodoResource]

    def data_sources(self) -> list[Callable[[], TodoDataSource]]:
        return [TodoDataSource]
