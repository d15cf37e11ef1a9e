"""
Custom Example - reconcile a declared todo list against a remote HTTP store.
"""

from .client import RemoteStoreClient, TodoStore
from .diagnostics import Diagnostic, Diagnostics, DiagnosticsError
from .errors import (
    ConfigurationError,
    ContractError,
    CustomExampleError,
    DecodeError,
    ProtocolError,
    RemoteStoreError,
    TransportError,
)
from .models import UNKNOWN, DeclaredConfig, OperationResult, ProviderConfig
from .projector import TodoDataSource
from .provider import ConfigureResponse, CustomExampleProvider
from .reconciler import TodoResource
from .resolver import ResolveResult, resolve

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConfigureResponse",
    "ContractError",
    "CustomExampleError",
    "CustomExampleProvider",
    "DeclaredConfig",
    "DecodeError",
    "Diagnostic",
    "Diagnostics",
    "DiagnosticsError",
    "OperationResult",
    "ProtocolError",
    "ProviderConfig",
    "RemoteStoreClient",
    "RemoteStoreError",
    "ResolveResult",
    "TodoDataSource",
    "TodoResource",
    "TodoStore",
    "TransportError",
    "UNKNOWN",
    "resolve",
]
