"""Data models shared by the resolver, reconciler and projector."""

from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .diagnostics import Diagnostics

# The complete remote collection at one point in time.
TodoList = list[str]


class _Unknown:
    """Sentinel for a declared value that is not yet known while planning."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = _Unknown()

DeclaredValue = Union[str, None, _Unknown]


def is_unknown(value: Any) -> bool:
    return value is UNKNOWN


class DeclaredConfig(BaseModel):
    """The provider block as declared by the orchestrator.

    Each field is a string, None when not declared, or UNKNOWN when the
    orchestrator cannot resolve it yet.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    username: DeclaredValue = None
    password: DeclaredValue = Field(default=None, repr=False)
    baseurl: DeclaredValue = None


class ProviderConfig(BaseModel):
    """Fully resolved provider configuration, immutable for the session."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr
    baseurl: str


class OperationResult(BaseModel):
    """Outcome of one reconciler or projector operation.

    Either ``todo_list`` holds the committed remote echo, or ``diagnostics``
    is non-empty and nothing was committed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    todo_list: TodoList | None = None
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()

    @classmethod
    def success(cls, todo_list: TodoList) -> "OperationResult":
        return cls(todo_list=list(todo_list))

    @classmethod
    def failure(cls, diagnostics: Diagnostics) -> "OperationResult":
        return cls(diagnostics=diagnostics)


# Values handed over at the configure boundary.

@dataclass(frozen=True)
class Absent:
    """The orchestrator has not configured the provider yet."""


@dataclass(frozen=True)
class BaseURL:
    value: str


@dataclass(frozen=True)
class WrongShape:
    """A value that is not a baseurl string."""

    type_name: str


ProviderData = Union[Absent, BaseURL, WrongShape]


def parse_provider_data(value: Any) -> ProviderData:
    """Classify an untyped provider data value."""
    if value is None:
        return Absent()
    if isinstance(value, str):
        return BaseURL(value)
    return WrongShape(type(value).__name__)
