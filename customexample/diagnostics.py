"""Diagnostics aggregation for provider operations.

A single operation appends every independent problem it finds to one
Diagnostics collection and checks ``has_error()`` once before using any data
produced in the same step. This lets several unrelated configuration problems
be reported in one pass instead of stopping at the first.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from .errors import CustomExampleError


class Diagnostic(BaseModel):
    """A structured, human-readable failure record.

    Attributes:
        summary: Short one-line description of the failure
        detail: Longer explanation, usually the underlying error message
        attribute: Configuration attribute the failure is attached to, if any
    """

    model_config = ConfigDict(frozen=True)

    summary: str
    detail: str = ""
    attribute: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.attribute}] " if self.attribute else ""
        if self.detail:
            return f"{prefix}{self.summary}: {self.detail}"
        return f"{prefix}{self.summary}"


class Diagnostics:
    """Append-only, insertion-ordered collection of diagnostics.

    Example:
        >>> diags = Diagnostics()
        >>> diags.add_error("Missing baseurl", "set CUSTOM_EXAMPLE_BASEURL")
        >>> diags.has_error()
        True
    """

    def __init__(self, items: list[Diagnostic] | None = None):
        self._items: list[Diagnostic] = list(items or [])

    def append(self, diagnostic: Diagnostic) -> None:
        """Append a single diagnostic."""
        self._items.append(diagnostic)

    def add_error(
        self, summary: str, detail: str = "", attribute: str | None = None
    ) -> None:
        """Build a diagnostic from its parts and append it."""
        self._items.append(
            Diagnostic(summary=summary, detail=detail, attribute=attribute)
        )

    def append_all(self, other: "Diagnostics") -> None:
        """Append every diagnostic of another collection, keeping order."""
        self._items.extend(other)

    def has_error(self) -> bool:
        """True iff at least one diagnostic has been appended."""
        return len(self._items) > 0

    def summaries(self) -> list[str]:
        return [d.summary for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return self.has_error()

    def __repr__(self) -> str:
        return f"Diagnostics({self.summaries()})"

    def __str__(self) -> str:
        return "\n".join(str(d) for d in self._items)


class DiagnosticsError(CustomExampleError):
    """Raised where a host requires an exception instead of diagnostics.

    Args:
        diagnostics: The non-empty collection that caused the failure
    """

    def __init__(self, diagnostics: Diagnostics):
        super().__init__(str(diagnostics))
        self.diagnostics = diagnostics
