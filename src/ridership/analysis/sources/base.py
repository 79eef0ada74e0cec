"""Abstract interface for passenger data sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RecordSource(Protocol):
    """Protocol for anything that can supply the raw JSON array as text."""

    def read_text(self) -> str:
        """Return the raw JSON text."""
        ...
