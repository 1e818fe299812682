"""Output formatter protocol: the contract all formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters (text, JSON, etc.)."""

    def format(self, note: Any, **kwargs: Any) -> bytes:
        """Render the processed note into output bytes."""
        ...

    def format_to_file(self, note: Any, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/json')."""
        ...


__all__ = ["IOutputFormatter"]
