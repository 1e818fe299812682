"""Output formatters for rendering a ProcessedNote.

Usage::

    from mindflow.formatters import JSONFormatter, TextFormatter

    text_bytes = TextFormatter().format(note)
    json_bytes = JSONFormatter().format(note)
"""

from __future__ import annotations

from mindflow.formatters.json_formatter import JSONFormatter
from mindflow.formatters.protocols import IOutputFormatter
from mindflow.formatters.text_formatter import TextFormatter, render_note

__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
    "TextFormatter",
    "render_note",
]
