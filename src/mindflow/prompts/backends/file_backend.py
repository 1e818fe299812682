"""File-based prompt backend.

Each template module stores its prompts in a ``_PROMPT_DATA`` dict, which this
backend reads directly.
"""

from __future__ import annotations

import importlib
from typing import Any


class FilePromptBackend:
    """Loads prompts from Python modules on disk via importlib.

    Module path convention: ``mindflow.prompts.templates.{domain}.{category}``

    Each module must expose a ``_PROMPT_DATA: dict[str, str]`` mapping
    constant names to their template strings.
    """

    def __init__(self) -> None:
        self._modules: dict[tuple[str, str], Any] = {}

    def get(self, domain: str, category: str, name: str) -> str:
        """Load a prompt from ``_PROMPT_DATA`` in ``prompts/templates/{domain}/{category}.py``."""
        key = (domain, category)
        if key not in self._modules:
            module_path = f"mindflow.prompts.templates.{domain}.{category}"
            try:
                self._modules[key] = importlib.import_module(module_path)
            except ModuleNotFoundError as exc:
                raise KeyError(f"Prompt module not found: {module_path}") from exc

        module = self._modules[key]
        data: dict[str, str] | None = getattr(module, "_PROMPT_DATA", None)
        if data is not None and name in data:
            return data[name]

        raise KeyError(f"Prompt {name!r} not found in {domain}/{category}")
