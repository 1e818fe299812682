"""Prompt registry.

Usage::

    prompt = get_prompt("progress_note", "completion", "SYSTEM_PROMPT")
"""

from __future__ import annotations

from mindflow.prompts.backends.file_backend import FilePromptBackend

_backend = FilePromptBackend()


def get_prompt(domain: str, category: str, name: str) -> str:
    """Look up a prompt template by domain, category, and name.

    Args:
        domain: Domain namespace (e.g. ``"progress_note"``).
        category: Prompt category (e.g. ``"completion"``).
        name: Constant name (e.g. ``"SYSTEM_PROMPT"``).

    Raises:
        KeyError: If the prompt cannot be found.
    """
    return _backend.get(domain, category, name)
