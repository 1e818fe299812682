"""Prompt storage backends."""

from __future__ import annotations

from mindflow.prompts.backends.file_backend import FilePromptBackend

__all__ = ["FilePromptBackend"]
