"""Prompt templates and the registry that loads them."""

from __future__ import annotations

from mindflow.prompts.registry import get_prompt

__all__ = ["get_prompt"]
