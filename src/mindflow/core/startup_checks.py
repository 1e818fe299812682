"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mindflow.core.config import AppSettings

log = logging.getLogger(__name__)

# Providers that use IAM/local auth and do not require an API key
_NO_KEY_PROVIDERS = frozenset({"bedrock", "ollama"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_fallback(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject placeholder API keys when the completion collaborator is switched on."""
    if not settings.llm.enabled:
        return
    if settings.llm.provider not in _NO_KEY_PROVIDERS and settings.llm.api_key in ("no-key", ""):
        raise ValueError(
            f"MINDFLOW_LLM_API_KEY is required for provider '{settings.llm.provider}'. "
            f"Set it via environment variable or disable MINDFLOW_LLM_ENABLED."
        )


def _check_fallback(settings: AppSettings) -> None:
    """Warn when completion failures will surface as errors instead of pipeline notes."""
    if settings.llm.enabled and not settings.llm.fallback_to_pipeline:
        log.warning(
            "MINDFLOW_LLM_FALLBACK_TO_PIPELINE=false: completion failures will be "
            "returned to callers as errors instead of deterministic notes."
        )
