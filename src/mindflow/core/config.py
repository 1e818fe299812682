"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``MINDFLOW_<GROUP>_*`` env vars::

    export MINDFLOW_LLM_ENABLED=true
    export MINDFLOW_LLM_MODEL=gpt-4o-mini
    export MINDFLOW_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """External completion collaborator configuration.

    Disabled by default: the deterministic pipeline is the only note source
    until ``MINDFLOW_LLM_ENABLED=true`` and a usable key are provided.
    """

    model_config = {"env_prefix": "MINDFLOW_LLM_"}

    enabled: bool = False
    provider: Literal["openai", "anthropic", "ollama", "litellm", "bedrock"] = "openai"
    base_url: str = ""
    api_key: str = "no-key"
    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    top_p: float = Field(default=0.9, gt=0.0, le=1.0)
    max_tokens: int = Field(default=1500, ge=1)
    timeout: float = 60.0
    max_attempts: int = Field(default=2, ge=1)
    retry_delay_seconds: float = Field(default=1.0, ge=0.0)
    inference_backend: str = "realtime"
    fallback_to_pipeline: bool = True


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``MINDFLOW_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "MINDFLOW_OBSERVABILITY_"}

    service_name: str = "mindflow"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``MINDFLOW_API_`` prefix.
    """

    model_config = {"env_prefix": "MINDFLOW_API_"}

    title: str = "MindFlow"
    description: str = "Casual counselor narratives to 245G-style progress notes"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    llm: LLMConfig = LLMConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
