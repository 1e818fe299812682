"""Inference backend factory: resolves a backend from config."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

from mindflow.inference.protocols import IInferenceBackend
from mindflow.inference.realtime import RealTimeBackend

if TYPE_CHECKING:
    from mindflow.core.config import AppSettings

log = logging.getLogger(__name__)


def _import_dotted_path(path: str) -> Any:
    """Import ``package.module:attr`` and return ``attr``."""
    module_path, _, attr = path.partition(":")
    if not attr:
        raise ImportError(f"Expected 'module:attribute', got {path!r}")
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"{module_path!r} has no attribute {attr!r}") from exc


def create_inference_backend(settings: AppSettings) -> IInferenceBackend:
    """Create an inference backend based on settings.

    When ``settings.llm.inference_backend`` is ``"realtime"``, returns
    the built-in :class:`RealTimeBackend`.

    When it's a dotted path like ``mypackage.backends:CustomBackend``,
    imports and instantiates the external class, passing ``settings`` to
    the constructor.

    Raises:
        ImportError: If the dotted-path class cannot be found.
        TypeError: If the resolved object is not callable.
    """
    backend_spec = settings.llm.inference_backend

    if backend_spec == "realtime":
        log.info("Using built-in RealTimeBackend")
        return RealTimeBackend(
            api_key=settings.llm.api_key,
            api_base=settings.llm.base_url,
            timeout=settings.llm.timeout,
        )

    log.info("Loading external inference backend: %s", backend_spec)
    cls = _import_dotted_path(backend_spec)

    if not callable(cls):
        raise TypeError(
            f"Inference backend {backend_spec!r} resolved to {cls!r}, "
            "which is not callable"
        )

    return cls(settings)
