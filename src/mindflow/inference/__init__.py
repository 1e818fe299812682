"""Pluggable inference backend layer.

Usage::

    from mindflow.inference import (
        IInferenceBackend,
        InferenceResult,
        RealTimeBackend,
        create_inference_backend,
    )
"""

from __future__ import annotations

from mindflow.inference.factory import create_inference_backend
from mindflow.inference.protocols import IInferenceBackend, InferenceResult
from mindflow.inference.realtime import RealTimeBackend

__all__ = [
    "IInferenceBackend",
    "InferenceResult",
    "RealTimeBackend",
    "create_inference_backend",
]
