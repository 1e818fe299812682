"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mindflow.exceptions import (
    CompletionError,
    ConfigurationError,
    MindflowError,
    NoteFormatError,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(ConfigurationError)
    async def handle_configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "configuration_error"})

    @app.exception_handler(CompletionError)
    async def handle_completion_error(request: Request, exc: CompletionError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"error": str(exc), "type": "completion_error"})

    @app.exception_handler(NoteFormatError)
    async def handle_note_format_error(request: Request, exc: NoteFormatError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "error": str(exc),
                "type": "note_format_error",
                "missing_sections": exc.missing_sections,
            },
        )

    @app.exception_handler(MindflowError)
    async def handle_generic_error(request: Request, exc: MindflowError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "mindflow_error"})
