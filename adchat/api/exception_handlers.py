from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from adchat.domain.exceptions import (
    ChatInputError,
    MissingCredentialError,
    PayloadTooLargeError,
    UpstreamFailureError,
)

logger = logging.getLogger("adchat.errors")


def _log_extra(request: Request, *, status_code: int) -> dict[str, object]:
    return {
        "request_id": getattr(request.state, "request_id", None)
        or request.headers.get("X-Request-ID"),
        "http_method": request.method,
        "request_path": request.url.path,  # no query string
        "status_code": status_code,
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers.

    Every error is rendered as `{"error": ..., "detail"?: ...}`.
    """

    @app.exception_handler(ChatInputError)
    async def handle_chat_input_error(request: Request, exc: ChatInputError) -> JSONResponse:
        # Do not log request bodies; the message text is fixed and safe.
        logger.info("Chat input rejected", extra=_log_extra(request, status_code=400))
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(PayloadTooLargeError)
    async def handle_payload_too_large(
        request: Request, exc: PayloadTooLargeError
    ) -> JSONResponse:
        logger.info("Request body too large", extra=_log_extra(request, status_code=413))
        return JSONResponse(status_code=413, content={"error": "request body too large"})

    @app.exception_handler(MissingCredentialError)
    async def handle_missing_credential(
        request: Request, exc: MissingCredentialError
    ) -> JSONResponse:
        logger.error("OPENAI_API_KEY is not configured", extra=_log_extra(request, status_code=500))
        return JSONResponse(status_code=500, content={"error": "OPENAI_API_KEY missing"})

    @app.exception_handler(UpstreamFailureError)
    async def handle_upstream_failure(request: Request, exc: UpstreamFailureError) -> JSONResponse:
        logger.warning(
            "Completion service failed",
            extra={**_log_extra(request, status_code=500), "upstream_status": exc.status_code},
        )
        return JSONResponse(
            status_code=500, content={"error": "openai_error", "detail": exc.detail}
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        # Only reached for failures outside HttpLoggingMiddleware, which renders its own 500.
        return JSONResponse(status_code=500, content={"error": "Server error"})
