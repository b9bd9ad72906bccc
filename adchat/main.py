from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_redoc_html

from adchat.api.exception_handlers import register_exception_handlers
from adchat.api.schemas import HealthOut
from adchat.chat.router import router as chat_router
from adchat.core.logging import setup_logging
from adchat.core.metrics import PrometheusMetricsMiddleware, metrics_router
from adchat.core.middleware.http_logging import HttpLoggingMiddleware
from adchat.core.settings import get_settings

setup_logging()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Marketing Chat API",
        description=(
            "Single-endpoint chat API that answers as a performance-marketing consultant.\n\n"
            "Design principles:\n"
            "- Each request is self-contained; no conversation history is stored.\n"
            "- Replies are plain text: one line, at most three sentences, no markdown.\n"
            "- A slow model yields a localized 'try again' reply instead of an error.\n"
            "- Logging and metrics use route templates and metadata only, never chat text."
        ),
        docs_url="/swagger",
        redoc_url=None,  # custom ReDoc page at /docs
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "chat",
                "description": "Send a conversation and receive the assistant's next reply.",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    # Added last so it wraps the others and CORS headers reach every non-500 response.
    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    @app.get("/docs", include_in_schema=False)
    async def redoc_docs():
        return get_redoc_html(
            openapi_url=app.openapi_url or "/openapi.json",
            title=f"{app.title} - ReDoc",
            redoc_js_url="https://cdn.jsdelivr.net/npm/redoc@2.1.4/bundles/redoc.standalone.js",
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "This endpoint does not call the completion service, so it is safe for basic "
            "uptime checks."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(chat_router)
    return app


app = create_app()
