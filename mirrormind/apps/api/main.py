"""FastAPI application entrypoint for MirrorMind."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mirrormind.libs.logging_utils import colorize, configure_logging

configure_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette_exporter import PrometheusMiddleware, handle_metrics

from mirrormind.apps.api.middleware import RequestLoggingMiddleware
from mirrormind.apps.api.routes.analyze import router as analyze_router
from mirrormind.libs.schemas.settings import get_settings

LOGGER = logging.getLogger(__name__)
SETTINGS = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    LOGGER.info(
        colorize("Analysis service configured"),
        extra={
            "event": "service_config",
            "environment": settings.environment,
            "remote_inference": settings.remote_inference_available,
            "generative_reflection": bool(settings.google_ai_api_key),
            "summarization_model": settings.summarization_model,
            "sentiment_model": settings.sentiment_model,
        },
    )
    yield


app = FastAPI(title=f"{SETTINGS.app_name} API", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(PrometheusMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_route("/metrics", handle_metrics)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Return a simple health payload."""

    return {"status": "ok"}


app.include_router(analyze_router)
