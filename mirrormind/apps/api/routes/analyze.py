from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from mirrormind.apps.engine.analysis.engine import analyze
from mirrormind.libs.schemas.analysis import AnalysisOptions, AnalyzeRequest, AnalyzeResponse
from mirrormind.libs.schemas.settings import get_settings

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

TEXT_REQUIRED = {"success": False, "error": "Text is required"}


def options_for_request(use_remote: bool) -> AnalysisOptions:
    settings = get_settings()
    remote = use_remote and settings.remote_inference_available
    return AnalysisOptions(
        use_remote_inference=remote,
        inference_token=settings.huggingface_api_token if remote else None,
        generation_key=settings.google_ai_api_key if remote else None,
        truncate_remote_input=True,
    )


async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        # Empty, non-JSON and non-UTF-8 bodies all carry no text.
        return None


@router.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze_entry(request: Request):
    body = await _read_body(request)
    if not isinstance(body, dict):
        LOGGER.info("[Analyze] Rejected body without a JSON object", extra={"body_type": type(body).__name__})
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=TEXT_REQUIRED)

    payload = AnalyzeRequest.model_validate(body)
    text = payload.text
    if not text or not isinstance(text, str):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=TEXT_REQUIRED)

    options = options_for_request(payload.remote_requested)
    LOGGER.info("[Analyze] Request received", extra={"chars": len(text), "remote": options.remote_enabled})
    result = await analyze(text, options)
    return AnalyzeResponse(success=True, data=result)


__all__ = ["options_for_request", "router"]
