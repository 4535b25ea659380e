"""
Journal analysis pipeline.

text -> keyword mood + extractive summary
     -> (optional) remote summary and sentiment, reconciled with the keyword mood
     -> reflection from the generation model or the template engine

``analyze`` never raises: any unexpected failure collapses to a neutral result.
"""

from __future__ import annotations

import logging
import random

from mirrormind.apps.engine.generative_reflection.engine import generate_reflection
from mirrormind.apps.engine.lexical_mood.engine import classify_mood
from mirrormind.apps.engine.mood_reconcile.engine import reconcile_mood
from mirrormind.apps.engine.remote_signals.engine import gather_remote_signals, select_summary
from mirrormind.apps.engine.summary.engine import extractive_summary
from mirrormind.apps.engine.themes.engine import extract_themes
from mirrormind.libs.inference.gemini import GeminiClient
from mirrormind.libs.inference.huggingface import HuggingFaceClient
from mirrormind.libs.schemas.analysis import AnalysisOptions, AnalysisResult, Mood

LOGGER = logging.getLogger(__name__)

PLACEHOLDER_SUMMARY = "Here's what I gathered from your entry."
FALLBACK_REFLECTION = "What are your thoughts about this entry?"


def _non_empty_summary(summary: str) -> str:
    return summary if summary.strip() else PLACEHOLDER_SUMMARY


def _safe_result(text: str) -> AnalysisResult:
    summary = _non_empty_summary(extractive_summary(text))
    return AnalysisResult(summary=summary, mood=Mood.NEUTRAL, reflection=FALLBACK_REFLECTION)


async def _run_pipeline(
    text: str,
    options: AnalysisOptions,
    *,
    inference_client: HuggingFaceClient | None,
    generation_client: GeminiClient | None,
    rng: random.Random | None,
) -> AnalysisResult:
    local_mood = classify_mood(text)
    summary = extractive_summary(text)
    mood = local_mood

    if options.remote_enabled:
        signals = await gather_remote_signals(
            text,
            summary,
            token=options.inference_token or "",
            truncate=options.truncate_remote_input,
            client=inference_client,
        )
        mood = reconcile_mood(signals.sentiment.label, local_mood, signals.sentiment.confidence)
        summary = select_summary(signals.summary, summary)

    summary = _non_empty_summary(summary)
    reflection = await generate_reflection(
        mood,
        text,
        summary,
        api_key=options.generation_key,
        client=generation_client if options.generation_key else None,
        rng=rng,
    )
    LOGGER.info(
        "[Analysis] Entry analysed",
        extra={
            "local_mood": local_mood.value,
            "mood": mood.value,
            "remote": options.remote_enabled,
            "generative": bool(options.generation_key),
            "themes": extract_themes(text).active(),
        },
    )
    return AnalysisResult(summary=summary, mood=mood, reflection=reflection)


async def analyze(
    text: str,
    options: AnalysisOptions | None = None,
    *,
    inference_client: HuggingFaceClient | None = None,
    generation_client: GeminiClient | None = None,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Analyse a journal entry. Always returns a usable result."""
    options = options or AnalysisOptions()
    if not isinstance(text, str):
        text = "" if text is None else str(text)

    try:
        return await _run_pipeline(
            text,
            options,
            inference_client=inference_client,
            generation_client=generation_client,
            rng=rng,
        )
    except Exception:
        LOGGER.exception("[Analysis] Pipeline failed, returning neutral result")
        return _safe_result(text)


__all__ = ["FALLBACK_REFLECTION", "PLACEHOLDER_SUMMARY", "analyze"]
