from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from mirrormind.libs.inference.huggingface import HuggingFaceClient
from mirrormind.libs.inference.types import (
    RemoteInferenceError,
    SentimentSignal,
    SignalSource,
    SummarySignal,
)
from mirrormind.libs.schemas.settings import get_settings

LOGGER = logging.getLogger(__name__)

DEFAULT_SENTIMENT = SentimentSignal(label="neutral", confidence=0.5, source=SignalSource.FALLBACK)


@dataclass(slots=True, frozen=True)
class RemoteSignals:
    summary: SummarySignal
    sentiment: SentimentSignal


def truncate_for_remote(text: str, limit: int | None = None) -> str:
    limit = get_settings().remote_input_limit if limit is None else limit
    return text[:limit] if len(text) > limit else text


def select_summary(remote: SummarySignal, extractive: str, min_length: int | None = None) -> str:
    """Remote summaries of ``min_length`` characters or fewer are treated as low value."""
    min_length = get_settings().min_remote_summary_length if min_length is None else min_length
    if remote.source is SignalSource.REMOTE and len(remote.text) > min_length:
        return remote.text
    return extractive


async def remote_summary(text: str, fallback: str, client: HuggingFaceClient) -> SummarySignal:
    try:
        summary = await client.summarize(text)
    except RemoteInferenceError as exc:
        LOGGER.warning("[Inference] Summarization failed, using extractive summary: %s", exc)
        return SummarySignal(text=fallback, source=SignalSource.FALLBACK)
    except Exception:
        LOGGER.exception("[Inference] Unexpected summarization error, using extractive summary")
        return SummarySignal(text=fallback, source=SignalSource.FALLBACK)
    return SummarySignal(text=summary, source=SignalSource.REMOTE)


async def remote_sentiment(text: str, client: HuggingFaceClient) -> SentimentSignal:
    try:
        return await client.classify_sentiment(text)
    except RemoteInferenceError as exc:
        LOGGER.warning("[Inference] Sentiment analysis failed, defaulting to neutral: %s", exc)
        return DEFAULT_SENTIMENT
    except Exception:
        LOGGER.exception("[Inference] Unexpected sentiment error, defaulting to neutral")
        return DEFAULT_SENTIMENT


def build_client(token: str) -> HuggingFaceClient:
    settings = get_settings()
    return HuggingFaceClient(
        token,
        summarization_model=settings.summarization_model,
        sentiment_model=settings.sentiment_model,
        base_url=settings.huggingface_base_url,
        timeout=settings.remote_timeout,
    )


async def gather_remote_signals(
    text: str,
    fallback_summary: str,
    *,
    token: str,
    truncate: bool = True,
    client: HuggingFaceClient | None = None,
) -> RemoteSignals:
    """
    Run summarization and sentiment concurrently.

    Each call owns its failure: a broken summarization endpoint still lets the
    sentiment result through, and vice versa.
    """
    client = client or build_client(token)
    payload = truncate_for_remote(text) if truncate else text
    summary, sentiment = await asyncio.gather(
        remote_summary(payload, fallback_summary, client),
        remote_sentiment(payload, client),
    )
    LOGGER.debug(
        "[Inference] Remote signals collected",
        extra={
            "summary_source": summary.source.value,
            "sentiment_label": sentiment.label,
            "sentiment_confidence": sentiment.confidence,
        },
    )
    return RemoteSignals(summary=summary, sentiment=sentiment)


__all__ = [
    "DEFAULT_SENTIMENT",
    "RemoteSignals",
    "build_client",
    "gather_remote_signals",
    "remote_sentiment",
    "remote_summary",
    "select_summary",
    "truncate_for_remote",
]
