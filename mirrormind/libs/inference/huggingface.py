"""Hugging Face inference client for summarization and sentiment models."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .base import BaseInferenceClient
from .types import LabelScore, MalformedResponseError, SentimentSignal, SignalSource, SummaryItem

HUGGINGFACE_DEFAULT_BASE_URL = "https://router.huggingface.co/hf-inference/models/"

_SUMMARY_ADAPTER = TypeAdapter(list[SummaryItem])
_RANKING_ADAPTER = TypeAdapter(list[list[LabelScore]])


class HuggingFaceClient(BaseInferenceClient):
    """Calls hosted summarization and text-classification models."""

    def __init__(
        self,
        token: str | None = None,
        *,
        summarization_model: str = "facebook/bart-large-cnn",
        sentiment_model: str = "distilbert-base-uncased-finetuned-sst-2-english",
        base_url: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            "huggingface",
            base_url=base_url or HUGGINGFACE_DEFAULT_BASE_URL,
            timeout=timeout,
            transport=transport,
        )
        self._token = token
        self.summarization_model = summarization_model
        self.sentiment_model = sentiment_model

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _query(self, model: str, inputs: str) -> Any:
        url = f"{self._base_url.rstrip('/')}/{model}"
        return await self._post(url, {"inputs": inputs, "options": {"wait_for_model": True}})

    async def summarize(self, text: str) -> str:
        """Return the model's ``summary_text`` for ``text``."""

        body = await self._query(self.summarization_model, text)
        try:
            items = _SUMMARY_ADAPTER.validate_python(body)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected summarization payload: {exc}") from exc
        if not items:
            raise MalformedResponseError("Summarization payload was an empty list")
        return items[0].summary_text

    async def classify_sentiment(self, text: str) -> SentimentSignal:
        """Return the top-ranked label of the first ranking, lower-cased."""

        body = await self._query(self.sentiment_model, text)
        try:
            rankings = _RANKING_ADAPTER.validate_python(body)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected sentiment payload: {exc}") from exc
        if not rankings or not rankings[0]:
            raise MalformedResponseError("Sentiment payload held no ranked labels")
        top = rankings[0][0]
        return SentimentSignal(label=top.label.lower(), confidence=top.score, source=SignalSource.REMOTE)


__all__ = ["HUGGINGFACE_DEFAULT_BASE_URL", "HuggingFaceClient"]
