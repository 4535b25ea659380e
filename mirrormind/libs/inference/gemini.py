"""Google generative-language client used for free-form reflections."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from .base import BaseInferenceClient
from .types import GenerationResponse, MalformedResponseError, RemoteInferenceError

GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiClient(BaseInferenceClient):
    """Calls ``:generateContent`` with a single text prompt."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gemini-pro",
        base_url: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Generation API key is required")

        super().__init__(
            "gemini",
            base_url=base_url or GEMINI_DEFAULT_BASE_URL,
            timeout=timeout,
            transport=transport,
        )
        self._api_key = api_key
        self.model = model

    async def generate(
        self,
        prompt: str,
        *,
        temperature: float = 0.7,
        top_k: int = 40,
        top_p: float = 0.95,
        max_output_tokens: int = 500,
    ) -> str:
        """Return the first candidate's text, verbatim."""

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "topK": top_k,
                "topP": top_p,
                "maxOutputTokens": max_output_tokens,
            },
        }
        url = f"{self._base_url.rstrip('/')}/{self.model}:generateContent"
        body = await self._post(url, payload, params={"key": self._api_key})

        try:
            parsed = GenerationResponse.model_validate(body)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected generation payload: {exc}") from exc

        if parsed.error is not None:
            raise RemoteInferenceError(parsed.error.message)
        if parsed.candidates:
            content = parsed.candidates[0].content
            if content and content.parts and content.parts[0].text:
                return content.parts[0].text
        raise MalformedResponseError("No response from generation model")


__all__ = ["GEMINI_DEFAULT_BASE_URL", "GeminiClient"]
