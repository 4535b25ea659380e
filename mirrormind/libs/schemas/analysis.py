"""Shared analysis schemas for MirrorMind."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Mood(str, Enum):
    """Closed set of moods a journal entry can be labelled with."""

    POSITIVE = "positive"
    CALM = "calm"
    ANXIOUS = "anxious"
    NEUTRAL = "neutral"


class AnalysisOptions(BaseModel):
    """Switches and credentials for a single analysis call."""

    use_remote_inference: bool = False
    inference_token: str | None = None
    generation_key: str | None = None
    # Server-side callers cap remote inputs; in-process callers may send the full entry.
    truncate_remote_input: bool = True

    @property
    def remote_enabled(self) -> bool:
        return self.use_remote_inference and bool(self.inference_token)


class AnalysisResult(BaseModel):
    """Summary, mood and reflection produced for one journal entry."""

    summary: str = Field(min_length=1)
    mood: Mood
    reflection: str = Field(min_length=1)


class AnalyzeRequest(BaseModel):
    """Body accepted by ``POST /analyze``; text is validated by the route.

    ``useHuggingFace`` is read by truthiness, so ``null`` or ``0`` turn remote
    inference off and an omitted flag leaves it on.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    use_hugging_face: Any = Field(default=True, alias="useHuggingFace")

    @property
    def remote_requested(self) -> bool:
        return bool(self.use_hugging_face)


class AnalyzeResponse(BaseModel):
    """Envelope returned by ``POST /analyze``."""

    success: bool
    data: AnalysisResult | None = None
    error: str | None = None


__all__ = ["AnalysisOptions", "AnalysisResult", "AnalyzeRequest", "AnalyzeResponse", "Mood"]
