"""Shared types for the remote inference clients."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RemoteInferenceError(RuntimeError):
    """Raised when a remote inference call fails at the transport level."""


class MalformedResponseError(RemoteInferenceError):
    """Raised when a remote service answers with an unexpected payload shape."""


class SignalSource(str, Enum):
    """Where a signal came from."""

    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(slots=True, frozen=True)
class SentimentSignal:
    """Label and confidence reported by the sentiment classifier."""

    label: str = "neutral"
    confidence: float = 0.5
    source: SignalSource = SignalSource.FALLBACK


@dataclass(slots=True, frozen=True)
class SummarySignal:
    """Summary text and whether it came from the remote model."""

    text: str
    source: SignalSource = SignalSource.FALLBACK


# Wire models. Extra keys are tolerated; missing or mistyped keys are not.


class SummaryItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    summary_text: str = Field(min_length=1)


class LabelScore(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: str = Field(min_length=1)
    score: float = Field(ge=0.0, le=1.0)


class GenerationPart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = ""


class GenerationContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: list[GenerationPart] = Field(default_factory=list)


class GenerationCandidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: GenerationContent | None = None


class GenerationError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = "unknown error"


class GenerationResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: list[GenerationCandidate] = Field(default_factory=list)
    error: GenerationError | None = None


__all__ = [
    "GenerationResponse",
    "LabelScore",
    "MalformedResponseError",
    "RemoteInferenceError",
    "SentimentSignal",
    "SignalSource",
    "SummaryItem",
    "SummarySignal",
]
