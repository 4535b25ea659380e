"""Remote inference clients (summarization, sentiment, text generation)."""

from .base import BaseInferenceClient
from .gemini import GEMINI_DEFAULT_BASE_URL, GeminiClient
from .huggingface import HUGGINGFACE_DEFAULT_BASE_URL, HuggingFaceClient
from .types import (
    MalformedResponseError,
    RemoteInferenceError,
    SentimentSignal,
    SignalSource,
    SummarySignal,
)

__all__ = [
    "BaseInferenceClient",
    "GEMINI_DEFAULT_BASE_URL",
    "GeminiClient",
    "HUGGINGFACE_DEFAULT_BASE_URL",
    "HuggingFaceClient",
    "MalformedResponseError",
    "RemoteInferenceError",
    "SentimentSignal",
    "SignalSource",
    "SummarySignal",
]
