"""Pydantic models and schema utilities."""

from .analysis import AnalysisOptions, AnalysisResult, AnalyzeRequest, Mood
from .settings import AppSettings, get_settings

__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "AnalyzeRequest",
    "AppSettings",
    "Mood",
    "get_settings",
]
