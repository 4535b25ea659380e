from __future__ import annotations

from typing import Iterable

from mirrormind.libs.schemas.analysis import Mood

POSITIVE_WORDS = ("happy", "joy", "love", "excited", "grateful", "wonderful", "amazing", "great", "good", "beautiful")
NEGATIVE_WORDS = ("sad", "angry", "frustrated", "tired", "anxious", "worried", "fear", "bad", "terrible", "difficult")
CALM_WORDS = ("calm", "peaceful", "relaxed", "quiet", "serene", "gentle")


def _count_present(lowered: str, words: Iterable[str]) -> int:
    # Each word counts once however often it appears; substrings count too ("badly" hits "bad").
    return sum(1 for word in words if word in lowered)


def classify_mood(text: str) -> Mood:
    """Keyword heuristic: calm wins outright, otherwise the larger of positive/negative."""
    lowered = (text or "").lower()

    if _count_present(lowered, CALM_WORDS) > 0:
        return Mood.CALM

    positive = _count_present(lowered, POSITIVE_WORDS)
    negative = _count_present(lowered, NEGATIVE_WORDS)
    if positive > negative:
        return Mood.POSITIVE
    if negative > positive:
        return Mood.ANXIOUS
    return Mood.NEUTRAL


__all__ = ["CALM_WORDS", "NEGATIVE_WORDS", "POSITIVE_WORDS", "classify_mood"]
