from __future__ import annotations

import re
from typing import List

# A sentence is a run of non-terminators closed by one or more terminators;
# trailing text without a terminator is not a sentence.
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

SHORT_TEXT_LIMIT = 200


def split_sentences(text: str) -> List[str]:
    sentences = _SENTENCE_RE.findall(text or "")
    return sentences or [text or ""]


def extractive_summary(text: str) -> str:
    """
    Deterministic summary used whenever no remote summary is available.

    Short entries (two sentences or fewer, or under 200 characters) are
    returned trimmed; longer ones keep only the first and last sentence.
    """
    text = text or ""
    sentences = split_sentences(text)
    if len(sentences) <= 2:
        return text.strip()
    if len(text) < SHORT_TEXT_LIMIT:
        return text.strip()
    return f"{sentences[0].strip()} {sentences[-1].strip()}"


__all__ = ["SHORT_TEXT_LIMIT", "extractive_summary", "split_sentences"]
