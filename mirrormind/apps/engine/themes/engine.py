from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, List, Pattern

# Plain alternations without word boundaries: "was" also fires on "wasn't".
THEME_PATTERNS: Dict[str, Pattern[str]] = {
    "work": re.compile(r"work|job|career|project|meeting|deadline|colleague|boss", re.IGNORECASE),
    "relationships": re.compile(r"friend|family|partner|relationship|love|connect|talk|conversation", re.IGNORECASE),
    "health": re.compile(r"health|exercise|sleep|tired|energy|sick|workout|gym", re.IGNORECASE),
    "growth": re.compile(r"learn|grow|improve|achieve|goal|progress|develop", re.IGNORECASE),
    "stress": re.compile(r"stress|anxious|worry|overwhelm|pressure|difficult|hard|struggle", re.IGNORECASE),
    "joy": re.compile(r"happy|joy|excited|amazing|wonderful|great|love|enjoy", re.IGNORECASE),
    "gratitude": re.compile(r"grateful|thankful|appreciate|blessed|lucky|fortunate", re.IGNORECASE),
    "future": re.compile(r"tomorrow|future|plan|hope|will|going to|next", re.IGNORECASE),
    "past": re.compile(r"yesterday|remember|used to|was|regret|miss", re.IGNORECASE),
}


@dataclass(frozen=True, slots=True)
class ThemeSet:
    """Which topical themes an entry touches. Themes are not exclusive."""

    work: bool = False
    relationships: bool = False
    health: bool = False
    growth: bool = False
    stress: bool = False
    joy: bool = False
    gratitude: bool = False
    future: bool = False
    past: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)

    def active(self) -> List[str]:
        return [name for name, present in self.as_dict().items() if present]


def extract_themes(text: str) -> ThemeSet:
    text = text or ""
    return ThemeSet(**{name: bool(pattern.search(text)) for name, pattern in THEME_PATTERNS.items()})


__all__ = ["THEME_PATTERNS", "ThemeSet", "extract_themes"]
