from __future__ import annotations

import random
from typing import Callable, Dict, List, Sequence, Tuple

from mirrormind.apps.engine.themes.engine import ThemeSet, extract_themes
from mirrormind.libs.sampling import pick_one, sample_without_replacement
from mirrormind.libs.schemas.analysis import Mood

MAX_SUGGESTIONS = 2

OPENINGS: Dict[Mood, Tuple[str, ...]] = {
    Mood.POSITIVE: (
        "I can really sense the positive energy in your words! {summary}",
        "It's wonderful to hear you're feeling good! {summary}",
        "Your enthusiasm comes through clearly! {summary}",
    ),
    Mood.ANXIOUS: (
        "I hear that you're going through a challenging time. {summary}",
        "It sounds like things feel heavy right now. {summary}",
        "I can sense the stress you're experiencing. {summary}",
    ),
    Mood.CALM: (
        "There's a peaceful quality to what you've shared. {summary}",
        "It's lovely to hear you're finding moments of calm. {summary}",
        "Your sense of tranquility comes through in your words. {summary}",
    ),
    Mood.NEUTRAL: ("Thank you for sharing your thoughts. {summary}",),
}

Rule = Tuple[Callable[[ThemeSet, Mood], bool], Tuple[str, ...]]

# Evaluated in order; every matching rule contributes its suggestions.
SUGGESTION_RULES: Tuple[Rule, ...] = (
    (
        lambda t, m: t.stress,
        (
            "Consider taking a few deep breaths or a short walk to reset your mind.",
            "Breaking down what's overwhelming into smaller, manageable steps might help.",
            "Remember: it's okay to ask for help or take a break when you need it.",
        ),
    ),
    (
        lambda t, m: t.work and m is Mood.ANXIOUS,
        (
            "Try prioritizing just 2-3 key tasks for tomorrow instead of everything at once.",
            "Maybe schedule short breaks between work sessions to maintain your energy.",
        ),
    ),
    (
        lambda t, m: t.work and m is Mood.POSITIVE,
        (
            "This momentum is great - consider documenting what's working well so you can replicate it.",
            "Celebrate these wins, even the small ones. They add up!",
        ),
    ),
    (
        lambda t, m: t.relationships and m is Mood.POSITIVE,
        (
            "These connections are clearly valuable to you. Keep nurturing them!",
            "Consider letting them know how much you appreciate them.",
        ),
    ),
    (
        lambda t, m: t.relationships and m is Mood.ANXIOUS,
        (
            "Open communication often helps. Consider sharing how you're feeling with someone you trust.",
            "Remember that healthy relationships involve both giving and receiving support.",
        ),
    ),
    (
        lambda t, m: t.health and not t.joy,
        (
            "Your physical health impacts your mental state. Even small changes can make a difference.",
            "Try setting one small, achievable health goal for this week.",
        ),
    ),
    (
        lambda t, m: t.growth,
        (
            "Growth often comes from stepping outside comfort zones. You're on the right path.",
            "Track your progress - sometimes we don't realize how far we've come.",
        ),
    ),
    (
        lambda t, m: t.future and m is Mood.ANXIOUS,
        (
            "Focus on what you can control today, rather than what might happen tomorrow.",
            "Write down your specific concerns - they often feel less overwhelming on paper.",
        ),
    ),
    (
        lambda t, m: t.future and m is Mood.POSITIVE,
        (
            "This optimism is powerful. Consider writing down your goals to make them more concrete.",
            "Channel this positive energy into taking one small action toward your aspirations.",
        ),
    ),
    (
        lambda t, m: t.past and m is Mood.ANXIOUS,
        (
            "The past is done, but it can teach us. What's one lesson you can take forward?",
            "Be gentle with yourself. We all have moments we wish we could change.",
        ),
    ),
    (
        lambda t, m: t.gratitude,
        (
            "Gratitude is a powerful practice. Consider keeping a list of things you're thankful for.",
            "This appreciative mindset will serve you well. Keep cultivating it!",
        ),
    ),
)

MOOD_BACKFILL: Dict[Mood, Tuple[str, ...]] = {
    Mood.ANXIOUS: (
        "Try a simple grounding technique: name 5 things you can see, 4 you can touch, 3 you can hear.",
        "Be kind to yourself. What would you tell a friend going through this?",
    ),
    Mood.CALM: (
        "Notice what helps you feel this way - these are your personal reset buttons.",
        "This peaceful state is valuable. Try to return to it when stress builds up.",
    ),
    Mood.POSITIVE: (
        "Ride this positive wave! Use this energy to tackle something you've been putting off.",
        "Share your joy with others - positivity is contagious.",
    ),
}

GENERIC_SUGGESTIONS: Tuple[str, ...] = (
    "Take a moment to check in with yourself throughout the day.",
    "Consider what small action could make tomorrow slightly better than today.",
    "Remember to be patient with yourself - progress isn't always linear.",
)


def opening_line(mood: Mood, summary: str, rng: random.Random | None = None) -> str:
    template = pick_one(OPENINGS.get(mood, OPENINGS[Mood.NEUTRAL]), rng)
    # Collapse whitespace so the summary cannot introduce its own blank lines.
    return template.format(summary=" ".join((summary or "").split())).strip()


def candidate_suggestions(mood: Mood, themes: ThemeSet) -> List[str]:
    """Theme rules first, then the mood backfill, then the generic backfill."""
    suggestions: List[str] = []
    for matches, lines in SUGGESTION_RULES:
        if matches(themes, mood):
            suggestions.extend(lines)

    if len(suggestions) < MAX_SUGGESTIONS and mood in MOOD_BACKFILL:
        suggestions.extend(MOOD_BACKFILL[mood])

    if not suggestions:
        suggestions.extend(GENERIC_SUGGESTIONS)
    return suggestions


def synthesize_reflection(
    mood: Mood | str,
    text: str,
    summary: str,
    rng: random.Random | None = None,
) -> str:
    """Template reflection: an opening keyed by mood plus one or two suggestions."""
    mood = Mood(mood)
    themes = extract_themes(text)
    pool: Sequence[str] = candidate_suggestions(mood, themes)
    chosen = sample_without_replacement(pool, MAX_SUGGESTIONS, rng)
    return f"{opening_line(mood, summary, rng)}\n\n{' '.join(chosen)}".strip()


__all__ = [
    "GENERIC_SUGGESTIONS",
    "MOOD_BACKFILL",
    "OPENINGS",
    "SUGGESTION_RULES",
    "candidate_suggestions",
    "opening_line",
    "synthesize_reflection",
]
