from __future__ import annotations

import logging
import random

from mirrormind.apps.engine.reflection.engine import synthesize_reflection
from mirrormind.libs.inference.gemini import GeminiClient
from mirrormind.libs.inference.types import RemoteInferenceError
from mirrormind.libs.schemas.analysis import Mood
from mirrormind.libs.schemas.settings import get_settings

LOGGER = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "top_k": 40,
    "top_p": 0.95,
    "max_output_tokens": 500,
}


def build_reflection_prompt(text: str, mood: Mood | str) -> str:
    mood_value = Mood(mood).value
    return (
        "You are a compassionate AI journal companion. A person has just shared a journal entry with you. "
        "Your role is to:\n\n"
        "1. Acknowledge their feelings with empathy\n"
        "2. Provide 1-2 specific, actionable suggestions based on their situation\n"
        "3. Be warm, supportive, and conversational (not clinical or robotic)\n"
        "4. Keep your response to 2-3 short paragraphs\n\n"
        "Here's their journal entry:\n"
        f'"{text}"\n\n'
        f"Their detected mood is: {mood_value}\n\n"
        "Provide a thoughtful, personalized response that shows you understood what they wrote and offer "
        "genuine, practical suggestions that could help them. Write in a warm, friend-like tone."
    )


def build_client(api_key: str) -> GeminiClient:
    settings = get_settings()
    return GeminiClient(
        api_key,
        model=settings.generation_model,
        base_url=settings.generation_base_url,
        timeout=settings.remote_timeout,
    )


async def generate_reflection(
    mood: Mood | str,
    text: str,
    summary: str,
    *,
    api_key: str | None = None,
    client: GeminiClient | None = None,
    rng: random.Random | None = None,
) -> str:
    """Ask the generation model for a reflection; use the templates when it cannot answer."""
    if not api_key and client is None:
        return synthesize_reflection(mood, text, summary, rng)

    client = client or build_client(api_key or "")
    try:
        reflection = await client.generate(build_reflection_prompt(text, mood), **GENERATION_CONFIG)
    except RemoteInferenceError as exc:
        LOGGER.warning("[Reflection] Generation failed, using template reflection: %s", exc)
        return synthesize_reflection(mood, text, summary, rng)
    except Exception:
        LOGGER.exception("[Reflection] Unexpected generation error, using template reflection")
        return synthesize_reflection(mood, text, summary, rng)
    if not reflection.strip():
        LOGGER.warning("[Reflection] Generation returned blank text, using template reflection")
        return synthesize_reflection(mood, text, summary, rng)
    return reflection


__all__ = ["GENERATION_CONFIG", "build_reflection_prompt", "generate_reflection"]
