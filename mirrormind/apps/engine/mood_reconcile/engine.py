from __future__ import annotations

from mirrormind.libs.schemas.analysis import Mood

HIGH_CONFIDENCE = 0.8


def reconcile_mood(remote_label: str, local_mood: Mood | str, confidence: float) -> Mood:
    """
    Merge the remote sentiment label with the keyword mood.

    Rules are checked in order and the first match wins:
      1. confident remote positive  -> positive
      2. confident remote negative  -> anxious
      3. local calm                 -> calm
      4. remote positive, local positive/neutral -> positive
      5. remote negative, local anxious/neutral  -> anxious
      6. otherwise keep the local mood

    A moderately confident positive label never lifts a local "anxious";
    local negative and calm signals are trusted over a soft remote one.
    """
    local = Mood(local_mood)
    remote = (remote_label or "").lower()

    if confidence > HIGH_CONFIDENCE:
        if remote == "positive":
            return Mood.POSITIVE
        if remote == "negative":
            return Mood.ANXIOUS

    if local is Mood.CALM:
        return Mood.CALM

    if remote == "positive" and local in {Mood.POSITIVE, Mood.NEUTRAL}:
        return Mood.POSITIVE

    if remote == "negative" and local in {Mood.ANXIOUS, Mood.NEUTRAL}:
        return Mood.ANXIOUS

    return local


__all__ = ["HIGH_CONFIDENCE", "reconcile_mood"]
