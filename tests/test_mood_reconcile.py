import pytest

from mirrormind.apps.engine.mood_reconcile.engine import reconcile_mood
from mirrormind.libs.schemas.analysis import Mood


def test_confident_negative_overrides_local_calm():
    assert reconcile_mood("negative", Mood.CALM, 0.9) is Mood.ANXIOUS


def test_confident_positive_overrides_local_anxious():
    assert reconcile_mood("positive", Mood.ANXIOUS, 0.95) is Mood.POSITIVE


def test_low_confidence_keeps_local_calm():
    assert reconcile_mood("positive", Mood.CALM, 0.5) is Mood.CALM


def test_threshold_is_exclusive():
    assert reconcile_mood("negative", Mood.CALM, 0.8) is Mood.CALM


@pytest.mark.parametrize(
    ("remote", "local", "expected"),
    [
        ("positive", Mood.NEUTRAL, Mood.POSITIVE),
        ("positive", Mood.POSITIVE, Mood.POSITIVE),
        ("negative", Mood.NEUTRAL, Mood.ANXIOUS),
        ("negative", Mood.ANXIOUS, Mood.ANXIOUS),
        # Soft positive does not lift a local anxious reading.
        ("positive", Mood.ANXIOUS, Mood.ANXIOUS),
        ("negative", Mood.POSITIVE, Mood.POSITIVE),
        ("neutral", Mood.NEUTRAL, Mood.NEUTRAL),
    ],
)
def test_moderate_confidence_cascade(remote, local, expected):
    assert reconcile_mood(remote, local, 0.6) is expected


def test_accepts_plain_string_mood():
    assert reconcile_mood("neutral", "calm", 0.99) is Mood.CALM
