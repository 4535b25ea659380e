from mirrormind.apps.engine.lexical_mood.engine import classify_mood
from mirrormind.libs.schemas.analysis import Mood


def test_calm_word_wins_over_everything():
    assert classify_mood("I feel calm even though the day was sad, bad and terrible") is Mood.CALM
    assert classify_mood("A PEACEFUL morning") is Mood.CALM


def test_positive_majority():
    assert classify_mood("A good and great day, though I was a little tired") is Mood.POSITIVE


def test_negative_majority_maps_to_anxious():
    assert classify_mood("I am worried and frustrated about work") is Mood.ANXIOUS


def test_repetition_counts_once():
    # "happy" three times is still one positive hit against one negative hit.
    assert classify_mood("happy happy happy but sad") is Mood.NEUTRAL


def test_substring_containment():
    assert classify_mood("It went badly") is Mood.ANXIOUS


def test_no_keywords_is_neutral():
    assert classify_mood("The bus arrived at noon.") is Mood.NEUTRAL
    assert classify_mood("") is Mood.NEUTRAL
