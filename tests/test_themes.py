from mirrormind.apps.engine.themes.engine import THEME_PATTERNS, ThemeSet, extract_themes


def test_no_themes():
    themes = extract_themes("The sky is blue.")
    assert themes == ThemeSet()
    assert themes.active() == []


def test_themes_are_not_exclusive():
    themes = extract_themes("I love my family and my job")
    assert themes.relationships
    assert themes.joy
    assert themes.work
    assert not themes.gratitude


def test_case_insensitive_substring_matching():
    themes = extract_themes("It WASN'T easy, but I'm THANKFUL for the gym")
    assert themes.past
    assert themes.gratitude
    assert themes.health


def test_as_dict_covers_every_theme():
    assert set(extract_themes("anything").as_dict()) == set(THEME_PATTERNS)
