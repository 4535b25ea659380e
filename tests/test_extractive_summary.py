from mirrormind.apps.engine.summary.engine import extractive_summary, split_sentences


def test_two_sentences_returned_verbatim():
    assert extractive_summary("  Short day. Went home!  ") == "Short day. Went home!"


def test_short_text_returned_verbatim_even_with_many_sentences():
    text = " One. Two. Three. Four? "
    assert len(text) < 200
    assert extractive_summary(text) == text.strip()


def test_long_text_keeps_first_and_last_sentence():
    text = "I started the day early. " + "Then a lot happened in between. " * 8 + "I ended it with tea!"
    assert len(text) >= 200
    assert extractive_summary(text) == "I started the day early. I ended it with tea!"


def test_trailing_fragment_is_not_a_sentence():
    text = "First thought here. " + "Middle detail. " * 15 + "Final sentence. dangling words"
    assert extractive_summary(text) == "First thought here. Final sentence."


def test_text_without_terminators_is_one_sentence():
    assert split_sentences("no punctuation at all") == ["no punctuation at all"]
    assert extractive_summary("  no punctuation at all ") == "no punctuation at all"


def test_empty_text():
    assert extractive_summary("") == ""
