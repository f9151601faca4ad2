import pytest

from television.matching import MatchingMode, Mode, preprocess_pattern


def test_prompt_preprocessing_one_word():
    assert preprocess_pattern(MatchingMode.SUBSTRING, "test") == "'test"


def test_prompt_preprocessing_multiple_words():
    assert (
        preprocess_pattern(MatchingMode.SUBSTRING, "this is a specific test")
        == "'this 'is 'a 'specific 'test"
    )


@pytest.mark.parametrize(
    "pattern",
    ["test", "this is a specific test", "  spaced  out ", ""],
)
def test_fuzzy_leaves_pattern_unchanged(pattern):
    assert preprocess_pattern(MatchingMode.FUZZY, pattern) == pattern


def test_substring_collapses_ascii_whitespace():
    assert (
        preprocess_pattern(MatchingMode.SUBSTRING, "  foo\t\tbar\nbaz\r\x0cqux  ")
        == "'foo 'bar 'baz 'qux"
    )


@pytest.mark.parametrize("pattern", ["", "   ", "\t\n"])
def test_substring_blank_pattern_gives_empty(pattern):
    assert preprocess_pattern(MatchingMode.SUBSTRING, pattern) == ""


def test_substring_does_not_split_on_non_ascii_whitespace():
    assert (
        preprocess_pattern(MatchingMode.SUBSTRING, "foo\u00a0bar")
        == "'foo\u00a0bar"
    )


def test_substring_keeps_existing_quotes():
    assert preprocess_pattern(MatchingMode.SUBSTRING, "'already") == "''already"


def test_modes_are_distinct():
    assert Mode.CHANNEL is not Mode.REMOTE_CONTROL
    assert Mode("channel") is Mode.CHANNEL
    assert MatchingMode("fuzzy") is MatchingMode.FUZZY