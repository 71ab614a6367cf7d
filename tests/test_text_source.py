"""Tests for utils.text_source module."""

import random

from utils.text_source import make_content_source, random_text, split_paragraphs
from utils.words import COMMON_WORDS


class TestSplitParagraphs:
    """Tests for split_paragraphs function."""

    def test_blank_lines_separate_segments(self):
        """Test each paragraph becomes one segment."""
        text = "first line\nsecond line\n\nnext para\n"

        assert split_paragraphs(text) == ["first line second line", "next para"]

    def test_collapses_whitespace_and_carriage_returns(self):
        """Test CRLF input and runs of spaces are normalised."""
        text = "a   b\r\nc\r\n\r\n\r\n\r\nd\te"

        assert split_paragraphs(text) == ["a b c", "d e"]

    def test_whitespace_only_lines_separate(self):
        """Test lines with only spaces count as blank."""
        assert split_paragraphs("one\n   \ntwo") == ["one", "two"]

    def test_empty_input(self):
        """Test empty input yields no segments."""
        assert split_paragraphs("\n\n  \n") == []

    def test_unicode_preserved(self):
        """Test non-ASCII text is kept intact."""
        assert split_paragraphs("Grüße aus Köln") == ["Grüße aus Köln"]


class TestRandomText:
    """Tests for random_text function."""

    def test_word_count(self):
        """Test the requested number of words is produced."""
        text = random_text(25, rng=random.Random(1))

        words = text.split(" ")
        assert len(words) == 25
        assert all(w in COMMON_WORDS for w in words)

    def test_seeded_is_reproducible(self):
        """Test the same seed gives the same text."""
        assert random_text(10, rng=random.Random(7)) == random_text(10, rng=random.Random(7))

    def test_custom_word_list(self):
        """Test a custom word list is used."""
        assert random_text(3, words=["x"]) == "x x x"


class TestMakeContentSource:
    """Tests for make_content_source function."""

    def test_random_words_when_nothing_piped(self):
        """Test random text is a single segment, regenerated per call."""
        source = make_content_source(None, n=5)

        segments = source()
        assert len(segments) == 1
        assert len(segments[0].split()) == 5

    def test_piped_paragraphs(self):
        """Test piped text is split into paragraphs."""
        source = make_content_source("a b\n\nc d\n")

        assert source() == ["a b", "c d"]

    def test_piped_raw(self):
        """Test raw mode keeps the input verbatim as one segment."""
        source = make_content_source("a  b\n\nc\n", raw=True)

        assert source() == ["a  b\n\nc\n"]

    def test_returns_fresh_list(self):
        """Test callers cannot mutate the stored segments."""
        source = make_content_source("a\n\nb")
        source().append("c")

        assert source() == ["a", "b"]
