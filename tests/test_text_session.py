"""Tests for TextSession class."""

import pytest

from core.text_session import END_OF_SEGMENT, Cell, TextSession, Verdict


def verdicts(session):
    return [v.value[0] for v in session.verdicts]


class TestTypeChar:
    """Tests for type_char."""

    def test_correct_char_advances_cursor(self):
        """Test matching input marks the cell correct and moves on."""
        session = TextSession("abc")

        assert session.type_char("a") is Verdict.CORRECT
        assert session.cursor == 1
        assert session.verdicts[0] is Verdict.CORRECT
        assert session.current_char() == "b"

    def test_wrong_char_does_not_advance(self):
        """Test mismatching input marks the cell incorrect in place."""
        session = TextSession("abc")

        assert session.type_char("x") is Verdict.INCORRECT
        assert session.cursor == 0
        assert session.verdicts[0] is Verdict.INCORRECT
        assert session.current_char() == "a"

    def test_retyping_overwrites_incorrect_verdict(self):
        """Test verdict is last-write: retyping the right char wins."""
        session = TextSession("abc")

        session.type_char("x")
        assert session.type_char("a") is Verdict.CORRECT
        assert session.verdicts[0] is Verdict.CORRECT
        assert session.cursor == 1

    def test_cells_after_cursor_stay_pending(self):
        """Test nothing beyond the cursor gets a verdict."""
        session = TextSession("hello")
        session.type_char("h")
        session.type_char("x")

        assert verdicts(session) == ["c", "i", "p", "p", "p"]

    def test_multibyte_characters_are_atomic(self):
        """Test non-ASCII characters compare as single cells."""
        session = TextSession("ßü€")

        assert len(session) == 3
        assert session.type_char("ß") is Verdict.CORRECT
        assert session.type_char("u") is Verdict.INCORRECT
        assert session.type_char("ü") is Verdict.CORRECT
        assert session.type_char("€") is Verdict.CORRECT
        assert session.is_complete()

    def test_type_after_complete_is_incorrect(self):
        """Test typing past the end does not move the cursor."""
        session = TextSession("a")
        session.type_char("a")

        assert session.type_char("b") is Verdict.INCORRECT
        assert session.cursor == 1


class TestCurrentChar:
    """Tests for current_char and is_complete."""

    def test_end_of_segment_sentinel(self):
        """Test sentinel is returned once the segment is exhausted."""
        session = TextSession("a")
        session.type_char("a")

        assert session.current_char() is END_OF_SEGMENT
        assert session.is_complete()

    def test_empty_segment_is_complete(self):
        """Test an empty segment is complete immediately."""
        session = TextSession("")

        assert session.is_complete()
        assert session.current_char() is END_OF_SEGMENT
        assert session.cells() == ()


class TestBackspace:
    """Tests for backspace."""

    def test_backspace_at_start_is_noop(self):
        """Test backspace on cursor 0 returns False and changes nothing."""
        session = TextSession("abc")

        assert session.backspace() is False
        assert session.cursor == 0
        assert verdicts(session) == ["p", "p", "p"]

    def test_backspace_resets_previous_cell(self):
        """Test backspace moves back and resets the cell to pending."""
        session = TextSession("abc")
        session.type_char("a")
        session.type_char("b")

        assert session.backspace() is True
        assert session.cursor == 1
        assert verdicts(session) == ["c", "p", "p"]

    def test_backspace_clears_retry_mark(self):
        """Test an incorrect mark at the cursor is cleared too."""
        session = TextSession("abc")
        session.type_char("a")
        session.type_char("x")

        session.backspace()
        assert session.cursor == 0
        assert verdicts(session) == ["p", "p", "p"]


class TestDeletePreviousWord:
    """Tests for delete_previous_word."""

    def test_mid_word_goes_to_word_start(self):
        """Test deleting from inside a word stops at its start."""
        session = TextSession("hello world")
        for c in "hello wo":
            session.type_char(c)

        assert session.delete_previous_word() == 2
        assert session.cursor == 6
        assert session.verdicts[5] is Verdict.CORRECT
        assert all(v is Verdict.PENDING for v in session.verdicts[6:])

    def test_at_word_start_goes_to_previous_word(self):
        """Test deleting at a word start removes the previous word."""
        session = TextSession("hello world")
        for c in "hello ":
            session.type_char(c)

        assert session.delete_previous_word() == 6
        assert session.cursor == 0
        assert all(v is Verdict.PENDING for v in session.verdicts)

    def test_at_start_is_noop(self):
        """Test nothing happens at cursor 0."""
        session = TextSession("hello")

        assert session.delete_previous_word() == 0
        assert session.cursor == 0


class TestSkipToNextWord:
    """Tests for skip_to_next_word."""

    def test_skips_rest_of_word(self):
        """Test untyped characters are marked incorrect and the space correct."""
        session = TextSession("hello world")
        session.type_char("h")
        session.type_char("e")

        assert session.skip_to_next_word() == 3
        assert session.cursor == 6
        assert verdicts(session)[:6] == ["c", "c", "i", "i", "i", "c"]
        assert session.current_char() == "w"

    def test_skip_in_last_word_completes_segment(self):
        """Test skipping with no following space reaches the end."""
        session = TextSession("hi there")
        for c in "hi t":
            session.type_char(c)

        assert session.skip_to_next_word() == 4
        assert session.is_complete()

    def test_is_mid_word(self):
        """Test mid-word detection."""
        session = TextSession("ab cd")

        assert not session.is_mid_word()
        session.type_char("a")
        assert session.is_mid_word()
        session.type_char("b")
        assert not session.is_mid_word()
        session.type_char(" ")
        assert not session.is_mid_word()


class TestReset:
    """Tests for reset and cells."""

    def test_reset_rewinds(self):
        """Test reset returns cursor to 0 with all cells pending."""
        session = TextSession("abc")
        session.type_char("a")
        session.type_char("x")

        session.reset()
        assert session.cursor == 0
        assert verdicts(session) == ["p", "p", "p"]

    @pytest.mark.parametrize("typed, expected", [
        ("", [Verdict.PENDING, Verdict.PENDING]),
        ("a", [Verdict.CORRECT, Verdict.PENDING]),
        ("ax", [Verdict.CORRECT, Verdict.INCORRECT]),
    ])
    def test_cells_snapshot(self, typed, expected):
        """Test cells() pairs characters with verdicts."""
        session = TextSession("ab")
        for c in typed:
            session.type_char(c)

        assert session.cells() == tuple(Cell(c, v) for c, v in zip("ab", expected))
