"""Per-segment cursor and verdict tracking."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union


class Verdict(str, Enum):
    """Typing outcome of a single character."""

    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class _EndOfSegment:
    """Sentinel returned by current_char() once the segment is exhausted."""

    def __repr__(self) -> str:
        return "END_OF_SEGMENT"


END_OF_SEGMENT = _EndOfSegment()


@dataclass(frozen=True)
class Cell:
    """One target character and its verdict."""
    char: str
    verdict: Verdict


class TextSession:
    """Navigable view of one segment of target text.

    Cells before the cursor always carry a verdict. The cell at the cursor
    is pending, or incorrect after a wrong keystroke until it is retyped.
    """

    def __init__(self, text: str):
        self.text = text
        self.cursor = 0
        self.verdicts: List[Verdict] = [Verdict.PENDING] * len(text)

    def __len__(self) -> int:
        return len(self.text)

    def current_char(self) -> Union[str, _EndOfSegment]:
        """Return the target character at the cursor or END_OF_SEGMENT."""
        if self.cursor >= len(self.text):
            return END_OF_SEGMENT
        return self.text[self.cursor]

    def type_char(self, char: str) -> Verdict:
        """Compare a typed character against the target at the cursor.

        A match advances the cursor. A mismatch marks the cell incorrect and
        leaves the cursor where it is, so the learner has to retype it.

        Args:
            char: The typed character

        Returns:
            Verdict.CORRECT or Verdict.INCORRECT
        """
        if self.is_complete():
            return Verdict.INCORRECT

        if char == self.text[self.cursor]:
            self.verdicts[self.cursor] = Verdict.CORRECT
            self.cursor += 1
            return Verdict.CORRECT

        self.verdicts[self.cursor] = Verdict.INCORRECT
        return Verdict.INCORRECT

    def backspace(self) -> bool:
        """Move back one character.

        Returns:
            True if a character was deleted, False at the start of the segment
        """
        if self.cursor == 0:
            return False

        self._clear_retry_mark()
        self.cursor -= 1
        self.verdicts[self.cursor] = Verdict.PENDING
        return True

    def delete_previous_word(self) -> int:
        """Move back to the start of the current word, or the previous one.

        Returns:
            Number of characters reset to pending
        """
        start = self.cursor
        while start > 0 and self.text[start - 1].isspace():
            start -= 1
        while start > 0 and not self.text[start - 1].isspace():
            start -= 1

        if start == self.cursor:
            return 0

        self._clear_retry_mark()
        for i in range(start, self.cursor):
            self.verdicts[i] = Verdict.PENDING
        count = self.cursor - start
        self.cursor = start
        return count

    def skip_to_next_word(self) -> int:
        """Jump past the rest of the current word and the space after it.

        The skipped characters are marked incorrect, the space is marked
        correct since it was what the learner typed.

        Returns:
            Number of characters marked incorrect
        """
        skipped = 0
        while self.cursor < len(self.text) and not self.text[self.cursor].isspace():
            self.verdicts[self.cursor] = Verdict.INCORRECT
            self.cursor += 1
            skipped += 1

        if self.cursor < len(self.text):
            self.verdicts[self.cursor] = Verdict.CORRECT
            self.cursor += 1

        return skipped

    def is_complete(self) -> bool:
        return self.cursor >= len(self.text)

    def is_mid_word(self) -> bool:
        """True when part of the word under the cursor has already been typed."""
        if self.cursor == 0 or self.is_complete():
            return False
        return not (self.text[self.cursor].isspace() or self.text[self.cursor - 1].isspace())

    def reset(self) -> None:
        """Rewind to the start with every cell pending."""
        self.cursor = 0
        self.verdicts = [Verdict.PENDING] * len(self.text)

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(Cell(c, v) for c, v in zip(self.text, self.verdicts))

    def _clear_retry_mark(self) -> None:
        if self.cursor < len(self.text):
            self.verdicts[self.cursor] = Verdict.PENDING
