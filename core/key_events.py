"""Abstract key events consumed by the typing engine."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Char:
    """A printable character (including space, newline and tab)."""
    char: str


@dataclass(frozen=True)
class Backspace:
    """Delete the previous character."""


@dataclass(frozen=True)
class DeleteWord:
    """Delete back to the start of the current or previous word."""


@dataclass(frozen=True)
class Restart:
    """Abandon the current attempt and start over."""


@dataclass(frozen=True)
class Quit:
    """Terminate the program."""


@dataclass(frozen=True)
class TimerExpired:
    """Posted on the engine queue by a countdown when its deadline passes.

    Not a key event: the generation lets the engine ignore expiries from
    countdowns that were cancelled by a restart.
    """
    generation: int


KeyEvent = Union[Char, Backspace, DeleteWord, Restart, Quit]

__all__ = ["Char", "Backspace", "DeleteWord", "Restart", "Quit", "TimerExpired", "KeyEvent"]
