"""Practice text sources: piped input split into segments, or random words."""

import random
import re
from typing import Callable, List, Optional, Sequence

from utils.words import COMMON_WORDS

_BLANK_LINES = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> List[str]:
    """Split text into one segment per paragraph.

    Paragraphs are separated by blank lines. The lines of a paragraph are
    joined with single spaces; wrapping for display is left to the renderer.

    Args:
        text: Raw input text

    Returns:
        Non-empty paragraphs in input order
    """
    text = text.replace("\r", "")
    segments = []
    for paragraph in _BLANK_LINES.split(text):
        words = paragraph.split()
        if words:
            segments.append(" ".join(words))
    return segments


def random_text(n: int, words: Sequence[str] = COMMON_WORDS,
                rng: Optional[random.Random] = None) -> str:
    """Build a practice text of n random words separated by spaces."""
    rng = rng or random.Random()
    return " ".join(rng.choice(words) for _ in range(n))


def make_content_source(piped: Optional[str], raw: bool = False,
                        n: int = 50) -> Callable[[], List[str]]:
    """Create the callable the driver asks for segments before every run.

    Args:
        piped: Text read from stdin, or None if stdin is a terminal
        raw: Use piped text verbatim as a single segment
        n: Number of random words when nothing was piped

    Returns:
        Function returning the segments for a new run
    """
    if piped is None:
        return lambda: [random_text(n)]

    if raw:
        segments = [piped]
    else:
        segments = split_paragraphs(piped)
    return lambda: list(segments)
