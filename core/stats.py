"""WPM, CPM and accuracy calculation."""

import logging

from core.models import RunResult, RunStats

log = logging.getLogger("typetrainer.stats")

NS_PER_MINUTE = 60e9
CHARS_PER_WORD = 5


def calculate_cpm(ncorrect: int, elapsed_ns: int) -> int:
    """Calculate correct characters per minute.

    Args:
        ncorrect: Number of correct keystrokes
        elapsed_ns: Duration in nanoseconds

    Returns:
        CPM truncated to an integer
    """
    if elapsed_ns <= 0:
        log.warning(f"Non-positive duration {elapsed_ns}ns, using one tick")
        elapsed_ns = 1

    return int(ncorrect / (elapsed_ns / NS_PER_MINUTE))


def calculate_wpm(cpm: int) -> int:
    """Calculate words per minute from CPM (5 characters per word)."""
    return cpm // CHARS_PER_WORD


def calculate_accuracy(ncorrect: int, nerrs: int) -> float:
    """Calculate accuracy in percent.

    Args:
        ncorrect: Number of correct keystrokes
        nerrs: Number of incorrect keystrokes

    Returns:
        Accuracy percentage, or 0.0 if nothing was typed
    """
    total = ncorrect + nerrs
    if total == 0:
        return 0.0
    return ncorrect * 100 / total


def compute_stats(result: RunResult) -> RunStats:
    """Derive speed and accuracy from a finished run."""
    cpm = calculate_cpm(result.ncorrect, result.elapsed_ns)
    return RunStats(
        wpm=calculate_wpm(cpm),
        cpm=cpm,
        accuracy=calculate_accuracy(result.ncorrect, result.nerrs),
    )
