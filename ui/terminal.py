"""Curses renderer for the typing screen and the result report."""

import curses
import logging
from typing import Dict, List, Sequence, Tuple

from core.models import RunStats
from core.text_session import Cell, Verdict
from core.typing_engine import EngineView
from utils.themes import nearest_basic, nearest_xterm256

log = logging.getLogger("typetrainer.ui")

PAIR_PENDING = 1
PAIR_CORRECT = 2
PAIR_INCORRECT = 3
PAIR_CURSOR = 4
PAIR_STATUS = 5

Line = List[Tuple[int, Cell]]


def layout_cells(cells: Sequence[Cell], width: int) -> List[Line]:
    """Word-wrap cells into display lines.

    Lines break after whitespace so words stay whole, newline cells end a
    line, and words longer than the width are split.

    Args:
        cells: Cells of the current segment
        width: Maximum cells per line

    Returns:
        Lines of (index, cell) pairs
    """
    width = max(1, width)
    lines: List[Line] = []
    line: Line = []
    word: Line = []

    def place(chunk: Line) -> None:
        nonlocal line
        if line and len(line) + len(chunk) > width:
            lines.append(line)
            line = []
        while len(chunk) > width:
            lines.append(chunk[:width])
            chunk = chunk[width:]
        line.extend(chunk)

    for i, cell in enumerate(cells):
        word.append((i, cell))
        if cell.char == "\n":
            place(word)
            word = []
            lines.append(line)
            line = []
        elif cell.char.isspace():
            place(word)
            word = []

    if word:
        place(word)
    if line or not lines:
        lines.append(line)
    return lines


class TerminalRenderer:
    """Draws engine views and reports on a curses screen."""

    def __init__(self, screen, colors: Dict[str, str], wrap: int = 80):
        """Initialize renderer.

        Args:
            screen: curses window (usually stdscr)
            colors: Theme colours as #rrggbb by key
            wrap: Maximum text width in columns
        """
        self.screen = screen
        self.wrap = wrap
        self.attrs = {
            Verdict.PENDING: curses.A_DIM,
            Verdict.CORRECT: curses.A_BOLD,
            Verdict.INCORRECT: curses.A_UNDERLINE,
            "cursor": curses.A_REVERSE,
            "status": curses.A_NORMAL,
        }
        self._init_colors(colors)
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def _init_colors(self, colors: Dict[str, str]) -> None:
        if not curses.has_colors():
            log.info("Terminal has no colour support, using attributes")
            return

        curses.start_color()
        convert = nearest_xterm256 if curses.COLORS >= 256 else nearest_basic
        bg = convert(colors["bgcol"])

        curses.init_pair(PAIR_PENDING, convert(colors["fgcol"]), bg)
        curses.init_pair(PAIR_CORRECT, convert(colors["hicol"]), bg)
        curses.init_pair(PAIR_INCORRECT, convert(colors["errcol"]), bg)
        curses.init_pair(PAIR_CURSOR, bg, convert(colors["hicol2"]))
        curses.init_pair(PAIR_STATUS, convert(colors["hicol3"]), bg)

        self.attrs = {
            Verdict.PENDING: curses.color_pair(PAIR_PENDING),
            Verdict.CORRECT: curses.color_pair(PAIR_CORRECT),
            Verdict.INCORRECT: curses.color_pair(PAIR_INCORRECT) | curses.A_UNDERLINE,
            "cursor": curses.color_pair(PAIR_CURSOR),
            "status": curses.color_pair(PAIR_STATUS),
        }
        self.screen.bkgd(" ", curses.color_pair(PAIR_PENDING))

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        # Writing the bottom-right cell raises even though it succeeds
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            pass

    def draw(self, view: EngineView) -> None:
        """Draw the current segment, its verdicts and the cursor."""
        self.screen.erase()
        rows, cols = self.screen.getmaxyx()
        width = max(1, min(self.wrap, cols))
        lines = layout_cells(view.cells, width)

        top = max(0, (rows - len(lines)) // 2)
        left = max(0, (cols - width) // 2)

        for row, line in enumerate(lines):
            y = top + row
            if y >= rows - 1:
                break
            for col, (i, cell) in enumerate(line):
                char = " " if cell.char.isspace() else cell.char
                attr = self.attrs[cell.verdict]
                if i == view.cursor:
                    # A wrong key leaves the cursor on an incorrect cell
                    attr = self.attrs["cursor"] if cell.verdict is Verdict.PENDING else attr | curses.A_REVERSE
                self._put(y, left + col, char, attr)

        self._put(rows - 1, 0, self._status_text(view)[:cols - 1], self.attrs["status"])
        self.screen.refresh()

    def _status_text(self, view: EngineView) -> str:
        parts = []
        if view.segment_count > 1:
            parts.append(f"{view.segment_index + 1}/{view.segment_count}")
        if view.remaining_ns is not None:
            parts.append(f"{view.remaining_ns / 1e9:.0f}s left")
        return "  ".join(parts)

    def show_report(self, stats: RunStats) -> None:
        """Draw the WPM/CPM/accuracy report centred on the screen."""
        lines = [
            f"WPM: {stats.wpm}",
            f"CPM: {stats.cpm}",
            f"Accuracy: {stats.accuracy:.2f}%",
            "",
            "<esc> new test  <C-c> quit",
        ]

        self.screen.erase()
        rows, cols = self.screen.getmaxyx()
        top = max(0, (rows - len(lines)) // 2)
        for row, text in enumerate(lines):
            x = max(0, (cols - len(text)) // 2)
            self._put(top + row, x, text[:cols - 1], self.attrs["status"])
        self.screen.refresh()
