"""Terminal input to abstract key event mapping."""

from typing import Optional, Tuple

from core.key_events import Backspace, Char, DeleteWord, KeyEvent, Quit, Restart

ESC = "\x1b"

# Control characters as delivered by a terminal in raw mode. Most terminals
# send ^H for Ctrl-Backspace and DEL for a plain Backspace.
CONTROL_KEYS = {
    "\x03": Quit(),        # Ctrl-C
    ESC: Restart(),
    "\x7f": Backspace(),   # DEL
    "\x08": DeleteWord(),  # Ctrl-H / Ctrl-Backspace
    "\x17": DeleteWord(),  # Ctrl-W
    "\r": Char("\n"),
    "\n": Char("\n"),
    "\t": Char("\t"),
}

KEY_NAMES = {
    "\x03": "CTRL_C",
    ESC: "ESC",
    "\x7f": "BACKSPACE",
    "\x08": "CTRL_BACKSPACE",
    "\x17": "CTRL_W",
    "\r": "ENTER",
    "\n": "ENTER",
    "\t": "TAB",
    " ": "SPACE",
}


def translate_char(char: str) -> Optional[KeyEvent]:
    """Map one decoded input character to a key event.

    Args:
        char: A single character read from the terminal

    Returns:
        KeyEvent, or None for control characters the trainer ignores
    """
    if char in CONTROL_KEYS:
        return CONTROL_KEYS[char]
    if char.isprintable():
        return Char(char)
    return None


def translate(text: str) -> list[KeyEvent]:
    """Map a chunk of decoded terminal input to key events.

    An ESC followed by more characters in the same read starts an escape
    sequence (arrow keys, function keys, Alt+key) which is dropped; an ESC
    at the end of the chunk is the restart key.

    Args:
        text: Characters from a single read

    Returns:
        Key events in input order
    """
    events = []
    i = 0
    while i < len(text):
        if text[i] == ESC and i + 1 < len(text):
            i = _skip_escape_sequence(text, i)
            continue
        event = translate_char(text[i])
        if event is not None:
            events.append(event)
        i += 1
    return events


def _skip_escape_sequence(text: str, start: int) -> int:
    """Return the index just past the escape sequence starting at start."""
    i = start + 1
    if text[i] not in "[O":
        # Alt+key
        return i + 1

    i += 1
    while i < len(text) and not ("\x40" <= text[i] <= "\x7e"):
        i += 1
    return i + 1


def split_pending_escape(text: str) -> Tuple[str, str]:
    """Split off an escape sequence that is not complete yet.

    A read can end between the ESC of an arrow key and the rest of its
    sequence, so the unfinished tail is held back until more input arrives
    or the input goes quiet.

    Args:
        text: Characters read so far

    Returns:
        (text ready to translate, unfinished escape sequence or "")
    """
    start = text.rfind(ESC)
    if start == -1:
        return text, ""

    tail = text[start + 1:]
    if not tail:
        return text[:start], text[start:]
    if tail[0] in "[O" and not any("\x40" <= c <= "\x7e" for c in tail[1:]):
        return text[:start], text[start:]
    return text, ""


def get_key_name(char: str) -> str:
    """Get a human-readable name for an input character.

    Args:
        char: A single character read from the terminal

    Returns:
        Key name, the character itself if printable, or KEY_0x.. otherwise
    """
    if char in KEY_NAMES:
        return KEY_NAMES[char]
    if char.isprintable():
        return char
    return f"KEY_{ord(char):#04x}"

