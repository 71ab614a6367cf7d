"""Colour themes and hex colour helpers."""

from typing import Dict

COLOR_KEYS = ("bgcol", "fgcol", "hicol", "hicol2", "hicol3", "errcol")

# fgcol: untyped text, hicol: correct, hicol2: cursor,
# hicol3: status line and report, errcol: mistakes
THEMES: Dict[str, Dict[str, str]] = {
    "default": {
        "bgcol": "#002b36",
        "fgcol": "#657b83",
        "hicol": "#93a1a1",
        "hicol2": "#268bd2",
        "hicol3": "#b58900",
        "errcol": "#dc322f",
    },
    "gruvbox": {
        "bgcol": "#282828",
        "fgcol": "#928374",
        "hicol": "#ebdbb2",
        "hicol2": "#fabd2f",
        "hicol3": "#83a598",
        "errcol": "#fb4934",
    },
    "dracula": {
        "bgcol": "#282a36",
        "fgcol": "#6272a4",
        "hicol": "#f8f8f2",
        "hicol2": "#bd93f9",
        "hicol3": "#8be9fd",
        "errcol": "#ff5555",
    },
    "nord": {
        "bgcol": "#2e3440",
        "fgcol": "#4c566a",
        "hicol": "#eceff4",
        "hicol2": "#88c0d0",
        "hicol3": "#a3be8c",
        "errcol": "#bf616a",
    },
    "light": {
        "bgcol": "#fdf6e3",
        "fgcol": "#93a1a1",
        "hicol": "#073642",
        "hicol2": "#268bd2",
        "hicol3": "#859900",
        "errcol": "#dc322f",
    },
}

# Standard 8 terminal colours, used when 256 colours are unavailable
BASIC_COLORS = [
    (0, 0, 0), (205, 0, 0), (0, 205, 0), (205, 205, 0),
    (0, 0, 238), (205, 0, 205), (0, 205, 205), (229, 229, 229),
]

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def is_valid_hex(value: str) -> bool:
    """Check for a #rrggbb colour string."""
    if len(value) != 7 or not value.startswith("#"):
        return False
    try:
        int(value[1:], 16)
    except ValueError:
        return False
    return True


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert #rrggbb to an (r, g, b) tuple."""
    if not is_valid_hex(value):
        raise ValueError(f"Invalid colour: {value!r} (expected #rrggbb)")
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def _distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> int:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def nearest_xterm256(value: str) -> int:
    """Map a hex colour to the closest xterm 256-colour palette index."""
    rgb = hex_to_rgb(value)

    cube = [min(range(6), key=lambda i: abs(_CUBE_LEVELS[i] - c)) for c in rgb]
    cube_rgb = tuple(_CUBE_LEVELS[i] for i in cube)
    cube_index = 16 + 36 * cube[0] + 6 * cube[1] + cube[2]

    gray_step = min(23, max(0, round((sum(rgb) / 3 - 8) / 10)))
    gray_rgb = (8 + 10 * gray_step,) * 3
    gray_index = 232 + gray_step

    if _distance(rgb, gray_rgb) < _distance(rgb, cube_rgb):
        return gray_index
    return cube_index


def nearest_basic(value: str) -> int:
    """Map a hex colour to the closest of the 8 standard terminal colours."""
    rgb = hex_to_rgb(value)
    return min(range(len(BASIC_COLORS)), key=lambda i: _distance(rgb, BASIC_COLORS[i]))
