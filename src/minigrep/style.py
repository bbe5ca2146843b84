"""ANSI escape codes for the foreground colour, background colour and style of
terminal output.

Every code is available two ways: the ``*_code`` helpers and ``add_*``
functions return strings, while ``fg``/``bg``/``style``/``reset`` write the
code straight to stdout.
"""
import sys

RESET = "\x1b[0m"

BOLD = 1
DIM = 2
ITALIC = 3
UNDERLINE = 4
BLINK = 5
REVERSED = 7
HIDDEN = 8
STRIKETHROUGH = 9

MAX_STYLE = 9

STYLE_NAMES = {
    BOLD: "bold",
    DIM: "dim",
    ITALIC: "italic",
    UNDERLINE: "underline",
    BLINK: "blink",
    REVERSED: "reversed",
    HIDDEN: "hidden",
    STRIKETHROUGH: "strikethrough",
}


def _byte(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")
    return value


def fg_code(r: int, g: int, b: int) -> str:
    """Foreground colour in RGB format."""
    return f"\x1b[38;2;{_byte(r, 'r')};{_byte(g, 'g')};{_byte(b, 'b')};1m"


def bg_code(r: int, g: int, b: int) -> str:
    """Background colour in RGB format."""
    return f"\x1b[48;2;{_byte(r, 'r')};{_byte(g, 'g')};{_byte(b, 'b')};1m"


def style_code(style: int) -> str:
    """Text attribute, see STYLE_NAMES. Other values pass through as raw numbers."""
    return f"\x1b[{_byte(style, 'style')};1m"


def _emit(code: str) -> None:
    sys.stdout.write(code)


def fg(r: int, g: int, b: int) -> None:
    _emit(fg_code(r, g, b))


def bg(r: int, g: int, b: int) -> None:
    _emit(bg_code(r, g, b))


def style(style: int) -> None:
    _emit(style_code(style))


def reset() -> None:
    _emit(RESET)


def add_fg(s: str, r: int, g: int, b: int) -> str:
    """Wrap a string in a foreground colour."""
    return f"{fg_code(r, g, b)}{s}{RESET}"


def add_bg(s: str, r: int, g: int, b: int) -> str:
    """Wrap a string in a background colour."""
    return f"{bg_code(r, g, b)}{s}{RESET}"


def add_style(s: str, style: int) -> str:
    """Wrap a string in a text attribute; styles above MAX_STYLE leave it untouched."""
    if _byte(style, "style") > MAX_STYLE:
        return s
    return f"{style_code(style)}{s}{RESET}"
