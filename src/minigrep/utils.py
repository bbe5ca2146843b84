import os
import sys
from typing import Optional, TextIO, Tuple

from .style import add_fg

RED = (255, 0, 0)
YELLOW = (255, 255, 0)

COLOR_MODES = ("auto", "always", "never")


def use_color(stream: TextIO, mode: str = "auto") -> bool:
    """ANSI color is used if forced, or if the stream is a TTY and NO_COLOR is not set."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and "NO_COLOR" not in os.environ


def colorize(text: str, rgb: Tuple[int, int, int], stream: Optional[TextIO] = None, mode: str = "auto") -> str:
    stream = stream if stream is not None else sys.stderr
    return add_fg(text, *rgb) if use_color(stream, mode) else text


def report_error(message: str, stream: Optional[TextIO] = None, mode: str = "auto") -> None:
    """Prints a fatal error in red on stderr."""
    stream = stream if stream is not None else sys.stderr
    print(colorize(f"Error: {message}", RED, stream, mode), file=stream)


def report_warning(message: str, stream: Optional[TextIO] = None, mode: str = "auto") -> None:
    """Prints a non-fatal warning in yellow on stderr."""
    stream = stream if stream is not None else sys.stderr
    print(colorize(f"Warning: {message}", YELLOW, stream, mode), file=stream)
