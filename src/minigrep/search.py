import sys
from typing import List, Optional, Sequence, TextIO

from .config import Config
from .errors import FileUnreadable
from .style import MAX_STYLE, add_style


def read_file(filename: str) -> List[str]:
    """
    Reads a file as a list of lines, split on "\\n" only.

    Carriage returns stay part of the line. An empty file gives [""].

    Raises:
        FileUnreadable: if the file is missing, unreadable or not UTF-8 text.
    """
    try:
        with open(filename, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnreadable(filename, str(e)) from e
    return content.split("\n")


def search(query: str, contents: Sequence[str]) -> List[int]:
    """Selects the indices of the lines containing the query."""
    return [i for i, line in enumerate(contents) if query in line]


def search_case_insensitive(query: str, contents: Sequence[str]) -> List[int]:
    """Selects the indices of the lines containing the query, ignoring case."""
    query = query.lower()
    return [i for i, line in enumerate(contents) if query in line.lower()]


def select(query: str, contents: Sequence[str], case_sensitive: bool = True) -> List[int]:
    """Selects the indices of matching lines, ignoring case unless case_sensitive."""
    if case_sensitive:
        return search(query, contents)
    return search_case_insensitive(query, contents)


def format_line(line: str, word: str, style: int) -> str:
    """
    Highlights each occurrence of word in line.

    Only exact-case occurrences are wrapped, whatever the search mode.
    Style 0 and styles above 9 return the line as is.

        >>> format_line("This is a fine sentence!", "fine", 2)
        'This is a \\x1b[2;1mfine\\x1b[0m sentence!'
    """
    if style == 0 or style > MAX_STYLE:
        return line
    return line.replace(word, add_style(word, style))


def run(config: Config, out: Optional[TextIO] = None) -> int:
    """Prints every matching line of config.filename. Returns the number of lines printed."""
    out = out if out is not None else sys.stdout
    contents = read_file(config.filename)
    matches = select(config.query, contents, config.case_sensitive)

    for n in matches:
        line = contents[n]
        if config.style > 0:
            line = format_line(line, config.query, config.style)
        print(line, file=out)
    return len(matches)
