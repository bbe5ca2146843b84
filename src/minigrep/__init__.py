"""
minigrep: print every line of a file that contains a string.

    minigrep query filename [style]

If the CASE_INSENSITIVE environment variable is set, the search ignores case.
"""

__version__ = "0.1.0"

from .config import Config, build_config, load_settings  # noqa: E402
from .errors import (  # noqa: E402
    ExtraArguments,
    FileUnreadable,
    MinigrepError,
    MissingArgument,
    SettingsError,
    UnparseableStyle,
)
from .search import format_line, read_file, run, search, search_case_insensitive, select  # noqa: E402
