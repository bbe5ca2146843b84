import argparse
import os
import sys
from typing import List, Optional

from . import __version__
from .config import build_config, load_settings, require_arguments
from .errors import MinigrepError
from .search import run
from .utils import report_error, report_warning

HELP_FLAGS = {"-h", "--help", "--version"}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="minigrep",
        description="Print every line of a file containing a string. "
        "Set CASE_INSENSITIVE to ignore case.",
    )
    p.add_argument("query", help="The string to search for")
    p.add_argument("filename", help="The file to search in")
    p.add_argument("style", nargs="?", default="0", help="Highlight style of the query, 1-9 (default: 0, none)")
    p.add_argument("--version", action="version", version=f"minigrep v{__version__}")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    # argparse only handles help and version; positionals go through build_config
    if len(argv) == 2 and argv[1] in HELP_FLAGS:
        try:
            build_parser().parse_args(argv[1:])
        except SystemExit as e:
            return e.code or 0

    try:
        require_arguments(argv)
        settings = load_settings()
    except MinigrepError as e:
        report_error(str(e))
        return 1
    mode = settings["color"]

    try:
        config = build_config(
            argv,
            warn=lambda w: report_warning(str(w), mode=mode),
            toggle=settings["case_insensitive_var"],
        )
        run(config)
    except MinigrepError as e:
        report_error(str(e), mode=mode)
        return 1
    except BrokenPipeError:
        # Python flushes stdout again at exit; point it at devnull first
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0
