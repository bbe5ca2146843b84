import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

import yaml

from .errors import ExtraArguments, MissingArgument, SettingsError, UnparseableStyle
from .utils import COLOR_MODES, report_warning

CASE_INSENSITIVE_VAR = "CASE_INSENSITIVE"
SETTINGS_ENV_VAR = "MINIGREP_CONFIG"
SETTINGS_FILE = ".minigrep.yaml"

DEFAULT_SETTINGS = {"color": "auto", "case_insensitive_var": CASE_INSENSITIVE_VAR}

_U8 = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Config:
    query: str
    filename: str
    style: int = 0
    case_sensitive: bool = True


def parse_style(value: str) -> Optional[int]:
    """Parses an unsigned byte ("+" sign allowed, no whitespace). Returns None if invalid."""
    if not _U8.fullmatch(value):
        return None
    digits = value.lstrip("+").lstrip("0") or "0"
    if len(digits) > 3:
        return None
    n = int(digits)
    return n if n <= 255 else None


def require_arguments(args: Sequence[str]) -> None:
    """Raises MissingArgument unless args hold a query and a filename after the program name."""
    if len(args) < 2:
        raise MissingArgument("query")
    if len(args) < 3:
        raise MissingArgument("filename")


def env_is_set(name: str) -> bool:
    return name in os.environ


def _warn(warning: UserWarning) -> None:
    report_warning(str(warning))


def build_config(
    args: Iterable[str],
    is_set: Optional[Callable[[str], bool]] = None,
    warn: Optional[Callable[[UserWarning], None]] = None,
    toggle: str = CASE_INSENSITIVE_VAR,
) -> Config:
    """
    Builds a Config from raw arguments.

    Args:
        args: Program name followed by query, filename and an optional style.
        is_set: Tells whether an environment variable is present. Defaults to
            looking it up in os.environ.
        warn: Receives non-fatal warnings. Defaults to printing them on stderr.
        toggle: Name of the variable that switches to case-insensitive search.

    Raises:
        MissingArgument: if query or filename is absent.
    """
    is_set = is_set or env_is_set
    warn = warn or _warn

    it = iter(args)
    next(it, None)
    query = next(it, None)
    if query is None:
        raise MissingArgument("query")
    filename = next(it, None)
    if filename is None:
        raise MissingArgument("filename")

    style = 0
    raw_style = next(it, None)
    if raw_style is not None:
        parsed = parse_style(raw_style)
        if parsed is None:
            warn(UnparseableStyle(raw_style))
        else:
            style = parsed
        if extra := list(it):
            warn(ExtraArguments(extra))

    return Config(query, filename, style, case_sensitive=not is_set(toggle))


def _validate(data: Any, source: str) -> Dict[str, Any]:
    settings = dict(DEFAULT_SETTINGS)
    if data is None:
        return settings
    if not isinstance(data, dict):
        raise SettingsError(f"{source}: expected a mapping at top level")

    color = data.get("color", settings["color"])
    # YAML 1.1 reads bare never/always as strings but yes/no as booleans
    if color is True:
        color = "always"
    elif color is False:
        color = "never"
    if color not in COLOR_MODES:
        raise SettingsError(f"{source}: color must be one of {', '.join(COLOR_MODES)}")
    settings["color"] = color

    var = data.get("case_insensitive_var", settings["case_insensitive_var"])
    if not isinstance(var, str) or not var:
        raise SettingsError(f"{source}: case_insensitive_var must be a non-empty string")
    settings["case_insensitive_var"] = var
    return settings


def load_settings(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Loads optional settings from YAML.

    The file is the explicit path, else $MINIGREP_CONFIG, else .minigrep.yaml
    in the working directory. Without any file the defaults are returned.
    """
    env = os.environ if env is None else env
    source = path or env.get(SETTINGS_ENV_VAR)
    if not source:
        if not os.path.isfile(SETTINGS_FILE):
            return dict(DEFAULT_SETTINGS)
        source = SETTINGS_FILE

    try:
        with open(source, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Could not read settings from {source}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Failed to parse YAML file {source}: {e}") from e
    return _validate(data, source)
