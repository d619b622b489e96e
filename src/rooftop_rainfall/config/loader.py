"""Layered discovery of the optional parameters file.

Candidates are tried in order and the last one that parses wins:

1. ``rooftop-rainfall-parameters.toml`` next to the running program
2. the same file name in the user's configuration directory

A candidate that is missing or unreadable is skipped. A candidate that exists
but is malformed stops the search; whatever was loaded before it (the
built-in defaults if nothing) stays in effect. Each successful parse replaces
the previous parameters wholesale, fields are never merged across files.
"""
from __future__ import annotations

import os
import sys
import tomllib
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from rooftop_rainfall.config.parameters import (
    DEFAULT_PARAMETERS,
    ConfigFile,
    LoadedParameters,
    Parameters,
)
from rooftop_rainfall.config.settings import LoaderSettings, get_settings
from rooftop_rainfall.exceptions import ConfigMalformed, ConfigUnreadable

__all__ = [
    "user_config_dir",
    "executable_dir",
    "candidate_paths",
    "read_parameters_file",
    "load_parameters",
]


def user_config_dir() -> Path:
    """Per-user configuration directory for the current platform."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    # Relative XDG paths are invalid per the basedir spec and are ignored.
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".config"


def executable_dir() -> Path:
    """Directory holding the running program."""
    if not sys.argv or not sys.argv[0]:
        return Path.cwd()
    return Path(sys.argv[0]).resolve().parent


def candidate_paths(settings: Optional[LoaderSettings] = None) -> List[Path]:
    """Parameters file locations in priority order (later wins)."""
    settings = settings or get_settings()
    exe_dir = settings.EXECUTABLE_DIR or executable_dir()
    config_dir = settings.CONFIG_DIR or user_config_dir()
    return [
        exe_dir / settings.CONFIG_FILENAME,
        config_dir / settings.CONFIG_FILENAME,
    ]


def read_parameters_file(path: Union[str, Path]) -> Parameters:
    """Read and validate one parameters file.

    Raises
    ------
    ConfigUnreadable
        The file does not exist or cannot be read as UTF-8 text.
    ConfigMalformed
        The text is not TOML, or the ``[parameters]`` table is missing, is
        incomplete or holds a non-numeric value.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigUnreadable(path, str(exc)) from exc

    try:
        document = tomllib.loads(text)
        return ConfigFile.model_validate(document).parameters
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise ConfigMalformed(path, str(exc)) from exc


def load_parameters(
    defaults: Parameters = DEFAULT_PARAMETERS,
    candidates: Optional[Iterable[Union[str, Path]]] = None,
) -> LoadedParameters:
    """Resolve the parameters to use as command line defaults.

    Never raises for configuration problems; the worst case is ``defaults``
    with no source.
    """
    if candidates is None:
        candidates = candidate_paths()

    loaded = LoadedParameters(parameters=defaults)
    for path in candidates:
        try:
            parameters = read_parameters_file(path)
        except ConfigUnreadable:
            continue
        except ConfigMalformed:
            break
        loaded = LoadedParameters(parameters=parameters, source=Path(path))
    return loaded
