"""Exceptions raised by the rooftop rainfall package."""
from pathlib import Path
from typing import Union


class RooftopRainfallError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(RooftopRainfallError):
    """A candidate parameters file could not be used."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ConfigUnreadable(ConfigError):
    """The file is missing or cannot be read (permissions, not a file, bad encoding)."""


class ConfigMalformed(ConfigError):
    """The file was read but is not a valid parameters document."""
