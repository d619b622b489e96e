from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PARAMETERS_FILENAME = "rooftop-rainfall-parameters.toml"


class LoaderSettings(BaseSettings):
    """Where the parameters file is looked for.

    Every field can be set from the environment with the ``ROOFTOP_RAINFALL_``
    prefix, e.g. ``ROOFTOP_RAINFALL_CONFIG_DIR=/etc/rooftop``. Unset
    directories fall back to the executable's directory and the user's
    configuration directory respectively.
    """
    CONFIG_FILENAME: str = PARAMETERS_FILENAME
    EXECUTABLE_DIR: Optional[Path] = None
    CONFIG_DIR: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="ROOFTOP_RAINFALL_", extra="ignore")


def get_settings() -> LoaderSettings:
    """Build settings from the current environment."""
    return LoaderSettings()
