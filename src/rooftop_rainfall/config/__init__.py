from .parameters import DEFAULT_PARAMETERS, ConfigFile, LoadedParameters, Parameters
from .settings import PARAMETERS_FILENAME, LoaderSettings, get_settings
from .loader import (
    candidate_paths,
    executable_dir,
    load_parameters,
    read_parameters_file,
    user_config_dir,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "ConfigFile",
    "LoadedParameters",
    "Parameters",
    "PARAMETERS_FILENAME",
    "LoaderSettings",
    "get_settings",
    "candidate_paths",
    "executable_dir",
    "load_parameters",
    "read_parameters_file",
    "user_config_dir",
]
