"""Catchment parameters and the on-disk document that carries them."""
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Parameters(BaseModel):
    """Rooftop catchment parameters.

    Attributes
    ----------
    roof_area:
        Catchment (roof) area in square metres.
    coefficient:
        Dimensionless collection efficiency in the range [0, 1], modelling
        losses such as evaporation and gutter overflow.
    initial_loss:
        Rainfall depth in millimetres consumed before any runoff reaches the
        tanks.

    Values must be TOML numbers (integers or floats); strings and booleans
    are rejected. Ranges are informational.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    roof_area: float = Field(..., examples=[232.3])
    coefficient: float = Field(..., examples=[0.95])
    initial_loss: float = Field(..., examples=[0.3])


# Average floor area of new residential dwellings in Australia for 2021-2023
# (Australian Bureau of Statistics); 0.3 mm fills a typical first flush
# diverter before water flows to the tanks.
DEFAULT_PARAMETERS = Parameters(roof_area=232.3, coefficient=0.95, initial_loss=0.3)


class ConfigFile(BaseModel):
    """Parameters file layout: a single required ``[parameters]`` table."""
    parameters: Parameters


class LoadedParameters(BaseModel):
    """Parameters in effect plus the file they came from (None for built-ins)."""
    model_config = ConfigDict(frozen=True)

    parameters: Parameters
    source: Optional[Path] = None
