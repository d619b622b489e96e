"""Command line interface for the rooftop rainfall runoff calculator.

Usage examples:

  rooftop-rainfall 10
  rooftop-rainfall 5 --area 100 --coefficient 1 --initial-loss 0
  python -m rooftop_rainfall.cli 12.5 -a 180 -C 0.9 -l 0.5

Defaults for the optional flags come from the parameters file (see
`rooftop_rainfall.config.loader`) or from the built-in values.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from rooftop_rainfall.config import DEFAULT_PARAMETERS, Parameters, load_parameters
from rooftop_rainfall.domain.hydrology import calculate_runoff


def real(text: str) -> float:
    """argparse type for real numbers with a readable error.

    Digit separators (``1_000``) and surrounding whitespace are rejected.
    """
    if "_" in text or text != text.strip():
        raise argparse.ArgumentTypeError(f"invalid real number: {text!r}")
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid real number: {text!r}") from None


def format_runoff(value: float) -> str:
    """Plain decimal with the shortest round-trip digits (``500``, ``0``, ``12.35``)."""
    return np.format_float_positional(value, trim="-")


def build_parser(defaults: Parameters = DEFAULT_PARAMETERS) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rooftop-rainfall",
        description="Estimate the runoff volume (litres) collected from a roof for a rainfall event",
    )
    parser.add_argument("rainfall", type=real,
                        help="Rainfall depth (mm)")
    parser.add_argument("-a", "--area", type=real, default=defaults.roof_area,
                        help="Roof area (m^2) (default: %(default)s)")
    parser.add_argument("-C", "--coefficient", type=real, default=defaults.coefficient,
                        help="Runoff coefficient, 0..1 (default: %(default)s)")
    parser.add_argument("-l", "--initial-loss", dest="initial_loss", type=real,
                        default=defaults.initial_loss,
                        help="Rainfall lost before any runoff (mm) (default: %(default)s)")
    return parser


def main(
    argv: List[str] | None = None,
    candidates: Iterable[Union[str, Path]] | None = None,
) -> int:
    loaded = load_parameters(DEFAULT_PARAMETERS, candidates)
    if loaded.source is not None:
        print(f"Using defaults from {loaded.source}")

    parser = build_parser(loaded.parameters)
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 2

    args = parser.parse_args(argv)
    runoff = calculate_runoff(
        args.initial_loss, args.coefficient, args.area, args.rainfall)
    print(format_runoff(runoff))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
