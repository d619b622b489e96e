"""CLI package for the rooftop rainfall calculator.

Execute via:
  python -m rooftop_rainfall.cli <rainfall> [options]

Or through the console script declared in pyproject.toml:
  rooftop-rainfall <rainfall> [options]

Implemented in `main.py` using the standard library `argparse`.
"""

from .main import main  # re-export for python -m rooftop_rainfall.cli

__all__ = ["main"]
