"""Rooftop rainfall runoff calculator."""

__version__ = "0.1.0"
