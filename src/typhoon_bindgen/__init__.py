"""Typhoon client binding generator: JSON IDL in, SDK packages out."""

__version__ = "0.1.0"
