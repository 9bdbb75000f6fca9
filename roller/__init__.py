"""Dice Roller: roll NdF dice with selection modes and descriptive statistics."""

from .version import __version__

__all__ = ["__version__"]
