"""Version information for Dice Roller."""

__version__ = "2.1.2"
