"""Data models for Dice Roller."""

from .enums import DiceMode
from .roll import RollRequest, RollOutcome, StatsBlock

__all__ = [
    "DiceMode",
    "RollRequest",
    "RollOutcome",
    "StatsBlock",
]
