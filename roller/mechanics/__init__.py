"""Roll mechanics for Dice Roller."""

from .dice import (
    roll_die,
    roll_dice,
    remove_lowest,
    remove_highest,
    saturating_add,
    aggregate,
    roll,
)
from .stats import (
    median,
    quartiles,
    mode,
    average_die,
    iqr,
    qcd,
    describe,
    max_possible,
    expected_total,
)

__all__ = [
    "roll_die",
    "roll_dice",
    "remove_lowest",
    "remove_highest",
    "saturating_add",
    "aggregate",
    "roll",
    "median",
    "quartiles",
    "mode",
    "average_die",
    "iqr",
    "qcd",
    "describe",
    "max_possible",
    "expected_total",
]
