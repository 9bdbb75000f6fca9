"""Enumerations for dice rolling concepts."""

from enum import Enum


class DiceMode(str, Enum):
    """Which rolls count toward the total."""
    NONE = "none"                   # Sum of every die
    DROP_HIGHEST = "drop-highest"   # Sum without the single highest die
    DROP_LOWEST = "drop-lowest"     # Sum without the single lowest die
    KEEP_HIGHEST = "keep-highest"   # Highest die only
    KEEP_LOWEST = "keep-lowest"     # Lowest die only

    @property
    def is_keep(self) -> bool:
        """Whether the mode reports a single selected die."""
        return self in {DiceMode.KEEP_HIGHEST, DiceMode.KEEP_LOWEST}

    @property
    def label(self) -> str:
        """Display name used in the report, e.g. "DropLowest"."""
        return "".join(part.title() for part in self.value.split("-"))
