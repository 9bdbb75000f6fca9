"""Dice rolling mechanics: sampling, selection modes and totals."""

import logging
import random
from collections import Counter
from typing import Optional, Protocol

from roller.errors import EmptyInputError, InvalidParameterError
from roller.models.enums import DiceMode
from roller.models.roll import RollOutcome, RollRequest

from .stats import describe

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw an inclusive random integer, e.g. random.Random."""

    def randint(self, a: int, b: int) -> int: ...


def roll_die(faces: int, rng: Optional[RandomSource] = None) -> int:
    """Roll a single die with the given number of faces."""
    if faces < 1:
        raise InvalidParameterError(f"Die must have at least 1 face, got {faces}")
    return (rng or random).randint(1, faces)


def roll_dice(count: int, faces: int, rng: Optional[RandomSource] = None) -> list[int]:
    """
    Roll several dice.

    Args:
        count: Number of dice
        faces: Faces per die (at least 1)
        rng: Random source; a fresh random.Random() when omitted

    Returns:
        One value in [1, faces] per die, in roll order
    """
    if count < 0:
        raise InvalidParameterError(f"Cannot roll a negative number of dice ({count})")
    if faces < 1:
        raise InvalidParameterError(f"Die must have at least 1 face, got {faces}")
    rng = rng or random.Random()
    return [roll_die(faces, rng) for _ in range(count)]


def _remove_sorted(rolls: list[int], dropped: list[int]) -> list[int]:
    """Remove one occurrence per dropped value, keeping roll order."""
    pending = Counter(dropped)
    kept = []
    for value in rolls:
        if pending[value] > 0:
            pending[value] -= 1
        else:
            kept.append(value)
    return kept


def remove_lowest(rolls: list[int], n: int = 1) -> list[int]:
    """
    Drop the n lowest dice.

    Only n dice are dropped even when the lowest value appears more often.
    Dropping as many dice as were rolled leaves nothing.
    """
    if n >= len(rolls):
        return []
    return _remove_sorted(rolls, sorted(rolls)[:n])


def remove_highest(rolls: list[int], n: int = 1) -> list[int]:
    """Drop the n highest dice; see remove_lowest."""
    if n >= len(rolls):
        return []
    return _remove_sorted(rolls, sorted(rolls)[len(rolls) - n:])


def saturating_add(value: int, adjustment: int) -> int:
    """Add a signed adjustment to a total, clamping to 1 if it goes negative."""
    adjusted = value + adjustment
    if adjusted < 0:
        return 1
    return adjusted


def aggregate(rolls: list[int], mode: DiceMode, adjustment: int = 0) -> int:
    """
    Reduce a roll set to a total under a selection mode.

    Args:
        rolls: Dice values in roll order
        mode: Selection mode
        adjustment: Signed amount added after selection

    Returns:
        The adjusted total, never negative
    """
    if mode is DiceMode.DROP_LOWEST:
        base = sum(remove_lowest(rolls, 1))
    elif mode is DiceMode.DROP_HIGHEST:
        base = sum(remove_highest(rolls, 1))
    elif mode is DiceMode.KEEP_HIGHEST or mode is DiceMode.KEEP_LOWEST:
        if not rolls:
            raise EmptyInputError(f"{mode.label} needs at least one roll")
        base = max(rolls) if mode is DiceMode.KEEP_HIGHEST else min(rolls)
    elif mode is DiceMode.NONE:
        base = sum(rolls)
    else:
        raise ValueError(f"Unknown dice mode: {mode!r}")
    return saturating_add(base, adjustment)


def roll(request: RollRequest, rng: Optional[RandomSource] = None) -> RollOutcome:
    """
    Perform a complete roll.

    Args:
        request: Validated roll parameters
        rng: Random source for every die of this roll

    Returns:
        RollOutcome with the rolls, total and, when extended output applies,
        the statistics block
    """
    rng = rng or random.Random()
    logger.debug("Rolling %s mode=%s adjust=%d",
                 request.notation, request.mode.value, request.adjustment)

    rolls = roll_dice(request.count, request.faces, rng)
    total = aggregate(rolls, request.mode, request.adjustment)
    stats = describe(rolls) if request.wants_stats else None

    logger.debug("Rolled %s -> %d", rolls, total)
    return RollOutcome(
        rolls=rolls,
        total=total,
        mode_used=request.mode,
        adjustment=request.adjustment,
        stats=stats,
    )
