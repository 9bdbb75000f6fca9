"""Descriptive statistics over a roll set.

Quartiles use a median-of-halves split: for a sorted sequence of length n,
Q1 is the median of the first floor(n/2) values and Q3 the median of the
last floor(n/2) values. For odd n the middle value belongs to neither half.
"""

import math
from collections import Counter
from typing import Sequence, Union

from roller.errors import EmptyInputError, InvalidParameterError
from roller.models.roll import StatsBlock

Number = Union[int, float]


def median(values: Sequence[int]) -> Number:
    """
    Median of an already sorted sequence.

    Args:
        values: Sorted values

    Returns:
        The middle value for odd lengths, the mean of the two middle values
        for even lengths

    Raises:
        EmptyInputError: If values is empty
    """
    if not values:
        raise EmptyInputError("Cannot take the median of an empty roll set")
    middle = len(values) // 2
    if len(values) % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2
    return values[middle]


def quartiles(values: Sequence[int]) -> tuple[float, float, float]:
    """
    Q1, Q2 and Q3 of a sorted sequence with at least two values.

    Returns:
        (q1, median, q3) as floats
    """
    if len(values) < 2:
        raise EmptyInputError("Quartiles need at least two rolls")
    lower = values[:math.floor(len(values) / 2)]
    upper = values[math.ceil(len(values) / 2):]
    return float(median(lower)), float(median(values)), float(median(upper))


def mode(values: Sequence[int]) -> int:
    """Most frequent value. Ties go to the lowest value."""
    if not values:
        raise EmptyInputError("Cannot take the mode of an empty roll set")
    occurrences = Counter(values)
    return min(occurrences, key=lambda value: (-occurrences[value], value))


def average_die(values: Sequence[int]) -> float:
    """Mean die value, truncated to a whole number."""
    if not values:
        raise EmptyInputError("Cannot average an empty roll set")
    return float(sum(values) // len(values))


def iqr(q1: float, q3: float) -> float:
    """Interquartile range. Not clamped, so degenerate input can go negative."""
    return q3 - q1


def qcd(q1: float, q3: float) -> float:
    """
    Quartile coefficient of dispersion, (Q3 - Q1) / (Q3 + Q1).

    Returns NaN when Q3 + Q1 is zero, where the ratio is undefined.
    """
    denominator = q3 + q1
    if denominator == 0:
        return math.nan
    return (q3 - q1) / denominator


def describe(rolls: Sequence[int]) -> StatsBlock:
    """Build the statistics block for a roll set; order of rolls does not matter."""
    ordered = sorted(rolls)
    q1, q2, q3 = quartiles(ordered)
    return StatsBlock(
        average_die=average_die(ordered),
        q1=q1,
        median=q2,
        q3=q3,
        mode_value=mode(ordered),
        iqr=iqr(q1, q3),
        qcd=qcd(q1, q3),
    )


def max_possible(count: int, faces: int) -> int:
    """Highest total NdF can produce."""
    if faces < 1:
        raise InvalidParameterError(f"Die must have at least 1 face, got {faces}")
    return count * faces


def expected_total(count: int, faces: int) -> float:
    """Average NdF result: each die averages (faces + 1) / 2."""
    if faces < 1:
        raise InvalidParameterError(f"Die must have at least 1 face, got {faces}")
    return count * (faces / 2 + 0.5)
