"""
Pytest fixtures for Dice Roller testing.

Provides scripted and seeded random sources so rolls can be asserted exactly.
"""

import random
import pytest

from roller.models import DiceMode, RollRequest


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def scripted_rng():
    """Factory for a random source returning the given values in order."""
    return ScriptedRandom


@pytest.fixture
def seeded_rng():
    """A deterministic random.Random."""
    return random.Random(1234)


@pytest.fixture
def make_request():
    """Factory for RollRequest with sensible defaults."""
    def _make(**kwargs):
        data = {"count": 5, "faces": 6, "mode": DiceMode.NONE, "adjustment": 0}
        data.update(kwargs)
        return RollRequest(**data)
    return _make
