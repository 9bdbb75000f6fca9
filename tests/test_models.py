"""
Tests for roll request validation and outcome models.
"""

import logging
import pytest
from pydantic import ValidationError

from roller import config
from roller.models import DiceMode, RollOutcome, RollRequest


class TestRollRequest:
    """Tests for RollRequest coercion rules."""

    def test_defaults(self):
        request = RollRequest()
        assert request.mode is DiceMode.NONE
        assert request.adjustment == 0

    def test_defaults_follow_config(self):
        """Model defaults match the CLI defaults from the environment."""
        request = RollRequest()
        assert request.count == max(config.DEFAULT_COUNT, 1)
        assert request.faces == config.DEFAULT_FACES

    def test_zero_count_coerced(self, caplog):
        """A count of 0 becomes 1 without a warning; the report carries the notice."""
        with caplog.at_level(logging.WARNING):
            request = RollRequest(count=0, faces=6)
        assert request.count == 1
        assert request.count_coerced is True
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    @pytest.mark.parametrize("raw", ["0", 0.0])
    def test_zero_count_coerced_after_conversion(self, raw):
        """Values pydantic converts to 0 are raised to 1 too."""
        request = RollRequest.model_validate({"count": raw, "faces": 6, "mode": "keep-highest"})
        assert request.count == 1
        assert request.count_coerced is True
        assert request.mode is DiceMode.NONE
        assert request.requested_mode is DiceMode.KEEP_HIGHEST

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            RollRequest(count=-2)

    def test_zero_faces_rejected(self):
        with pytest.raises(ValidationError):
            RollRequest(faces=0)

    def test_single_die_forces_no_mode(self):
        request = RollRequest(count=1, mode=DiceMode.KEEP_HIGHEST)
        assert request.mode is DiceMode.NONE
        assert request.requested_mode is DiceMode.KEEP_HIGHEST

    def test_mode_kept_for_multiple_dice(self):
        request = RollRequest(count=4, mode=DiceMode.DROP_LOWEST)
        assert request.mode is DiceMode.DROP_LOWEST
        assert request.requested_mode is DiceMode.DROP_LOWEST

    def test_mode_from_string(self):
        assert RollRequest(count=2, mode="keep-lowest").mode is DiceMode.KEEP_LOWEST

    @pytest.mark.parametrize("count,mode,extended,expected", [
        (5, DiceMode.NONE, True, True),
        (5, DiceMode.DROP_HIGHEST, True, True),
        (5, DiceMode.KEEP_HIGHEST, True, False),
        (5, DiceMode.NONE, False, False),
        (1, DiceMode.NONE, True, False),
    ])
    def test_wants_stats(self, count, mode, extended, expected):
        request = RollRequest(count=count, mode=mode, extended=extended)
        assert request.wants_stats is expected


class TestDiceMode:

    def test_is_keep(self):
        assert DiceMode.KEEP_HIGHEST.is_keep
        assert DiceMode.KEEP_LOWEST.is_keep
        assert not DiceMode.DROP_LOWEST.is_keep
        assert not DiceMode.NONE.is_keep

    def test_label(self):
        assert DiceMode.DROP_LOWEST.label == "DropLowest"
        assert DiceMode.NONE.label == "None"


class TestRollOutcome:

    @pytest.mark.parametrize("rolls,mode,label", [
        ([4, 5], DiceMode.KEEP_HIGHEST, "Highest"),
        ([4, 5], DiceMode.KEEP_LOWEST, "Lowest"),
        ([4, 5], DiceMode.DROP_LOWEST, "Sum"),
        ([4, 5], DiceMode.NONE, "Sum"),
        ([4], DiceMode.NONE, "Result"),
    ])
    def test_label(self, rolls, mode, label):
        assert RollOutcome(rolls=rolls, total=0, mode_used=mode).label == label
