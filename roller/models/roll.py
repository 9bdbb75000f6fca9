"""Roll request and outcome models."""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from roller import config

from .enums import DiceMode

logger = logging.getLogger(__name__)


class RollRequest(BaseModel):
    """Validated parameters for a single invocation.

    A count of 0 is raised to 1, and selection modes are dropped when only
    one die is rolled since there is nothing to select between.
    """
    count: int = Field(default=config.DEFAULT_COUNT, ge=0)
    faces: int = Field(default=config.DEFAULT_FACES, ge=1)
    mode: DiceMode = DiceMode.NONE
    adjustment: int = 0
    extended: bool = False
    timestamp: bool = False

    # What the caller asked for, before the single-die rule applied
    requested_mode: Optional[DiceMode] = None
    count_coerced: bool = False

    @model_validator(mode="after")
    def coerce_count_and_mode(self) -> "RollRequest":
        if self.count == 0:
            logger.debug("Count was 0, setting to 1")
            self.count = 1
            self.count_coerced = True
        if self.requested_mode is None:
            self.requested_mode = self.mode
        if self.count <= 1 and self.mode is not DiceMode.NONE:
            logger.debug("Ignoring %s for a single die", self.mode.label)
            self.mode = DiceMode.NONE
        return self

    @property
    def wants_stats(self) -> bool:
        """Whether the full statistics block applies to this request."""
        return self.extended and self.count > 1 and not self.mode.is_keep

    @property
    def notation(self) -> str:
        """Dice notation such as "3d6"."""
        return f"{self.count}d{self.faces}"


@dataclass
class StatsBlock:
    """Descriptive statistics over a roll set."""
    average_die: float
    q1: float
    median: float
    q3: float
    mode_value: int
    iqr: float
    qcd: float


@dataclass
class RollOutcome:
    """Result of rolling a request."""
    rolls: list[int]
    total: int
    mode_used: DiceMode = DiceMode.NONE
    adjustment: int = 0
    stats: Optional[StatsBlock] = None

    @property
    def label(self) -> str:
        """Name of the total line in the report."""
        if self.mode_used is DiceMode.KEEP_HIGHEST:
            return "Highest"
        if self.mode_used is DiceMode.KEEP_LOWEST:
            return "Lowest"
        if len(self.rolls) > 1:
            return "Sum"
        return "Result"
