"""
Floor traversal sequencer.

Owns the (stage, stage type) cursor for the seed being recorded and defines the
total order over every floor of a seed:

    1.0, 1.1, 1.2, 1.4, 1.5, 2.0, ... 8.4, 10.0, 10.1, 11.0, 11.1, 12.0

Greed mode stage types and the Blue Womb / Home stages are never visited.
Running past the final stage wraps the cursor back to the first floor and
reports that the seed is complete.
"""

import logging
from dataclasses import dataclass

from ..content.stages import (
    LevelStage,
    StageType,
    FIRST_STAGE,
    FINAL_STAGE,
    STAGES_TO_SKIP,
    STAGE_TYPES_TO_SKIP,
    get_max_stage_type,
    floor_key,
    validate_stage_tables,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloorCursor:
    """A single (stage, stage type) pair."""
    stage: int
    stage_type: int

    @property
    def key(self) -> str:
        return floor_key(self.stage, self.stage_type)

    def __str__(self) -> str:
        return self.key


class FloorSequencer:
    """
    Walks the floors of one seed in order.

    Both advance methods return True when the seed traversal just completed
    (the cursor has wrapped back to the first floor) and False when more
    floors remain.
    """

    def __init__(self):
        validate_stage_tables()
        self.stage: int = FIRST_STAGE
        self.stage_type: int = StageType.ORIGINAL

    @property
    def cursor(self) -> FloorCursor:
        return FloorCursor(self.stage, self.stage_type)

    def reset(self) -> None:
        self.stage = FIRST_STAGE
        self.stage_type = StageType.ORIGINAL

    def advance_stage_type(self) -> bool:
        """Move to the next stage type, rolling over to the next stage."""
        self.stage_type += 1
        while self.stage_type in STAGE_TYPES_TO_SKIP:
            self.stage_type += 1

        if self.stage_type > get_max_stage_type(self.stage):
            return self.advance_stage()

        return False

    def advance_stage(self) -> bool:
        """Move to the first stage type of the next recorded stage, wrapping past the final stage."""
        self.stage += 1
        self.stage_type = StageType.ORIGINAL
        while self.stage in STAGES_TO_SKIP:
            self.stage += 1

        if self.stage > FINAL_STAGE:
            logger.debug(f"Ran past stage {LevelStage(FINAL_STAGE).name}; seed complete")
            self.reset()
            return True

        return False
