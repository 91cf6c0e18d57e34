"""
Content module - static game tables.

Contains:
- Stage / stage type ordinals and the traversal skip tables
- Engine enums used at the host boundary
"""

from .stages import (
    LevelStage,
    StageType,
    FIRST_STAGE,
    FINAL_STAGE,
    STAGES_TO_SKIP,
    STAGE_TYPES_TO_SKIP,
    MAX_STAGE_TYPE,
    get_max_stage_type,
    floor_key,
    validate_stage_tables,
    iter_floors,
)
from .game import (
    ModCallback,
    RoomShape,
    Difficulty,
    Challenge,
    PlayerType,
    SeedEffect,
)
