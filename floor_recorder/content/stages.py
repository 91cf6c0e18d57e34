"""
Stage and stage type tables.

The traversal visits every (stage, stage type) pair that can actually be
generated for a seed. The skip sets and ceilings below are the only source of
truth for which pairs exist; an off-by-one here silently drops real floors
from the dataset, so the tables are checked by validate_stage_tables().
"""

from enum import IntEnum
from typing import Dict, FrozenSet, Iterator, Tuple


class LevelStage(IntEnum):
    """Stage ordinals, matching the engine's numbering."""
    STAGE1_1 = 1   # Basement I
    STAGE1_2 = 2   # Basement II
    STAGE2_1 = 3   # Caves I
    STAGE2_2 = 4   # Caves II
    STAGE3_1 = 5   # Depths I
    STAGE3_2 = 6   # Depths II
    STAGE4_1 = 7   # Womb I
    STAGE4_2 = 8   # Womb II
    STAGE4_3 = 9   # Blue Womb
    STAGE5 = 10    # Sheol / Cathedral
    STAGE6 = 11    # Dark Room / Chest
    STAGE7 = 12    # The Void
    STAGE8 = 13    # Home


class StageType(IntEnum):
    """Alternate versions of a stage."""
    ORIGINAL = 0
    WOTL = 1
    AFTERBIRTH = 2
    GREEDMODE = 3     # Unused outside of Greed mode
    REPENTANCE = 4
    REPENTANCE_B = 5


FIRST_STAGE = LevelStage.STAGE1_1
FINAL_STAGE = LevelStage.STAGE8

STAGES_TO_SKIP: FrozenSet[int] = frozenset({
    LevelStage.STAGE4_3,  # Blue Womb
    LevelStage.STAGE8,    # Home
})

STAGE_TYPES_TO_SKIP: FrozenSet[int] = frozenset({
    StageType.GREEDMODE,
})

MAX_STAGE_TYPE: Dict[int, int] = {
    LevelStage.STAGE1_1: StageType.REPENTANCE_B,
    LevelStage.STAGE1_2: StageType.REPENTANCE_B,
    LevelStage.STAGE2_1: StageType.REPENTANCE_B,
    LevelStage.STAGE2_2: StageType.REPENTANCE_B,
    LevelStage.STAGE3_1: StageType.REPENTANCE_B,
    LevelStage.STAGE3_2: StageType.REPENTANCE_B,
    # Corpse is the only alternate of the Womb
    LevelStage.STAGE4_1: StageType.REPENTANCE,
    LevelStage.STAGE4_2: StageType.REPENTANCE,
    LevelStage.STAGE4_3: StageType.ORIGINAL,
    # Sheol / Cathedral and Dark Room / Chest
    LevelStage.STAGE5: StageType.WOTL,
    LevelStage.STAGE6: StageType.WOTL,
    LevelStage.STAGE7: StageType.ORIGINAL,
    LevelStage.STAGE8: StageType.WOTL,
}


def get_max_stage_type(stage: int) -> int:
    """Highest stage type that exists for a stage."""
    return MAX_STAGE_TYPE[stage]


def floor_key(stage: int, stage_type: int) -> str:
    """Key of a floor inside a seed record, e.g. "4.2"."""
    return f"{int(stage)}.{int(stage_type)}"


def validate_stage_tables() -> None:
    """
    Check the static tables for completeness over the full stage range.

    Raises:
        ValueError: if a stage has no ceiling, a skip set names an unknown
            ordinal, or the traversal would start on a skipped stage.
    """
    stages = {int(s) for s in LevelStage}
    stage_types = {int(t) for t in StageType}

    missing = stages - set(MAX_STAGE_TYPE)
    if missing:
        raise ValueError(f"No maximum stage type for stages: {sorted(missing)}")

    for stage, max_type in MAX_STAGE_TYPE.items():
        if stage not in stages:
            raise ValueError(f"Unknown stage in MAX_STAGE_TYPE: {stage}")
        if max_type not in stage_types:
            raise ValueError(f"Stage {stage} has unknown maximum stage type {max_type}")
        if max_type in STAGE_TYPES_TO_SKIP:
            raise ValueError(f"Stage {stage} ends on a skipped stage type {max_type}")

    if not STAGES_TO_SKIP <= stages:
        raise ValueError(f"Unknown stages to skip: {sorted(STAGES_TO_SKIP - stages)}")
    if not STAGE_TYPES_TO_SKIP <= stage_types:
        raise ValueError(f"Unknown stage types to skip: {sorted(STAGE_TYPES_TO_SKIP - stage_types)}")
    if StageType.ORIGINAL in STAGE_TYPES_TO_SKIP:
        raise ValueError("The original stage type can not be skipped")
    if FIRST_STAGE in STAGES_TO_SKIP:
        raise ValueError(f"The first stage ({FIRST_STAGE}) can not be skipped")
    if FIRST_STAGE > FINAL_STAGE:
        raise ValueError("The first stage comes after the final stage")


def iter_floors() -> Iterator[Tuple[LevelStage, StageType]]:
    """Every floor of one seed, in traversal order."""
    for stage in LevelStage:
        if stage < FIRST_STAGE or stage > FINAL_STAGE or stage in STAGES_TO_SKIP:
            continue
        for stage_type in StageType:
            if stage_type > MAX_STAGE_TYPE[stage]:
                break
            if stage_type in STAGE_TYPES_TO_SKIP:
                continue
            yield stage, stage_type
