"""
Tests for the stage tables and the floor enumeration.
"""

import pytest

from floor_recorder.content import stages
from floor_recorder.content.stages import (
    LevelStage,
    StageType,
    FIRST_STAGE,
    FINAL_STAGE,
    STAGES_TO_SKIP,
    MAX_STAGE_TYPE,
    floor_key,
    get_max_stage_type,
    iter_floors,
    validate_stage_tables,
)


# =============================================================================
# Tables
# =============================================================================


class TestStageTables:

    def test_tables_validate(self):
        validate_stage_tables()

    def test_every_stage_has_a_ceiling(self):
        for stage in LevelStage:
            assert stage in MAX_STAGE_TYPE

    def test_blue_womb_and_home_are_skipped(self):
        assert STAGES_TO_SKIP == {LevelStage.STAGE4_3, LevelStage.STAGE8}

    def test_first_and_final_stage(self):
        assert FIRST_STAGE == 1
        assert FINAL_STAGE == 13

    @pytest.mark.parametrize("stage,expected", [
        (LevelStage.STAGE1_1, StageType.REPENTANCE_B),
        (LevelStage.STAGE3_2, StageType.REPENTANCE_B),
        (LevelStage.STAGE4_1, StageType.REPENTANCE),
        (LevelStage.STAGE4_2, StageType.REPENTANCE),
        (LevelStage.STAGE4_3, StageType.ORIGINAL),
        (LevelStage.STAGE5, StageType.WOTL),
        (LevelStage.STAGE6, StageType.WOTL),
        (LevelStage.STAGE7, StageType.ORIGINAL),
        (LevelStage.STAGE8, StageType.WOTL),
    ])
    def test_max_stage_type(self, stage, expected):
        assert get_max_stage_type(stage) == expected

    def test_floor_key(self):
        assert floor_key(LevelStage.STAGE2_2, StageType.AFTERBIRTH) == "4.2"
        assert floor_key(10, 1) == "10.1"


class TestValidation:
    """validate_stage_tables rejects incomplete or inconsistent tables."""

    def test_missing_ceiling(self, monkeypatch):
        table = dict(MAX_STAGE_TYPE)
        del table[LevelStage.STAGE7]
        monkeypatch.setattr(stages, "MAX_STAGE_TYPE", table)
        with pytest.raises(ValueError, match="No maximum stage type"):
            validate_stage_tables()

    def test_ceiling_on_skipped_stage_type(self, monkeypatch):
        table = dict(MAX_STAGE_TYPE)
        table[LevelStage.STAGE5] = StageType.GREEDMODE
        monkeypatch.setattr(stages, "MAX_STAGE_TYPE", table)
        with pytest.raises(ValueError, match="skipped stage type"):
            validate_stage_tables()

    def test_unknown_stage_to_skip(self, monkeypatch):
        monkeypatch.setattr(stages, "STAGES_TO_SKIP", frozenset({9, 42}))
        with pytest.raises(ValueError, match="Unknown stages to skip"):
            validate_stage_tables()

    def test_first_stage_can_not_be_skipped(self, monkeypatch):
        monkeypatch.setattr(stages, "STAGES_TO_SKIP", frozenset({FIRST_STAGE}))
        with pytest.raises(ValueError, match="first stage"):
            validate_stage_tables()


# =============================================================================
# Enumeration
# =============================================================================


class TestIterFloors:

    def test_floor_count(self):
        # 6 stages x 5 types, 2 Womb stages x 4, Sheol/Dark Room x 2, The Void
        assert len(list(iter_floors())) == 43

    def test_starts_on_first_floor(self):
        assert next(iter_floors()) == (LevelStage.STAGE1_1, StageType.ORIGINAL)

    def test_never_yields_greed_mode(self):
        assert all(t != StageType.GREEDMODE for _, t in iter_floors())

    def test_never_yields_skipped_stages(self):
        assert all(s not in STAGES_TO_SKIP for s, _ in iter_floors())

    def test_floors_are_unique(self):
        floors = list(iter_floors())
        assert len(set(floors)) == len(floors)
