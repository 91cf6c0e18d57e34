"""
Tests for room snapshots and floor extraction.
"""

import dataclasses

import pytest

from floor_recorder.content.game import RoomShape
from floor_recorder.state.rooms import RoomData, RoomDescriptor, RoomSnapshot, extract_floor


def _room(index, shape=RoomShape.SHAPE_1x1, stage_id=1, variant=0, subtype=0):
    return RoomDescriptor(
        safe_grid_index=index,
        data=RoomData(shape=shape, stage_id=stage_id, variant=variant, subtype=subtype),
    )


# =============================================================================
# RoomSnapshot
# =============================================================================


class TestRoomSnapshot:

    def test_from_room_data(self):
        data = RoomData(shape=RoomShape.SHAPE_2x2, stage_id=4, variant=1031, subtype=2)
        snapshot = RoomSnapshot.from_room_data(data)
        assert snapshot == RoomSnapshot(shape=8, stage_id=4, variant=1031, subtype=2)

    def test_to_dict_uses_persisted_field_names(self):
        snapshot = RoomSnapshot(shape=1, stage_id=2, variant=3, subtype=4)
        assert snapshot.to_dict() == {"shape": 1, "stageID": 2, "variant": 3, "subType": 4}

    def test_from_dict(self):
        snapshot = RoomSnapshot.from_dict({"shape": 6, "stageID": 0, "variant": 12, "subType": 1})
        assert snapshot.shape == 6
        assert snapshot.subtype == 1

    def test_is_immutable(self):
        snapshot = RoomSnapshot(shape=1, stage_id=1, variant=1, subtype=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.shape = 2


# =============================================================================
# extract_floor
# =============================================================================


class TestExtractFloor:

    def test_skips_rooms_without_data(self):
        descriptors = [
            _room(45),
            _room(46, shape=RoomShape.SHAPE_1x2),
            RoomDescriptor(safe_grid_index=58),
            _room(71, variant=12),
            _room(84, subtype=3),
        ]
        floor = extract_floor(descriptors)
        assert len(floor) == 4
        assert "58" not in floor

    def test_keys_are_stringified_grid_indices(self):
        floor = extract_floor([_room(84), _room(7)])
        assert set(floor) == {"84", "7"}

    def test_snapshot_values(self):
        floor = extract_floor([_room(84, shape=RoomShape.SHAPE_LTL, stage_id=3, variant=5, subtype=1)])
        assert floor["84"] == RoomSnapshot(shape=9, stage_id=3, variant=5, subtype=1)

    def test_empty_floor(self):
        assert extract_floor([]) == {}
        assert extract_floor([RoomDescriptor(safe_grid_index=1)]) == {}

    def test_order_does_not_matter(self):
        rooms = [_room(1), _room(2, variant=9), _room(3)]
        assert extract_floor(rooms) == extract_floor(list(reversed(rooms)))
