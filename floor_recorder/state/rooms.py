"""
Room snapshots - static layout of the rooms on one floor.

The engine hands out one room descriptor per room on the current floor. Rooms
that have not been generated yet carry no layout data and are left out of the
snapshot.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class RoomData:
    """Layout data the engine attaches to a generated room."""
    shape: int
    stage_id: int
    variant: int
    subtype: int


@dataclass(frozen=True)
class RoomDescriptor:
    """Engine reference to one room on the current floor."""
    safe_grid_index: int
    data: Optional[RoomData] = None


@dataclass(frozen=True)
class RoomSnapshot:
    """Static shape/identity attributes of a room, as persisted."""
    shape: int
    stage_id: int
    variant: int
    subtype: int

    @classmethod
    def from_room_data(cls, data: RoomData) -> 'RoomSnapshot':
        return cls(
            shape=int(data.shape),
            stage_id=int(data.stage_id),
            variant=int(data.variant),
            subtype=int(data.subtype),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "shape": self.shape,
            "stageID": self.stage_id,
            "variant": self.variant,
            "subType": self.subtype,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoomSnapshot':
        return cls(
            shape=int(data["shape"]),
            stage_id=int(data["stageID"]),
            variant=int(data["variant"]),
            subtype=int(data["subType"]),
        )


# Indexed by grid index (stringified so the map stays valid JSON)
FloorRecord = Dict[str, RoomSnapshot]

# Indexed by floor key "{stage}.{stage_type}"
SeedRecord = Dict[str, FloorRecord]

# Indexed by start seed string
Dataset = Dict[str, SeedRecord]


def extract_floor(descriptors: Iterable[RoomDescriptor]) -> FloorRecord:
    """
    Build the floor record for the currently loaded floor.

    Args:
        descriptors: Room descriptors reported by the engine

    Returns:
        Mapping of stringified grid index -> RoomSnapshot
    """
    rooms: FloorRecord = {}
    for room_desc in descriptors:
        if room_desc.data is None:
            continue
        rooms[str(room_desc.safe_grid_index)] = RoomSnapshot.from_room_data(room_desc.data)
    return rooms
