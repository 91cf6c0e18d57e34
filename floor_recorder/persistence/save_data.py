"""
Dataset <-> save blob encoding.

The blob is a single JSON object:

    {
      "<seed>": {
        "<stage>.<stage_type>": {
          "<grid index>": {"shape": 1, "stageID": 1, "variant": 0, "subType": 0}
        }
      }
    }

Every key is text so the structure stays valid JSON even where the natural key
is numeric.
"""

import json
from typing import Any, Dict, Optional

from ..errors import SaveDataError
from ..state.rooms import Dataset, FloorRecord, RoomSnapshot, SeedRecord


def dataset_to_json(dataset: Dataset) -> Dict[str, Any]:
    """Convert a dataset to plain JSON-serializable dicts."""
    return {
        seed: {
            floor: {index: room.to_dict() for index, room in rooms.items()}
            for floor, rooms in floors.items()
        }
        for seed, floors in dataset.items()
    }


def encode_dataset(dataset: Dataset) -> str:
    """Encode the whole dataset into a save blob."""
    return json.dumps(dataset_to_json(dataset), separators=(",", ":"))


def decode_dataset(blob: Optional[str]) -> Dataset:
    """
    Decode a save blob into a dataset.

    Args:
        blob: Raw save contents; None or blank means nothing was saved yet

    Returns:
        The decoded dataset

    Raises:
        SaveDataError: if the blob is not a dataset
    """
    if blob is None or not blob.strip():
        return {}

    try:
        raw = json.loads(blob)
    except json.JSONDecodeError as e:
        raise SaveDataError(f"Save data is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise SaveDataError("Save data malformed: top level is not an object")

    dataset: Dataset = {}
    for seed, floors in raw.items():
        if not isinstance(floors, dict):
            raise SaveDataError(f"Save data malformed: seed {seed} is not an object")
        seed_record: SeedRecord = {}
        for floor, rooms in floors.items():
            if not isinstance(rooms, dict):
                raise SaveDataError(f"Save data malformed: floor {seed}/{floor} is not an object")
            floor_record: FloorRecord = {}
            for index, room in rooms.items():
                try:
                    floor_record[index] = RoomSnapshot.from_dict(room)
                except (KeyError, TypeError, ValueError) as e:
                    raise SaveDataError(f"Save data malformed: room {seed}/{floor}/{index}: {e}") from e
            seed_record[floor] = floor_record
        dataset[seed] = seed_record
    return dataset
