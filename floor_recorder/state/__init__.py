"""
State module - in-memory recording state.

Contains:
- Room snapshots and floor extraction
- The (stage, stage type) traversal sequencer
- The per-seed accumulator and the dataset it folds into
"""

from .rooms import (
    RoomData,
    RoomDescriptor,
    RoomSnapshot,
    FloorRecord,
    SeedRecord,
    Dataset,
    extract_floor,
)
from .cursor import FloorCursor, FloorSequencer
from .accumulator import SeedAccumulator
