"""
Isaac Floor Recorder

Walks every floor of every seed it is given, records the static room layout of
each floor, and persists the accumulated seed -> floor -> room dataset in
batches.

Subsystems:
- content: Stage / stage type tables and engine enums
- state: Room snapshots, traversal sequencer, seed accumulator
- persistence: Save blob format, batched writes, file storage
- handlers: RunController, the engine callback state machine
- simulation: SimulatedHost, a headless engine for dry runs

Usage:
    from floor_recorder import RunController, RecorderConfig

    controller = RunController(host, RecorderConfig.from_env())
    controller.register()
"""

__version__ = "0.1.0"

from .config import RecorderConfig, MOD_NAME, VERBOSE, NUMBER_OF_SEEDS_BEFORE_WRITING_TO_DISK
from .errors import (
    RecorderError,
    IneligibleRunError,
    RecorderNotInitializedError,
    DuplicateSeedError,
    SaveDataError,
)
from .content.stages import LevelStage, StageType, iter_floors, validate_stage_tables
from .state.rooms import RoomData, RoomDescriptor, RoomSnapshot, extract_floor
from .state.cursor import FloorCursor, FloorSequencer
from .state.accumulator import SeedAccumulator
from .persistence.batcher import SaveBatcher
from .persistence.save_data import encode_dataset, decode_dataset
from .persistence.storage import SaveFile
from .host import HostEngine
from .handlers.run_controller import RunController, RunPhase
