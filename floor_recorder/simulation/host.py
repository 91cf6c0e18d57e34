"""
Simulated Host - headless stand-in for the game engine.

Lets the recorder run outside the game, for dry runs and tests. The simulator
keeps the properties of the real engine that the recorder depends on:

- Events are delivered one at a time from a FIFO queue; handlers never nest.
- A new run fires POST_NEW_LEVEL for stage 1 on a random stage type, then
  POST_GAME_STARTED.
- Warping fires POST_NEW_LEVEL for the new floor.
- When no event is pending, a POST_RENDER tick is delivered.
- Room layouts are a pure function of (seed, stage, stage type), so recording
  the same seed twice gives the same data.
- Seed effects survive a "restart".

Usage:
    host = SimulatedHost(save_file=SaveFile("save1.dat"), max_runs=10)
    controller = RunController(host)
    controller.register()
    host.run()
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Set, Tuple

from ..content.game import Challenge, Difficulty, ModCallback, PlayerType, RoomShape, SeedEffect
from ..content.stages import (
    LevelStage,
    StageType,
    STAGE_TYPES_TO_SKIP,
    get_max_stage_type,
)
from ..host import HostEngine
from ..persistence.storage import SaveFile
from ..state.rooms import RoomData, RoomDescriptor

logger = logging.getLogger(__name__)

SEED_CHARACTERS = "ABCDEFGHJKLMNPQRSTWXYZ01234V6789"
GRID_WIDTH = 13
GRID_SIZE = GRID_WIDTH * GRID_WIDTH

MIN_ROOMS = 8
MAX_ROOMS = 20


def random_seed_string(rng: random.Random) -> str:
    """A start seed string in the engine's "XXXX XXXX" format."""
    chars = [rng.choice(SEED_CHARACTERS) for _ in range(8)]
    return "".join(chars[:4]) + " " + "".join(chars[4:])


def generate_rooms(
    seed: str,
    stage: int,
    stage_type: int,
    unloaded_room_chance: float = 0.1,
) -> List[RoomDescriptor]:
    """Deterministic room layout for one floor of one seed."""
    rng = random.Random(f"{seed}:{int(stage)}.{int(stage_type)}")
    count = rng.randint(MIN_ROOMS, MAX_ROOMS)
    indices = rng.sample(range(GRID_SIZE), count)
    shapes = list(RoomShape)

    rooms = []
    for index in sorted(indices):
        if rng.random() < unloaded_room_chance:
            rooms.append(RoomDescriptor(safe_grid_index=index))
            continue
        data = RoomData(
            shape=rng.choice(shapes),
            stage_id=int(stage) * 6 + int(stage_type),
            variant=rng.randint(0, 2000),
            subtype=rng.randint(0, 3),
        )
        rooms.append(RoomDescriptor(safe_grid_index=index, data=data))
    return rooms


def _first_stage_types() -> List[int]:
    max_type = get_max_stage_type(LevelStage.STAGE1_1)
    return [t for t in StageType if t <= max_type and t not in STAGE_TYPES_TO_SKIP]


class SimulatedHost(HostEngine):
    """In-memory engine with a single-threaded event queue."""

    def __init__(
        self,
        save_file: Optional[SaveFile] = None,
        rng_seed: Optional[int] = None,
        max_runs: Optional[int] = None,
        difficulty: int = Difficulty.NORMAL,
        challenge: int = Challenge.NULL,
        player_type: int = PlayerType.ISAAC,
        set_seed: bool = False,
        curses_prevented: bool = False,
        new_level_first: bool = True,
        unloaded_room_chance: float = 0.1,
    ):
        self.save_file = save_file
        self.rng = random.Random(rng_seed)
        self.max_runs = max_runs
        self.difficulty = difficulty
        self.challenge = challenge
        self.player_type = player_type
        self.set_seed = set_seed
        self.new_level_first = new_level_first
        self.unloaded_room_chance = unloaded_room_chance

        self.callbacks: Dict[ModCallback, List[Callable]] = {cb: [] for cb in ModCallback}
        self.events: Deque[Tuple[ModCallback, tuple]] = deque()
        self.seed_effects: Set[int] = set()
        if curses_prevented:
            self.seed_effects.add(SeedEffect.PREVENT_ALL_CURSES)

        self.start_seed: str = ""
        self.stage: int = LevelStage.STAGE1_1
        self.stage_type: int = StageType.ORIGINAL
        self.rooms: List[RoomDescriptor] = []

        self.runs_started = 0
        self.stopped = False
        self.debug_log: List[str] = []
        self.commands: List[str] = []
        self.warps: List[Tuple[int, int]] = []
        self._blob: Optional[str] = None

    # =========================================================================
    # Event loop
    # =========================================================================

    def add_callback(self, callback: ModCallback, fn: Callable) -> None:
        self.callbacks[callback].append(fn)

    def fire(self, callback: ModCallback, *args) -> None:
        for fn in self.callbacks[callback]:
            fn(*args)

    def start_run(self, continued: bool = False) -> None:
        """Begin a new run on a fresh random seed."""
        if self.max_runs is not None and self.runs_started >= self.max_runs:
            logger.info(f"Reached {self.max_runs} runs; stopping")
            self.stopped = True
            return

        self.runs_started += 1
        self.start_seed = random_seed_string(self.rng)
        self._load_floor(LevelStage.STAGE1_1, self.rng.choice(_first_stage_types()))
        logger.debug(f"Run #{self.runs_started} started on seed {self.start_seed}")

        if self.new_level_first:
            self.events.append((ModCallback.POST_NEW_LEVEL, ()))
            self.events.append((ModCallback.POST_GAME_STARTED, (continued,)))
        else:
            self.events.append((ModCallback.POST_GAME_STARTED, (continued,)))
            self.events.append((ModCallback.POST_NEW_LEVEL, ()))

    def step(self) -> ModCallback:
        """Deliver the next queued event, or a render tick if none is queued."""
        if self.events:
            callback, args = self.events.popleft()
        else:
            callback, args = ModCallback.POST_RENDER, ()
        self.fire(callback, *args)
        return callback

    def run(
        self,
        until: Optional[Callable[[], bool]] = None,
        max_events: int = 1_000_000,
    ) -> int:
        """
        Start a run and pump events until `until()` returns True, the host
        stops itself after `max_runs` runs, or `max_events` events are delivered.

        Returns:
            Number of events delivered.
        """
        if self.runs_started == 0:
            self.start_run()

        delivered = 0
        while not self.stopped and delivered < max_events:
            if until is not None and until():
                self.stopped = True
                break
            self.step()
            delivered += 1

        if not self.stopped:
            logger.warning(f"Stopped after {delivered} events with runs still pending")
        return delivered

    # =========================================================================
    # Queries
    # =========================================================================

    def get_stage(self) -> int:
        return self.stage

    def get_stage_type(self) -> int:
        return self.stage_type

    def get_start_seed_string(self) -> str:
        return self.start_seed

    def get_rooms(self) -> List[RoomDescriptor]:
        return list(self.rooms)

    def get_difficulty(self) -> int:
        return self.difficulty

    def get_challenge(self) -> int:
        return self.challenge

    def get_player_type(self) -> int:
        return self.player_type

    def on_set_seed(self) -> bool:
        return self.set_seed

    def has_seed_effect(self, effect: int) -> bool:
        return effect in self.seed_effects

    def add_seed_effect(self, effect: int) -> None:
        self.seed_effects.add(effect)

    # =========================================================================
    # Commands
    # =========================================================================

    def go_to_stage(self, stage: int, stage_type: int) -> None:
        self.warps.append((int(stage), int(stage_type)))
        self._load_floor(stage, stage_type)
        self.events.append((ModCallback.POST_NEW_LEVEL, ()))

    def execute_command(self, command: str) -> None:
        self.commands.append(command)
        if command == "restart":
            self.events.clear()
            self.start_run()
        else:
            raise ValueError(f"Unknown console command: {command!r}")

    def debug_string(self, message: str) -> None:
        self.debug_log.append(message)

    def save_data(self, data: str) -> None:
        if self.save_file is not None:
            self.save_file.write(data)
        else:
            self._blob = data

    def load_data(self) -> Optional[str]:
        if self.save_file is not None:
            return self.save_file.read()
        return self._blob

    def _load_floor(self, stage: int, stage_type: int) -> None:
        self.stage = stage
        self.stage_type = stage_type
        self.rooms = generate_rooms(self.start_seed, stage, stage_type, self.unloaded_room_chance)
