"""
Run Controller - drives the recorder from engine callbacks.

Lifecycle of one seed:

    AWAITING_RUN --game started--> VALIDATING --eligible--> EXPLORING
         ^                             |                        |
         |                 curses active: add effect,           | every floor recorded:
         |                 restart next frame                   | fold seed, maybe write,
         +-----------------------------+------------------------+ restart next frame

Restarts are only flagged inside the handlers; the "restart" command itself
is issued from the next POST_RENDER, where the engine accepts it.

Engine callback order on a fresh run is POST_NEW_LEVEL (for a randomly chosen
stage type) followed by POST_GAME_STARTED. The first level of a new seed is
recognised by its start seed string differing from the last one seen, and is
never recorded.
"""

import logging
from enum import Enum, auto
from typing import Optional

from ..config import RecorderConfig
from ..content.game import Challenge, Difficulty, ModCallback, PlayerType, SeedEffect
from ..errors import IneligibleRunError
from ..host import HostEngine
from ..persistence.batcher import SaveBatcher
from ..persistence.save_data import decode_dataset
from ..state.accumulator import SeedAccumulator
from ..state.cursor import FloorSequencer
from ..state.rooms import Dataset, extract_floor

logger = logging.getLogger(__name__)


class RunPhase(Enum):
    """Where the controller is in the lifecycle of a run."""
    AWAITING_RUN = auto()   # No eligible run in progress
    VALIDATING = auto()     # Game start is being checked
    EXPLORING = auto()      # Warping through the floors of the current seed


class RunController:
    """
    Owns all recording state for the process.

    Constructed once at startup with the host engine; `register()` hooks the
    three engine callbacks up to it.

    Usage:
        controller = RunController(host, RecorderConfig.from_env())
        controller.register()
    """

    def __init__(
        self,
        host: HostEngine,
        config: Optional[RecorderConfig] = None,
        load_existing: bool = True,
    ):
        self.host = host
        self.config = config or RecorderConfig()

        self.sequencer = FloorSequencer()
        self.accumulator = SeedAccumulator()
        self.batcher = SaveBatcher(self.config.seeds_per_write, storage=host)

        self.phase = RunPhase.AWAITING_RUN
        self.restart_pending = False
        self.current_start_seed: Optional[str] = None

        if load_existing:
            existing = decode_dataset(host.load_data())
            if existing:
                self.accumulator.load(existing)

    @property
    def dataset(self) -> Dataset:
        return self.accumulator.dataset

    @property
    def seeds_recorded(self) -> int:
        return self.accumulator.seeds_recorded

    def register(self) -> None:
        self.host.add_callback(ModCallback.POST_RENDER, self.post_render)
        self.host.add_callback(ModCallback.POST_GAME_STARTED, self.post_game_started)
        self.host.add_callback(ModCallback.POST_NEW_LEVEL, self.post_new_level)
        logger.info(f"{self.config.mod_name} registered (seeds per write: {self.config.seeds_per_write})")

    # =========================================================================
    # Callbacks
    # =========================================================================

    def post_render(self) -> None:
        if self.restart_pending:
            self.restart_pending = False
            self.host.execute_command("restart")

    def post_game_started(self, continued: bool) -> None:
        self._diagnostic(f"MC_POST_GAME_STARTED - {self.host.get_start_seed_string()}")

        self.phase = RunPhase.VALIDATING
        if not self.validate_run(continued):
            self.phase = RunPhase.AWAITING_RUN
            return

        self.accumulator.reset()
        self.sequencer.reset()
        self.phase = RunPhase.EXPLORING
        self._go_to_cursor()

    def post_new_level(self) -> None:
        self._diagnostic(f"MC_POST_NEW_LEVEL - {self.host.get_stage()}.{self.host.get_stage_type()}")

        start_seed = self.host.get_start_seed_string()

        # The first level of a seed is on a randomly selected stage type
        if start_seed != self.current_start_seed:
            self.current_start_seed = start_seed
            return

        if self.phase is not RunPhase.EXPLORING:
            logger.debug(f"Ignoring level outside of exploration (phase={self.phase.name})")
            return

        self.record_floor()
        self.move_to_next_floor()

    # =========================================================================
    # Run validation
    # =========================================================================

    def validate_run(self, continued: bool) -> bool:
        """
        Check that the run can be recorded.

        Returns:
            False if curses had to be disabled (a restart is pending),
            True if exploration can start.

        Raises:
            IneligibleRunError: for runs that can never be recorded.
        """
        name = self.config.mod_name

        if continued:
            self._fail(f"The {name} mod will not work when continuing a run.")

        if self.host.on_set_seed():
            self._fail(f"The {name} mod will not work on set seeds.")

        if self.host.get_difficulty() != Difficulty.NORMAL:
            self._fail(f"The {name} mod will not work on non-normal difficulties.")

        if self.host.get_challenge() != Challenge.NULL:
            self._fail(f"The {name} mod will not work on challenges.")

        if self.host.get_player_type() != PlayerType.ISAAC:
            self._fail(f"The {name} mod will not work on characters other than Isaac.")

        if not self.host.has_seed_effect(SeedEffect.PREVENT_ALL_CURSES):
            self.host.add_seed_effect(SeedEffect.PREVENT_ALL_CURSES)
            self.restart_on_next_frame()
            logger.info("Disabling curses and restarting the run.")
            self.host.debug_string("Disabling curses and restarting the run.")
            return False

        return True

    # =========================================================================
    # Recording
    # =========================================================================

    def record_floor(self) -> None:
        cursor = self.sequencer.cursor
        stage, stage_type = self.host.get_stage(), self.host.get_stage_type()
        if (stage, stage_type) != (cursor.stage, cursor.stage_type):
            logger.warning(f"Engine reports floor {stage}.{stage_type} while recording {cursor}")

        floor = extract_floor(self.host.get_rooms())
        self.accumulator.record_floor(cursor, floor)
        logger.debug(f"Recorded floor {cursor} ({len(floor)} rooms)")

    def move_to_next_floor(self) -> None:
        if self.sequencer.advance_stage_type():
            self.complete_seed()
            return

        self._diagnostic(f"Going to stage: {self.sequencer.cursor}")
        self._go_to_cursor()

    def complete_seed(self) -> None:
        """Fold the finished seed into the dataset and restart for the next one."""
        start_seed = self.host.get_start_seed_string()

        if self.accumulator.fold_into_dataset(start_seed):
            self._diagnostic(f"Recorded seed: {start_seed}")
            self._diagnostic(f"Total seeds: {self.seeds_recorded}")

            # Writing data to the disk is expensive, so only do it every N seeds
            if self.batcher.seed_completed(self.dataset):
                self._diagnostic('Recorded data to the "save#.dat" file.')

        self.phase = RunPhase.AWAITING_RUN
        self.restart_on_next_frame()

    def flush(self) -> bool:
        """Write any seeds completed since the last batched write."""
        return self.batcher.flush(self.dataset)

    def restart_on_next_frame(self) -> None:
        self.restart_pending = True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _go_to_cursor(self) -> None:
        cursor = self.sequencer.cursor
        self.host.go_to_stage(cursor.stage, cursor.stage_type)

    def _diagnostic(self, message: str) -> None:
        logger.debug(message)
        if self.config.verbose:
            self.host.debug_string(message)

    def _fail(self, message: str) -> None:
        logger.error(message)
        self.host.debug_string(message)
        self.phase = RunPhase.AWAITING_RUN
        raise IneligibleRunError(message)
