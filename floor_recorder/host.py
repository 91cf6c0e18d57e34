"""
Host engine boundary.

Everything the recorder needs from the running game: the query surface it reads
the current floor from, the command surface it drives the game with, and
callback registration. Implemented by the live game glue and by
simulation.host.SimulatedHost.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .content.game import ModCallback
from .state.rooms import RoomDescriptor


class HostEngine(ABC):
    """The subset of the engine API the recorder uses."""

    # === Callbacks ===

    @abstractmethod
    def add_callback(self, callback: ModCallback, fn: Callable) -> None:
        """Register `fn` to be called when `callback` fires."""

    # === Queries ===

    @abstractmethod
    def get_stage(self) -> int:
        ...

    @abstractmethod
    def get_stage_type(self) -> int:
        ...

    @abstractmethod
    def get_start_seed_string(self) -> str:
        ...

    @abstractmethod
    def get_rooms(self) -> List[RoomDescriptor]:
        """Room descriptors for the floor that is currently loaded."""

    @abstractmethod
    def get_difficulty(self) -> int:
        ...

    @abstractmethod
    def get_challenge(self) -> int:
        ...

    @abstractmethod
    def get_player_type(self) -> int:
        ...

    @abstractmethod
    def on_set_seed(self) -> bool:
        """True if the run was started from a seed the player typed in."""

    @abstractmethod
    def has_seed_effect(self, effect: int) -> bool:
        ...

    @abstractmethod
    def add_seed_effect(self, effect: int) -> None:
        ...

    # === Commands ===

    @abstractmethod
    def go_to_stage(self, stage: int, stage_type: int) -> None:
        """Warp to the given floor. The engine fires POST_NEW_LEVEL afterwards."""

    @abstractmethod
    def execute_command(self, command: str) -> None:
        """Run a console command such as "restart"."""

    @abstractmethod
    def debug_string(self, message: str) -> None:
        """Write a line to the engine's log."""

    @abstractmethod
    def save_data(self, data: str) -> None:
        """Replace the mod's save blob."""

    @abstractmethod
    def load_data(self) -> Optional[str]:
        """Read the mod's save blob, or None if nothing was saved."""
