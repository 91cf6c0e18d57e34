"""
Recorder configuration.

The two tunables are the number of completed seeds between disk writes and
whether diagnostics are printed. Both can be overridden from the environment
(or a .env file next to the project):

    FLOOR_RECORDER_SEEDS_PER_WRITE=100
    FLOOR_RECORDER_VERBOSE=1
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

MOD_NAME = "isaac-floor-recorder"
VERBOSE = True
NUMBER_OF_SEEDS_BEFORE_WRITING_TO_DISK = 100

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class RecorderConfig:
    """Settings for a recorder instance."""

    seeds_per_write: int = NUMBER_OF_SEEDS_BEFORE_WRITING_TO_DISK
    verbose: bool = VERBOSE
    mod_name: str = MOD_NAME

    def __post_init__(self):
        if self.seeds_per_write < 1:
            raise ValueError(f"seeds_per_write must be at least 1, got {self.seeds_per_write}")

    @classmethod
    def from_env(cls) -> 'RecorderConfig':
        """Build a config from FLOOR_RECORDER_* environment variables."""
        load_dotenv()

        seeds_per_write = NUMBER_OF_SEEDS_BEFORE_WRITING_TO_DISK
        raw = os.environ.get("FLOOR_RECORDER_SEEDS_PER_WRITE")
        if raw:
            try:
                seeds_per_write = int(raw)
            except ValueError:
                raise ValueError(f"FLOOR_RECORDER_SEEDS_PER_WRITE must be an integer, got {raw!r}")

        verbose = VERBOSE
        raw = os.environ.get("FLOOR_RECORDER_VERBOSE")
        if raw:
            verbose = _parse_bool("FLOOR_RECORDER_VERBOSE", raw)

        return cls(seeds_per_write=seeds_per_write, verbose=verbose)
