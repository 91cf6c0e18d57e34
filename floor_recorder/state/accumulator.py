"""
Seed accumulator.

Holds the floors recorded so far for the seed being explored and the
long-lived seed -> floors dataset. A seed only reaches the dataset once every
one of its floors has been recorded; folding is the only place the dataset is
mutated.
"""

import logging
from typing import Optional, Set

from ..errors import DuplicateSeedError
from .cursor import FloorCursor
from .rooms import Dataset, FloorRecord, SeedRecord

logger = logging.getLogger(__name__)


class SeedAccumulator:
    """In-progress seed record plus the dataset it is folded into."""

    def __init__(self, dataset: Optional[Dataset] = None):
        self.floors: SeedRecord = {}
        self.dataset: Dataset = {}
        # Seeds that came from a previous process lifetime
        self._loaded_seeds: Set[str] = set()
        if dataset:
            self.load(dataset)

    @property
    def seeds_recorded(self) -> int:
        return len(self.dataset)

    def load(self, dataset: Dataset) -> None:
        """Merge previously persisted seeds into the dataset."""
        for seed, floors in dataset.items():
            if seed not in self.dataset:
                self.dataset[seed] = floors
                self._loaded_seeds.add(seed)
        logger.info(f"Loaded {len(dataset)} previously recorded seeds")

    def reset(self) -> None:
        """Drop the floors recorded for the current attempt."""
        self.floors = {}

    def record_floor(self, cursor: FloorCursor, floor: FloorRecord) -> None:
        if cursor.key in self.floors:
            logger.debug(f"Overwriting floor {cursor.key}")
        self.floors[cursor.key] = floor

    def fold_into_dataset(self, seed: str) -> bool:
        """
        Move the current seed record into the dataset.

        Returns:
            True if the seed was added, False if it was skipped because it was
            already loaded from a previous lifetime.

        Raises:
            DuplicateSeedError: if the seed was already folded by this process.
        """
        if seed in self.dataset:
            if seed not in self._loaded_seeds:
                raise DuplicateSeedError(seed)
            logger.warning(f"Seed {seed} was recorded by a previous session; keeping the stored copy")
            self.floors = {}
            return False

        self.dataset[seed] = self.floors
        self.floors = {}
        return True
