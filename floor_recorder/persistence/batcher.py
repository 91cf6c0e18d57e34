"""
Persistence batcher.

Writing the dataset is expensive relative to visiting a floor, so the whole
dataset is only written once every `interval` completed seeds. On an abnormal
exit up to `interval - 1` completed seeds are lost.
"""

import logging
from typing import Optional

from ..errors import RecorderNotInitializedError
from ..state.rooms import Dataset
from .save_data import encode_dataset

logger = logging.getLogger(__name__)


class SaveBatcher:
    """
    Counts completed seeds and writes the dataset every `interval` seeds.

    `storage` is anything with a `save_data(blob: str)` method (normally the
    host engine). It may be bound after construction.
    """

    def __init__(self, interval: int, storage: Optional[object] = None):
        if interval < 1:
            raise ValueError(f"Write interval must be at least 1, got {interval}")
        self.interval = interval
        self.storage = storage
        self.seeds_completed = 0
        self.writes = 0

    def seed_completed(self, dataset: Dataset) -> bool:
        """
        Register one completed seed.

        Returns:
            True if the dataset was written to storage.
        """
        self.seeds_completed += 1
        if self.seeds_completed % self.interval != 0:
            return False
        self.write(dataset)
        return True

    def write(self, dataset: Dataset) -> None:
        """Serialize and write the entire dataset."""
        if self.storage is None:
            raise RecorderNotInitializedError("Recorder was not initialized; no save storage is bound.")
        blob = encode_dataset(dataset)
        self.storage.save_data(blob)
        self.writes += 1
        logger.info(f"Wrote {len(dataset)} seeds to storage (write #{self.writes})")

    def flush(self, dataset: Dataset) -> bool:
        """Write if any seed completed since the last write."""
        if self.seeds_completed % self.interval == 0:
            return False
        self.write(dataset)
        return True
