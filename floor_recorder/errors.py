"""
Recorder exceptions.

Everything raised here is fatal for the current process: the event handlers
let these propagate so the host aborts with a diagnostic instead of recording
bad data.
"""


class RecorderError(Exception):
    """Base class for floor recorder errors."""


class IneligibleRunError(RecorderError):
    """The current run can never produce reproducible floor layouts."""


class RecorderNotInitializedError(RecorderError):
    """Tried to persist data before the recorder was set up."""


class DuplicateSeedError(RecorderError):
    """A seed was folded into the dataset more than once."""

    def __init__(self, seed: str):
        super().__init__(f"Seed {seed!r} was already recorded.")
        self.seed = seed


class SaveDataError(RecorderError):
    """The persisted blob could not be decoded into a dataset."""
