"""
File-backed save blob, equivalent to the engine's per-mod "save#.dat" file.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class SaveFile:
    """A single opaque text blob stored on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Optional[str]:
        """Return the stored blob, or None if nothing was written yet."""
        if not self.path.exists():
            logger.debug(f"Save file does not exist: {self.path}")
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, blob: str) -> None:
        """Replace the stored blob atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(blob)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, self.path)
        logger.debug(f"Wrote {len(blob)} bytes to {self.path}")
