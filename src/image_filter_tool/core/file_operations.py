#!/usr/bin/env python3
"""
file_operations.py: Quarantine moves for flagged images.

Flagged images are copied into a flat quarantine folder under their base name
and then removed from the source tree. A file already present under the same
name in the quarantine folder is overwritten.
"""

import shutil
from pathlib import Path

from ..errors import RouterError
from ..utils.log_utils import get_logger

logger = get_logger(__name__)

QUARANTINE_DIRNAME = 'dacy'


class QuarantineRouter:
    """Moves flagged images into the quarantine folder."""

    def __init__(self, quarantine_dir: Path):
        self.quarantine_dir = Path(quarantine_dir)

    def ensure_folder(self) -> Path:
        """Create the quarantine folder if it does not exist yet."""
        self.quarantine_dir.mkdir(parents=True, exist_ok=True)
        return self.quarantine_dir

    def destination_for(self, src_path: Path) -> Path:
        return self.quarantine_dir / Path(src_path).name

    def quarantine(self, src_path: Path) -> bool:
        """
        Copy `src_path` into quarantine, then delete the source.

        Returns True on success. On failure the source stays where it was and
        no copy is left behind.
        """
        src = Path(src_path)
        dest = self.destination_for(src)
        try:
            self._copy(src, dest)
            self._remove_source(src, dest)
        except RouterError as err:
            logger.error("Error moving file %s: %s", src, err)
            return False
        logger.info("Moved %s -> %s", src, dest)
        return True

    @staticmethod
    def _copy(src: Path, dest: Path) -> None:
        try:
            shutil.copyfile(src, dest)
        except OSError as err:
            raise RouterError(f"copy to {dest} failed: {err}") from err

    @staticmethod
    def _remove_source(src: Path, dest: Path) -> None:
        try:
            src.unlink()
        except OSError as err:
            dest.unlink(missing_ok=True)
            raise RouterError(f"delete of source failed: {err}") from err
