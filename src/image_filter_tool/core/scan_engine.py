#!/usr/bin/env python3
"""
scan_engine.py: Directory scanning for image-filter-tool.

Provides FileScanner, which walks the source tree, keeps only files on the
image allow-list and never returns anything from the quarantine folder.
A directory that cannot be read aborts the scan with ScanError.
"""

from pathlib import Path
from collections import Counter
from typing import List, Optional

from ..utils.utils import iter_files, is_image
from ..utils.log_utils import get_logger

logger = get_logger(__name__)


class FileScanner:
    """
    Lists the images to process under a root folder, in traversal order.
    """

    def __init__(self, root: Path, quarantine_dir: Optional[Path] = None):
        self.root = Path(root)
        self.quarantine_dir = Path(quarantine_dir) if quarantine_dir is not None else None
        self.ext_counter: Counter[str] = Counter()
        self.non_image_count: int = 0

    def scan(self) -> List[Path]:
        """Return every image path under root, excluding the quarantine folder."""
        self.ext_counter.clear()
        self.non_image_count = 0
        exclude = [self.quarantine_dir] if self.quarantine_dir is not None else []
        image_paths: List[Path] = []
        for path in iter_files(self.root, exclude=exclude):
            if is_image(path):
                image_paths.append(path)
                self.ext_counter[path.suffix.lower()] += 1
            else:
                self.non_image_count += 1
        logger.debug(
            "Scanned %s: %d images, %d other files",
            self.root, len(image_paths), self.non_image_count,
        )
        return image_paths
