import os
from pathlib import Path
from typing import Iterable, Iterator

from ..errors import ScanError

IMAGE_EXTS = {'.jpg', '.jpeg', '.png', '.gif', '.bmp'}


def is_image(path: Path) -> bool:
    """Return True if the file extension is on the image allow-list (case-insensitive)."""
    return path.suffix.lower() in IMAGE_EXTS


def iter_files(root: Path, exclude: Iterable[Path] = ()) -> Iterator[Path]:
    """
    Recursively yield file paths under `root` using os.scandir and an explicit stack.

    Directories listed in `exclude` are never descended into. Symlinks are not
    followed. Any error while listing a directory raises ScanError.
    """
    skipped = {os.path.normcase(os.path.abspath(p)) for p in exclude}
    stack = [Path(root)]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as err:
            raise ScanError(f"Cannot read directory {current}: {err}") from err
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if os.path.normcase(os.path.abspath(entry.path)) in skipped:
                    continue
                stack.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                yield Path(entry.path)
