#!/usr/bin/env python3
"""
transformer.py: Geometry-based crop decisions for images that pass moderation.

Landscape and square images lose their bottom part (only the top `top_ratio`
of the height is kept). Portrait images are cut to the square at their top.
The crop is written next to the original as `<name>.tmp` and renamed over it,
so the canonical path always holds either the old or the new image.

Running the transformer twice on the same file crops it twice.
"""

import math
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from ..errors import TransformError
from ..utils.log_utils import get_logger

logger = get_logger(__name__)

DEFAULT_TOP_RATIO = 0.7
TMP_SUFFIX = ".tmp"


class CropAction(Enum):
    TOP_CROP = "top_crop"
    SQUARE_CROP = "square_crop"
    DELETE = "delete"
    NONE = "none"


class TransformOutcome(Enum):
    CROPPED = "cropped"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass(frozen=True)
class CropPlan:
    action: CropAction
    box: Optional[Tuple[int, int, int, int]] = None


def decide_crop(width: int, height: int, top_ratio: float = DEFAULT_TOP_RATIO,
                max_aspect_ratio: Optional[float] = None) -> CropPlan:
    """
    Decide what to do with an image of the given size.

    Args:
        width: Pixel width.
        height: Pixel height.
        top_ratio: Fraction of the height kept for landscape/square images.
        max_aspect_ratio: If set, images whose long side exceeds the short side
            by more than this factor are deleted.

    Returns:
        CropPlan with the action and, for crops, the Pillow box (left, top, right, bottom).
    """
    if width <= 0 or height <= 0:
        return CropPlan(CropAction.NONE)
    if max_aspect_ratio is not None and max(width, height) / min(width, height) > max_aspect_ratio:
        return CropPlan(CropAction.DELETE)
    if height <= width:
        new_height = math.floor(height * top_ratio)
        if new_height < 1:
            return CropPlan(CropAction.NONE)
        return CropPlan(CropAction.TOP_CROP, (0, 0, width, new_height))
    return CropPlan(CropAction.SQUARE_CROP, (0, 0, width, width))


def read_size(path: Path) -> Optional[Tuple[int, int]]:
    """Return (width, height) from the image header, or None if it cannot be read."""
    try:
        with Image.open(path) as img:
            width, height = img.size
    except Exception as err:
        logger.warning("Cannot read image metadata of %s: %s", path, err)
        return None
    if not width or not height:
        return None
    return width, height


class ImageTransformer:
    """Applies the crop plan of each image in place."""

    def __init__(self, top_ratio: float = DEFAULT_TOP_RATIO, max_aspect_ratio: Optional[float] = None):
        self.top_ratio = top_ratio
        self.max_aspect_ratio = max_aspect_ratio

    def transform(self, path: Path) -> TransformOutcome:
        path = Path(path)
        size = read_size(path)
        if size is None:
            return TransformOutcome.UNCHANGED

        plan = decide_crop(*size, top_ratio=self.top_ratio, max_aspect_ratio=self.max_aspect_ratio)
        try:
            if plan.action is CropAction.DELETE:
                self._delete(path)
                logger.info("Deleted %s (aspect ratio %dx%d)", path, *size)
                return TransformOutcome.DELETED
            if plan.action is CropAction.NONE:
                return TransformOutcome.UNCHANGED
            self._write_crop(path, plan.box)
        except TransformError as err:
            logger.error("Image processing error on %s: %s", path, err)
            return TransformOutcome.FAILED

        logger.info("Cropped %s (%s) to %dx%d", path, plan.action.value, plan.box[2], plan.box[3])
        return TransformOutcome.CROPPED

    @staticmethod
    def _write_crop(path: Path, box: Tuple[int, int, int, int]) -> None:
        tmp_path = path.with_name(path.name + TMP_SUFFIX)
        try:
            with Image.open(path) as img:
                fmt = img.format
                cropped = img.crop(box)
                cropped.save(tmp_path, format=fmt)
            os.replace(tmp_path, path)
        except Exception as err:
            tmp_path.unlink(missing_ok=True)
            raise TransformError(str(err)) from err

    @staticmethod
    def _delete(path: Path) -> None:
        try:
            path.unlink()
        except OSError as err:
            raise TransformError(str(err)) from err
