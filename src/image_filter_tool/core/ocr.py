"""
OCR text extraction backed by Tesseract.

The engine configuration is fixed for every call: English, LSTM engine mode,
automatic page segmentation and a whitelist of ASCII letters and space.
Digits and punctuation never reach the classifier.
"""

import string
from pathlib import Path
from typing import Callable, Optional

import pytesseract
from PIL import Image

from ..errors import ExtractionError
from ..utils.log_utils import get_logger

logger = get_logger(__name__)

OCR_LANG = "eng"
OCR_ENGINE_MODE = 1
OCR_PAGE_SEGMENTATION_MODE = 3
OCR_CHAR_WHITELIST = " " + string.ascii_lowercase + string.ascii_uppercase

PREVIEW_LENGTH = 100


def tesseract_config() -> str:
    return (
        f'--oem {OCR_ENGINE_MODE} --psm {OCR_PAGE_SEGMENTATION_MODE} '
        f'-c "tessedit_char_whitelist={OCR_CHAR_WHITELIST}"'
    )


def tesseract_engine(path: Path) -> str:
    """Run Tesseract on the image at `path` and return the raw recognized text."""
    try:
        with Image.open(path) as img:
            return pytesseract.image_to_string(img, lang=OCR_LANG, config=tesseract_config())
    except (OSError, pytesseract.TesseractError) as err:
        raise ExtractionError(f"{path}: {err}") from err


def normalize_text(raw: str) -> str:
    """Collapse newlines into single spaces and trim surrounding whitespace."""
    return raw.replace("\r\n", " ").replace("\n", " ").strip()


def preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Shorten text for the console, marking truncation with an ellipsis."""
    return text[:limit] + ("..." if len(text) > limit else "")


class OcrExtractor:
    """Turns an image path into a single line of text, or "" when that fails."""

    def __init__(self, engine: Optional[Callable[[Path], str]] = None):
        self.engine = engine or tesseract_engine

    def extract(self, path: Path) -> str:
        try:
            raw = self.engine(path)
        except Exception as err:
            logger.warning("OCR error on %s: %s", path, err)
            return ""
        return normalize_text(raw or "")
