"""
Utility functions and helpers.
"""

from .log_utils import configure_logging, get_logger
from .utils import IMAGE_EXTS, is_image, iter_files

__all__ = ["configure_logging", "get_logger", "IMAGE_EXTS", "is_image", "iter_files"]
