"""
Core functionality for scanning, extracting, classifying and transforming images.
"""

from .scan_engine import FileScanner
from .ocr import OcrExtractor
from .classifier import ContentClassifier
from .transformer import ImageTransformer, CropAction, CropPlan, TransformOutcome, decide_crop
from .file_operations import QuarantineRouter, QUARANTINE_DIRNAME
from .pipeline import PipelineOrchestrator, RunStatistics, FileResult, FileState

__all__ = [
    "FileScanner",
    "OcrExtractor",
    "ContentClassifier",
    "ImageTransformer",
    "CropAction",
    "CropPlan",
    "TransformOutcome",
    "decide_crop",
    "QuarantineRouter",
    "QUARANTINE_DIRNAME",
    "PipelineOrchestrator",
    "RunStatistics",
    "FileResult",
    "FileState",
]
