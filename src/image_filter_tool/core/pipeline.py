#!/usr/bin/env python3
"""
pipeline.py: Per-file orchestration for image-filter-tool.

Each image goes through
    DISCOVERED -> EXTRACTED -> CLASSIFIED -> QUARANTINED | TRANSFORMED
with a shortcut to SKIPPED when OCR yields no text. Files are handled one at a
time in scan order; the effects on one file are complete before the next one
starts. An exception while handling a single file is logged and recorded, and
the run continues. Errors before the loop (folder creation, scanning) abort
the run.
"""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .classifier import ContentClassifier
from .file_operations import QuarantineRouter
from .ocr import OcrExtractor, preview
from .scan_engine import FileScanner
from .transformer import ImageTransformer, TransformOutcome
from ..utils.log_utils import get_logger

logger = get_logger(__name__)


class FileState(Enum):
    DISCOVERED = "discovered"
    EXTRACTED = "extracted"
    CLASSIFIED = "classified"
    QUARANTINED = "quarantined"
    TRANSFORMED = "transformed"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass
class FileResult:
    """Final state of one image after the run."""
    path: Path
    state: FileState = FileState.DISCOVERED
    text_preview: str = ""
    flagged: Optional[bool] = None
    outcome: Optional[TransformOutcome] = None
    processing_time: float = 0.0
    error: Optional[str] = None


@dataclass
class RunStatistics:
    """Counters for a single run, returned by PipelineOrchestrator.run()."""
    found: int = 0
    processed: int = 0
    quarantined: int = 0
    transformed: int = 0
    unchanged: int = 0
    skipped: int = 0
    errors: int = 0
    results: List[FileResult] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.results.append(result)
        if result.flagged is not None:
            self.processed += 1
        if result.state is FileState.QUARANTINED:
            self.quarantined += 1
        elif result.state is FileState.TRANSFORMED:
            if result.outcome in (TransformOutcome.CROPPED, TransformOutcome.DELETED):
                self.transformed += 1
            else:
                self.unchanged += 1
        elif result.state is FileState.SKIPPED:
            self.skipped += 1
        elif result.state is FileState.ERROR:
            self.errors += 1

    def summary(self) -> str:
        return (
            f"Finished processing. Found {self.found} images, processed {self.processed}, "
            f"filtered {self.quarantined} images containing sensitive content "
            f"({self.transformed} transformed, {self.unchanged} left unchanged, {self.skipped} skipped, {self.errors} errors)."
        )


class PipelineOrchestrator:
    """
    Drives every scanned image through OCR, classification and routing.
    Callbacks can be attached to follow progress.
    """

    def __init__(
        self,
        root: Path,
        extractor: OcrExtractor,
        classifier: ContentClassifier,
        transformer: ImageTransformer,
        router: QuarantineRouter,
        scanner: Optional[FileScanner] = None,
    ) -> None:
        self.root = Path(root)
        self.extractor = extractor
        self.classifier = classifier
        self.transformer = transformer
        self.router = router
        self.scanner = scanner or FileScanner(self.root, router.quarantine_dir)
        self.on_file_start: Optional[Callable[[Path, int, int], None]] = None
        self.on_file_done: Optional[Callable[[FileResult], None]] = None

    async def run(self) -> RunStatistics:
        """Process every image under root and return the run statistics."""
        self.router.ensure_folder()
        paths = self.scanner.scan()
        stats = RunStatistics(found=len(paths))
        logger.info("Found %d images to process", stats.found)

        for index, path in enumerate(paths, start=1):
            if self.on_file_start:
                self.on_file_start(path, index, stats.found)
            logger.info("Processing image %d of %d: %s", index, stats.found, path)
            result = await self._process_file(path)
            stats.record(result)
            if self.on_file_done:
                self.on_file_done(result)

        logger.info(stats.summary())
        return stats

    async def _process_file(self, path: Path) -> FileResult:
        result = FileResult(path=path)
        start_time = time.time()
        try:
            await self._advance(result)
        except Exception as e:
            result.state = FileState.ERROR
            result.error = str(e)
            logger.error("Error processing %s: %s", path, e)
        result.processing_time = time.time() - start_time
        return result

    async def _advance(self, result: FileResult) -> None:
        loop = asyncio.get_running_loop()
        path = result.path

        text = await loop.run_in_executor(None, self.extractor.extract, path)
        if not text:
            result.state = FileState.SKIPPED
            logger.info("Cannot perform OCR on %s, probably removed or unsupported image", path)
            return
        result.state = FileState.EXTRACTED
        result.text_preview = preview(text)
        logger.info("Extracted text: %s", result.text_preview)

        result.flagged = await self.classifier.classify(text)
        result.state = FileState.CLASSIFIED

        if result.flagged:
            logger.info("Sensitive content detected, moving %s to quarantine", path)
            moved = await loop.run_in_executor(None, self.router.quarantine, path)
            if moved:
                result.state = FileState.QUARANTINED
                return

        result.outcome = await loop.run_in_executor(None, self.transformer.transform, path)
        result.state = FileState.TRANSFORMED
