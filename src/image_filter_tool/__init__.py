"""
Image Filter Tool

Moves images whose visible text touches sensitive themes into a quarantine
folder and crops the remaining ones.
"""

__version__ = "0.1.0"

from .core import (
    FileScanner,
    OcrExtractor,
    ContentClassifier,
    ImageTransformer,
    QuarantineRouter,
    PipelineOrchestrator,
    RunStatistics,
)
from .api import (
    APIClient,
    ClaudeClient,
    OpenAIClient,
    GeminiClient,
    get_client,
)
from .config import FilterConfig


__all__ = [
    "FileScanner",
    "OcrExtractor",
    "ContentClassifier",
    "ImageTransformer",
    "QuarantineRouter",
    "PipelineOrchestrator",
    "RunStatistics",
    "APIClient",
    "ClaudeClient",
    "OpenAIClient",
    "GeminiClient",
    "get_client",
    "FilterConfig",
]
