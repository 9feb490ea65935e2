"""
Exception types raised by the filtering pipeline.

Only ScanError is fatal to a run. The others are raised inside a component
and handled there or at the per-file boundary of the orchestrator.
"""


class FilterError(Exception):
    """Base class for pipeline errors."""


class ScanError(FilterError):
    """A directory under the source tree could not be listed."""


class ExtractionError(FilterError):
    """OCR could not produce text for an image."""


class ClassificationError(FilterError, RuntimeError):
    """The classification API call failed or returned nothing usable."""


class TransformError(FilterError):
    """Cropping or deleting an image failed."""


class RouterError(FilterError):
    """Moving an image into the quarantine folder failed."""
