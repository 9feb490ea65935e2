"""
Run configuration, validated with pydantic.

API keys are not part of the configuration; each client reads its own
environment variable.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .core.classifier import DEFAULT_BACKOFF_SECONDS
from .core.file_operations import QUARANTINE_DIRNAME
from .core.transformer import DEFAULT_TOP_RATIO


class FilterConfig(BaseModel):
    root: Path
    quarantine_name: str = QUARANTINE_DIRNAME
    api: Literal["openai", "claude", "gemini"] = "openai"
    model: Optional[str] = None
    backoff_seconds: float = Field(DEFAULT_BACKOFF_SECONDS, ge=0)
    fail_open: bool = True
    top_ratio: float = Field(DEFAULT_TOP_RATIO, gt=0, le=1)
    max_aspect_ratio: Optional[float] = Field(None, gt=1)

    @field_validator("root")
    @classmethod
    def root_must_be_directory(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"'{value}' is not a directory")
        return value

    @field_validator("quarantine_name")
    @classmethod
    def quarantine_name_is_plain(cls, value: str) -> str:
        if value in ("", ".", "..") or Path(value).name != value:
            raise ValueError("quarantine folder must be a plain directory name")
        return value

    @property
    def quarantine_dir(self) -> Path:
        return self.root / self.quarantine_name
