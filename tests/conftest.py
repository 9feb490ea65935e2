"""Shared fixtures: fake collaborators and real images built with Pillow."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from PIL import Image

from image_filter_tool.api.base import APIClient
from image_filter_tool.errors import ClassificationError


class FakeClient(APIClient):
    """APIClient that answers from a script instead of the network."""

    def __init__(self, response: Optional[str] = "FALSE", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.prompts: List[str] = []
        super().__init__(api_key="test-key")

    def _validate_api_key(self) -> None:
        pass

    def _get_model_name(self) -> str:
        return "fake-model"

    def _call_api(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


class KeywordClient(FakeClient):
    """Answers TRUE when the prompt contains one of the given words."""

    def __init__(self, keywords):
        self.keywords = [k.lower() for k in keywords]
        super().__init__()

    def _call_api(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        text = prompt.split("Text:", 1)[1].lower()
        return "TRUE" if any(k in text for k in self.keywords) else "FALSE"


class RecordingSleep:
    """Stand-in for asyncio.sleep that only records the requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


class FakeOcr:
    """OCR engine returning canned text per file name."""

    def __init__(self, texts: Dict[str, str], default: str = ""):
        self.texts = texts
        self.default = default
        self.calls: List[Path] = []

    def __call__(self, path: Path) -> str:
        self.calls.append(Path(path))
        return self.texts.get(Path(path).name, self.default)


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a real image of the given size under tmp_path."""

    def _make(name: str, width: int, height: int, fmt: Optional[str] = None, parent: Optional[Path] = None) -> Path:
        folder = parent or tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        img = Image.new("RGB", (width, height), color=(200, 120, 40))
        img.save(path, format=fmt)
        return path

    return _make


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI can switch logging off process-wide; switch it back on after each test."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


def image_size(path: Path):
    with Image.open(path) as img:
        return img.size
