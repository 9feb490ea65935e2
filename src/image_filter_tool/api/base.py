"""
Base functionality for text classification clients.

This module provides the abstract client every provider implements. The
pipeline only talks to this interface, so tests can swap in a fake.
"""

from typing import Optional
from abc import ABC, abstractmethod

from ..errors import ClassificationError
from ..utils.log_utils import get_logger
from .prompt import build_prompt

logger = get_logger(__name__)


class APIClient(ABC):
    """Abstract base class for API clients."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize the API client.

        Args:
            api_key: API key for the service. If None, will try to get from environment.
        """
        self.api_key = api_key
        self._validate_api_key()

    @abstractmethod
    def _validate_api_key(self) -> None:
        """Validate that the API key is available and properly configured."""
        pass

    @abstractmethod
    def _get_model_name(self) -> str:
        """Return the model name to use for this API."""
        pass

    @abstractmethod
    def _call_api(self, prompt: str) -> Optional[str]:
        """Make the actual API call and return the response text.

        Args:
            prompt: Fully rendered moderation prompt

        Returns:
            Raw response text from the API
        """
        pass

    def complete(self, text: str) -> str:
        """Ask the model whether `text` touches any sensitive theme.

        Args:
            text: Normalized OCR text

        Returns:
            The raw model answer

        Raises:
            ClassificationError: If the API call fails or the answer is empty
        """
        logger.debug("Classifying %d characters with %s", len(text), self._get_model_name())
        response_text = self._call_api(build_prompt(text))
        if not response_text:
            raise ClassificationError(f"Empty response from {self._get_model_name()}")
        return response_text
