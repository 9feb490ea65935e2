"""
Content classification with a single fixed backoff on failure.

A failed API call is never re-sent. The classifier waits `backoff_seconds`
once so a flaky provider gets some breathing room, then returns the fallback
verdict: not flagged when failing open (the default), flagged when failing
closed.
"""

import asyncio
from typing import Awaitable, Callable

from ..api.base import APIClient
from ..api.prompt import parse_verdict
from ..utils.log_utils import get_logger

logger = get_logger(__name__)

DEFAULT_BACKOFF_SECONDS = 15.0


class ContentClassifier:
    """Wraps an APIClient and turns its answer into a boolean verdict."""

    def __init__(
        self,
        client: APIClient,
        backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        fail_open: bool = True,
    ) -> None:
        self.client = client
        self.backoff_seconds = backoff_seconds
        self.sleep = sleep
        self.fail_open = fail_open

    async def classify(self, text: str) -> bool:
        """
        Return True if the text is flagged as sensitive.

        Args:
            text: Normalized, non-empty OCR text.

        Returns:
            The model verdict, or the fallback verdict after one backoff wait
            if the call failed.
        """
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, self.client.complete, text)
        except Exception as err:
            logger.error("Classification failed: %s", err)
            logger.info("Waiting %.1fs before continuing", self.backoff_seconds)
            await self.sleep(self.backoff_seconds)
            return not self.fail_open
        return parse_verdict(response)
