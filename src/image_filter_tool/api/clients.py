"""
API client implementations for various AI services.

This module provides concrete implementations of API clients for different AI services,
all inheriting from the base APIClient class for unified interface.
"""

import os
from typing import Optional

import anthropic
from openai import OpenAI
import google.generativeai as genai
from google.generativeai.types import HarmBlockThreshold, HarmCategory

from ..errors import ClassificationError
from ..utils.log_utils import get_logger
from .base import APIClient
from .prompt import SYSTEM_PROMPT

logger = get_logger(__name__)

MAX_OUTPUT_TOKENS = 16

# The text under review is often exactly what provider safety filters block.
GEMINI_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
}

# Answer reported for text a provider refuses to look at.
BLOCKED_VERDICT = "TRUE"


class ClaudeClient(APIClient):
    """Client for Anthropic's Claude API."""

    def __init__(self, api_key: Optional[str] = None, model: str = "claude-3-haiku-20240307"):
        """Initialize Claude client.

        Args:
            api_key: Anthropic API key. If None, uses ANTHROPIC_API_KEY env var.
            model: Model name to use (default: claude-3-haiku-20240307)
        """
        self.model = model
        super().__init__(api_key)

    def _validate_api_key(self) -> None:
        """Validate Anthropic API key."""
        key = self.api_key or os.getenv("ANTHROPIC_API_KEY")
        if not key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")
        self.api_key = key
        self.client = anthropic.Anthropic(api_key=key)

    def _get_model_name(self) -> str:
        """Return Claude model name."""
        return self.model

    def _call_api(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=MAX_OUTPUT_TOKENS,
                temperature=0,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
            return "".join(block.text for block in response.content if block.type == "text")
        except Exception as err:
            logger.error("Claude API request failed: %s", err)
            raise ClassificationError(f"Claude API error: {err}") from err


class OpenAIClient(APIClient):
    """Client for OpenAI's chat completions API."""

    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-4o-mini"):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key. If None, uses OPENAI_API_KEY env var.
            model: Model name to use (default: gpt-4o-mini)
        """
        self.model = model
        super().__init__(api_key)

    def _validate_api_key(self) -> None:
        """Validate OpenAI API key."""
        key = self.api_key or os.getenv("OPENAI_API_KEY")
        if not key:
            raise ValueError("OPENAI_API_KEY environment variable not set")
        self.api_key = key
        self.client = OpenAI(api_key=key)

    def _get_model_name(self) -> str:
        """Return OpenAI model name."""
        return self.model

    def _call_api(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=MAX_OUTPUT_TOKENS,
            )
            return response.choices[0].message.content
        except Exception as err:
            logger.error("OpenAI API request failed: %s", err)
            raise ClassificationError(f"OpenAI API error: {err}") from err


class GeminiClient(APIClient):
    """Client for Google's Gemini API."""

    def __init__(self, api_key: Optional[str] = None, model: str = "gemini-1.5-flash-8b"):
        """Initialize Gemini client.

        Args:
            api_key: Google API key. If None, uses GOOGLE_API_KEY env var.
            model: Model name to use (default: gemini-1.5-flash-8b)
        """
        self.model = model
        super().__init__(api_key)

    def _validate_api_key(self) -> None:
        """Validate Google API key."""
        key = self.api_key or os.getenv("GOOGLE_API_KEY")
        if not key:
            raise ValueError("GOOGLE_API_KEY environment variable not set")
        self.api_key = key
        genai.configure(api_key=key)

    def _get_model_name(self) -> str:
        """Return Gemini model name."""
        return self.model

    def _call_api(self, prompt: str) -> Optional[str]:
        try:
            model = genai.GenerativeModel(
                self.model,
                system_instruction=SYSTEM_PROMPT,
                generation_config={
                    "temperature": 0,
                    "candidate_count": 1,
                    "max_output_tokens": MAX_OUTPUT_TOKENS,
                },
                safety_settings=GEMINI_SAFETY_SETTINGS,
            )
            response = model.generate_content(prompt)
            if _gemini_blocked(response):
                logger.warning("Gemini blocked the text, treating it as sensitive")
                return BLOCKED_VERDICT
            return response.text.strip()
        except Exception as err:
            logger.error("Gemini API request failed: %s", err)
            raise ClassificationError(f"Gemini API error: {err}") from err


def _gemini_blocked(response) -> bool:
    """Return True if the prompt or a candidate was stopped by a safety filter."""
    feedback = getattr(response, "prompt_feedback", None)
    if feedback is not None and getattr(feedback, "block_reason", None):
        return True
    candidates = getattr(response, "candidates", None) or []
    return any(getattr(c.finish_reason, "name", None) == "SAFETY" for c in candidates)


AVAILABLE_APIS = ("openai", "claude", "gemini")


def get_client(api_name: str, **kwargs) -> APIClient:
    """Factory function to create API client instances.

    Args:
        api_name: Name of the API ('claude', 'openai', 'gemini')
        **kwargs: Additional arguments passed to the client constructor

    Returns:
        Configured API client instance

    """
    api_name = api_name.lower()
    if api_name == "claude":
        return ClaudeClient(**kwargs)
    elif api_name == "openai":
        return OpenAIClient(**kwargs)
    elif api_name == "gemini":
        return GeminiClient(**kwargs)
    else:
        raise ValueError(f"Unsupported API: {api_name}")
