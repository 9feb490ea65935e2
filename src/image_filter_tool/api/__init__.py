"""
API integrations for external text classification services.

This module provides a unified interface for various AI APIs through client classes.
"""

from .base import APIClient
from .clients import AVAILABLE_APIS, ClaudeClient, OpenAIClient, GeminiClient, get_client
from .prompt import PROMPT_TEMPLATE, SENSITIVE_THEMES, build_prompt, parse_verdict

__all__ = [
    # Main classes
    "APIClient",
    "ClaudeClient",
    "OpenAIClient",
    "GeminiClient",
    "get_client",
    "AVAILABLE_APIS",

    # Utilities
    "PROMPT_TEMPLATE",
    "SENSITIVE_THEMES",
    "build_prompt",
    "parse_verdict",
]
