"""Anthropic provider strategy."""

from __future__ import annotations

import os

from .base import LLMProviderStrategy


class AnthropicProvider(LLMProviderStrategy):
    """Strategy for Anthropic provider."""

    def configure(self, model: str, api_key: str | None) -> None:
        """
        Configure Anthropic provider.

        Sets ANTHROPIC_API_KEY environment variable for litellm.
        """
        if api_key:
            os.environ["ANTHROPIC_API_KEY"] = api_key

    def get_model_name(self, model: str) -> str:
        """Anthropic model names need no prefix for litellm."""
        return model
