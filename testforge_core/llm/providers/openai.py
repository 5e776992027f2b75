"""OpenAI provider strategy."""

from __future__ import annotations

import litellm

from .base import LLMProviderStrategy


class OpenAIProvider(LLMProviderStrategy):
    """Strategy for OpenAI provider."""

    def configure(self, model: str, api_key: str | None) -> None:
        """
        Configure OpenAI provider.

        Sets litellm API key.
        """
        if api_key:
            litellm.api_key = api_key

    def get_model_name(self, model: str) -> str:
        """
        Get formatted model name for OpenAI.

        OpenAI model names need no prefix for litellm.
        """
        return model

    def supports_json_mode(self, model: str) -> bool:
        supported_prefixes = ["gpt-4", "gpt-3.5-turbo", "o1", "o3", "o4"]
        return any(model.startswith(prefix) for prefix in supported_prefixes)
