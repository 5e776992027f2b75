"""OpenRouter provider strategy."""

from __future__ import annotations

import os

from .base import LLMProviderStrategy


class OpenRouterProvider(LLMProviderStrategy):
    """Strategy for OpenRouter provider."""

    # Models routed through OpenRouter that reject response_format
    MODELS_WITHOUT_JSON_MODE = {
        "qwen/qwq-32b-preview",
        "deepseek/deepseek-r1",
        "google/gemma-2-27b-it",
        "google/gemma-2-9b-it",
        "meta-llama/llama-3.2-1b-instruct",
        "meta-llama/llama-3.2-3b-instruct",
    }

    def configure(self, model: str, api_key: str | None) -> None:
        """
        Configure OpenRouter provider.

        Sets OPENROUTER_API_KEY environment variable when a key is given.
        """
        if api_key:
            os.environ["OPENROUTER_API_KEY"] = api_key
        self.completion_kwargs = {"api_key": api_key} if api_key else {}

    def get_model_name(self, model: str) -> str:
        """
        Get formatted model name for OpenRouter.

        Args:
            model: Original model name

        Returns:
            Model name formatted for LiteLLM with openrouter/ prefix
        """
        if model.startswith("openrouter/"):
            return model

        # Provider-prefixed names (openai/gpt-4o-mini) only need the router prefix
        if "/" in model:
            return f"openrouter/{model}"

        # Bare names (gpt-4o-mini) are assumed to be OpenAI models
        return f"openrouter/openai/{model}"

    def supports_json_mode(self, model: str) -> bool:
        clean_model = self.get_model_name(model).replace("openrouter/", "")
        for excluded in self.MODELS_WITHOUT_JSON_MODE:
            if excluded in clean_model or clean_model in excluded:
                return False
        return True
