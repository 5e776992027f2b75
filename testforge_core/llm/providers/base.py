"""Base class for LLM provider strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class LLMProviderStrategy(ABC):
    """
    Abstract base class for LLM provider strategies.

    Each provider handles its own credential setup and the model name
    format litellm expects for it.
    """

    #: Extra keyword arguments passed to litellm.acompletion
    completion_kwargs: dict = {}

    @abstractmethod
    def configure(self, model: str, api_key: str | None) -> None:
        """
        Configure the provider with API key and model.

        Args:
            model: Model name
            api_key: API key for the provider (may be None for local servers)
        """
        raise NotImplementedError

    @abstractmethod
    def get_model_name(self, model: str) -> str:
        """
        Get the formatted model name for this provider.

        Args:
            model: Original model name

        Returns:
            Formatted model name for litellm
        """
        raise NotImplementedError

    def supports_json_mode(self, model: str) -> bool:
        """
        Check if the model accepts response_format={"type": "json_object"}.

        Step inference asks for a JSON answer; providers that do not
        support JSON mode get the instruction in the prompt only.
        """
        return False
