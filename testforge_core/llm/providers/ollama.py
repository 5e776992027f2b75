"""Ollama LLM provider strategy."""

from __future__ import annotations

import os

import httpx

from .base import LLMProviderStrategy

DEFAULT_OLLAMA_HOST = "http://localhost:11434"


class OllamaProvider(LLMProviderStrategy):
    """
    Ollama LLM provider strategy.

    For LiteLLM, Ollama models need the "ollama/" prefix.
    Ollama runs locally so API key is not required.
    """

    def __init__(self, host: str | None = None):
        self.host = (host or os.environ.get("OLLAMA_API_BASE", DEFAULT_OLLAMA_HOST)).rstrip("/")

    def configure(self, model: str, api_key: str | None) -> None:
        """Configure Ollama provider.

        Args:
            model: Model name (e.g., "qwen2.5-coder:7b-instruct")
            api_key: Ignored for local Ollama
        """
        self.model = model
        self.completion_kwargs = {"api_base": self.host}

    def get_model_name(self, model: str) -> str:
        """Get LiteLLM-formatted model name for Ollama."""
        if model.startswith("ollama/"):
            return model
        return f"ollama/{model}"

    def supports_json_mode(self, model: str) -> bool:
        # Ollama honours format=json for every model
        return True

    def is_available(self, timeout: float = 5.0) -> bool:
        """Check whether the Ollama server answers on /api/tags."""
        try:
            response = httpx.get(f"{self.host}/api/tags", timeout=timeout)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def list_models(self, timeout: float = 10.0) -> list[dict]:
        """List models installed on the Ollama server."""
        try:
            response = httpx.get(f"{self.host}/api/tags", timeout=timeout)
            response.raise_for_status()
        except httpx.HTTPError:
            return []
        return response.json().get("models", [])
