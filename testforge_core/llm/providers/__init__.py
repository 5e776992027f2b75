"""
LLM provider strategies used by the gateway.
"""

from .base import LLMProviderStrategy
from .openrouter import OpenRouterProvider
from .ollama import OllamaProvider
from .openai import OpenAIProvider
from .anthropic import AnthropicProvider
from .factory import create_provider, SUPPORTED_PROVIDERS

__all__ = [
    "LLMProviderStrategy",
    "OpenRouterProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "create_provider",
    "SUPPORTED_PROVIDERS",
]
