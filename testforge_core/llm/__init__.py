"""
TestForge LLM - acesso a LLMs para inferencia de steps

Suporta multiplos providers via litellm:
- OpenRouter (API cloud)
- OpenAI, Anthropic
- Ollama (local)

Features:
- Estrategia por provider (nome de modelo, credenciais, modo JSON)
- Fallback entre modelos
- Extracao de JSON de respostas com texto extra
"""

from testforge_core.llm.gateway import LLMGateway, ChatResponse, extract_json
from testforge_core.llm.providers import create_provider, SUPPORTED_PROVIDERS

__all__ = [
    "LLMGateway",
    "ChatResponse",
    "extract_json",
    "create_provider",
    "SUPPORTED_PROVIDERS",
]
