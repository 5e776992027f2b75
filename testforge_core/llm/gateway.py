"""LLM Gateway using litellm for multi-provider support."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

import litellm
import structlog

from testforge_core.llm.providers.factory import create_provider

logger = structlog.get_logger()

# Pattern for removing <think>...</think> tags from LLM responses (extended thinking mode)
THINK_TAG_PATTERN = re.compile(r'<think>.*?</think>\s*', re.DOTALL | re.IGNORECASE)

CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*\n?([\s\S]*?)\n?```", re.IGNORECASE)

# Drop unsupported params instead of failing with "unexpected keyword argument"
litellm.drop_params = True


@dataclass
class ChatResponse:
    """Response from LLM chat."""

    content: str | None
    model: str = ""
    finish_reason: str = "stop"

    def __post_init__(self):
        """Clean up <think>...</think> tags from content (extended thinking mode artifacts)."""
        if self.content:
            self.content = THINK_TAG_PATTERN.sub('', self.content).strip()


def _balanced_json_end(text: str, start: int) -> int:
    """Return the index just past the bracket that closes text[start], or 0."""
    opening = text[start]
    closing = "}" if opening == "{" else "]"
    depth = 0
    in_string = False
    escape_next = False

    for i in range(start, len(text)):
        char = text[i]
        if escape_next:
            escape_next = False
            continue
        if char == "\\":
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return i + 1
    return 0


def extract_json(text: str) -> Any:
    """
    Extract the first JSON value (object or array) from an LLM reply.

    Handles bare JSON, JSON wrapped in a markdown code block and JSON with
    extra text before or after it.

    Returns:
        The decoded value, or None when nothing decodes
    """
    if not text or not text.strip():
        return None

    stripped = text.strip()
    try:
        return json.loads(stripped)
    except json.JSONDecodeError:
        pass

    code_block_match = CODE_BLOCK_PATTERN.search(stripped)
    if code_block_match:
        try:
            return json.loads(code_block_match.group(1).strip())
        except json.JSONDecodeError:
            pass

    for start, char in enumerate(stripped):
        if char not in "{[":
            continue
        end = _balanced_json_end(stripped, start)
        if end:
            try:
                return json.loads(stripped[start:end])
            except json.JSONDecodeError:
                continue
    return None


class LLMGateway:
    """
    Gateway for LLM providers via litellm.

    Tries the primary model first, then each fallback model in order.
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        provider: str = "openrouter",
        fallback_models: list[str] | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize LLM Gateway.

        Args:
            model: Model name
            api_key: API key for the provider
            provider: Provider name (default: "openrouter")
            fallback_models: List of fallback models to try if primary fails
            timeout: Per-request timeout in seconds passed to litellm
        """
        self.api_key = api_key
        self.timeout = timeout

        try:
            self.provider_strategy = create_provider(provider)
            self.provider = provider.lower()
        except ValueError:
            # Unknown provider: guess from the model name
            self.provider = "openrouter" if model.startswith(("openrouter/", "qwen/")) else "openai"
            logger.warning("Unknown provider, falling back", requested=provider, provider=self.provider)
            self.provider_strategy = create_provider(self.provider)

        self.provider_strategy.configure(model, api_key)
        self.model = self.provider_strategy.get_model_name(model)
        self.fallback_models = [
            self.provider_strategy.get_model_name(m) for m in (fallback_models or [])
        ]

        logger.info("LLMGateway initialized", provider=self.provider, model=self.model)

    async def _execute_chat_with_model(
        self,
        model: str,
        messages: list[dict[str, str]],
        json_mode: bool = False,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> ChatResponse:
        """Execute chat with a specific model."""
        kwargs: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            **self.provider_strategy.completion_kwargs,
        }
        if max_tokens:
            kwargs["max_tokens"] = max_tokens
        if self.timeout:
            kwargs["timeout"] = self.timeout
        if json_mode and self.provider_strategy.supports_json_mode(model):
            kwargs["response_format"] = {"type": "json_object"}

        response = await litellm.acompletion(**kwargs)

        if not response.choices:
            raise ValueError("LLM response has no choices")

        return ChatResponse(
            content=response.choices[0].message.content,
            model=model,
            finish_reason=getattr(response.choices[0], "finish_reason", "stop") or "stop",
        )

    async def chat(
        self,
        messages: list[dict[str, str]],
        json_mode: bool = False,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> ChatResponse:
        """Send chat messages and get the response, trying fallbacks on failure."""
        models_to_try = [self.model] + self.fallback_models
        last_error: Exception | None = None

        for current_model in models_to_try:
            try:
                logger.info("Trying model", model=current_model)
                return await self._execute_chat_with_model(
                    current_model, messages, json_mode, temperature, max_tokens
                )
            except Exception as e:
                last_error = e
                logger.warning("Model failed", model=current_model, error=str(e))
                continue

        raise RuntimeError(f"LLM request failed (all models exhausted): {last_error}") from last_error

    async def chat_text(self, messages: list[dict[str, str]], json_mode: bool = False) -> str:
        """Chat returning only the reply text."""
        response = await self.chat(messages, json_mode=json_mode)
        return response.content or ""
