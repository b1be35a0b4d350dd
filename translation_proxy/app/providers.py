"""Upstream LLM providers.

Each provider knows how to address its API, shape a chat request that carries
the system prompt and the text, pull the translation out of a success body,
and turn an error status into the error reported to the caller. Adding a
provider means adding a subclass and registering it in ``PROVIDERS``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from . import config
from .errors import UPSTREAM_ERRORS_BY_STATUS, UpstreamError, UpstreamOtherError

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "anthropic"


class TranslationProvider(ABC):
    name: str
    label: str
    default_model: str
    max_tokens: int

    def __init__(self, endpoint: str, deadline_seconds: float) -> None:
        self.endpoint = endpoint
        self.deadline_seconds = deadline_seconds

    @abstractmethod
    def build_headers(self, api_key: str) -> dict[str, str]:
        ...

    @abstractmethod
    def build_payload(
        self,
        *,
        model: str | None,
        system_prompt: str,
        text: str,
        temperature: float,
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    def extract_translation(self, data: Any) -> str | None:
        """Return the translated text, or None when the body does not have the expected shape."""

    def extract_error_message(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        return None

    def error_for(self, status_code: int, data: Any) -> UpstreamError:
        error_cls = UPSTREAM_ERRORS_BY_STATUS.get(status_code)
        provider_error = data.get("error", data) if isinstance(data, dict) else data
        if error_cls is None:
            message = self.extract_error_message(data) or UpstreamOtherError.default_message
            return UpstreamOtherError(
                message,
                status_code=status_code,
                status=status_code,
                provider=self.name,
                provider_error=provider_error,
            )
        return error_cls(
            error_cls.default_message.format(provider=self.label),
            status=status_code,
            provider=self.name,
            provider_error=provider_error,
        )


class AnthropicProvider(TranslationProvider):
    name = "anthropic"
    label = "Anthropic"
    default_model = "claude-3-5-sonnet-20241022"
    max_tokens = 8192

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": api_key,
            "anthropic-version": config.ANTHROPIC_VERSION,
        }

    def build_payload(
        self,
        *,
        model: str | None,
        system_prompt: str,
        text: str,
        temperature: float,
    ) -> dict[str, Any]:
        return {
            "model": model or self.default_model,
            "max_tokens": self.max_tokens,
            "temperature": temperature,
            "system": system_prompt,
            "messages": [{"role": "user", "content": text}],
        }

    def extract_translation(self, data: Any) -> str | None:
        try:
            text = data["content"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None


class OpenAIProvider(TranslationProvider):
    name = "openai"
    label = "OpenAI"
    default_model = "gpt-4o-mini"
    max_tokens = 4096

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    def build_payload(
        self,
        *,
        model: str | None,
        system_prompt: str,
        text: str,
        temperature: float,
    ) -> dict[str, Any]:
        return {
            "model": model or self.default_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": text},
            ],
            "temperature": temperature,
            "max_tokens": self.max_tokens,
        }

    def extract_translation(self, data: Any) -> str | None:
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None


PROVIDERS: dict[str, TranslationProvider] = {
    "anthropic": AnthropicProvider(config.ANTHROPIC_API_URL, config.ANTHROPIC_DEADLINE_SECONDS),
    "openai": OpenAIProvider(config.OPENAI_API_URL, config.OPENAI_DEADLINE_SECONDS),
}


def get_provider(name: str | None) -> TranslationProvider:
    provider = PROVIDERS.get((name or DEFAULT_PROVIDER).lower())
    if provider is None:
        logger.warning("Unknown provider %r requested, falling back to %s", name, DEFAULT_PROVIDER)
        return PROVIDERS[DEFAULT_PROVIDER]
    return provider
