"""OpenAI-compatible LLM providers for journey parsing."""

from enum import StrEnum


class AiProvider(StrEnum):
    """Supported chat completion providers."""

    GROQ = "groq"
    OPENROUTER = "openrouter"

    @property
    def endpoint(self) -> str:
        """Base URL of the provider's OpenAI-compatible API."""
        return PROVIDER_ENDPOINTS[self]

    @property
    def default_model(self) -> str:
        return PROVIDER_MODELS[self]


PROVIDER_ENDPOINTS = {
    AiProvider.GROQ: "https://api.groq.com/openai/v1",
    AiProvider.OPENROUTER: "https://openrouter.ai/api/v1",
}

PROVIDER_MODELS = {
    AiProvider.GROQ: "llama-3.3-70b-versatile",
    AiProvider.OPENROUTER: "meta-llama/llama-3.1-8b-instruct:free",
}


def provider_from_name(name: str | None) -> AiProvider:
    """Map a provider name to an AiProvider, defaulting to Groq."""
    if not name:
        return AiProvider.GROQ
    try:
        return AiProvider(name.strip().lower())
    except ValueError:
        return AiProvider.GROQ
