"""LLM provider abstractions and implementations."""

from .provider import GenerationResult, LLMProvider, ProviderInfo, TokenUsage
from .google_gemini import GoogleGeminiProvider
from .openai_chat import OpenAIProvider
from .registry import ProviderRegistry, get_provider_registry

__all__ = [
    "GenerationResult",
    "LLMProvider",
    "ProviderInfo",
    "TokenUsage",
    "GoogleGeminiProvider",
    "OpenAIProvider",
    "ProviderRegistry",
    "get_provider_registry",
]
