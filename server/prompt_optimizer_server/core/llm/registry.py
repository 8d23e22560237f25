"""Provider registry: capability-indexed lookup of configured LLM providers."""

import logging
from typing import Callable, Mapping, Optional, cast

from ...config import Settings, get_settings
from ..exceptions import ConfigurationError
from ..model import ProviderName
from .google_gemini import GoogleGeminiProvider
from .openai_chat import OpenAIProvider
from .provider import LLMProvider, ProviderInfo

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Settings], LLMProvider]

DISPLAY_NAMES = {
    ProviderName.GEMINI: "Gemini",
    ProviderName.OPENAI: "OpenAI",
}


def _create_gemini(settings: Settings) -> LLMProvider:
    return cast(
        LLMProvider,
        GoogleGeminiProvider(
            api_key=settings.google_generative_ai_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.provider_timeout_seconds,
        ),
    )


def _create_openai(settings: Settings) -> LLMProvider:
    return cast(
        LLMProvider,
        OpenAIProvider(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            temperature=settings.openai_temperature,
            timeout_seconds=settings.provider_timeout_seconds,
        ),
    )


DEFAULT_FACTORIES: dict[ProviderName, ProviderFactory] = {
    ProviderName.GEMINI: _create_gemini,
    ProviderName.OPENAI: _create_openai,
}


class ProviderRegistry:
    """Registry mapping each supported provider to a lazily created adapter."""

    def __init__(
        self,
        settings: Settings,
        factories: Optional[Mapping[ProviderName, ProviderFactory]] = None,
    ) -> None:
        """
        Initialize provider registry.

        Args:
            settings: Settings holding provider credentials and models
            factories: Adapter constructors per provider (defaults to the real adapters)
        """
        self._settings = settings
        self._factories = dict(factories or DEFAULT_FACTORIES)
        self._cached_providers: dict[ProviderName, LLMProvider] = {}

    def is_configured(self, provider_name: ProviderName) -> bool:
        """Whether a credential is present for the provider."""
        return bool(self._settings.credential_for(provider_name))

    def credential_length(self, provider_name: ProviderName) -> int:
        """Length of the configured credential (0 when unset); never the value."""
        return len(self._settings.credential_for(provider_name))

    def get(self, provider_name: ProviderName) -> LLMProvider:
        """Get the adapter for a provider.

        The credential is checked before any client is created, so a missing
        key never results in a network call.

        Args:
            provider_name: Provider to look up

        Returns:
            LLMProvider instance (cached after first use)

        Raises:
            ConfigurationError: If the provider's credential is not configured
        """
        if not self.is_configured(provider_name):
            raise ConfigurationError(
                f"{DISPLAY_NAMES[provider_name]} API key not configured"
            )

        if provider_name not in self._cached_providers:
            factory = self._factories[provider_name]
            self._cached_providers[provider_name] = factory(self._settings)
            logger.info(f"Initialized provider: {provider_name.value}")

        return self._cached_providers[provider_name]

    def describe(self) -> list[tuple[ProviderInfo, bool]]:
        """Describe every supported provider and whether it is configured.

        Never creates a client: providers already in use describe themselves,
        the rest are described from settings.
        """
        described = []
        for provider_name in ProviderName:
            cached = self._cached_providers.get(provider_name)
            if cached is not None:
                info = cached.describe()
            else:
                model = (
                    self._settings.gemini_model
                    if provider_name == ProviderName.GEMINI
                    else self._settings.openai_model
                )
                info = ProviderInfo(
                    name=provider_name,
                    display_name=DISPLAY_NAMES[provider_name],
                    model=model,
                )
            described.append((info, self.is_configured(provider_name)))
        return described


_registry: ProviderRegistry | None = None


def get_provider_registry() -> ProviderRegistry:
    """Get the process-wide provider registry (dependency injection for FastAPI)."""
    global _registry

    if _registry is None:
        _registry = ProviderRegistry(get_settings())

    return _registry
