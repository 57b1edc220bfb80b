"""
Translation provider implementations.

Each provider adheres to the `BaseProvider` interface and is selected by
name from the user's configuration.
"""

from po_ai_translate.config import ProviderSettings, TranslatorConfig
from po_ai_translate.errors import ConfigurationError

from .anthropic_provider import AnthropicProvider
from .base import BaseProvider, build_system_prompt
from .gemini_provider import GeminiProvider
from .mock_provider import MockProvider
from .openai_provider import OpenAIProvider

# Central mapping from provider name to provider class.
PROVIDER_MAPPING: dict[str, type[BaseProvider]] = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "gemini": GeminiProvider,
    "mock": MockProvider,
}


def create_provider(config: TranslatorConfig) -> BaseProvider:
    """
    Instantiate the provider selected by `config`.

    Raises:
        ConfigurationError: If the provider name is unknown.

    """
    provider_class = PROVIDER_MAPPING.get(config.provider)
    if provider_class is None:
        msg = f"Unknown provider '{config.provider}'. Choose one of: {', '.join(PROVIDER_MAPPING)}"
        raise ConfigurationError(msg)
    return provider_class(ProviderSettings(api_key=config.api_key, model=config.model))


__all__ = [
    "PROVIDER_MAPPING",
    "AnthropicProvider",
    "BaseProvider",
    "GeminiProvider",
    "MockProvider",
    "OpenAIProvider",
    "build_system_prompt",
    "create_provider",
]
