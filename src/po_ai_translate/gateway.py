"""The single entry point the pipeline uses to translate a text."""

import logging

from .config import TranslatorConfig
from .providers import BaseProvider, build_system_prompt, create_provider

logger = logging.getLogger(__name__)


class TranslationGateway:
    """Binds a TranslatorConfig to a provider and translates one text per call."""

    def __init__(self, config: TranslatorConfig, provider: BaseProvider | None = None) -> None:
        """
        Initialize the gateway.

        Args:
            config: The provider selection, model and extra rules.
            provider: A ready provider instance. When omitted, one is created from `config`.

        """
        self.config = config
        self.provider = provider if provider is not None else create_provider(config)

    @property
    def model(self) -> str:
        """Return the configured model, or the provider's default."""
        return self.config.model or self.provider.default_model

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate `text` into `target_language`.

        Returns:
            The translation with surrounding whitespace removed.

        Raises:
            ProviderError: If the backend request fails.

        """
        system_prompt = build_system_prompt(target_language, self.config.rules)
        logger.debug("Translating with %s/%s to '%s': '%s'", self.provider.name, self.model, target_language, text[:50])
        translated = await self.provider.complete(system_prompt, text, self.model)
        return translated.strip()
