"""A mock provider for offline runs and testing."""

import logging
from typing import Any

from po_ai_translate.config import ProviderSettings
from po_ai_translate.errors import ProviderError

from .base import BaseProvider

logger = logging.getLogger(__name__)


class MockProviderError(Exception):
    """Custom exception for mock provider errors."""


class MockProvider(BaseProvider):
    """
    A provider that prepends a '[MOCK]' prefix instead of calling an API.

    It can also be configured to fail, for testing error handling.
    """

    name = "mock"

    def __init__(self, settings: ProviderSettings | None = None, *, client: Any = None, return_error: bool = False) -> None:  # noqa: ANN401
        """
        Initialize the mock provider.

        Args:
            settings: Provider-specific settings (ignored).
            client: Ignored; the mock provider has no client.
            return_error: If True, `complete` raises a ProviderError.

        """
        super().__init__(settings, client=client)
        self.return_error = return_error

    @property
    def default_model(self) -> str:
        """Return a placeholder model name."""
        return "mock"

    def _create_client(self) -> None:
        return None

    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        """Return the text with a '[MOCK] ' prefix."""
        _ = system_prompt
        if self.return_error:
            msg = "Mock provider was configured to fail."
            raise ProviderError(self.name, MockProviderError(msg))
        logger.debug("MockProvider translating with model '%s': %s", model, text)
        return f"[MOCK] {text}"
