"""A provider backed by the Anthropic messages API."""

import logging

import anthropic
from anthropic import AsyncAnthropic

from po_ai_translate.errors import ProviderError

from .base import BaseProvider

logger = logging.getLogger(__name__)

_MAX_TOKENS = 1024


class AnthropicProvider(BaseProvider):
    """Translates with Claude models, `claude-3-5-haiku-20241022` by default."""

    name = "anthropic"

    @property
    def default_model(self) -> str:
        """Return the default Claude model."""
        return "claude-3-5-haiku-20241022"

    def _create_client(self) -> AsyncAnthropic:
        return AsyncAnthropic(api_key=self.settings.api_key)

    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        """Send the text as the only user message and return the first text block."""
        logger.debug("[Anthropic] Inp: %s", text)
        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=_MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": text}],
            )
        except anthropic.APIError as e:
            raise ProviderError(self.name, e) from e

        block = next((b for b in response.content or [] if b.type == "text"), None)
        content = block.text if block is not None else ""
        logger.debug("[Anthropic] Oup: %s", content)
        return content or ""
