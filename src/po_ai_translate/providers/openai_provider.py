"""A provider backed by the OpenAI chat completions API."""

import logging

import openai
from openai import AsyncOpenAI

from po_ai_translate.errors import ProviderError

from .base import BaseProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """Translates with OpenAI chat models, `gpt-4o-mini` by default."""

    name = "openai"

    @property
    def default_model(self) -> str:
        """Return the default OpenAI model."""
        return "gpt-4o-mini"

    def _create_client(self) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=self.settings.api_key)

    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        """Send the text as a user message after the system prompt."""
        logger.debug("[OpenAI] Inp: %s", text)
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
            )
        except openai.APIError as e:
            raise ProviderError(self.name, e) from e

        content = response.choices[0].message.content if response.choices else None
        logger.debug("[OpenAI] Oup: %s", content)
        return content or ""
