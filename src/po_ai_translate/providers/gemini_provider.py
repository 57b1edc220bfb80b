"""A provider that uses Google's Gemini models through the google-genai SDK."""

import logging

import httpx
from google import genai
from google.genai import errors, types

from po_ai_translate.errors import ProviderError

from .base import BaseProvider

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """Translates with Gemini models, `gemini-2.0-flash` by default."""

    name = "gemini"

    @property
    def default_model(self) -> str:
        """Return the default Gemini model."""
        return "gemini-2.0-flash"

    def _create_client(self) -> genai.Client:
        return genai.Client(api_key=self.settings.api_key)

    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        """Send the text as the contents, with the prompt as the system instruction."""
        logger.debug("[Gemini] Inp: %s", text)
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=text,
                config=types.GenerateContentConfig(system_instruction=system_prompt),
            )
        # The SDK only raises APIError for HTTP error responses; transport failures come from httpx.
        except (errors.APIError, httpx.HTTPError) as e:
            raise ProviderError(self.name, e) from e

        logger.debug("[Gemini] Oup: %s", response.text)
        return response.text or ""
