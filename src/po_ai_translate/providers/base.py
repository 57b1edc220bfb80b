"""Defines the base class for all translation providers."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from po_ai_translate.config import ProviderSettings

TRANSLATE_PROMPT = (
    "Translate into {target_language}. Only output the translation text. "
    "Do not translate text inside curly braces or ICU placeholders. "
    'Example: "Hello {{name}}" should keep {{name}} unchanged. '
    "Maintain surrounding punctuation. "
    "Make translation concise while preserving the full meaning of the sentence."
)


def build_system_prompt(target_language: str, rules: str | None = None) -> str:
    """
    Build the system instruction sent with every translation request.

    Args:
        target_language: The language to translate into, e.g. 'fr'.
        rules: Free-text rules appended verbatim after the base instruction.

    Returns:
        The system prompt.

    """
    prompt = TRANSLATE_PROMPT.format(target_language=target_language)
    if rules and rules.strip():
        prompt += f"\n\nAdditional translation rules:\n{rules.strip()}"
    return prompt


class BaseProvider(ABC):
    """
    Abstract base class for the LLM backends.

    A provider performs a single request/response exchange per call. Retries,
    if any, are left to the underlying SDK client.
    """

    name: ClassVar[str]

    def __init__(self, settings: ProviderSettings | None = None, *, client: Any = None) -> None:  # noqa: ANN401
        """
        Initialize the provider.

        Args:
            settings: Provider-specific settings such as the API key.
            client: A pre-built SDK client. When omitted, one is created from `settings`.

        """
        self.settings = settings or ProviderSettings()
        self.client = client if client is not None else self._create_client()

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Return the model used when none is configured."""
        raise NotImplementedError

    @abstractmethod
    def _create_client(self) -> Any:  # noqa: ANN401
        """Create the SDK client for this backend."""
        raise NotImplementedError

    @abstractmethod
    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        """
        Send one translation request.

        Args:
            system_prompt: The instruction describing the translation to perform.
            text: The source text.
            model: The model identifier to use.

        Returns:
            The first textual content of the response, untrimmed.

        Raises:
            ProviderError: If the backend request fails.

        """
        raise NotImplementedError
