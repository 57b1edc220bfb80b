"""Exception types raised by the translation pipeline."""

from pathlib import Path


class PoTranslateError(Exception):
    """Base class for all errors raised by po-ai-translate."""


class ParseError(PoTranslateError):
    """Raised when a catalog file cannot be parsed."""

    def __init__(self, file_path: Path | str | None, cause: BaseException | str) -> None:
        """
        Build the error message from the file path and the underlying cause.

        Args:
            file_path: The catalog that failed to parse.
            cause: The exception raised by the parser, or a description of the problem.

        """
        self.file_path = file_path
        self.cause = cause
        msg = (
            f"Error parsing PO data in {file_path}: {cause}. "
            "This can be caused by an unescaped quote character in a msgid or msgstr value."
        )
        super().__init__(msg)


class ConfigurationError(PoTranslateError):
    """Raised when the pipeline lacks a setting it needs, such as a target language."""


class ProviderError(PoTranslateError):
    """Raised when a translation backend request fails."""

    def __init__(self, provider: str, cause: BaseException) -> None:
        """
        Wrap a backend exception.

        Args:
            provider: The name of the provider whose request failed.
            cause: The exception raised by the provider's client.

        """
        self.provider = provider
        self.cause = cause
        super().__init__(f"The '{provider}' provider request failed: {cause}")


class UsageError(PoTranslateError):
    """Raised for contradictory or missing command-line selections."""
