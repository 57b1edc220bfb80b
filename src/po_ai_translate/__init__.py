"""po-ai-translate: Fill untranslated gettext catalog entries with LLM translations."""

import importlib.metadata


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("po-ai-translate")
    except importlib.metadata.PackageNotFoundError:
        # Running from a source checkout without an install
        return "0.0.0-dev"


__version__ = _get_version()
