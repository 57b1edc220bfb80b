"""Handles provider settings, credentials and the optional YAML configuration file."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError
from .selector import KeyMismatchPolicy

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "openai"
DEFAULT_INCLUDE = "**/*.po"
DEFAULT_CONCURRENCY = 2

# Environment variable holding the API key of each provider.
PROVIDER_API_KEYS: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


class ProviderSettings(BaseModel):
    """Settings for a specific translation provider."""

    api_key: str | None = None
    model: str | None = None


class TranslatorConfig(BaseModel):
    """The provider selection used for one invocation."""

    model_config = ConfigDict(frozen=True)

    provider: str = DEFAULT_PROVIDER
    model: str | None = None
    rules: str | None = None
    api_key: str | None = Field(default=None, repr=False)


class AppConfig(BaseModel):
    """The contents of a YAML configuration file."""

    provider: str | None = None
    model: str | None = None
    rules: str | None = None
    language: str | None = None
    include: str | None = None
    concurrency: int | None = Field(default=None, ge=1)
    on_key_mismatch: KeyMismatchPolicy | None = None
    providers: dict[str, ProviderSettings] = Field(default_factory=dict)


def resolve_api_key(provider: str, settings: ProviderSettings | None = None) -> str | None:
    """
    Return the API key for `provider`.

    A key set in the configuration file wins over the provider's environment variable.
    """
    if settings and settings.api_key:
        return settings.api_key
    env_var = PROVIDER_API_KEYS.get(provider)
    return os.environ.get(env_var) if env_var else None


def require_api_key(config: TranslatorConfig) -> None:
    """
    Check that the selected provider has a credential.

    Raises:
        ConfigurationError: If the provider needs an API key and none is set.

    """
    env_var = PROVIDER_API_KEYS.get(config.provider)
    if env_var and not config.api_key:
        msg = f"Missing {env_var} in environment"
        raise ConfigurationError(msg)


def build_translator_config(
    app_config: AppConfig,
    *,
    provider: str | None = None,
    model: str | None = None,
    rules: str | None = None,
) -> TranslatorConfig:
    """
    Merge command-line values over the configuration file into a TranslatorConfig.

    Args:
        app_config: Values loaded from the configuration file (possibly empty).
        provider: The provider chosen on the command line, if any.
        model: The model chosen on the command line, if any.
        rules: Extra translation rules given on the command line, if any.

    Returns:
        The resolved, immutable translator configuration.

    """
    provider_name = provider or app_config.provider or DEFAULT_PROVIDER
    settings = app_config.providers.get(provider_name)
    return TranslatorConfig(
        provider=provider_name,
        model=model or app_config.model or (settings.model if settings else None),
        rules=rules or app_config.rules,
        api_key=resolve_api_key(provider_name, settings),
    )


def load_config(config_path: Path | str) -> AppConfig:
    """
    Load and validate a YAML configuration file.

    Args:
        config_path: The path to the YAML file.

    Returns:
        The validated AppConfig.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or fails validation.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise ConfigurationError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise ConfigurationError(msg) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Config file must be a YAML mapping (dictionary)."
        raise ConfigurationError(msg)

    try:
        config = AppConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigurationError(msg) from e

    logger.debug("Loaded configuration from %s: %s", path, config.model_dump(exclude={"providers"}))
    return config
