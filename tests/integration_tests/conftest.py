"""Pytest configuration and fixtures for integration tests."""

import os

import pytest

from po_ai_translate.config import ProviderSettings
from po_ai_translate.providers import AnthropicProvider, GeminiProvider, MockProvider, OpenAIProvider


def _require_key(env_var: str) -> str:
    api_key = os.getenv(env_var)
    if not api_key:
        pytest.skip(f"API key not available (set {env_var})")
    return api_key


@pytest.fixture
def mock_provider() -> MockProvider:
    """
    Provide a MockProvider instance for testing.

    This provider does not require API keys.
    """
    return MockProvider()


@pytest.fixture
def openai_provider() -> OpenAIProvider:
    """Provide OpenAIProvider, skipping the test when OPENAI_API_KEY is not set."""
    return OpenAIProvider(ProviderSettings(api_key=_require_key("OPENAI_API_KEY")))


@pytest.fixture
def anthropic_provider() -> AnthropicProvider:
    """Provide AnthropicProvider, skipping the test when ANTHROPIC_API_KEY is not set."""
    return AnthropicProvider(ProviderSettings(api_key=_require_key("ANTHROPIC_API_KEY")))


@pytest.fixture
def gemini_provider() -> GeminiProvider:
    """Provide GeminiProvider, skipping the test when GEMINI_API_KEY is not set."""
    return GeminiProvider(ProviderSettings(api_key=_require_key("GEMINI_API_KEY")))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring API keys (deselect with '-m \"not integration\"')",
    )
