"""Shared fixtures for the po-ai-translate test suite."""

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from po_ai_translate.config import TranslatorConfig
from po_ai_translate.errors import ProviderError
from po_ai_translate.gateway import TranslationGateway
from po_ai_translate.providers.base import BaseProvider


class StubProvider(BaseProvider):
    """An in-memory provider that prefixes the source text and records every call."""

    name = "stub"

    def __init__(self, prefix: str = "[T] ", *, fail_on: str | None = None, delay: float = 0.0) -> None:
        """Create a stub that fails when asked to translate `fail_on`."""
        super().__init__(client=object())
        self.prefix = prefix
        self.fail_on = fail_on
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    @property
    def default_model(self) -> str:
        return "stub-model"

    def _create_client(self) -> None:
        return None

    async def complete(self, system_prompt: str, text: str, model: str) -> str:
        self.calls.append((text, system_prompt))
        if self.delay:
            await asyncio.sleep(self.delay)
        if text == self.fail_on:
            raise ProviderError(self.name, RuntimeError(f"cannot translate {text!r}"))
        return f"  {self.prefix}{text}\n"


@pytest.fixture
def translator_config() -> TranslatorConfig:
    """Return a configuration that never needs a real API key."""
    return TranslatorConfig(provider="mock")


@pytest.fixture
def stub_provider() -> StubProvider:
    """Return a StubProvider with the default '[T] ' prefix."""
    return StubProvider()


@pytest.fixture
def stub_gateway(translator_config: TranslatorConfig, stub_provider: StubProvider) -> TranslationGateway:
    """Return a gateway backed by the stub provider."""
    return TranslationGateway(translator_config, provider=stub_provider)


@pytest.fixture
def write_po(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes PO content to a path relative to tmp_path."""

    def _write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_gateway(translator_config: TranslatorConfig) -> Callable[..., TranslationGateway]:
    """Return a factory building gateways around custom StubProvider instances."""

    def _make(prefix: str = "[T] ", *, fail_on: str | None = None, delay: float = 0.0) -> TranslationGateway:
        return TranslationGateway(translator_config, provider=StubProvider(prefix, fail_on=fail_on, delay=delay))

    return _make
