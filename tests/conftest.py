"""Shared fixtures for spellcheck_bridge tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest
import structlog

from spellcheck_bridge.client import SpellCheckClient
from spellcheck_bridge.models import LanguageConfig

from .mocks import FakeProvider


@pytest.fixture
def language_config() -> LanguageConfig:
    """Provide an English language configuration."""
    return LanguageConfig(default_language="en")


@pytest.fixture
def fox_provider() -> FakeProvider:
    """Provider that knows every word of the fox sentence except the typo."""
    return FakeProvider(known=["the", "brown", "fox", "hello"])


@pytest.fixture
def make_client(language_config: LanguageConfig) -> Callable[..., SpellCheckClient]:
    """Factory building a client around a provider with optional overrides."""

    def _make(provider: Any = None, **kwargs: Any) -> SpellCheckClient:
        return SpellCheckClient(language_config, provider, **kwargs)

    return _make


@pytest.fixture
def clean_logging_config() -> Generator[None, None, None]:
    """Reset stdlib logging and structlog after a test reconfigures them."""
    yield
    logging.root.handlers.clear()
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
