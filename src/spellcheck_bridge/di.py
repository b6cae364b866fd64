"""Dependency injection configuration for spellcheck_bridge using Dishka."""

from __future__ import annotations

from typing import Any

from dishka import Provider, Scope, provide

from spellcheck_bridge.client import SpellCheckClient
from spellcheck_bridge.config import Settings, settings
from spellcheck_bridge.models import LanguageConfig
from spellcheck_bridge.protocols import (
    CharacterAttributesProtocol,
    ProviderBridgeProtocol,
    ScriptClassifierProtocol,
    SpellCheckClientProtocol,
)
from spellcheck_bridge.provider_bridge import ProviderBridge, ProviderMethodNames
from spellcheck_bridge.providers import PySpellCheckerProvider
from spellcheck_bridge.script_gate import RegexScriptClassifier
from spellcheck_bridge.word_iterator import CharacterAttributes


class SpellCheckBridgeProvider(Provider):
    """Provider for spell-check client dependencies."""

    def __init__(self, checking_provider: Any = None, language: str | None = None) -> None:
        """Initialize provider.

        Args:
            checking_provider: Provider object to check against; a
                pyspellchecker dictionary is used when omitted
            language: Overrides DEFAULT_LANGUAGE from settings
        """
        super().__init__()
        self._checking_provider = checking_provider
        self._language = language

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide bridge settings."""
        return settings

    @provide(scope=Scope.APP)
    def provide_language_config(self, settings: Settings) -> LanguageConfig:
        if self._language:
            return LanguageConfig(default_language=self._language)
        return settings.language_config

    @provide(scope=Scope.APP)
    def provide_character_attributes(
        self, language_config: LanguageConfig
    ) -> CharacterAttributesProtocol:
        return CharacterAttributes(language_config.default_language)

    @provide(scope=Scope.APP)
    def provide_script_classifier(self) -> ScriptClassifierProtocol:
        return RegexScriptClassifier()

    @provide(scope=Scope.APP)
    def provide_provider_bridge(
        self, settings: Settings, language_config: LanguageConfig
    ) -> ProviderBridgeProtocol:
        """Provide the bridge, loading the default dictionary if no provider was given."""
        checking_provider = self._checking_provider
        if checking_provider is None:
            checking_provider = PySpellCheckerProvider(
                language_config.default_language, distance=settings.PYSPELLCHECKER_DISTANCE
            )
        method_names = ProviderMethodNames(
            spell_check=settings.PROVIDER_SPELL_CHECK_METHOD,
            batch_check=settings.PROVIDER_BATCH_CHECK_METHOD,
            auto_correct=settings.PROVIDER_AUTO_CORRECT_METHOD,
        )
        return ProviderBridge(checking_provider, method_names)

    @provide(scope=Scope.APP)
    def provide_spell_check_client(
        self,
        language_config: LanguageConfig,
        bridge: ProviderBridgeProtocol,
        character_attributes: CharacterAttributesProtocol,
        script_classifier: ScriptClassifierProtocol,
    ) -> SpellCheckClientProtocol:
        return SpellCheckClient(
            language_config,
            bridge=bridge,
            character_attributes=character_attributes,
            script_classifier=script_classifier,
        )
