"""
Spell-check client driven by a host text surface.

The client segments text into candidates, asks the provider about each one and
retries rejected candidates through the contraction resolver. Every internal
fault degrades to the least disruptive outcome: the word is treated as correct,
or the batch check is cancelled. Nothing is raised to the host.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from spellcheck_bridge.contraction import ContractionResolver
from spellcheck_bridge.errors import SpellCheckError
from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.models import (
    BatchCheckOutcome,
    CheckVerdict,
    LanguageConfig,
    MisspellingRange,
    TextSpan,
    WordToken,
)
from spellcheck_bridge.protocols import (
    CharacterAttributesProtocol,
    ProviderBridgeProtocol,
    ScriptClassifierProtocol,
    SpellCheckClientProtocol,
    TextCheckingCompletionProtocol,
    TextCheckingType,
    WordSegmenterProtocol,
)
from spellcheck_bridge.provider_bridge import ProviderBridge
from spellcheck_bridge.script_gate import has_checkable_characters
from spellcheck_bridge.segmenter_slot import LazySegmenter
from spellcheck_bridge.word_iterator import CharacterAttributes, WordIterator

logger = create_logger("spellcheck_bridge.client")


class SpellCheckClient(SpellCheckClientProtocol):
    """Single-result and batch spell checking over a checking provider.

    The two segmenters (one for top-level text, one for splitting
    contractions) are owned exclusively by the client and initialized on
    first use. The client assumes a single caller at a time.
    """

    def __init__(
        self,
        language_config: LanguageConfig,
        provider: Any = None,
        *,
        bridge: ProviderBridgeProtocol | None = None,
        character_attributes: CharacterAttributesProtocol | None = None,
        text_segmenter: WordSegmenterProtocol | None = None,
        contraction_segmenter: WordSegmenterProtocol | None = None,
        script_classifier: ScriptClassifierProtocol | None = None,
    ) -> None:
        self.language_config = language_config
        self._bridge = bridge if bridge is not None else ProviderBridge(provider)
        self._script_classifier = script_classifier

        self._attributes = character_attributes or CharacterAttributes()
        self._attributes.set_default_language(language_config.default_language)

        self._text_segmenter = LazySegmenter(
            "text", text_segmenter or WordIterator(), self._attributes, allow_contraction=True
        )
        self._contraction_segmenter = LazySegmenter(
            "contraction",
            contraction_segmenter or WordIterator(),
            self._attributes,
            allow_contraction=False,
        )
        self._contraction_resolver = ContractionResolver(self._contraction_segmenter, self._bridge)

    @property
    def text_segmenter(self) -> LazySegmenter:
        return self._text_segmenter

    @property
    def contraction_segmenter(self) -> LazySegmenter:
        return self._contraction_segmenter

    # Single-result check

    def check_one(self, text: str) -> TextSpan | None:
        """Return the first real misspelling in ``text``, or None.

        Scanning stops at the first candidate that neither the provider nor
        the contraction fallback accepts.
        """
        return self.verdict_for(text).span

    def verdict_for(self, text: str) -> CheckVerdict:
        """Like ``check_one`` but reports why nothing was found."""
        if not text:
            return CheckVerdict.correct()
        if not self._bridge.spell_check_available:
            return CheckVerdict.indeterminate()

        try:
            segmenter = self._text_segmenter.acquire("check_one")
        except SpellCheckError as e:
            logger.debug(
                "Text segmenter unavailable; reporting no misspelling", **e.to_log_context()
            )
            return CheckVerdict.indeterminate()

        for token in self._candidates(segmenter, text):
            if not self._is_correct(token.word):
                return CheckVerdict.misspelled(token.to_span())
        return CheckVerdict.correct()

    def check_paragraph(
        self, text: str, check_types: TextCheckingType = TextCheckingType.SPELLING
    ) -> list[MisspellingRange]:
        """Return every misspelling in ``text`` using the client's own segmenter.

        Unlike ``check_one`` this does not stop at the first misspelling.
        Only spelling is checked; a mask without SPELLING yields no results.
        """
        if not check_types & TextCheckingType.SPELLING:
            return []
        if not text or not self._bridge.spell_check_available:
            return []

        try:
            segmenter = self._text_segmenter.acquire("check_paragraph")
        except SpellCheckError as e:
            logger.debug(
                "Text segmenter unavailable; reporting no misspelling", **e.to_log_context()
            )
            return []

        return [
            token.to_span().to_range()
            for token in self._candidates(segmenter, text)
            if not self._is_correct(token.word)
        ]

    def is_valid_contraction(self, word: str) -> bool:
        return self._contraction_resolver.is_valid_contraction(word)

    def _is_correct(self, word: str) -> bool:
        if self._bridge.check_word(word):
            return True
        return self._contraction_resolver.is_valid_contraction(word)

    @staticmethod
    def _candidates(segmenter: WordSegmenterProtocol, text: str) -> Iterator[WordToken]:
        segmenter.set_text(text)
        while (token := segmenter.next_word()) is not None:
            if token.start + token.length > len(text):
                logger.warning(
                    "Segmenter produced a span outside the text; skipping it",
                    start=token.start,
                    length=token.length,
                    text_length=len(text),
                )
                continue
            yield token

    # Batch check

    async def check_all(self, text: str) -> BatchCheckOutcome:
        """Delegate the whole of ``text`` to the provider's batch check.

        Returns a cancelled outcome when nothing was checked: empty text, no
        checkable characters, or a provider that could not complete the call.
        The provider's ranges are forwarded unchanged.
        """
        if not text or not has_checkable_characters(text, self._script_classifier):
            return BatchCheckOutcome.cancelled()

        try:
            results = await self._bridge.request_batch_check(text)
        except SpellCheckError as e:
            logger.debug("Batch check cancelled", **e.to_log_context())
            return BatchCheckOutcome.cancelled()

        return BatchCheckOutcome.completed(results)

    async def request_checking_of_text(
        self, text: str, completion: TextCheckingCompletionProtocol
    ) -> BatchCheckOutcome:
        """Run ``check_all`` and deliver its terminal state to ``completion``.

        Exactly one of ``did_finish_checking_text`` and
        ``did_cancel_checking_text`` is called.
        """
        outcome = await self.check_all(text)
        if outcome.is_cancelled:
            completion.did_cancel_checking_text()
        else:
            completion.did_finish_checking_text(list(outcome.results))
        return outcome

    # Auto-correction

    def auto_correct(self, word: str) -> str | None:
        try:
            return self._bridge.auto_correct(word)
        except SpellCheckError as e:
            logger.debug("No auto-correction available", **e.to_log_context())
            return None

    # Spelling UI is owned by the host

    def show_spelling_ui(self, show: bool) -> None:
        pass

    def is_showing_spelling_ui(self) -> bool:
        return False

    def update_spelling_ui_with_misspelled_word(self, word: str) -> None:
        pass
