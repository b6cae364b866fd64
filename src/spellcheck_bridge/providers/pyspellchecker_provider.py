"""Checking provider backed by the pyspellchecker library."""

from __future__ import annotations

from spellchecker import SpellChecker

from spellcheck_bridge.contraction import ContractionResolver
from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.provider_bridge import ProviderBridge
from spellcheck_bridge.segmenter_slot import LazySegmenter
from spellcheck_bridge.word_iterator import CharacterAttributes, WordIterator, normalize_language

logger = create_logger("spellcheck_bridge.providers.pyspellchecker")


class DictionaryNotFound(Exception):
    """No pyspellchecker dictionary exists for the requested language."""

    def __init__(self, language: str) -> None:
        super().__init__(f"dictionary {language} not available")
        self.language = language


class PySpellCheckerProvider:
    """Provider exposing ``spell_check``, ``request_checking_of_text`` and
    ``auto_correct_word`` over a pyspellchecker dictionary.

    The batch check segments text itself and applies the same contraction
    fallback as the client, reporting every misspelled word in text order.
    """

    def __init__(self, language: str = "en", distance: int = 2) -> None:
        self.language = normalize_language(language)
        self._ignored: set[str] = set()
        try:
            self._dictionary = SpellChecker(language=self.language, distance=distance)
        except ValueError as e:
            raise DictionaryNotFound(language) from e

        attributes = CharacterAttributes(self.language)
        self._words = LazySegmenter("provider_text", WordIterator(), attributes, True)
        self._contractions = ContractionResolver(
            LazySegmenter("provider_contraction", WordIterator(), attributes, False),
            ProviderBridge(self),
        )
        logger.debug("pyspellchecker dictionary loaded", language=self.language)

    def add_word(self, word: str) -> None:
        """Add a word to the dictionary for the lifetime of this provider."""
        self._dictionary.word_frequency.add(word)

    def ignore_word(self, word: str) -> None:
        """Accept a word without adding it to the dictionary."""
        self._ignored.add(word.lower())

    def spell_check(self, word: str) -> bool:
        if word.lower() in self._ignored:
            return True
        return bool(self._dictionary.known([word]))

    def request_checking_of_text(self, text: str) -> list[dict[str, int]]:
        segmenter = self._words.acquire("request_checking_of_text")
        segmenter.set_text(text)
        results: list[dict[str, int]] = []
        while (token := segmenter.next_word()) is not None:
            if self.spell_check(token.word):
                continue
            if self._contractions.is_valid_contraction(token.word):
                continue
            results.append({"location": token.start, "length": token.length})
        return results

    def auto_correct_word(self, word: str) -> str | None:
        correction = self._dictionary.correction(word)
        if not correction or correction == word.lower():
            return None
        if word[:1].isupper():
            return correction[:1].upper() + correction[1:]
        return correction
