"""
Default word segmentation: a character-attribute table and a word iterator.

The iterator splits text into candidates the provider can check. With
contractions allowed, runs of word characters joined by single "mid-letter"
characters (apostrophes, colon, middle dot, ...) stay one candidate, so
"in'n'out" and "hello:hello" are handed to the provider whole. Without
contractions, mid-letter characters break words; the contraction resolver uses
that mode to split a rejected candidate into its components.
"""

from __future__ import annotations

from collections.abc import Iterator

import regex

from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.models import WordToken
from spellcheck_bridge.protocols import CharacterAttributesProtocol, WordSegmenterProtocol

logger = create_logger("spellcheck_bridge.word_iterator")

# Characters that join the parts of a contraction in every language
DEFAULT_MID_LETTERS = "'\u2019:\u00b7\u2027\ufe13\ufe55\uff1a"

# Additional joiners for specific languages
LANGUAGE_MID_LETTERS: dict[str, str] = {
    "he": "\u05f3\u05f4",  # geresh, gershayim
}

WORD_CHARACTERS = r"\p{L}\p{M}\p{N}"

_HAS_LETTER = regex.compile(r"\p{L}")


def normalize_language(language: str) -> str:
    """Reduce a language identifier such as ``en-US`` or ``en_US`` to ``en``."""
    return language.strip().replace("_", "-").split("-")[0].lower()


class CharacterAttributes(CharacterAttributesProtocol):
    """Character-attribute table for one language."""

    def __init__(self, language: str | None = None) -> None:
        self._language: str | None = None
        self._mid_letters = ""
        if language:
            self.set_default_language(language)

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def mid_letters(self) -> str:
        return self._mid_letters

    def set_default_language(self, language: str) -> None:
        base = normalize_language(language)
        if not base:
            logger.debug("Ignoring empty language identifier")
            return
        self._language = base
        self._mid_letters = DEFAULT_MID_LETTERS + LANGUAGE_MID_LETTERS.get(base, "")

    def rule_set(self, allow_contraction: bool) -> str:
        word = f"[{WORD_CHARACTERS}]+"
        if not allow_contraction:
            return word
        joiners = "".join(regex.escape(ch) for ch in self._mid_letters)
        return f"{word}(?:[{joiners}]{word})*"


class WordIterator(WordSegmenterProtocol):
    """Iterates over the candidates of one text at a time.

    Tokens without any letter (numbers) are skipped. Offsets are code-point
    offsets into the text given to ``set_text``.
    """

    def __init__(self) -> None:
        self._pattern: regex.Pattern[str] | None = None
        self._text = ""
        self._position = 0

    @property
    def is_initialized(self) -> bool:
        return self._pattern is not None

    def initialize(self, attributes: CharacterAttributesProtocol, allow_contraction: bool) -> bool:
        if attributes.language is None:
            logger.debug("Character attributes have no language; cannot initialize")
            return False
        try:
            self._pattern = regex.compile(attributes.rule_set(allow_contraction))
        except regex.error as e:
            logger.warning("Invalid word rule set", error=str(e))
            return False
        return True

    def set_text(self, text: str) -> bool:
        if self._pattern is None:
            return False
        self._text = text
        self._position = 0
        return True

    def next_word(self) -> WordToken | None:
        if self._pattern is None:
            return None
        while True:
            match = self._pattern.search(self._text, self._position)
            if match is None:
                self._position = len(self._text)
                return None
            self._position = match.end()
            word = match.group()
            if _HAS_LETTER.search(word):
                return WordToken(word=word, start=match.start(), length=len(word))

    def __iter__(self) -> Iterator[WordToken]:
        while (token := self.next_word()) is not None:
            yield token
