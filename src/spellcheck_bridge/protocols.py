"""
Protocol definitions for the spell-check client and its collaborators.

The word segmenter, the character-attribute table, the script classifier and
the checking provider are external collaborators; default implementations
live in this package but any object satisfying these protocols can be used.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, IntFlag
from typing import Protocol

from spellcheck_bridge.models import BatchCheckOutcome, MisspellingRange, TextSpan, WordToken


class ScriptCategory(str, Enum):
    COMMON = "Common"
    INHERITED = "Inherited"
    SPECIFIC = "Specific"  # Any script with its own word-forming semantics


class TextCheckingType(IntFlag):
    SPELLING = 1
    GRAMMAR = 2


class CharacterAttributesProtocol(Protocol):
    """Locale-specific classification of characters that participate in words."""

    @property
    def language(self) -> str | None:
        """The normalised base language, or None if never set."""
        ...

    def set_default_language(self, language: str) -> None:
        """Rebuild the table for ``language``."""
        ...

    def rule_set(self, allow_contraction: bool) -> str:
        """Return the word pattern for the current language."""
        ...


class WordSegmenterProtocol(Protocol):
    """Produces word and contraction candidates from text."""

    @property
    def is_initialized(self) -> bool: ...

    def initialize(
        self, attributes: CharacterAttributesProtocol, allow_contraction: bool
    ) -> bool:
        """Prepare the segmenter; returns False on failure."""
        ...

    def set_text(self, text: str) -> bool:
        """Reset the segmenter onto ``text``."""
        ...

    def next_word(self) -> WordToken | None:
        """Return the next candidate, or None when the text is exhausted."""
        ...


class ScriptClassifierProtocol(Protocol):
    def script_of(self, code_point: int) -> ScriptCategory:
        """Classify a single code point."""
        ...


class ProviderBridgeProtocol(Protocol):
    """Logical call/return contract of the checking provider."""

    @property
    def spell_check_available(self) -> bool: ...

    def check_word(self, word: str) -> bool:
        """Return True if ``word`` is correct; fails open to True."""
        ...

    async def request_batch_check(self, text: str) -> list[MisspellingRange]:
        """Return the provider's misspellings for ``text``.

        Raises:
            SpellCheckError: If the provider method is missing or the call failed
        """
        ...

    def auto_correct(self, word: str) -> str | None:
        """Return the provider's correction for ``word``, if any.

        Raises:
            SpellCheckError: If the provider method is missing or the call failed
        """
        ...


class TextCheckingCompletionProtocol(Protocol):
    """Callback-style handle receiving exactly one batch-check terminal state."""

    def did_finish_checking_text(self, results: Sequence[MisspellingRange]) -> None: ...

    def did_cancel_checking_text(self) -> None: ...


class SpellCheckClientProtocol(Protocol):
    """Capability set a host text surface uses for inline spell checking."""

    def check_one(self, text: str) -> TextSpan | None:
        """Return the first real misspelling in ``text``, or None."""
        ...

    async def check_all(self, text: str) -> BatchCheckOutcome:
        """Check the whole of ``text`` through the provider's batch entry point."""
        ...

    def auto_correct(self, word: str) -> str | None:
        """Return an automatic correction for ``word``, or None."""
        ...

    def show_spelling_ui(self, show: bool) -> None: ...

    def is_showing_spelling_ui(self) -> bool: ...

    def update_spelling_ui_with_misspelled_word(self, word: str) -> None: ...
