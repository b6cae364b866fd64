"""In-process checking providers."""

from .pyspellchecker_provider import DictionaryNotFound, PySpellCheckerProvider

__all__ = ["DictionaryNotFound", "PySpellCheckerProvider"]
