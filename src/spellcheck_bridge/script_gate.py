"""
Cheap rejection of text that contains nothing worth checking.

A pass here says nothing about whether any word is misspelled; it only means
the text contains at least one character from a script with its own word
semantics (not Common, not Inherited).
"""

from __future__ import annotations

import regex

from spellcheck_bridge.protocols import ScriptCategory, ScriptClassifierProtocol

_COMMON = regex.compile(r"\p{Script=Common}")
_INHERITED = regex.compile(r"\p{Script=Inherited}")

NON_WORD_SCRIPTS = frozenset({ScriptCategory.COMMON, ScriptCategory.INHERITED})


class RegexScriptClassifier(ScriptClassifierProtocol):
    """Script classifier backed by the Unicode script property of ``regex``."""

    def script_of(self, code_point: int) -> ScriptCategory:
        char = chr(code_point)
        if _COMMON.match(char):
            return ScriptCategory.COMMON
        if _INHERITED.match(char):
            return ScriptCategory.INHERITED
        return ScriptCategory.SPECIFIC


_default_classifier = RegexScriptClassifier()


def has_checkable_characters(
    text: str,
    classifier: ScriptClassifierProtocol | None = None,
    start: int = 0,
) -> bool:
    """Return True on the first code point from ``start`` outside Common/Inherited."""
    classifier = classifier or _default_classifier
    for index in range(start, len(text)):
        if classifier.script_of(ord(text[index])) not in NON_WORD_SCRIPTS:
            return True
    return False
