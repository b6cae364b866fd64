"""Fallback for candidates that concatenate several valid words."""

from __future__ import annotations

from spellcheck_bridge.errors import SpellCheckError
from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.protocols import ProviderBridgeProtocol
from spellcheck_bridge.segmenter_slot import LazySegmenter

logger = create_logger("spellcheck_bridge.contraction")


class ContractionResolver:
    """Decides whether a rejected candidate is made only of correct words.

    A concatenated word such as "hello:hello" or "in'n'out" that the provider
    does not know is still treated as correct when each component is. The
    components are checked through the provider directly; the resolver never
    goes back through the top-level segmenter.
    """

    def __init__(self, segmenter: LazySegmenter, bridge: ProviderBridgeProtocol) -> None:
        self._segmenter = segmenter
        self._bridge = bridge

    def is_valid_contraction(self, contraction: str) -> bool:
        try:
            segmenter = self._segmenter.acquire("is_valid_contraction")
        except SpellCheckError as e:
            logger.debug(
                "Contraction segmenter unavailable; treating word as valid",
                **e.to_log_context(),
            )
            return True

        segmenter.set_text(contraction)
        while (token := segmenter.next_word()) is not None:
            if not self._bridge.check_word(token.word):
                return False
        return True
