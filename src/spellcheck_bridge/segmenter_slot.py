"""Lazily initialized, fail-sticky ownership of one word segmenter."""

from __future__ import annotations

from enum import Enum

from spellcheck_bridge.errors import raise_uninitialized_segmenter
from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.protocols import CharacterAttributesProtocol, WordSegmenterProtocol

logger = create_logger("spellcheck_bridge.segmenter_slot")


class SegmenterState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    DISABLED = "disabled"


class LazySegmenter:
    """Owns a segmenter and initializes it on first use.

    A failed initialization disables the slot for the lifetime of the owner;
    it is never retried.
    """

    def __init__(
        self,
        name: str,
        segmenter: WordSegmenterProtocol,
        attributes: CharacterAttributesProtocol,
        allow_contraction: bool,
    ) -> None:
        self.name = name
        self._segmenter = segmenter
        self._attributes = attributes
        self._allow_contraction = allow_contraction
        self._state = SegmenterState.UNINITIALIZED

    @property
    def state(self) -> SegmenterState:
        return self._state

    def acquire(self, operation: str) -> WordSegmenterProtocol:
        """Return the ready segmenter, initializing it on first use.

        Raises:
            SpellCheckError: UNINITIALIZED_SEGMENTER if the slot is disabled
        """
        if self._state is SegmenterState.READY:
            return self._segmenter
        if self._state is SegmenterState.UNINITIALIZED:
            self._state = (
                SegmenterState.READY if self._initialize() else SegmenterState.DISABLED
            )
            if self._state is SegmenterState.READY:
                return self._segmenter
            logger.debug(f"Failed to initialize word segmenter '{self.name}'", segmenter=self.name)
        raise_uninitialized_segmenter(operation, self.name)

    def _initialize(self) -> bool:
        if self._segmenter.is_initialized:
            return True
        try:
            return bool(self._segmenter.initialize(self._attributes, self._allow_contraction))
        except Exception as e:
            logger.warning(
                f"Word segmenter '{self.name}' raised during initialization",
                segmenter=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False
