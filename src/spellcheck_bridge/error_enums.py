"""
spellcheck_bridge.error_enums - Error code definitions for internal faults.
"""

from __future__ import annotations

from enum import Enum


class SpellCheckErrorCode(str, Enum):
    UNINITIALIZED_SEGMENTER = "UNINITIALIZED_SEGMENTER"
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"
    PROVIDER_CALL_FAILED = "PROVIDER_CALL_FAILED"
