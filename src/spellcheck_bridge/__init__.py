"""
Spell-check orchestration for host text surfaces.

The client segments text into candidate words, asks an external checking
provider about each one, rescues concatenations of valid words, and reports
either the first misspelling or the provider's full list of misspellings.
"""

from .client import SpellCheckClient
from .contraction import ContractionResolver
from .errors import ErrorDetail, SpellCheckError
from .error_enums import SpellCheckErrorCode
from .models import (
    BatchCheckOutcome,
    BatchStatus,
    CheckVerdict,
    LanguageConfig,
    MisspellingRange,
    TextSpan,
    VerdictKind,
    WordToken,
)
from .protocols import (
    ProviderBridgeProtocol,
    ScriptCategory,
    SpellCheckClientProtocol,
    TextCheckingCompletionProtocol,
    TextCheckingType,
)
from .provider_bridge import ProviderBridge, ProviderMethodNames
from .script_gate import has_checkable_characters

__all__ = [
    "BatchCheckOutcome",
    "BatchStatus",
    "CheckVerdict",
    "ContractionResolver",
    "ErrorDetail",
    "LanguageConfig",
    "MisspellingRange",
    "ProviderBridge",
    "ProviderBridgeProtocol",
    "ProviderMethodNames",
    "ScriptCategory",
    "SpellCheckClient",
    "SpellCheckClientProtocol",
    "SpellCheckError",
    "SpellCheckErrorCode",
    "TextCheckingCompletionProtocol",
    "TextCheckingType",
    "TextSpan",
    "VerdictKind",
    "WordToken",
    "has_checkable_characters",
]
