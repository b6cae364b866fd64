"""
Adapter between the client and a checking provider object.

A provider is any object (or mapping of callables) exposing the configured
method names. Methods are looked up at call time, except the single-word
check, which is resolved once at construction and kept for the lifetime of the
bridge.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from spellcheck_bridge.errors import raise_provider_call_failed, raise_provider_unavailable
from spellcheck_bridge.logging_utils import create_logger
from spellcheck_bridge.models import MisspellingRange
from spellcheck_bridge.protocols import ProviderBridgeProtocol

logger = create_logger("spellcheck_bridge.provider_bridge")


class ProviderMethodNames(BaseModel):
    """Names of the provider methods the bridge calls."""

    spell_check: str = "spell_check"
    batch_check: str = "request_checking_of_text"
    auto_correct: str = "auto_correct_word"

    model_config = ConfigDict(frozen=True)


class ProviderBridge(ProviderBridgeProtocol):
    """Calls into a provider object and normalises what comes back."""

    def __init__(self, provider: Any, method_names: ProviderMethodNames | None = None) -> None:
        self._provider = provider
        self.method_names = method_names or ProviderMethodNames()
        self._spell_check = self._resolve(self.method_names.spell_check)

    @property
    def spell_check_available(self) -> bool:
        return self._spell_check is not None

    def _resolve(self, method: str) -> Callable[..., Any] | None:
        if self._provider is None:
            return None
        if isinstance(self._provider, Mapping):
            candidate = self._provider.get(method)
        else:
            candidate = getattr(self._provider, method, None)
        return candidate if callable(candidate) else None

    def check_word(self, word: str) -> bool:
        """Ask the provider whether ``word`` is spelled correctly.

        A missing callable, an exception or a non-boolean answer counts as
        correct.
        """
        if self._spell_check is None:
            return True

        try:
            result = self._spell_check(word)
        except Exception as e:
            logger.debug(
                "Provider spell check raised; treating word as correct",
                error=str(e),
                error_type=type(e).__name__,
            )
            return True

        if isinstance(result, bool):
            return result

        if inspect.iscoroutine(result):
            result.close()
        logger.debug(
            "Provider spell check returned a non-boolean; treating word as correct",
            result_type=type(result).__name__,
        )
        return True

    async def request_batch_check(self, text: str) -> list[MisspellingRange]:
        """Ask the provider for every misspelling in ``text``.

        Returns:
            Misspelling ranges in the order the provider reported them

        Raises:
            SpellCheckError: PROVIDER_UNAVAILABLE if the method is missing,
                PROVIDER_CALL_FAILED if it raised or returned malformed data
        """
        method = self.method_names.batch_check
        call = self._resolve(method)
        if call is None:
            raise_provider_unavailable("request_batch_check", method)

        try:
            result = call(text)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            raise_provider_call_failed(
                "request_batch_check", method, str(e), error_type=type(e).__name__
            )

        return self._to_ranges(result, method)

    @staticmethod
    def _to_ranges(result: Any, method: str) -> list[MisspellingRange]:
        if isinstance(result, (str, bytes, Mapping)) or not isinstance(result, Iterable):
            raise_provider_call_failed(
                "request_batch_check",
                method,
                "result is not a sequence of ranges",
                result_type=type(result).__name__,
            )
        try:
            return [MisspellingRange.model_validate(item) for item in result]
        except ValidationError as e:
            raise_provider_call_failed(
                "request_batch_check", method, "malformed range", errors=e.error_count()
            )
        except Exception as e:
            # Lazy results fail while being consumed, after the call returned
            raise_provider_call_failed(
                "request_batch_check", method, str(e), error_type=type(e).__name__
            )

    def auto_correct(self, word: str) -> str | None:
        """Ask the provider for an automatic correction of ``word``.

        Returns:
            The correction, or None if the provider has none

        Raises:
            SpellCheckError: PROVIDER_UNAVAILABLE if the method is missing,
                PROVIDER_CALL_FAILED if it raised or returned a non-string
        """
        method = self.method_names.auto_correct
        call = self._resolve(method)
        if call is None:
            raise_provider_unavailable("auto_correct", method)

        try:
            result = call(word)
        except Exception as e:
            raise_provider_call_failed("auto_correct", method, str(e), error_type=type(e).__name__)

        if result is None or result == "":
            return None
        if not isinstance(result, str):
            raise_provider_call_failed(
                "auto_correct",
                method,
                "result is not a string",
                result_type=type(result).__name__,
            )
        return result
