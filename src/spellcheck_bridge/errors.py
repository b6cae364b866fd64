"""
Structured errors for spell-check faults.

Errors are raised close to the fault (the provider bridge, the segmenter slots)
and caught at the public boundary of the client, where they are logged and
degraded to the fail-open outcome. They never reach the host.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, NoReturn

from pydantic import BaseModel, ConfigDict, Field

from spellcheck_bridge.error_enums import SpellCheckErrorCode


class ErrorDetail(BaseModel):
    """Pure data description of an internal spell-check fault."""

    error_code: SpellCheckErrorCode
    message: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(frozen=True)


class SpellCheckError(Exception):
    """Exception carrying an ErrorDetail."""

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    @property
    def error_code(self) -> SpellCheckErrorCode:
        return self.error_detail.error_code

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    @property
    def details(self) -> dict[str, Any]:
        return self.error_detail.details

    def to_log_context(self) -> dict[str, Any]:
        """Flatten the error into keyword arguments for a structlog call."""
        return {
            "error_code": self.error_code.value,
            "operation": self.operation,
            **self.details,
        }

    def __repr__(self) -> str:
        return (
            f"SpellCheckError(error_code={self.error_code.value!r}, "
            f"operation={self.operation!r}, message={self.error_detail.message!r})"
        )


def _raise(
    error_code: SpellCheckErrorCode, operation: str, message: str, **details: Any
) -> NoReturn:
    raise SpellCheckError(
        ErrorDetail(error_code=error_code, message=message, operation=operation, details=details)
    )


def raise_provider_unavailable(operation: str, method: str, **details: Any) -> NoReturn:
    """Raise when the provider does not expose a callable for ``method``."""
    _raise(
        SpellCheckErrorCode.PROVIDER_UNAVAILABLE,
        operation,
        f"Provider method '{method}' is not available",
        method=method,
        **details,
    )


def raise_provider_call_failed(
    operation: str, method: str, reason: str, **details: Any
) -> NoReturn:
    """Raise when a provider call raised or returned malformed data."""
    _raise(
        SpellCheckErrorCode.PROVIDER_CALL_FAILED,
        operation,
        f"Provider method '{method}' failed: {reason}",
        method=method,
        **details,
    )


def raise_uninitialized_segmenter(operation: str, segmenter: str, **details: Any) -> NoReturn:
    """Raise when a word segmenter slot could not be initialized."""
    _raise(
        SpellCheckErrorCode.UNINITIALIZED_SEGMENTER,
        operation,
        f"Word segmenter '{segmenter}' is not initialized",
        segmenter=segmenter,
        **details,
    )
