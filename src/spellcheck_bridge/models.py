"""
Data models shared by the segmenter, the provider bridge and the client.

All models are frozen pydantic models. Offsets and lengths are counted in
code points of the Python ``str`` they refer to.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MisspellingRange(BaseModel):
    """A misspelled range reported to the host."""

    location: int = Field(ge=0)
    length: int = Field(ge=0)

    model_config = ConfigDict(frozen=True, from_attributes=True)


class TextSpan(BaseModel):
    """A word (or contraction) and its position in the source text."""

    text: str
    start: int = Field(ge=0)
    length: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def end(self) -> int:
        return self.start + self.length

    def to_range(self) -> MisspellingRange:
        return MisspellingRange(location=self.start, length=self.length)


class WordToken(BaseModel):
    """One candidate produced by a word segmenter."""

    word: str
    start: int = Field(ge=0)
    length: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def to_span(self) -> TextSpan:
        return TextSpan(text=self.word, start=self.start, length=self.length)


class VerdictKind(str, Enum):
    CORRECT = "correct"
    MISSPELLED = "misspelled"
    INDETERMINATE = "indeterminate"


class CheckVerdict(BaseModel):
    """Result of a single-result check.

    INDETERMINATE means no check could be performed; callers treat it exactly
    like CORRECT.
    """

    kind: VerdictKind
    span: TextSpan | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _span_only_when_misspelled(self) -> CheckVerdict:
        if (self.kind is VerdictKind.MISSPELLED) != (self.span is not None):
            raise ValueError("span must be set exactly when the verdict is MISSPELLED")
        return self

    @classmethod
    def correct(cls) -> CheckVerdict:
        return cls(kind=VerdictKind.CORRECT)

    @classmethod
    def indeterminate(cls) -> CheckVerdict:
        return cls(kind=VerdictKind.INDETERMINATE)

    @classmethod
    def misspelled(cls, span: TextSpan) -> CheckVerdict:
        return cls(kind=VerdictKind.MISSPELLED, span=span)

    @property
    def is_misspelled(self) -> bool:
        return self.kind is VerdictKind.MISSPELLED


class BatchStatus(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BatchCheckOutcome(BaseModel):
    """Terminal state of a batch check.

    CANCELLED means no check was performed at all, which is not the same as
    COMPLETED with an empty result list.
    """

    status: BatchStatus
    results: tuple[MisspellingRange, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _cancelled_has_no_results(self) -> BatchCheckOutcome:
        if self.status is BatchStatus.CANCELLED and self.results:
            raise ValueError("a cancelled batch check cannot carry results")
        return self

    @classmethod
    def completed(cls, results: Any) -> BatchCheckOutcome:
        return cls(status=BatchStatus.COMPLETED, results=tuple(results))

    @classmethod
    def cancelled(cls) -> BatchCheckOutcome:
        return cls(status=BatchStatus.CANCELLED)

    @property
    def is_cancelled(self) -> bool:
        return self.status is BatchStatus.CANCELLED


class LanguageConfig(BaseModel):
    """Language the character-attribute table is built for."""

    default_language: str = "en"

    model_config = ConfigDict(frozen=True)
