"""Pydantic data models for the extraction pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ExtractionStage(str, Enum):
    """Pipeline stages, in the order they are attempted."""
    direct = "direct"
    fence_stripped = "fence_stripped"
    balanced_extraction = "balanced_extraction"


class ExtractionCandidate(BaseModel):
    """A contiguous slice of response text hypothesized to be one JSON value."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="The sliced text, source[start:end]")
    stage: ExtractionStage = Field(description="Stage that produced this candidate")
    start: int = Field(ge=0, description="Start offset in the source text")
    end: int = Field(ge=0, description="End offset (exclusive) in the source text")

    @classmethod
    def from_span(cls, source: str, start: int, end: int, stage: ExtractionStage) -> "ExtractionCandidate":
        return cls(text=source[start:end], stage=stage, start=start, end=end)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class DecodeOutcome(Generic[T]):
    """Result of running the pipeline without raising.

    On success ``value`` holds the decoded object and ``candidate`` the slice
    that produced it. On failure ``error`` holds the last decoder message and
    ``candidate`` the last slice attempted, or a direct-stage slice of the
    whole input when nothing was worth decoding.
    """

    ok: bool
    value: Optional[T] = None
    candidate: Optional[ExtractionCandidate] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any, candidate: ExtractionCandidate) -> "DecodeOutcome":
        return cls(ok=True, value=value, candidate=candidate)

    @classmethod
    def failure(cls, error: str, candidate: Optional[ExtractionCandidate] = None) -> "DecodeOutcome":
        return cls(ok=False, error=error, candidate=candidate)

    @property
    def stage(self) -> Optional[ExtractionStage]:
        return self.candidate.stage if self.candidate else None
