"""Candidate string views and the score-qualified search result."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class UnsupportedCandidateError(TypeError):
    """Raised when a candidate has no string view to match against."""

    def __init__(self, candidate: Any) -> None:
        self.candidate = candidate
        super().__init__(f"Cannot match against {type(candidate).__name__!r} candidate")


@runtime_checkable
class AsStr(Protocol):
    """Anything that can hand out a string view of itself."""

    def as_str(self) -> str: ...


def as_str(candidate: Any) -> str:
    """Return the string view of *candidate*.

    Plain strings are returned as-is, ``AsStr`` objects are asked for their
    view and path-like objects go through ``os.fspath``.
    """
    if isinstance(candidate, str):
        return candidate
    if isinstance(candidate, AsStr):
        return candidate.as_str()
    if isinstance(candidate, os.PathLike):
        return os.fsdecode(os.fspath(candidate))
    raise UnsupportedCandidateError(candidate)


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    """A candidate paired with its similarity score.

    The original haystack element is available as ``candidate``.
    """

    candidate: T
    score: float

    @property
    def text(self) -> str:
        """String view the score was computed from (before case folding)."""
        return as_str(self.candidate)
