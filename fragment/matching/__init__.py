"""Substring matching: candidate scoring and result ranking."""

from fragment.matching.ranker import find
from fragment.matching.scorer import similarity, split_terms
from fragment.matching.types import AsStr, Match, UnsupportedCandidateError, as_str

__all__ = [
    "AsStr",
    "Match",
    "UnsupportedCandidateError",
    "as_str",
    "find",
    "similarity",
    "split_terms",
]
