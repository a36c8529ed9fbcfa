"""Rank a haystack of candidates against a query."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import TypeVar

from fragment.config import settings
from fragment.matching.scorer import similarity
from fragment.matching.types import Match, as_str

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find(
    needle: str,
    haystack: Iterable[T],
    max_results: int | None = None,
    case_sensitive: bool | None = None,
    *,
    clone: bool = False,
) -> list[Match[T]]:
    """Return up to *max_results* matches for *needle*, best first.

    Candidates scoring ``0.0`` are dropped. Equal scores keep the order in
    which they appeared in *haystack*. With ``clone=True`` each match holds a
    shallow copy of its candidate instead of the caller's object.

    *max_results* and *case_sensitive* default to the values in
    ``fragment.config.settings``.
    """
    if max_results is None:
        max_results = settings.max_results
    if case_sensitive is None:
        case_sensitive = settings.case_sensitive
    if max_results < 0:
        raise ValueError(f"max_results must be non-negative, got {max_results}")

    # Lowered once here; same result as lowering per candidate
    query = needle if case_sensitive else needle.lower()

    results: list[Match[T]] = []
    scored = 0
    for candidate in haystack:
        text = as_str(candidate)
        if not case_sensitive:
            text = text.lower()
        scored += 1

        score = similarity(query, text)
        if score > 0.0:
            results.append(Match(copy.copy(candidate) if clone else candidate, score))

    # list.sort is stable, reverse=True included
    results.sort(key=lambda match: match.score, reverse=True)
    del results[max_results:]

    logger.debug(
        "find(%r): scored %d candidates, returning %d matches",
        needle,
        scored,
        len(results),
    )
    return results
