"""Substring coverage scoring for a single query/candidate pair."""

from __future__ import annotations

TERM_SEPARATOR = " "


def split_terms(query: str) -> list[str]:
    """Split *query* on single spaces, dropping empty terms."""
    return [term for term in query.split(TERM_SEPARATOR) if term]


def similarity(query: str, data: str) -> float:
    """Score how much of *data* is covered by the terms of *query*.

    Every occurrence of a term, overlapping ones included, adds the term's
    UTF-8 length over the UTF-8 length of *data* to the score. Occurrences
    are searched at character offsets. A term that never occurs makes the
    whole score ``0.0``. The result is capped at ``1.0``.
    """
    if not data:
        return 0.0

    data_len = len(data.encode())
    score = 0.0

    for term in split_terms(query):
        term_len = len(term.encode())
        found = False
        start = data.find(term)
        while start != -1:
            score += term_len / data_len
            found = True
            start = data.find(term, start + 1)

        if not found:
            return 0.0

    # Overlapping occurrences can push the sum past 1.0
    return min(score, 1.0)
