"""Select-mode substring matching (core domain)."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from core.models import MatchResult


def _split(candidate: str, found: Optional[re.Match]) -> Optional[MatchResult]:
    if found is None:
        return None
    start, end = found.span()
    return MatchResult(
        prefix=candidate[:start],
        matched=candidate[start:end],
        suffix=candidate[end:],
        full=candidate,
    )


def _pattern(query: str) -> re.Pattern:
    # IGNORECASE keeps the span in original-string indices, which lower()
    # does not guarantee for every code point.
    return re.compile(re.escape(query), re.IGNORECASE)


def match(query: str, candidate: str) -> Optional[MatchResult]:
    """Return the candidate split around the first case-insensitive hit.

    An empty query matches every candidate trivially; callers must not treat
    that as an active selection.
    """

    if not query:
        return MatchResult(prefix="", matched="", suffix=candidate, full=candidate)
    return _split(candidate, _pattern(query).search(candidate))


def compute_matches(query: str, candidates: Iterable[str]) -> List[MatchResult]:
    """Match every candidate, keeping candidate order and dropping misses."""

    if not query:
        return [match(query, candidate) for candidate in candidates]

    pattern = _pattern(query)
    results: List[MatchResult] = []
    for candidate in candidates:
        result = _split(candidate, pattern.search(candidate))
        if result is not None:
            results.append(result)
    return results
