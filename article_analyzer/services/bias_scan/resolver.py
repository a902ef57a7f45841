# article_analyzer/services/bias_scan/resolver.py
"""
Overlap Resolver: reduce candidates to a non-overlapping set.

Policy is greedy earliest-start-wins. Candidates are stably sorted by start
offset, so same-start ties go to whichever candidate came first in the pool
(lexicon, then category, then term declaration order). A candidate sharing
any character with an already accepted match is dropped.
"""

from typing import Iterable

from .types import Match


def resolve_overlaps(candidates: Iterable[Match]) -> list[Match]:
    """
    Keep a maximal non-overlapping subset of candidates.

    Args:
        candidates: Pooled matches from all active lexicons, in pool order

    Returns:
        Retained matches ordered by start offset
    """
    ordered = sorted(candidates, key=lambda m: m.start)

    retained: list[Match] = []
    # Accepted matches are disjoint and sorted, so the last one ends furthest right
    cursor = 0
    for match in ordered:
        if match.start < cursor:
            continue
        retained.append(match)
        cursor = match.end

    return retained
