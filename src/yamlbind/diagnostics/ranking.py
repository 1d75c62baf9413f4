"""Edit-distance ranking for "did you mean?" suggestions."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(left: str, right: str) -> int:
    """Compute Levenshtein edit distance between two strings."""
    if left == right:
        return 0
    if not left:
        return len(right)
    if not right:
        return len(left)
    prev = list(range(len(right) + 1))
    for i, cl in enumerate(left, 1):
        curr = [i]
        for j, cr in enumerate(right, 1):
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + (cl != cr)))
        prev = curr
    return prev[-1]


def rank_suggestions(candidates: Iterable[str], base: str | None) -> list[str]:
    """Order candidates by closeness to *base*.

    A candidate equal to *base* always comes first, the rest follow by
    ascending edit distance. Ties keep their input order. Without a base the
    input order is returned unchanged. Matching is case-sensitive.
    """
    ordered = list(candidates)
    if not base:
        return ordered
    return sorted(ordered, key=lambda c: (c != base, levenshtein_distance(c, base)))
