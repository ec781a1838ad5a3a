"""Binary range search over a sorted term sequence.

All terms that start with a prefix sit in one contiguous run of a sorted
store. ``lower_bound`` finds the first index of that run and ``upper_bound``
the last; when ``upper_bound < lower_bound`` nothing matches.
"""

from __future__ import annotations

from collections.abc import Sequence

from term_autocomplete.search.compare import compare_prefix
from term_autocomplete.search.models import Term


def lower_bound(terms: Sequence[Term], prefix: str) -> int:
    """Return the first index whose prefix-truncated text is not less than ``prefix``.

    Returns ``len(terms)`` when every term sorts before ``prefix``.
    """
    left, right = 0, len(terms) - 1
    while left <= right:
        mid = (left + right) // 2
        if compare_prefix(terms[mid].text, prefix) >= 0:
            right = mid - 1
        else:
            left = mid + 1
    return left


def upper_bound(terms: Sequence[Term], prefix: str) -> int:
    """Return the last index whose text starts with ``prefix``, or ``-1`` when none does.

    When no term matches, the returned index is below ``lower_bound`` for the
    same prefix.
    """
    left, right = 0, len(terms) - 1
    while left <= right:
        mid = (left + right) // 2
        if compare_prefix(terms[mid].text, prefix) > 0:
            right = mid - 1
        else:
            left = mid + 1
    if right >= 0 and compare_prefix(terms[right].text, prefix) != 0:
        return -1
    return right


def match_range(terms: Sequence[Term], prefix: str) -> range:
    """Indices of all terms starting with ``prefix`` (empty when there are none)."""
    low = lower_bound(terms, prefix)
    high = upper_bound(terms, prefix)
    if high < low:
        return range(0)
    return range(low, high + 1)
