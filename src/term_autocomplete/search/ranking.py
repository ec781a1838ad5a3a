"""Weight ranking of prefix matches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from term_autocomplete.search.compare import weight_key
from term_autocomplete.search.models import Term
from term_autocomplete.search.range_search import lower_bound, upper_bound


def rank_by_weight(terms: Iterable[Term]) -> list[Term]:
    """Return a new list of ``terms`` sorted by descending weight.

    The sort is stable: terms with equal weight keep the order they arrive in,
    which for store slices is lexicographic order.
    """
    return sorted(terms, key=weight_key, reverse=True)


def autocomplete(terms: Sequence[Term], prefix: str, limit: int | None = None) -> list[Term]:
    """Find all terms starting with ``prefix``, heaviest first.

    Args:
        terms: A sorted term sequence, normally a ``TermStore``.
        prefix: Query prefix. The empty string matches every term.
        limit: Keep only the first ``limit`` ranked terms. ``None`` keeps all.

    Returns:
        A freshly allocated list; ``terms`` is never modified.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    low = lower_bound(terms, prefix)
    high = upper_bound(terms, prefix)
    if high < low:
        return []

    ranked = rank_by_weight(terms[low : high + 1])
    if limit is not None:
        del ranked[limit:]
    return ranked
