"""Comparison helpers shared by the term store and the query engine.

Python compares ``str`` values by code point, and UTF-8 preserves code point
order, so plain string comparison is byte-wise comparison of the encoded
terms. None of these helpers fold case or consult the locale.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from term_autocomplete.search.models import Term


def compare_prefix(text: str, prefix: str) -> int:
    """Compare ``text`` against ``prefix`` looking only at ``len(prefix)`` characters.

    Returns:
        A negative number, zero or a positive number when the truncated text
        sorts before, equal to, or after ``prefix``. Zero means ``text``
        starts with ``prefix``.

    Examples:
        >>> compare_prefix("apex", "ap")
        0
        >>> compare_prefix("an", "ap")
        -1
        >>> compare_prefix("a", "ap")
        -1
        >>> compare_prefix("bee", "ap")
        1
    """
    head = text[: len(prefix)]
    if head == prefix:
        return 0
    return -1 if head < prefix else 1


def text_key(term: Term) -> str:
    """Sort key for ascending lexicographic order."""
    return term.text


def weight_key(term: Term) -> float:
    """Sort key for ranking by weight."""
    return term.weight
