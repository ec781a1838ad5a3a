"""
Prefix search and ranking package.

This package provides the pure-Python completion core:
- models: Term value type, validation, MalformedInputError
- compare: prefix-truncated comparison and sort keys
- term_store: immutable sorted TermStore
- range_search: lower/upper bound binary search
- ranking: descending-weight ranking and autocomplete
"""

from term_autocomplete.search.models import MAX_TERM_LENGTH, MalformedInputError, Term, validate_term
from term_autocomplete.search.range_search import lower_bound, match_range, upper_bound
from term_autocomplete.search.ranking import autocomplete, rank_by_weight
from term_autocomplete.search.term_store import TermStore


__all__ = [
    "MAX_TERM_LENGTH",
    "MalformedInputError",
    "Term",
    "TermStore",
    "autocomplete",
    "lower_bound",
    "match_range",
    "rank_by_weight",
    "upper_bound",
    "validate_term",
]
