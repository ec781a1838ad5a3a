"""Weighted prefix autocompletion over a static in-memory dictionary."""

from term_autocomplete.search import MalformedInputError, Term, TermStore, autocomplete


__all__ = ["MalformedInputError", "Term", "TermStore", "autocomplete"]
