"""Autocomplete service orchestration layer.

Wraps the pure search core with configuration, logging and metrics.
Provides the high-level query API used by the CLI.
"""

from __future__ import annotations

import logging

from term_autocomplete.config import Settings
from term_autocomplete.dictionary import load_term_store
from term_autocomplete.models import AutocompleteResponse
from term_autocomplete.observability.metrics import DICTIONARY_TERMS, QUERY_COUNT, QUERY_LATENCY, track_latency
from term_autocomplete.search.range_search import match_range
from term_autocomplete.search.ranking import autocomplete
from term_autocomplete.search.term_store import TermStore


logger = logging.getLogger(__name__)


class AutocompleteService:
    """High-level completion service over one loaded dictionary.

    The service holds a read-only ``TermStore`` and keeps no per-query
    state, so a single instance may be shared between threads.
    """

    def __init__(self, store: TermStore, *, default_limit: int | None = None):
        """Initialize the service.

        Args:
            store: Sorted term store to query
            default_limit: Result limit used when ``complete`` gets none (None = unlimited)
        """
        if default_limit is not None and default_limit < 0:
            raise ValueError(f"default_limit must be >= 0, got {default_limit}")
        self.store = store
        self.default_limit = default_limit
        DICTIONARY_TERMS.set(len(store))

    @classmethod
    def from_settings(cls, settings: Settings) -> AutocompleteService:
        """Load the dictionary named by ``settings`` and build a service around it.

        Raises:
            ValueError: If no dictionary path is configured
            FileNotFoundError: If the dictionary file does not exist
            MalformedInputError: If the dictionary content is invalid
        """
        path = settings.get_dictionary_path()
        if path is None:
            raise ValueError("No dictionary configured; pass a path or set DICTIONARY_PATH")

        store = load_term_store(path, encoding=settings.file_encoding, max_length=settings.max_term_length)
        logger.info("Dictionary loaded", extra={"path": str(path), "terms": len(store)})
        return cls(store, default_limit=settings.result_limit)

    def complete(self, prefix: str, limit: int | None = None) -> AutocompleteResponse:
        """Return ranked completions for ``prefix``.

        Args:
            prefix: Query prefix; the empty prefix matches every term
            limit: Maximum suggestions to return, overriding ``default_limit``

        Returns:
            AutocompleteResponse with the total match count and ranked suggestions
        """
        effective_limit = self.default_limit if limit is None else limit

        with track_latency(QUERY_LATENCY):
            total_matches = len(match_range(self.store, prefix))
            terms = autocomplete(self.store, prefix, effective_limit)

        QUERY_COUNT.labels(outcome="hit" if total_matches else "miss").inc()
        logger.debug(f"Prefix {prefix!r}: {total_matches} matches, returning {len(terms)}")
        return AutocompleteResponse.from_terms(prefix, terms, total_matches)
