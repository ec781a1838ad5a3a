"""Immutable, lexicographically sorted term store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from term_autocomplete.search.compare import text_key
from term_autocomplete.search.models import MAX_TERM_LENGTH, MalformedInputError, Term, validate_term


class TermStore(Sequence[Term]):
    """Read-only sequence of terms sorted ascending by text.

    Duplicate texts are allowed and keep their input order. The store exposes
    no mutation operations, so one instance can serve any number of
    concurrent queries.

    Use ``build()`` to create a store from raw entries. The constructor only
    wraps terms that are already sorted by text and raises ``ValueError``
    when they are not; it does not validate the terms themselves.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        terms = tuple(terms)
        for index in range(1, len(terms)):
            if terms[index - 1].text > terms[index].text:
                raise ValueError(
                    f"terms must be sorted by text: {terms[index - 1].text!r} precedes {terms[index].text!r}"
                )
        self._terms = terms

    @classmethod
    def build(
        cls,
        entries: Iterable[Term | tuple[str, float]],
        max_length: int = MAX_TERM_LENGTH,
    ) -> TermStore:
        """Validate and sort raw dictionary entries.

        Args:
            entries: Terms or ``(text, weight)`` pairs in any order.
            max_length: Maximum UTF-8 length of a term text in bytes.

        Returns:
            A new store sorted ascending by text.

        Raises:
            MalformedInputError: On the first entry that is not a valid term.
        """
        validated: list[Term] = []
        for index, entry in enumerate(entries):
            try:
                validated.append(validate_term(Term.from_pair(entry), max_length))
            except MalformedInputError as exc:
                raise MalformedInputError(exc.reason, index=index) from exc
        validated.sort(key=text_key)
        return cls(tuple(validated))

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(term.text for term in self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    @overload
    def __getitem__(self, index: int) -> Term: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Term, ...]: ...

    def __getitem__(self, index: int | slice) -> Term | tuple[Term, ...]:
        return self._terms[index]

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermStore):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __repr__(self) -> str:
        return f"TermStore({len(self._terms)} terms)"
