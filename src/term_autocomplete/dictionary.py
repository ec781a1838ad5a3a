"""Reader for weighted dictionary files.

The format is the one used by the legacy completion tools: an entry count,
then one ``<weight> <text>`` entry per line, where the text is the rest of
the line after the weight::

    3
    5627187200	the
    3395006400	of
      1234.5  new york

Blank lines are ignored. The declared count must match the entries present.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from term_autocomplete.search.models import MAX_TERM_LENGTH, MalformedInputError, Term, validate_term
from term_autocomplete.search.term_store import TermStore


logger = logging.getLogger(__name__)


class DictionaryFormatError(MalformedInputError):
    """Raised when a dictionary file does not follow the count + entries layout."""

    def __init__(self, reason: str, *, line_number: int | None = None, index: int | None = None) -> None:
        self.line_number = line_number
        super().__init__(reason, index=index)
        if line_number is not None:
            self.args = (f"line {line_number}: {reason}",)


def _parse_count(line: str, line_number: int) -> int:
    token = line.strip()
    try:
        count = int(token)
    except ValueError as exc:
        raise DictionaryFormatError(f"expected an entry count, got {token!r}", line_number=line_number) from exc
    if count < 0:
        raise DictionaryFormatError(f"entry count must be >= 0, got {count}", line_number=line_number)
    return count


def _parse_entry(line: str, line_number: int, index: int, max_length: int) -> Term:
    fields = line.split(maxsplit=1)
    if len(fields) < 2:
        raise DictionaryFormatError(
            f"expected '<weight> <text>', got {line!r}", line_number=line_number, index=index
        )
    raw_weight, text = fields
    try:
        weight = float(raw_weight)
    except ValueError as exc:
        raise DictionaryFormatError(
            f"weight {raw_weight!r} is not a number", line_number=line_number, index=index
        ) from exc
    try:
        return validate_term(Term(text=text, weight=weight), max_length)
    except MalformedInputError as exc:
        raise DictionaryFormatError(exc.reason, line_number=line_number, index=index) from exc


def parse_dictionary(lines: Iterable[str], *, max_length: int = MAX_TERM_LENGTH) -> list[Term]:
    """Parse dictionary lines into terms, in file order.

    Args:
        lines: Lines of a dictionary file, with or without line endings.
        max_length: Maximum UTF-8 length of a term text in bytes.

    Returns:
        Parsed terms (unsorted).

    Raises:
        DictionaryFormatError: On a missing or invalid count, a malformed
            entry, or a count that disagrees with the entries present.
    """
    count: int | None = None
    terms: list[Term] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        if count is None:
            count = _parse_count(line, line_number)
            continue
        if len(terms) == count:
            raise DictionaryFormatError(
                f"found more entries than the declared count of {count}", line_number=line_number
            )
        terms.append(_parse_entry(line, line_number, len(terms), max_length))

    if count is None:
        raise DictionaryFormatError("dictionary is empty; expected an entry count")
    if len(terms) != count:
        raise DictionaryFormatError(f"declared {count} entries but found {len(terms)}")
    return terms


def read_dictionary(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    max_length: int = MAX_TERM_LENGTH,
) -> list[Term]:
    """Read and parse a dictionary file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        DictionaryFormatError: If the file content is malformed.
    """
    path = Path(path)
    with path.open(encoding=encoding, newline="") as handle:
        terms = parse_dictionary(handle, max_length=max_length)
    logger.info("Read %d terms from %s", len(terms), path)
    return terms


def load_term_store(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    max_length: int = MAX_TERM_LENGTH,
) -> TermStore:
    """Read a dictionary file and build the sorted term store from it."""
    return TermStore.build(read_dictionary(path, encoding=encoding, max_length=max_length), max_length)
