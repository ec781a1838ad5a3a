"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass
import math
import unicodedata


# Matches the fixed 200-byte term buffer of the legacy dictionary tools (199 bytes + terminator).
MAX_TERM_LENGTH = 199

# Tab is the only control character the dictionary format carries inside a term.
_ALLOWED_CONTROL_CHARS = frozenset("\t")


class MalformedInputError(ValueError):
    """Raised when a dictionary entry violates the term constraints."""

    def __init__(self, reason: str, *, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        if index is None:
            super().__init__(reason)
        else:
            super().__init__(f"entry {index}: {reason}")


@dataclass(frozen=True, slots=True)
class Term:
    """A dictionary entry: the completion text and its relevance weight."""

    text: str
    weight: float

    def to_dict(self) -> dict[str, str | float]:
        """Convert to dictionary for serialization."""
        return {"text": self.text, "weight": self.weight}

    @classmethod
    def from_pair(cls, entry: Term | tuple[str, float]) -> Term:
        """Create from a ``(text, weight)`` pair, passing terms through."""
        if isinstance(entry, Term):
            return entry
        try:
            text, weight = entry
        except (TypeError, ValueError) as exc:
            raise MalformedInputError(f"expected a (text, weight) pair, got {entry!r}") from exc
        try:
            weight = float(weight)
        except (TypeError, ValueError, OverflowError) as exc:
            raise MalformedInputError(f"weight {weight!r} is not a number") from exc
        return cls(text=text, weight=weight)


def find_control_character(text: str) -> str | None:
    """Return the first control character in ``text`` that a term may not contain."""
    for char in text:
        if char in _ALLOWED_CONTROL_CHARS:
            continue
        if unicodedata.category(char) == "Cc":
            return char
    return None


def validate_term(term: Term, max_length: int = MAX_TERM_LENGTH) -> Term:
    """Check a term against the dictionary constraints.

    Args:
        term: Term to check.
        max_length: Maximum UTF-8 encoded length of ``term.text`` in bytes.

    Returns:
        The same term, for chaining.

    Raises:
        MalformedInputError: If the text is empty, too long, not a string,
            contains a control character, or the weight is not a number or is NaN.
    """
    if not isinstance(term.text, str):
        raise MalformedInputError(f"text must be a string, got {type(term.text).__name__}")
    if not term.text:
        raise MalformedInputError("text is empty")

    encoded_length = len(term.text.encode("utf-8", errors="surrogatepass"))
    if encoded_length > max_length:
        raise MalformedInputError(f"text is {encoded_length} bytes long, the limit is {max_length}")

    control = find_control_character(term.text)
    if control is not None:
        raise MalformedInputError(f"text contains control character {control!r}")

    if isinstance(term.weight, bool) or not isinstance(term.weight, (int, float)):
        raise MalformedInputError(f"weight of {term.text!r} must be a number, got {type(term.weight).__name__}")
    if isinstance(term.weight, float) and math.isnan(term.weight):
        raise MalformedInputError(f"weight of {term.text!r} is NaN")
    return term
