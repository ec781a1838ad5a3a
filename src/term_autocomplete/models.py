"""Pydantic response models for autocomplete queries."""

from __future__ import annotations

from collections.abc import Iterable
import math

from pydantic import BaseModel, Field, field_serializer

from term_autocomplete.search.models import Term


class Suggestion(BaseModel):
    """A single completion with its dictionary weight."""

    text: str = Field(description="Completed term text")
    weight: float = Field(description="Dictionary weight; larger is more relevant")

    @field_serializer("weight", when_used="json")
    def _serialize_weight(self, weight: float) -> float | str:
        # JSON has no infinity literal
        if math.isinf(weight):
            return "Infinity" if weight > 0 else "-Infinity"
        return weight

    @classmethod
    def from_term(cls, term: Term) -> Suggestion:
        return cls(text=term.text, weight=term.weight)


class AutocompleteResponse(BaseModel):
    """Ranked completions for one prefix.

    Fields:
        prefix: The query prefix exactly as received
        total_matches: Number of dictionary terms starting with the prefix,
            before any result limit is applied
        suggestions: Matching terms, heaviest first; equal weights keep
            dictionary (lexicographic) order

    Example Response:
        {
            "prefix": "ap",
            "total_matches": 2,
            "suggestions": [
                {"text": "apex", "weight": 5.0},
                {"text": "ape", "weight": 1.0}
            ]
        }
    """

    prefix: str = Field(description="Query prefix")
    total_matches: int = Field(ge=0, description="Matching terms before the result limit")
    suggestions: list[Suggestion] = Field(default_factory=list, description="Ranked completions")

    @classmethod
    def from_terms(cls, prefix: str, terms: Iterable[Term], total_matches: int) -> AutocompleteResponse:
        return cls(
            prefix=prefix,
            total_matches=total_matches,
            suggestions=[Suggestion.from_term(term) for term in terms],
        )
