"""Weighted fuzzy search over a fixed sequence of records.

A field matches when the query can be turned into some substring of the
field with few edits. The distance of a field is::

    errors / len(query)

where ``errors`` is the smallest Levenshtein distance between the query and
any substring of the field, so a match counts the same wherever it sits in
the field. A field shorter than the query is compared whole, which charges
every missing character as an edit. A field is accepted when its distance is
within the threshold. Accepted fields are combined into one score, lower is
better::

    score = prod(max(distance, eps) ** (weight * norm))

``weight`` is the field weight normalized to sum to 1 over all keys and
``norm`` is ``1 / sqrt(tokens in the field)``, so a hit in a short field beats
the same hit buried in a long one.

``rapidfuzz.fuzz.partial_ratio`` runs over the whole column first as a cheap
filter; only the survivors get the exact edit count.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from rapidfuzz import fuzz, process
from rapidfuzz.distance import Levenshtein

T = TypeVar("T")

_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class SearchKey:
    """A record attribute taking part in matching, with its relative weight."""
    name: str
    weight: float = 1.0


@dataclass(frozen=True)
class SearchHit(Generic[T]):
    """A matched record, its combined score and its position in the index."""
    item: T
    score: float
    index: int


@dataclass(frozen=True)
class _Field:
    name: str
    weight: float
    values: list[str]
    norms: list[float]


def _field_norm(value: str) -> float:
    tokens = len(value.split())
    return round(1 / math.sqrt(max(tokens, 1)), 3)


def _prefilter_cutoff(threshold: float) -> float:
    """Lowest partial_ratio a field within ``threshold`` can score.

    With e <= threshold * len(query) edits, a field window scores at least
    1 - 1.5 * threshold, and a field shorter than the query at least
    1 - threshold / (1 - threshold). One point of slack covers rounding.
    """
    if threshold >= 0.5:
        return 0.0
    bound = min(1 - 1.5 * threshold, 1 - threshold / (1 - threshold))
    return max(math.floor(bound * 100) - 1, 0)


def substring_errors(query: str, value: str, max_errors: int) -> int:
    """Fewest edits turning ``query`` into a substring of ``value``.

    Anything above ``max_errors`` is reported as ``max_errors + 1``.
    """
    size = len(query)
    if len(value) <= size:
        return min(Levenshtein.distance(query, value), max_errors + 1)

    best = max_errors + 1
    # a window within max_errors edits differs from the query length by at most max_errors
    for width in range(max(size - max_errors, 1), min(size + max_errors, len(value)) + 1):
        for start in range(len(value) - width + 1):
            errors = Levenshtein.distance(
                query, value[start:start + width], score_cutoff=best - 1
            )
            if errors < best:
                best = errors
                if best == 0:
                    return 0
    return best


class FuzzyIndex(Generic[T]):
    """Read-only fuzzy index built once over ``records``."""

    def __init__(self, records: Sequence[T], keys: Sequence[SearchKey], threshold: float = 0.6):
        if not keys:
            raise ValueError("at least one search key is required")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        total_weight = sum(key.weight for key in keys)
        if total_weight <= 0:
            raise ValueError("search key weights must sum to a positive number")

        self.threshold = threshold
        self._records = tuple(records)
        self._fields = []
        for key in keys:
            values = [str(getattr(record, key.name) or "") for record in self._records]
            self._fields.append(_Field(
                name=key.name,
                weight=key.weight / total_weight,
                values=values,
                norms=[_field_norm(value) for value in values],
            ))
        self._prefilter_cutoff = _prefilter_cutoff(threshold)

    def __len__(self) -> int:
        return len(self._records)

    def max_errors(self, query: str) -> int:
        """Edits allowed for ``query`` under this index's threshold."""
        return math.floor(round(self.threshold * len(query), 6))

    def search(self, query: str, limit: Optional[int] = None) -> list[SearchHit[T]]:
        """Return hits for ``query`` ordered best first, at most ``limit`` of them."""
        if not query or not self._records:
            return []

        max_errors = self.max_errors(query)
        scores: dict[int, float] = {}
        for field in self._fields:
            candidates = process.extract(
                query,
                field.values,
                scorer=fuzz.partial_ratio,
                processor=None,
                limit=None,
                score_cutoff=self._prefilter_cutoff,
            )
            for value, _, index in candidates:
                errors = substring_errors(query, value, max_errors)
                if errors > max_errors:
                    continue
                distance = errors / len(query)
                factor = max(distance, _EPSILON) ** (field.weight * field.norms[index])
                scores[index] = scores.get(index, 1.0) * factor

        ranked = sorted(scores.items(), key=lambda entry: (entry[1], entry[0]))
        if limit is not None:
            ranked = ranked[:limit]
        return [SearchHit(self._records[index], score, index) for index, score in ranked]
