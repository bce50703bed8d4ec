"""Text canonicalization shared by index building and query handling."""

from __future__ import annotations

import re
from typing import Optional

# Alternate spellings -> canonical spelling (whole words only)
CITY_ALIASES: dict[str, str] = {
    "BANGALORE": "BENGALURU",
    "BANGLORE": "BENGALURU",
}

# Generic words in train names that carry no identifying information.
# EXPRESS must come before EXP so the longer word is removed whole.
TRAIN_SUFFIXES = ["EXPRESS", "EXP", "SF", "MAIL", "SPL"]

_ALIAS_PATTERNS = [
    (re.compile(rf"\b{re.escape(alias)}\b"), canonical)
    for alias, canonical in CITY_ALIASES.items()
]
_SUFFIX_PATTERN = re.compile(r"\b(?:" + "|".join(TRAIN_SUFFIXES) + r")\b")
_WHITESPACE = re.compile(r"\s+")
_VOWELS = re.compile(r"[AEIOU]")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def normalize(text: Optional[str]) -> str:
    """Uppercase, rewrite known city aliases and collapse whitespace.

    The same function is used for records and queries, so both sides of a
    match always share one vocabulary.

    >>> normalize("  bangalore   city ")
    'BENGALURU CITY'
    """
    result = (text or "").upper()
    for pattern, canonical in _ALIAS_PATTERNS:
        result = pattern.sub(canonical, result)
    return collapse_whitespace(result)


def strip_vowels(text: str) -> str:
    """Remove the vowels A, E, I, O and U (expects normalized text)."""
    return _VOWELS.sub("", text)


def strip_train_suffixes(name: str) -> str:
    """Drop generic words such as EXPRESS or MAIL from a normalized train name."""
    return collapse_whitespace(_SUFFIX_PATTERN.sub(" ", name))


def build_search_text(*parts: str) -> str:
    """Join the non-empty parts into one space separated matching blob."""
    return " ".join(part for part in parts if part)
