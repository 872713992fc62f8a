"""Query term extraction."""

from __future__ import annotations

import re

MAX_TERMS = 10
MIN_TERM_LENGTH = 3

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "can", "cannot", "how", "what", "when", "where", "why", "which", "who", "whom",
})

_PUNCTUATION = re.compile(r"[^a-z0-9_\s-]")


def extract_search_terms(query: str) -> list[str]:
    """Lowercase, fold punctuation to spaces, and keep the first ten significant tokens."""
    folded = _PUNCTUATION.sub(" ", query.lower())
    terms = [t for t in folded.split() if len(t) >= MIN_TERM_LENGTH and t not in STOP_WORDS]
    return terms[:MAX_TERMS]
