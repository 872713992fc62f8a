"""Text normalization and snippet utilities."""

from __future__ import annotations

import re
import unicodedata
from typing import Sequence

SNIPPET_LENGTH = 150
SNIPPET_LEAD = 50
ELLIPSIS = "..."


def normalize_text(text: str) -> str:
    """Normalize unicode, collapse whitespace, strip."""
    text = unicodedata.normalize("NFKC", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def make_snippet(text: str, terms: Sequence[str], max_length: int = SNIPPET_LENGTH) -> str:
    """Cut a window of ``text`` around the earliest occurrence of any term."""
    text = normalize_text(text)
    lowered = text.lower()
    hits = [i for i in (lowered.find(t.lower()) for t in terms if t) if i != -1]

    start = max(0, min(hits) - SNIPPET_LEAD) if hits else 0
    end = min(len(text), start + max_length)
    snippet = text[start:end]

    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(text):
        snippet = snippet + ELLIPSIS
    return snippet
