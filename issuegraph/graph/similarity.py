"""Heuristic pairwise similarity between two records."""

from __future__ import annotations

from issuegraph.models.schemas import Record

# Fixed cut-off; pairs at or below it get no similarity edge.
SIMILARITY_THRESHOLD = 0.3

TITLE_OVERLAP_WEIGHT = 0.4
LABEL_OVERLAP_WEIGHT = 0.3
SAME_REPOSITORY_BONUS = 0.2
SAME_AUTHOR_BONUS = 0.1


def _overlap(a: set[str], b: set[str]) -> float:
    larger = max(len(a), len(b))
    if larger == 0:
        return 0.0
    return len(a & b) / larger


def similarity(a: Record, b: Record) -> float:
    """Symmetric similarity in [0, 1] from title words, labels, repository and author."""
    score = _overlap(set(a.title.lower().split()), set(b.title.lower().split())) * TITLE_OVERLAP_WEIGHT
    score += _overlap(set(a.label_names), set(b.label_names)) * LABEL_OVERLAP_WEIGHT

    if a.repository and a.repository == b.repository:
        score += SAME_REPOSITORY_BONUS
    if a.user.login and a.user.login == b.user.login:
        score += SAME_AUTHOR_BONUS

    return min(score, 1.0)
