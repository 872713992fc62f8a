"""Per-record relevance scoring against extracted search terms."""

from __future__ import annotations

from typing import Sequence

from issuegraph.models.schemas import MatchType, Record

TITLE_WEIGHT = 0.4
EXACT_TITLE_BONUS = 0.3
BODY_WEIGHT = 0.2
BODY_OCCURRENCE_BONUS = 0.05
MAX_COUNTED_OCCURRENCES = 3
LABEL_WEIGHT = 0.3


def _fields(record: Record) -> tuple[str, str, list[str]]:
    return (
        record.title.lower(),
        record.body.lower(),
        [name.lower() for name in record.label_names],
    )


def relevance_score(record: Record, terms: Sequence[str], *, include_body: bool = True) -> float:
    """Score a record in [0, 1]. More or stronger term matches never lower the score."""
    title, body, labels = _fields(record)
    score = 0.0

    for term in terms:
        term = term.lower()

        if term in title:
            score += TITLE_WEIGHT
            if title == term:
                score += EXACT_TITLE_BONUS

        if include_body and term in body:
            occurrences = min(body.count(term), MAX_COUNTED_OCCURRENCES)
            score += BODY_WEIGHT + (occurrences - 1) * BODY_OCCURRENCE_BONUS

        if any(term in label for label in labels):
            score += LABEL_WEIGHT

    return min(score, 1.0)


def match_type(record: Record, terms: Sequence[str], *, include_body: bool = True) -> MatchType:
    """Which field category matched any term; ``combined`` when several did."""
    title, body, labels = _fields(record)
    title_match = body_match = label_match = False

    for term in terms:
        term = term.lower()
        title_match = title_match or term in title
        body_match = body_match or (include_body and term in body)
        label_match = label_match or any(term in label for label in labels)

    if sum((title_match, body_match, label_match)) > 1:
        return "combined"
    if title_match:
        return "title"
    if body_match:
        return "body"
    if label_match:
        return "labels"
    # Only reachable for zero-score records, which the search service drops.
    return "combined"


def score_record(record: Record, terms: Sequence[str], *, include_body: bool = True) -> tuple[float, MatchType]:
    return (
        relevance_score(record, terms, include_body=include_body),
        match_type(record, terms, include_body=include_body),
    )
