"""Record builders shared by the unit tests."""

from __future__ import annotations

from issuegraph.models.schemas import Author, Label, Record, RecordKind, ScoredResult


def make_record(
    id: str,
    title: str,
    *,
    body: str = "",
    repository: str = "",
    author: str = "",
    labels: tuple[str, ...] = (),
    kind: RecordKind = RecordKind.ISSUE,
    state: str = "open",
) -> Record:
    return Record(
        id=id,
        kind=kind,
        title=title,
        body=body,
        state=state,
        repository=repository,
        user=Author(login=author),
        labels=tuple(Label(name=name) for name in labels),
    )


def make_result(record: Record, score: float = 0.5) -> ScoredResult:
    return ScoredResult(record=record, relevance_score=score, match_type="title")
