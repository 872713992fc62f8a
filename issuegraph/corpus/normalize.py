"""Map raw ingested items from each source kind onto the common Record shape.

Issues and pull requests are stored with GitHub REST field names (``user``,
``html_url``); discussions come from GraphQL and use ``author`` and ``url``
instead. Everything downstream of this module only sees :class:`Record`.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from issuegraph.models.schemas import Author, Label, Record, RecordKind
from issuegraph.utils.exceptions import RecordNormalizationError
from issuegraph.utils.logging import get_logger

logger = get_logger(__name__)

_KNOWN_STATES = {"open", "closed"}


def _author(value: Any) -> Author:
    if isinstance(value, str):
        return Author(login=value)
    if isinstance(value, dict):
        return Author(
            login=str(value.get("login") or ""),
            avatar_url=str(value.get("avatar_url") or value.get("avatarUrl") or ""),
        )
    return Author()


def _labels(value: Any) -> tuple[Label, ...]:
    labels: list[Label] = []
    for item in value or []:
        if isinstance(item, str):
            name, color = item, ""
        elif isinstance(item, dict):
            name, color = str(item.get("name") or ""), str(item.get("color") or "")
        else:
            continue
        if name:
            labels.append(Label(name=name, color=color))
    return tuple(labels)


def _state(value: Any) -> str:
    state = str(value or "").lower()
    return state if state in _KNOWN_STATES else "other"


def _identifier(raw: dict[str, Any]) -> str:
    for key in ("githubId", "id", "uuid"):
        value = raw.get(key)
        if value not in (None, ""):
            return str(value)
    raise RecordNormalizationError("record has no identifier")


def _issue_fields(raw: dict[str, Any]) -> dict[str, Any]:
    return {"user": _author(raw.get("user")), "html_url": raw.get("html_url") or ""}


def _discussion_fields(raw: dict[str, Any]) -> dict[str, Any]:
    return {
        "user": _author(raw.get("author") or raw.get("user")),
        "html_url": raw.get("url") or raw.get("html_url") or "",
    }


_SOURCE_FIELDS = {
    RecordKind.ISSUE: _issue_fields,
    RecordKind.PULL_REQUEST: _issue_fields,
    RecordKind.DISCUSSION: _discussion_fields,
}


def normalize_record(raw: dict[str, Any], kind: RecordKind) -> Record:
    """Build a Record from one raw item of the given source kind."""
    title = raw.get("title")
    if not isinstance(title, str):
        raise RecordNormalizationError(f"{kind.value} record has no title")

    try:
        return Record(
            id=_identifier(raw),
            kind=kind,
            number=raw.get("number"),
            title=title,
            body=raw.get("body") or "",
            state=_state(raw.get("state")),
            repository=raw.get("repository") or "",
            labels=_labels(raw.get("labels")),
            assignees=tuple(_author(a) for a in raw.get("assignees") or []),
            created_at=str(raw.get("created_at") or ""),
            updated_at=str(raw.get("updated_at") or ""),
            comments=raw.get("comments") or 0,
            **_SOURCE_FIELDS[kind](raw),
        )
    except ValidationError as exc:
        raise RecordNormalizationError(str(exc)) from exc


def normalize_collection(items: Iterable[dict[str, Any]], kind: RecordKind) -> list[Record]:
    """Normalize every item, skipping the ones that cannot be mapped."""
    records: list[Record] = []
    for raw in items:
        try:
            records.append(normalize_record(raw, kind))
        except RecordNormalizationError as exc:
            logger.warning("record_normalization_skipped", kind=kind.value, error=str(exc))
    return records
