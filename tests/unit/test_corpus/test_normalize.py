"""Unit tests for source-schema normalization."""

from __future__ import annotations

import pytest

from issuegraph.corpus.normalize import normalize_collection, normalize_record
from issuegraph.corpus.reader import InMemoryCorpus
from issuegraph.models.schemas import RecordKind
from issuegraph.utils.exceptions import RecordNormalizationError


def test_issue_fields_are_mapped(raw_issues):
    record = normalize_record(raw_issues[0], RecordKind.ISSUE)

    assert record.id == "101"
    assert record.number == 1
    assert record.kind == RecordKind.ISSUE
    assert record.state == "open"
    assert record.user.login == "alice"
    assert record.html_url == "https://github.com/acme/web/issues/1"
    assert record.label_names == ["typescript"]
    assert record.labels[0].color == "3178c6"
    assert record.comments == 4


def test_string_labels_are_accepted(raw_pull_requests):
    record = normalize_record(raw_pull_requests[0], RecordKind.PULL_REQUEST)
    assert record.label_names == ["typescript"]
    assert record.labels[0].color == ""
    assert record.comments == 0


def test_discussion_author_and_url(raw_discussions):
    record = normalize_record(raw_discussions[0], RecordKind.DISCUSSION)

    assert record.user.login == "carol"
    assert record.user.avatar_url == "https://avatars/carol"
    assert record.html_url == "https://github.com/acme/web/discussions/9"
    assert record.state == "other"


def test_discussion_author_as_plain_login():
    record = normalize_record({"id": "d1", "title": "Q", "author": "dave"}, RecordKind.DISCUSSION)
    assert record.user.login == "dave"


def test_defaults_for_fields_sources_never_provide():
    record = normalize_record({"id": 9, "title": "bare"}, RecordKind.ISSUE)

    assert record.body == ""
    assert record.repository == ""
    assert record.labels == ()
    assert record.assignees == ()
    assert record.locked is False
    assert record.reactions.total_count == 0
    assert record.reactions.plus_one == 0


@pytest.mark.parametrize(
    "raw",
    [
        {"title": "no id"},
        {"githubId": 1},
        {"githubId": 1, "title": None},
        {"githubId": 1, "title": "bad number", "number": "not-a-number"},
    ],
)
def test_unmappable_items_raise(raw):
    with pytest.raises(RecordNormalizationError):
        normalize_record(raw, RecordKind.ISSUE)


def test_collection_skips_bad_items(raw_issues):
    records = normalize_collection([{"title": "no id"}, *raw_issues], RecordKind.ISSUE)
    assert [r.id for r in records] == ["101", "102"]


@pytest.mark.asyncio
async def test_in_memory_corpus_reads_by_kind(raw_issues):
    corpus = InMemoryCorpus({RecordKind.ISSUE: raw_issues})
    assert await corpus.read_collection(RecordKind.ISSUE) == raw_issues
    assert await corpus.read_collection(RecordKind.DISCUSSION) == []
