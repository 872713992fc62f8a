"""Shared test fixtures."""

from __future__ import annotations

import random

import pytest

from issuegraph.config import Settings


@pytest.fixture(autouse=True)
def _env_setup(monkeypatch):
    """Keep a developer's shell settings from leaking into tests."""
    for name in (
        "SEARCH_RESULT_LIMIT",
        "SEARCH_MIN_RELEVANCE",
        "SEARCH_INCLUDE_PULL_REQUESTS",
        "SEARCH_INCLUDE_DISCUSSIONS",
        "LAYOUT_WIDTH",
        "LAYOUT_HEIGHT",
        "LAYOUT_SEED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(_env_file=None, LAYOUT_SEED=7)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def raw_issues() -> list[dict]:
    return [
        {
            "githubId": 101,
            "number": 1,
            "title": "TypeScript compilation error with React",
            "body": "Build fails with a typescript error. The error appears after upgrade.",
            "state": "open",
            "html_url": "https://github.com/acme/web/issues/1",
            "repository": "acme/web",
            "user": {"login": "alice", "avatar_url": "https://avatars/alice"},
            "labels": [{"name": "typescript", "color": "3178c6"}],
            "assignees": [],
            "created_at": "2024-01-02T00:00:00Z",
            "updated_at": "2024-01-03T00:00:00Z",
            "comments": 4,
        },
        {
            "githubId": 102,
            "number": 2,
            "title": "Unrelated database issue",
            "body": "Connection pool exhausted.",
            "state": "closed",
            "html_url": "https://github.com/acme/api/issues/2",
            "repository": "acme/api",
            "user": {"login": "bob", "avatar_url": ""},
            "labels": [],
            "created_at": "2024-01-04T00:00:00Z",
            "updated_at": "2024-01-05T00:00:00Z",
            "comments": 0,
        },
    ]


@pytest.fixture
def raw_pull_requests() -> list[dict]:
    return [
        {
            "githubId": 201,
            "number": 3,
            "title": "Fix typescript error in build",
            "body": "",
            "state": "open",
            "html_url": "https://github.com/acme/web/pull/3",
            "repository": "acme/web",
            "user": {"login": "alice"},
            "labels": ["typescript"],
            "created_at": "2024-01-06T00:00:00Z",
            "updated_at": "2024-01-06T00:00:00Z",
        },
    ]


@pytest.fixture
def raw_discussions() -> list[dict]:
    return [
        {
            "githubId": "D_301",
            "title": "How should we handle typescript strict mode?",
            "body": "Discussion about typescript settings.",
            "state": "answered",
            "url": "https://github.com/acme/web/discussions/9",
            "repository": "acme/web",
            "author": {"login": "carol", "avatarUrl": "https://avatars/carol"},
            "created_at": "2024-01-07T00:00:00Z",
            "updated_at": "2024-01-07T00:00:00Z",
        },
    ]
