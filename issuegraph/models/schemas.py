"""Pydantic models for records and search results flowing through the engine."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MatchType = Literal["title", "body", "labels", "combined"]
RecordState = Literal["open", "closed", "other"]


class RecordKind(str, Enum):
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"
    DISCUSSION = "discussion"


# ── Record models ────────────────────────────────────────────────────


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: str = ""
    avatar_url: str = ""


class Label(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: str = ""


class Reactions(BaseModel):
    """Reaction counters; ingested sources never provide them, so all default to zero."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_count: int = 0
    plus_one: int = Field(default=0, alias="+1")
    minus_one: int = Field(default=0, alias="-1")
    laugh: int = 0
    hooray: int = 0
    confused: int = 0
    heart: int = 0
    rocket: int = 0
    eyes: int = 0


class Record(BaseModel):
    """A single ingested issue, pull request or discussion in the common shape."""
    model_config = ConfigDict(frozen=True)

    id: str
    kind: RecordKind = RecordKind.ISSUE
    number: int | None = None
    title: str
    body: str = ""
    state: RecordState = "other"
    html_url: str = ""
    repository: str = ""
    user: Author = Field(default_factory=Author)
    labels: tuple[Label, ...] = ()
    assignees: tuple[Author, ...] = ()
    created_at: str = ""
    updated_at: str = ""
    comments: int = 0
    reactions: Reactions = Field(default_factory=Reactions)
    locked: bool = False

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]


# ── Search models ────────────────────────────────────────────────────


class ScoredResult(BaseModel):
    record: Record
    relevance_score: float = Field(default=0.0, description="0.0 to 1.0")
    match_type: MatchType = "combined"
    snippet: str = ""


class SearchOptions(BaseModel):
    limit: int = Field(default=10, ge=0)
    min_relevance: float = Field(default=0.3, ge=0.0, le=1.0)
    include_body: bool = True
    include_pull_requests: bool = False
    include_discussions: bool = False


class CorpusStats(BaseModel):
    total_issues: int = 0
    total_pull_requests: int = 0
    total_discussions: int = 0
    repositories: list[str] = Field(default_factory=list)
