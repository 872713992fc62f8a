"""Relevance search over the ingested issue, pull request and discussion corpus."""

from __future__ import annotations

import re
from collections import Counter

from issuegraph.config import Settings
from issuegraph.corpus.normalize import normalize_collection
from issuegraph.corpus.reader import CorpusReader
from issuegraph.models.schemas import CorpusStats, RecordKind, ScoredResult, SearchOptions
from issuegraph.search.scoring import score_record
from issuegraph.search.terms import STOP_WORDS, extract_search_terms
from issuegraph.utils.logging import get_logger
from issuegraph.utils.text_processing import make_snippet

logger = get_logger(__name__)

_MIN_KEYWORD_LENGTH = 4
_ALPHA_WORD = re.compile(r"^[a-z]+$")


class SearchService:
    """Scores every record of the enabled sub-collections against a query.

    Stateless between calls: each search re-reads the corpus in full.
    """

    def __init__(self, reader: CorpusReader, settings: Settings | None = None) -> None:
        self._reader = reader
        self._settings = settings or Settings()

    def default_options(self) -> SearchOptions:
        return SearchOptions(
            limit=self._settings.SEARCH_RESULT_LIMIT,
            min_relevance=self._settings.SEARCH_MIN_RELEVANCE,
            include_pull_requests=self._settings.SEARCH_INCLUDE_PULL_REQUESTS,
            include_discussions=self._settings.SEARCH_INCLUDE_DISCUSSIONS,
        )

    async def search(self, query: str, options: SearchOptions | None = None) -> list[ScoredResult]:
        """Ranked results, best first. Never raises: corpus failures yield ``[]``."""
        options = options or self.default_options()
        terms = extract_search_terms(query)

        kinds = [RecordKind.ISSUE]
        if options.include_pull_requests:
            kinds.append(RecordKind.PULL_REQUEST)
        if options.include_discussions:
            kinds.append(RecordKind.DISCUSSION)

        results: list[ScoredResult] = []
        try:
            for kind in kinds:
                results.extend(await self._search_collection(kind, terms, options))
        except Exception as exc:
            logger.error("ingested_search_failed", query=query, error=str(exc))
            return []

        filtered = [r for r in results if r.relevance_score >= options.min_relevance]
        filtered.sort(key=lambda r: r.relevance_score, reverse=True)
        filtered = filtered[: options.limit]

        logger.info(
            "ingested_search_completed",
            query=query,
            total_found=len(results),
            after_filtering=len(filtered),
            search_terms=terms,
        )
        return filtered

    async def _search_collection(
        self,
        kind: RecordKind,
        terms: list[str],
        options: SearchOptions,
    ) -> list[ScoredResult]:
        raw_items = await self._reader.read_collection(kind)
        results: list[ScoredResult] = []

        for record in normalize_collection(raw_items, kind):
            score, match = score_record(record, terms, include_body=options.include_body)
            if score <= 0:
                continue
            results.append(ScoredResult(
                record=record,
                relevance_score=score,
                match_type=match,
                snippet=make_snippet(record.body or record.title, terms),
            ))

        return results

    async def corpus_stats(self) -> CorpusStats:
        """Per-kind record counts and the distinct repositories across the corpus."""
        try:
            issues = await self._reader.read_collection(RecordKind.ISSUE)
            pull_requests = await self._reader.read_collection(RecordKind.PULL_REQUEST)
            discussions = await self._reader.read_collection(RecordKind.DISCUSSION)
        except Exception as exc:
            logger.error("corpus_stats_failed", error=str(exc))
            return CorpusStats()

        repositories = dict.fromkeys(
            item["repository"]
            for item in [*issues, *pull_requests, *discussions]
            if item.get("repository")
        )
        return CorpusStats(
            total_issues=len(issues),
            total_pull_requests=len(pull_requests),
            total_discussions=len(discussions),
            repositories=list(repositories),
        )

    async def suggest_terms(self, partial_query: str, limit: int = 5) -> list[str]:
        """Keywords from issue titles and bodies that contain the partial query."""
        needle = partial_query.lower()
        try:
            issues = await self._reader.read_collection(RecordKind.ISSUE)
        except Exception as exc:
            logger.error("search_suggestions_failed", error=str(exc))
            return []

        suggestions: dict[str, None] = {}
        for record in normalize_collection(issues, RecordKind.ISSUE):
            for word in f"{record.title} {record.body}".lower().split():
                if len(word) >= _MIN_KEYWORD_LENGTH and word not in STOP_WORDS and needle in word:
                    suggestions[word] = None
            if len(suggestions) >= limit * 2:
                break
        return list(suggestions)[:limit]

    async def trending_terms(self, limit: int = 10) -> list[tuple[str, int]]:
        """Most frequent alphabetic keywords across issue titles and bodies."""
        try:
            issues = await self._reader.read_collection(RecordKind.ISSUE)
        except Exception as exc:
            logger.error("trending_terms_failed", error=str(exc))
            return []

        counts: Counter[str] = Counter()
        for record in normalize_collection(issues, RecordKind.ISSUE):
            counts.update(
                word
                for word in f"{record.title} {record.body}".lower().split()
                if len(word) >= _MIN_KEYWORD_LENGTH and word not in STOP_WORDS and _ALPHA_WORD.match(word)
            )
        return counts.most_common(limit)
