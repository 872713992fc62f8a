"""Relevance search and relationship-graph synthesis over ingested GitHub records."""

from __future__ import annotations

from issuegraph.config import Settings, get_settings
from issuegraph.corpus.reader import CorpusReader, InMemoryCorpus
from issuegraph.services.graph_service import GraphService
from issuegraph.services.search_service import SearchService
from issuegraph.utils.logging import configure_logging

__all__ = [
    "CorpusReader",
    "GraphService",
    "InMemoryCorpus",
    "SearchService",
    "Settings",
    "configure_logging",
    "get_settings",
]
