"""Custom exception hierarchy for the search and graph engine."""

from __future__ import annotations


class IssueGraphError(Exception):
    """Base exception for all engine errors."""


class CorpusError(IssueGraphError):
    """Base for corpus access failures."""


class CorpusReadError(CorpusError):
    """A sub-collection could not be read from the backing store."""


class RecordNormalizationError(IssueGraphError):
    """A raw ingested item cannot be mapped onto the common record shape."""
