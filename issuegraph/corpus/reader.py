"""Corpus access: the storage collaborator the search service reads from."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from issuegraph.models.schemas import RecordKind


class CorpusReader(Protocol):
    """Yields the raw items of one named sub-collection.

    Implementations raise :class:`~issuegraph.utils.exceptions.CorpusReadError`
    (or any other exception) when the backing store cannot be read.
    """

    async def read_collection(self, kind: RecordKind) -> list[dict[str, Any]]: ...


class InMemoryCorpus:
    """Corpus held in memory, keyed by record kind."""

    def __init__(self, collections: Mapping[RecordKind, Sequence[dict[str, Any]]] | None = None) -> None:
        self._collections = {RecordKind(k): list(v) for k, v in (collections or {}).items()}

    async def read_collection(self, kind: RecordKind) -> list[dict[str, Any]]:
        return list(self._collections.get(kind, []))
