"""Relationship-graph synthesis from search results."""

from __future__ import annotations

import random
from collections import Counter
from itertools import combinations
from typing import Sequence

from issuegraph.config import Settings
from issuegraph.graph.clusters import assign_clusters
from issuegraph.graph.layout import RadialLayout
from issuegraph.graph.similarity import SIMILARITY_THRESHOLD, similarity
from issuegraph.models.graph import (
    EDGE_COLORS,
    NODE_COLORS,
    EdgeMetadata,
    EdgeType,
    GraphData,
    GraphEdge,
    GraphNode,
    NodeMetadata,
    NodeType,
)
from issuegraph.models.schemas import Record, ScoredResult
from issuegraph.utils.logging import get_logger

logger = get_logger(__name__)

MAX_LABEL_NODES = 10
RECORD_SIZE_RANGE = (10.0, 30.0)
RECORD_SIZE_SCALE = 40.0
LABEL_SIZE_RANGE = (8.0, 20.0)
LABEL_SIZE_SCALE = 1.5
REPOSITORY_SIZE = 40.0
USER_SIZE = 30.0


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def record_node_id(record: Record) -> str:
    return f"{record.kind.value}-{record.id}"


def repository_node_id(name: str) -> str:
    return f"repo-{name}"


def user_node_id(login: str) -> str:
    return f"user-{login}"


def label_node_id(name: str) -> str:
    return f"label-{name}"


class GraphService:
    """Builds nodes, typed edges, clusters and a layout from a result set.

    Every call starts from scratch; nothing is cached between builds. Unless an
    rng is injected, each build seeds its own generator from ``LAYOUT_SEED``.
    """

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None) -> None:
        self._settings = settings or Settings()
        self._rng = rng

    def _layout_rng(self) -> random.Random:
        if self._rng is not None:
            return self._rng
        return random.Random(self._settings.LAYOUT_SEED)

    def build_graph(self, results: Sequence[ScoredResult | Record]) -> GraphData:
        scored = self._unique(results)
        records = [record for record, _ in scored]

        nodes = [self._record_node(record, score) for record, score in scored]
        nodes.extend(self._repository_nodes(records))
        nodes.extend(self._user_nodes(records))
        label_nodes = self._label_nodes(records)
        nodes.extend(label_nodes)

        node_ids = {n.id for n in nodes}
        edges = self._membership_edges(records, node_ids)
        edges.extend(self._similarity_edges(records))

        clusters = assign_clusters(nodes)
        RadialLayout(self._settings.LAYOUT_WIDTH, self._settings.LAYOUT_HEIGHT, self._layout_rng()).apply(nodes, clusters)

        logger.info(
            "graph_built",
            node_count=len(nodes),
            edge_count=len(edges),
            cluster_count=len(clusters),
            label_nodes=len(label_nodes),
        )
        return GraphData(nodes=nodes, edges=edges, clusters=clusters)

    @staticmethod
    def _unique(results: Sequence[ScoredResult | Record]) -> list[tuple[Record, float | None]]:
        seen: set[str] = set()
        scored: list[tuple[Record, float | None]] = []
        for item in results:
            if isinstance(item, ScoredResult):
                record, score = item.record, item.relevance_score
            else:
                record, score = item, None
            node_id = record_node_id(record)
            if node_id in seen:
                continue
            seen.add(node_id)
            scored.append((record, score))
        return scored

    # ── Nodes ────────────────────────────────────────────────────────

    @staticmethod
    def _record_node(record: Record, score: float | None) -> GraphNode:
        node_type = NodeType(record.kind.value)
        return GraphNode(
            id=record_node_id(record),
            type=node_type,
            title=record.title,
            subtitle=f"{record.repository} • {record.state}" if record.repository else record.state,
            size=_clamp((score or 0.0) * RECORD_SIZE_SCALE, RECORD_SIZE_RANGE),
            color=NODE_COLORS[node_type],
            group=record.repository or None,
            metadata=NodeMetadata(
                repository=record.repository or None,
                state=record.state,
                author=record.user.login or None,
                labels=record.label_names,
                created_at=record.created_at or None,
                relevance_score=score,
                html_url=record.html_url or None,
            ),
        )

    @staticmethod
    def _repository_nodes(records: Sequence[Record]) -> list[GraphNode]:
        names = dict.fromkeys(r.repository for r in records if r.repository)
        return [
            GraphNode(
                id=repository_node_id(name),
                type=NodeType.REPOSITORY,
                title=name,
                subtitle="Repository",
                size=REPOSITORY_SIZE,
                color=NODE_COLORS[NodeType.REPOSITORY],
                group=name,
                metadata=NodeMetadata(repository=name),
            )
            for name in names
        ]

    @staticmethod
    def _user_nodes(records: Sequence[Record]) -> list[GraphNode]:
        logins = dict.fromkeys(r.user.login for r in records if r.user.login)
        return [
            GraphNode(
                id=user_node_id(login),
                type=NodeType.USER,
                title=login,
                subtitle="Author",
                size=USER_SIZE,
                color=NODE_COLORS[NodeType.USER],
                metadata=NodeMetadata(author=login),
            )
            for login in logins
        ]

    @staticmethod
    def _label_nodes(records: Sequence[Record]) -> list[GraphNode]:
        counts: Counter[str] = Counter()
        for record in records:
            counts.update(list(dict.fromkeys(record.label_names)))

        # Counter.most_common is stable, so ties keep first-seen order.
        shared = [(name, n) for name, n in counts.most_common() if n > 1][:MAX_LABEL_NODES]
        return [
            GraphNode(
                id=label_node_id(name),
                type=NodeType.LABEL,
                title=name,
                subtitle=f"{count} items",
                size=_clamp(count * LABEL_SIZE_SCALE, LABEL_SIZE_RANGE),
                color=NODE_COLORS[NodeType.LABEL],
                metadata=NodeMetadata(count=count),
            )
            for name, count in shared
        ]

    # ── Edges ────────────────────────────────────────────────────────

    @staticmethod
    def _categorical_edge(source: str, target: str, edge_type: EdgeType, width: float, reason: str) -> GraphEdge:
        return GraphEdge(
            id=f"{source}-{target}",
            source=source,
            target=target,
            type=edge_type,
            weight=1.0,
            width=width,
            color=EDGE_COLORS[edge_type],
            metadata=EdgeMetadata(reason=reason),
        )

    def _membership_edges(self, records: Sequence[Record], node_ids: set[str]) -> list[GraphEdge]:
        edges: list[GraphEdge] = []
        for record in records:
            source = record_node_id(record)

            repo_id = repository_node_id(record.repository)
            if record.repository and repo_id in node_ids:
                edges.append(self._categorical_edge(source, repo_id, EdgeType.SAME_REPOSITORY, 2, "Same repository"))

            user_id = user_node_id(record.user.login)
            if record.user.login and user_id in node_ids:
                edges.append(self._categorical_edge(source, user_id, EdgeType.SAME_AUTHOR, 2, "Same author"))

            for name in dict.fromkeys(record.label_names):
                label_id = label_node_id(name)
                if label_id in node_ids:
                    edges.append(self._categorical_edge(source, label_id, EdgeType.SHARED_LABEL, 1, "Shared label"))
        return edges

    @staticmethod
    def _similarity_edges(records: Sequence[Record]) -> list[GraphEdge]:
        edges: list[GraphEdge] = []
        for a, b in combinations(records, 2):
            weight = similarity(a, b)
            if weight <= SIMILARITY_THRESHOLD:
                continue
            source, target = record_node_id(a), record_node_id(b)
            edges.append(GraphEdge(
                id=f"{source}-{target}",
                source=source,
                target=target,
                type=EdgeType.SIMILARITY,
                weight=weight,
                width=max(1.0, weight * 3),
                color=EDGE_COLORS[EdgeType.SIMILARITY],
                metadata=EdgeMetadata(reason="Content similarity", strength=weight),
            ))
        return edges
