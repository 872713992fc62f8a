"""Graph primitives handed to the rendering layer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NodeType(str, Enum):
    ISSUE = "issue"
    PULL_REQUEST = "pull_request"
    DISCUSSION = "discussion"
    REPOSITORY = "repository"
    USER = "user"
    LABEL = "label"


class EdgeType(str, Enum):
    SAME_REPOSITORY = "same_repository"
    SAME_AUTHOR = "same_author"
    SHARED_LABEL = "shared_label"
    SIMILARITY = "similarity"


RECORD_NODE_TYPES = frozenset({NodeType.ISSUE, NodeType.PULL_REQUEST, NodeType.DISCUSSION})

NODE_COLORS: dict[NodeType, str] = {
    NodeType.ISSUE: "#3b82f6",
    NodeType.PULL_REQUEST: "#8b5cf6",
    NodeType.DISCUSSION: "#06b6d4",
    NodeType.REPOSITORY: "#f59e0b",
    NodeType.USER: "#10b981",
    NodeType.LABEL: "#ef4444",
}

EDGE_COLORS: dict[EdgeType, str] = {
    EdgeType.SAME_REPOSITORY: "#f59e0b",
    EdgeType.SAME_AUTHOR: "#10b981",
    EdgeType.SHARED_LABEL: "#ef4444",
    EdgeType.SIMILARITY: "#3b82f6",
}

# 8-digit hex suffix, roughly 12% opacity
CLUSTER_ALPHA = "20"


class Point(BaseModel):
    x: float = 0.0
    y: float = 0.0


class NodeMetadata(BaseModel):
    repository: str | None = None
    state: str | None = None
    author: str | None = None
    labels: list[str] | None = None
    created_at: str | None = None
    relevance_score: float | None = None
    html_url: str | None = None
    count: int | None = None


class GraphNode(BaseModel):
    id: str
    type: NodeType
    title: str
    subtitle: str = ""
    size: float
    color: str
    group: str | None = None
    x: float | None = None
    y: float | None = None
    metadata: NodeMetadata = Field(default_factory=NodeMetadata)

    @property
    def is_record(self) -> bool:
        return self.type in RECORD_NODE_TYPES

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


class EdgeMetadata(BaseModel):
    reason: str = ""
    strength: float | None = None


class GraphEdge(BaseModel):
    id: str
    source: str
    target: str
    type: EdgeType
    weight: float = 1.0
    width: float = 1.0
    color: str
    metadata: EdgeMetadata = Field(default_factory=EdgeMetadata)


class GraphCluster(BaseModel):
    id: str
    name: str
    nodes: list[str] = Field(default_factory=list)
    color: str
    center: Point = Field(default_factory=Point)


class GraphData(BaseModel):
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
    clusters: list[GraphCluster] = Field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def nodes_of_type(self, *types: NodeType) -> list[GraphNode]:
        return [n for n in self.nodes if n.type in types]

    def edges_of_type(self, edge_type: EdgeType) -> list[GraphEdge]:
        return [e for e in self.edges if e.type == edge_type]
