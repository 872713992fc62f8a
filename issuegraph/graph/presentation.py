"""Display glyphs and captions for node and edge types."""

from __future__ import annotations

from issuegraph.models.graph import EdgeType, NodeType

_NODE_ICONS = {
    NodeType.ISSUE: "🐛",
    NodeType.PULL_REQUEST: "🔀",
    NodeType.DISCUSSION: "💬",
    NodeType.USER: "👤",
    NodeType.REPOSITORY: "📁",
    NodeType.LABEL: "🏷️",
}

_EDGE_LABELS = {
    EdgeType.SIMILARITY: "Similar",
    EdgeType.SHARED_LABEL: "Shared Label",
    EdgeType.SAME_AUTHOR: "Same Author",
    EdgeType.SAME_REPOSITORY: "Same Repo",
}


def node_type_icon(node_type: NodeType | str) -> str:
    try:
        return _NODE_ICONS[NodeType(node_type)]
    except ValueError:
        return "⚪"


def edge_type_label(edge_type: EdgeType | str) -> str:
    try:
        return _EDGE_LABELS[EdgeType(edge_type)]
    except ValueError:
        return "Related"
