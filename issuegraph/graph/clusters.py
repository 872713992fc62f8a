"""Group nodes into per-repository clusters."""

from __future__ import annotations

from typing import Sequence

from issuegraph.models.graph import CLUSTER_ALPHA, NODE_COLORS, GraphCluster, GraphNode, NodeType


def assign_clusters(nodes: Sequence[GraphNode]) -> list[GraphCluster]:
    """One cluster per distinct non-empty group key, in first-seen order.

    Centers stay at the origin here; the layout step moves them onto the
    repository anchors.
    """
    groups: dict[str, list[str]] = {}
    for node in nodes:
        if node.group:
            groups.setdefault(node.group, []).append(node.id)

    color = NODE_COLORS[NodeType.REPOSITORY] + CLUSTER_ALPHA
    return [
        GraphCluster(id=f"cluster-{name}", name=name, nodes=members, color=color)
        for name, members in groups.items()
    ]
