"""Single-pass radial placement of graph nodes.

Repositories sit evenly spaced on a ring around the canvas center and every
record is dropped at a random point of an annulus around its repository.
There is no iterative relaxation, so a seeded ``random.Random`` reproduces
the exact same coordinates.
"""

from __future__ import annotations

import math
import random
from typing import Sequence

from issuegraph.models.graph import GraphCluster, GraphNode, NodeType, Point

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0
REPOSITORY_RING_RATIO = 0.25
SCATTER_RING_RATIO = 0.3
SCATTER_JITTER = 100.0
RECORD_MIN_DISTANCE = 80.0
RECORD_MAX_DISTANCE = 140.0


class RadialLayout:
    def __init__(
        self,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self._width = width
        self._height = height
        self._rng = rng or random.Random()

    @property
    def center(self) -> Point:
        return Point(x=self._width / 2, y=self._height / 2)

    def apply(self, nodes: Sequence[GraphNode], clusters: Sequence[GraphCluster] = ()) -> None:
        """Assign coordinates in place.

        Records whose repository has no anchor keep ``x``/``y`` unset.
        """
        self._scatter(nodes)
        anchors = self._place_repositories(nodes)
        self._place_records(nodes, anchors)

        for cluster in clusters:
            anchor = anchors.get(cluster.name)
            if anchor is not None:
                cluster.center = anchor.model_copy()

    def _scatter(self, nodes: Sequence[GraphNode]) -> None:
        # Best-effort starting positions for users and labels; repositories
        # and records are placed by the later steps.
        center = self.center
        radius = min(self._width, self._height) * SCATTER_RING_RATIO
        total = len(nodes)
        for index, node in enumerate(nodes):
            if node.type not in (NodeType.USER, NodeType.LABEL):
                continue
            angle = index / total * 2 * math.pi
            node.x = center.x + math.cos(angle) * radius + (self._rng.random() - 0.5) * SCATTER_JITTER
            node.y = center.y + math.sin(angle) * radius + (self._rng.random() - 0.5) * SCATTER_JITTER

    def _place_repositories(self, nodes: Sequence[GraphNode]) -> dict[str, Point]:
        center = self.center
        radius = min(self._width, self._height) * REPOSITORY_RING_RATIO
        repositories = [n for n in nodes if n.type == NodeType.REPOSITORY]

        anchors: dict[str, Point] = {}
        for index, node in enumerate(repositories):
            angle = index / len(repositories) * 2 * math.pi
            anchor = Point(x=center.x + math.cos(angle) * radius, y=center.y + math.sin(angle) * radius)
            node.x, node.y = anchor.x, anchor.y
            anchors[node.title] = anchor
        return anchors

    def _place_records(self, nodes: Sequence[GraphNode], anchors: dict[str, Point]) -> None:
        for node in nodes:
            if not node.is_record:
                continue
            anchor = anchors.get(node.metadata.repository or "")
            if anchor is None:
                node.x = node.y = None
                continue
            angle = self._rng.random() * 2 * math.pi
            distance = self._rng.uniform(RECORD_MIN_DISTANCE, RECORD_MAX_DISTANCE)
            node.x = anchor.x + math.cos(angle) * distance
            node.y = anchor.y + math.sin(angle) * distance
