# pathviz/domain/search/search_core.py
from __future__ import annotations

import math
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field

from pathviz.domain.entities.graph import Graph
from pathviz.domain.search.search_errors import InvalidEndpoint

NodeId = Hashable

# "no path" sentinel; always paired with an empty path
UNREACHABLE = math.inf


@dataclass(frozen=True)
class SearchTrace:
    """
    Replay log of one search.

    Attributes:
        visited_order: nodes in the order they were popped from the frontier
        visited_edges: (settled, neighbor) pairs in the order they were examined
    """

    visited_order: tuple[NodeId, ...] = ()
    visited_edges: tuple[tuple[NodeId, NodeId], ...] = ()


@dataclass(frozen=True)
class SearchResult:
    path: tuple[NodeId, ...] = ()
    distance: float = UNREACHABLE

    @property
    def reachable(self) -> bool:
        return bool(self.path)


@dataclass(frozen=True)
class SearchOutcome:
    algorithm: str
    source: NodeId
    target: NodeId
    trace: SearchTrace = field(default_factory=SearchTrace)
    result: SearchResult = field(default_factory=SearchResult)

    @property
    def visited_order(self) -> tuple[NodeId, ...]:
        return self.trace.visited_order

    @property
    def visited_edges(self) -> tuple[tuple[NodeId, NodeId], ...]:
        return self.trace.visited_edges

    @property
    def path(self) -> tuple[NodeId, ...]:
        return self.result.path

    @property
    def distance(self) -> float:
        return self.result.distance

    @property
    def reachable(self) -> bool:
        return self.result.reachable

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "source": self.source,
            "target": self.target,
            "visited_order": list(self.visited_order),
            "visited_edges": [list(e) for e in self.visited_edges],
            "path": list(self.path),
            "distance": self.distance if self.reachable else None,
        }


# ---------------- Shared helpers ------------------------


def check_endpoints(graph: Graph, source: NodeId, target: NodeId) -> None:
    if source not in graph:
        raise InvalidEndpoint(source, "source")
    if target not in graph:
        raise InvalidEndpoint(target, "target")


def reconstruct_path(
    came_from: Mapping[NodeId, NodeId], source: NodeId, target: NodeId
) -> tuple[NodeId, ...]:
    """Walk predecessor links back from target; empty if the chain misses source."""
    if target == source:
        return (source,)
    if target not in came_from:
        return ()
    path = [target]
    u = target
    while u != source:
        u = came_from.get(u)
        if u is None:
            return ()
        path.append(u)
    path.reverse()
    return tuple(path)


class TraceLog:
    """Append-only trace buffers, frozen into a SearchTrace on completion."""

    __slots__ = ("order", "edges")

    def __init__(self):
        self.order: list[NodeId] = []
        self.edges: list[tuple[NodeId, NodeId]] = []

    def settled(self, node: NodeId) -> int:
        self.order.append(node)
        return len(self.order)

    def examined(self, u: NodeId, v: NodeId) -> None:
        self.edges.append((u, v))

    def freeze(self) -> SearchTrace:
        return SearchTrace(tuple(self.order), tuple(self.edges))
