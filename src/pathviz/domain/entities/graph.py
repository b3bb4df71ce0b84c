# pathviz/domain/entities/graph.py
"""
Undirected weighted adjacency used by both search algorithms.

A graph is a plain dict ``node -> tuple[Edge, ...]``. Every edge is stored in
both directions with the same weight, and nodes without neighbours map to an
empty tuple so they can still be looked up. Dict insertion order is the
graph's iteration order; the searches rely on it for their tie-break.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Literal, NamedTuple

from pathviz.domain.entities.geography import Point, euclid

logger = logging.getLogger(__name__)

NodeId = Hashable
OnUnknown = Literal["skip", "raise"]


class Edge(NamedTuple):
    to: NodeId
    weight: float


Graph = Mapping[NodeId, Sequence[Edge]]


class GraphBuildError(ValueError):
    pass


class UnknownNodeError(GraphBuildError):
    def __init__(self, u: NodeId, v: NodeId, missing: NodeId):
        super().__init__(f"edge ({u!r}, {v!r}) references unknown node {missing!r}")
        self.edge, self.missing = (u, v), missing


class NegativeWeightError(GraphBuildError):
    def __init__(self, u: NodeId, v: NodeId, weight: float):
        super().__init__(f"edge ({u!r}, {v!r}) has invalid weight {weight!r}")
        self.edge, self.weight = (u, v), weight


def build_graph(
    nodes: Iterable[NodeId],
    edges: Iterable[tuple[NodeId, NodeId, float]],
    *,
    on_unknown: OnUnknown = "skip",
) -> dict[NodeId, tuple[Edge, ...]]:
    adj: dict[NodeId, list[Edge]] = {}
    for n in nodes:
        adj.setdefault(n, [])

    for u, v, w in edges:
        missing = u if u not in adj else (v if v not in adj else None)
        if missing is not None:
            if on_unknown == "raise":
                raise UnknownNodeError(u, v, missing)
            logger.warning("skipping edge (%r, %r): unknown node %r", u, v, missing)
            continue
        w = float(w)
        if w < 0 or not math.isfinite(w):
            raise NegativeWeightError(u, v, w)
        adj[u].append(Edge(v, w))
        if u != v:
            adj[v].append(Edge(u, w))

    return {n: tuple(es) for n, es in adj.items()}


def build_euclidean_graph(
    positions: Mapping[NodeId, Point],
    pairs: Iterable[tuple[NodeId, NodeId]],
    *,
    on_unknown: OnUnknown = "skip",
) -> dict[NodeId, tuple[Edge, ...]]:
    """Weights are the straight-line distance between endpoint positions."""

    def weighted():
        for u, v in pairs:
            if u in positions and v in positions:
                yield u, v, euclid(positions[u], positions[v])
            else:
                # let build_graph apply the unknown-node policy
                yield u, v, 0.0

    return build_graph(positions.keys(), weighted(), on_unknown=on_unknown)


# ---------------- Lookups -----------------------------


def edge_weight(graph: Graph, u: NodeId, v: NodeId) -> float | None:
    for e in graph.get(u, ()):
        if e.to == v:
            return e.weight
    return None


def has_edge(graph: Graph, u: NodeId, v: NodeId) -> bool:
    return edge_weight(graph, u, v) is not None


def edges_of(graph: Graph) -> Iterator[tuple[NodeId, NodeId, float]]:
    """Each undirected edge once, in the orientation it was first seen."""
    seen: set[frozenset] = set()
    for u, es in graph.items():
        for v, w in es:
            key = frozenset((u, v))
            if key in seen:
                continue
            seen.add(key)
            yield u, v, w


def is_symmetric(graph: Graph) -> bool:
    for u, es in graph.items():
        for v, w in es:
            back = edge_weight(graph, v, u)
            if back is None or back != w:
                return False
    return True


# ------------- Presentation keys ---------------------


def edge_key(u: NodeId, v: NodeId) -> str:
    return f"{u}-{v}"


def find_edge_key(keys: Iterable[str] | set[str], u: NodeId, v: NodeId) -> str | None:
    """Resolve an undirected edge to whichever orientation the caller registered."""
    keys = keys if isinstance(keys, (set, frozenset)) else set(keys)
    for k in (edge_key(u, v), edge_key(v, u)):
        if k in keys:
            return k
    return None


def edge_label(weight: float) -> str:
    # half-up, not banker's rounding
    return str(math.floor(weight + 0.5))
