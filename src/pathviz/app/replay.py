# app/replay.py
"""
Step-by-step playback of a finished search.

Frames are snapshots: each one carries the cumulative highlight state, so a
renderer can jump to any frame without replaying the ones before it. Order
comes straight from the trace; nothing here re-derives it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from pathviz.domain.entities.graph import Graph, edge_key, edges_of, find_edge_key
from pathviz.domain.search.search_core import SearchOutcome
from pathviz.io.recorder import Recorder

FrameKind = Literal["settle", "examine", "path"]


@dataclass(frozen=True)
class ReplayFrame:
    step: int
    kind: FrameKind
    node: str | None
    edge: str | None
    visited_nodes: tuple[str, ...]
    visited_edges: tuple[str, ...]
    path_nodes: tuple[str, ...] = ()
    path_edges: tuple[str, ...] = ()
    is_final: bool = False


def frames(outcome: SearchOutcome, graph: Graph | None = None) -> Iterator[ReplayFrame]:
    """
    One ``settle`` frame per popped node, followed by an ``examine`` frame for
    each edge checked from it, then a closing ``path`` frame. With ``graph``
    given, edge keys use the orientation the graph first lists them in.
    """
    keys = {edge_key(u, v) for u, v, _ in edges_of(graph)} if graph is not None else None

    def key(u, v) -> str:
        k = find_edge_key(keys, u, v) if keys is not None else None
        return k or edge_key(u, v)

    endpoints = {outcome.source, outcome.target}
    nodes: list = []
    edges: list[str] = []
    seen_edges: set[str] = set()
    step = 0
    j, examined = 0, outcome.visited_edges

    for n in outcome.visited_order:
        if n not in endpoints and n not in nodes:
            nodes.append(n)
        yield ReplayFrame(step, "settle", n, None, tuple(nodes), tuple(edges))
        step += 1
        while j < len(examined) and examined[j][0] == n:
            k = key(*examined[j])
            if k not in seen_edges:
                seen_edges.add(k)
                edges.append(k)
            yield ReplayFrame(step, "examine", n, k, tuple(nodes), tuple(edges))
            step += 1
            j += 1

    path = outcome.path
    path_edges = tuple(key(path[i], path[i + 1]) for i in range(len(path) - 1))
    yield ReplayFrame(
        step,
        "path",
        None,
        None,
        tuple(nodes),
        tuple(edges),
        path_nodes=tuple(path),
        path_edges=path_edges,
        is_final=True,
    )


def replay(
    outcome: SearchOutcome, graph: Graph | None = None, *, recorder: Recorder | None = None
) -> list[ReplayFrame]:
    out = []
    for f in frames(outcome, graph):
        if recorder is not None:
            recorder.emit(f)
        out.append(f)
    return out
