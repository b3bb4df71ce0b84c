# pathviz/domain/search/search_dijkstra.py
"""
Uniform-cost search (Dijkstra) with a replayable trace.

Tie-break: among nodes with equal tentative distance, the one that comes
first in the graph's iteration order is settled first. The heap is keyed
``(distance, graph_index)`` with lazy deletion, which yields the same order
as scanning an insertion-ordered frontier with a strict ``<``. Nodes still at
+inf are popped in graph order once every finite node is settled.
"""

from __future__ import annotations

import heapq
import math
import time

from pathviz.domain.entities.graph import Graph
from pathviz.domain.search.search_core import (
    UNREACHABLE,
    NodeId,
    SearchOutcome,
    SearchResult,
    TraceLog,
    check_endpoints,
    reconstruct_path,
)
from pathviz.domain.search.search_errors import SearchCancelled
from pathviz.runtime.hooks import CancelCheck, NoopHooks, SearchHooks

NAME = "dijkstra"


def shortest_path(
    graph: Graph,
    source: NodeId,
    target: NodeId,
    *,
    hooks: SearchHooks | None = None,
    cancel: CancelCheck | None = None,
) -> SearchOutcome:
    hooks = hooks or NoopHooks()
    check_endpoints(graph, source, target)
    t0 = time.perf_counter()
    hooks.search_start(algorithm=NAME, source=source, target=target, nodes=len(graph))

    order = {n: i for i, n in enumerate(graph)}
    dist: dict[NodeId, float] = {n: math.inf for n in graph}
    dist[source] = 0.0
    prev: dict[NodeId, NodeId] = {}
    frontier = [(d, order[n], n) for n, d in dist.items()]
    heapq.heapify(frontier)
    settled: set[NodeId] = set()
    log = TraceLog()

    try:
        while frontier:
            if cancel is not None and cancel():
                raise SearchCancelled(NAME, len(log.order))
            d, _, u = heapq.heappop(frontier)
            if u in settled or d != dist[u]:
                continue  # stale entry
            settled.add(u)
            step = log.settled(u)
            hooks.settle(u, distance=d, step=step)
            if u == target:
                break

            for v, w in graph[u]:
                log.examined(u, v)
                alt = d + w
                improved = v not in settled and alt < dist[v]
                if improved:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(frontier, (alt, order[v], v))
                hooks.examine(u, v, weight=w, improved=improved)
    except SearchCancelled as exc:
        hooks.error(algorithm=NAME, exc=exc)
        raise

    path = reconstruct_path(prev, source, target)
    result = SearchResult(path, dist[target] if path else UNREACHABLE)
    outcome = SearchOutcome(NAME, source, target, log.freeze(), result)
    hooks.search_end(outcome, wall_ms=(time.perf_counter() - t0) * 1000)
    return outcome
