# pathviz/domain/search/search_astar.py
"""
A* search guided by straight-line distance to the target.

Tie-break: among open nodes with equal f-score, the one that entered the open
set earliest is expanded first. A node keeps its place while it stays open
(an improved f-score does not move it to the back); a node that is expanded
and later re-opened gets a fresh place at the back. There is no closed set:
an expanded node is re-opened whenever a cheaper route to it turns up.

The straight-line heuristic is admissible and consistent when edge weights
are Euclidean distances between node positions, which is how the graph
builder weights them. With any other weighting the returned path is not
guaranteed to be optimal.
"""

from __future__ import annotations

import heapq
import itertools
import math
import time
from pathviz.app.protocols import Heuristic
from pathviz.domain.entities.geography import Point, Positions, euclid
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
from pathviz.domain.search.search_errors import InvalidHeuristicInput, SearchCancelled
from pathviz.runtime.hooks import CancelCheck, NoopHooks, SearchHooks

NAME = "astar"


def straight_line(a: Point, b: Point) -> float:
    return euclid(a, b)


def shortest_path(
    graph: Graph,
    positions: Positions,
    source: NodeId,
    target: NodeId,
    *,
    heuristic: Heuristic = straight_line,
    hooks: SearchHooks | None = None,
    cancel: CancelCheck | None = None,
) -> SearchOutcome:
    hooks = hooks or NoopHooks()
    check_endpoints(graph, source, target)
    goal = _position(positions, target)

    def h(n: NodeId) -> float:
        return heuristic(_position(positions, n), goal)

    # both endpoints must be placed before anything is reported
    h0 = h(source)

    t0 = time.perf_counter()
    hooks.search_start(algorithm=NAME, source=source, target=target, nodes=len(graph))

    g: dict[NodeId, float] = {source: 0.0}
    f: dict[NodeId, float] = {source: h0}
    came_from: dict[NodeId, NodeId] = {}
    seq = itertools.count()
    open_seq: dict[NodeId, int] = {source: next(seq)}
    heap = [(f[source], open_seq[source], source)]
    log = TraceLog()
    reached = False

    try:
        while heap:
            if cancel is not None and cancel():
                raise SearchCancelled(NAME, len(log.order))
            fu, s, u = heapq.heappop(heap)
            if open_seq.get(u) != s or fu != f[u]:
                continue  # stale entry
            del open_seq[u]
            step = log.settled(u)
            hooks.settle(u, distance=g[u], step=step)
            if u == target:
                reached = True
                break

            for v, w in graph[u]:
                log.examined(u, v)
                tentative = g[u] + w
                improved = tentative < g.get(v, math.inf)
                if improved:
                    came_from[v] = u
                    g[v] = tentative
                    f[v] = tentative + h(v)
                    if v not in open_seq:
                        open_seq[v] = next(seq)
                    heapq.heappush(heap, (f[v], open_seq[v], v))
                hooks.examine(u, v, weight=w, improved=improved)
    except (InvalidHeuristicInput, SearchCancelled) as exc:
        hooks.error(algorithm=NAME, exc=exc)
        raise

    path = reconstruct_path(came_from, source, target) if reached else ()
    result = SearchResult(path, g[target] if path else UNREACHABLE)
    outcome = SearchOutcome(NAME, source, target, log.freeze(), result)
    hooks.search_end(outcome, wall_ms=(time.perf_counter() - t0) * 1000)
    return outcome


def _position(positions: Positions, n: NodeId) -> Point:
    try:
        return positions[n]
    except KeyError:
        raise InvalidHeuristicInput(n) from None
