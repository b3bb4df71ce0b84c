# runtime/registries.py
from collections.abc import Callable
from typing import Any

from pathviz.app.protocols import GraphSource, PathSearch
from pathviz.config.models import (
    GraphByName,
    GraphLiteral,
    GraphRandom,
    GraphRef,
    SearchAStarModel,
    SearchDijkstraModel,
    SearchUnion,
)
from pathviz.domain.search.search_astar import straight_line
from pathviz.domain.search.search_engines import AStarSearch, DijkstraSearch
from pathviz.io.datasets import get_dataset, make_dataset, random_dataset
from pathviz.runtime.rng import RNGRegistry

SearchFactory = Callable[[SearchUnion, dict], PathSearch]
GraphFactory = Callable[[GraphRef, dict], GraphSource]

_search_registry: dict[str, SearchFactory] = {}
_graph_registry: dict[str, GraphFactory] = {}
_heuristic_registry: dict[str, Any] = {"straight_line": straight_line}


# ------------------- Search engines ---------------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion, *, deps: dict | None = None) -> PathSearch:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


def search_for(kind: str) -> PathSearch:
    """Engine with default settings, by algorithm name."""
    models = {"dijkstra": SearchDijkstraModel, "astar": SearchAStarModel}
    if kind not in models:
        raise ValueError(f"Unknown search kind {kind!r}")
    return make_search(models[kind]())


@register_search("dijkstra")
def _make_dijkstra(cfg: SearchDijkstraModel, deps):
    return DijkstraSearch()


@register_search("astar")
def _make_astar(cfg: SearchAStarModel, deps):
    return AStarSearch(heuristic=_heuristic_registry[cfg.heuristic])


# ----- Graph sources --------------------------


def register_graph(by: str):
    def deco(fn: GraphFactory):
        _graph_registry[by] = fn
        return fn

    return deco


def resolve_graph(ref: GraphRef, *, deps: dict | None = None) -> GraphSource:
    """
    deps can include:
      - 'datasets': dict[str, GraphSource]  # overrides for named scenarios
      - 'rng': RNGRegistry                 # for random scenarios
    """
    try:
        factory = _graph_registry[ref.by]
    except KeyError:
        raise ValueError(f"Unknown graph source {ref.by!r}") from None
    return factory(ref, deps or {})


@register_graph("name")
def _graph_by_name(ref: GraphByName, deps):
    named = deps.get("datasets")
    if named is not None:
        return named[ref.name]  # raises KeyError if missing
    return get_dataset(ref.name)


@register_graph("literal")
def _graph_literal(ref: GraphLiteral, deps):
    return make_dataset("literal", ref.positions, ref.edges, on_unknown=ref.on_unknown)


@register_graph("random")
def _graph_random(ref: GraphRandom, deps):
    reg = deps.get("rng") or RNGRegistry(ref.seed, scenario="random")
    return random_dataset(
        reg.substream("layout", ref.n),
        ref.n,
        radius=ref.radius,
        width=ref.width,
        height=ref.height,
    )
