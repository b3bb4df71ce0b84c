from collections.abc import Hashable, Mapping, Sequence
from typing import Protocol, runtime_checkable

from pathviz.domain.entities.geography import Point, Positions
from pathviz.domain.entities.graph import Edge
from pathviz.domain.search.search_core import SearchOutcome


# ------------- Search --------------------
@runtime_checkable
class Heuristic(Protocol):
    """Estimated remaining cost between two positions. Must be >= 0."""

    def __call__(self, a: Point, b: Point) -> float: ...


@runtime_checkable
class PathSearch(Protocol):
    """
    Responsibilities:
      • Compute a shortest path between two nodes of a static graph.
      • Report the settle order and examined edges for replay.
    Implementations are stateless; every call owns its working data.
    """

    name: str

    def search(
        self,
        graph: Mapping[Hashable, Sequence[Edge]],
        positions: Positions | None,
        source: Hashable,
        target: Hashable,
        *,
        hooks=None,
        cancel=None,
    ) -> SearchOutcome: ...


# ------------- Scenario sources --------------------
@runtime_checkable
class GraphSource(Protocol):
    """Produces the adjacency and node coordinates of one scenario."""

    name: str

    def positions(self) -> dict[Hashable, Point]: ...
    def graph(self) -> dict[Hashable, tuple[Edge, ...]]: ...
