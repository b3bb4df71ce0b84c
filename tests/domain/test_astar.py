import math

import pytest

from pathviz.domain.entities.geography import Point, to_positions
from pathviz.domain.entities.graph import build_euclidean_graph, build_graph
from pathviz.domain.search.search_astar import shortest_path, straight_line
from pathviz.domain.search.search_core import UNREACHABLE
from pathviz.domain.search.search_errors import InvalidEndpoint, InvalidHeuristicInput, SearchCancelled
from pathviz.io.datasets import SIMPLE
from pathviz.runtime.hooks import CancelToken, NoopHooks


class ErrorHooks(NoopHooks):
    def __init__(self):
        self.errors = []
        self.events = []

    def search_start(self, **_):
        self.events.append("start")

    def error(self, *, algorithm, exc, **kw):
        self.errors.append((algorithm, type(exc).__name__))
        self.events.append("error")


@pytest.fixture
def line():
    # A-B(1), B-C(1), A-C(5) on a line; weights dominate straight-line distance
    pos = to_positions({"A": (0, 0), "B": (1, 0), "C": (2, 0), "D": (2, 1), "E": (3, 1), "Z": (9, 9)})
    g = build_graph(pos, [("A", "B", 1), ("B", "C", 1), ("A", "C", 5), ("C", "D", 1), ("D", "E", 1)])
    return g, pos


def test_finds_cheapest_route(line):
    g, pos = line
    out = shortest_path(g, pos, "A", "C")
    assert out.path == ("A", "B", "C")
    assert out.distance == 2
    assert out.visited_order[0] == "A"
    assert out.visited_order.index("B") < out.visited_order.index("C")
    assert out.algorithm == "astar"


def test_unreachable_target(line):
    g, pos = line
    out = shortest_path(g, pos, "A", "Z")
    assert out.path == ()
    assert out.distance == UNREACHABLE
    # only the component of the source is ever opened
    assert "Z" not in out.visited_order
    assert set(out.visited_order) == {"A", "B", "C", "D", "E"}


def test_source_equals_target(line):
    g, pos = line
    out = shortest_path(g, pos, "B", "B")
    assert out.path == ("B",)
    assert out.distance == 0
    assert out.visited_order == ("B",)
    assert out.visited_edges == ()


def test_invalid_endpoint_comes_before_heuristic_checks(line):
    g, _ = line
    with pytest.raises(InvalidEndpoint):
        shortest_path(g, {}, "A", "Q")


def test_missing_target_position_is_rejected_up_front(line):
    g, pos = line
    partial = {k: v for k, v in pos.items() if k != "C"}
    with pytest.raises(InvalidHeuristicInput) as ei:
        shortest_path(g, partial, "A", "C")
    assert ei.value.node == "C"


def test_missing_source_position_is_rejected_before_search_start(line):
    g, pos = line
    partial = {k: v for k, v in pos.items() if k != "A"}
    hooks = ErrorHooks()
    with pytest.raises(InvalidHeuristicInput) as ei:
        shortest_path(g, partial, "A", "B", hooks=hooks)
    assert ei.value.node == "A"
    # nothing was started, so there is nothing to close with an error
    assert hooks.events == []


def test_missing_neighbour_position_fails_mid_search(line):
    g, pos = line
    partial = {k: v for k, v in pos.items() if k != "B"}
    hooks = ErrorHooks()
    with pytest.raises(InvalidHeuristicInput) as ei:
        shortest_path(g, partial, "A", "E", hooks=hooks)
    assert ei.value.node == "B"
    assert "no position for node 'B'" in str(ei.value)
    assert hooks.errors == [("astar", "InvalidHeuristicInput")]
    assert hooks.events == ["start", "error"]


def test_ties_go_to_earliest_open_set_entry():
    # P precedes Q in the graph, but S opens Q first; f-scores tie exactly
    pos = to_positions({"S": (0, 0), "P": (1, 1), "Q": (1, -1), "T": (2, 0)})
    g = build_euclidean_graph(pos, [("S", "Q"), ("S", "P"), ("P", "T"), ("Q", "T")])
    out = shortest_path(g, pos, "S", "T")
    assert out.visited_order == ("S", "Q", "P", "T")
    assert out.path == ("S", "Q", "T")
    assert out.distance == pytest.approx(2 * math.sqrt(2))


def test_expanded_node_is_reopened_when_a_cheaper_route_appears():
    pos = to_positions({"S": (0, 0), "A": (1, 0), "B": (0, 1), "T": (2, 0)})
    g = build_graph(pos, [("S", "A", 2), ("S", "B", 1), ("B", "A", 0.5), ("A", "T", 5)])

    def lopsided(a: Point, b: Point) -> float:
        # inconsistent on purpose: B looks far away
        return 3.0 if a == pos["B"] else 0.0

    out = shortest_path(g, pos, "S", "T", heuristic=lopsided)
    assert out.visited_order == ("S", "A", "B", "A", "T")
    assert out.path == ("S", "B", "A", "T")
    assert out.distance == pytest.approx(6.5)


def test_golden_path_on_simple_dataset():
    out = shortest_path(SIMPLE.graph(), SIMPLE.positions(), "A", "M")
    assert out.path == ("A", "X", "D", "N", "M")
    assert out.distance == pytest.approx(400 + 100 * math.sqrt(2))
    assert out.visited_order[0] == "A" and out.visited_order[-1] == "M"


def test_straight_line_heuristic():
    assert straight_line(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


def test_cancel_token_stops_search(line):
    g, pos = line
    token = CancelToken()
    token.cancel()
    with pytest.raises(SearchCancelled):
        shortest_path(g, pos, "A", "E", cancel=token)
