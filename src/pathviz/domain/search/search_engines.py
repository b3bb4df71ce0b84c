from pathviz.app.protocols import Heuristic, PathSearch
from pathviz.domain.search import search_astar, search_dijkstra


class DijkstraSearch(PathSearch):
    name = search_dijkstra.NAME

    def search(self, graph, positions, source, target, *, hooks=None, cancel=None):
        # positions are not needed for uniform-cost search
        return search_dijkstra.shortest_path(graph, source, target, hooks=hooks, cancel=cancel)


class AStarSearch(PathSearch):
    name = search_astar.NAME

    def __init__(self, heuristic: Heuristic = search_astar.straight_line):
        self.heuristic = heuristic

    def search(self, graph, positions, source, target, *, hooks=None, cancel=None):
        return search_astar.shortest_path(
            graph,
            positions or {},
            source,
            target,
            heuristic=self.heuristic,
            hooks=hooks,
            cancel=cancel,
        )
