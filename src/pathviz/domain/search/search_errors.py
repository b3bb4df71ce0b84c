class SearchError(Exception):
    """Base exception for search input and lifecycle failures."""


class InvalidEndpoint(SearchError, KeyError):
    def __init__(self, node, role: str = "endpoint"):
        if node is None:
            msg = f"no {role} configured"
        else:
            msg = f"{role} {node!r} is not a node of the graph"
        super().__init__(msg)
        self.node, self.role = node, role

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidHeuristicInput(SearchError, KeyError):
    def __init__(self, node):
        super().__init__(f"no position for node {node!r}; heuristic is undefined")
        self.node = node

    def __str__(self) -> str:
        return self.args[0]


class SearchCancelled(SearchError):
    def __init__(self, algorithm: str, steps: int):
        super().__init__(f"{algorithm} search cancelled after {steps} settled nodes")
        self.algorithm, self.steps = algorithm, steps
