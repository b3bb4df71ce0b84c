# app/session.py
from __future__ import annotations

import logging
from collections.abc import Mapping

from pathviz.app.protocols import GraphSource, PathSearch
from pathviz.app.replay import ReplayFrame, replay
from pathviz.app.selection import Selection, SelectionPhase
from pathviz.domain.search.search_core import SearchOutcome
from pathviz.domain.search.search_errors import InvalidEndpoint
from pathviz.io.datasets import DATASETS
from pathviz.io.recorder import Recorder
from pathviz.runtime.hooks import NoopHooks, SearchHooks
from pathviz.runtime.registries import search_for

logger = logging.getLogger(__name__)


class SelectionIncomplete(RuntimeError):
    def __init__(self, selection: Selection):
        super().__init__("pick both a source and a target node before running a search")
        self.selection = selection


class Session:
    """
    Interaction state of one visualizer window: current scenario, endpoint
    selection, chosen algorithm and the last outcome. The graph of the
    active scenario is built once per switch and never mutated.
    """

    def __init__(
        self,
        datasets: Mapping[str, GraphSource] | None = None,
        *,
        scenario: str = "simple",
        algorithm: str = "dijkstra",
        hooks: SearchHooks | None = None,
        recorder: Recorder | None = None,
    ):
        self.datasets = dict(datasets or DATASETS)
        self.hooks = hooks or NoopHooks()
        self.recorder = recorder
        self.selection = Selection()
        self.outcome: SearchOutcome | None = None
        self.engine: PathSearch = search_for(algorithm)
        self.switch_scenario(scenario)

    @property
    def algorithm(self) -> str:
        return self.engine.name

    @property
    def phase(self) -> SelectionPhase:
        return self.selection.phase

    # ------------- scenario & algorithm -------------

    def switch_scenario(self, name: str) -> None:
        try:
            src = self.datasets[name]
        except KeyError:
            raise ValueError(f"Unknown scenario {name!r}; expected one of {sorted(self.datasets)}") from None
        self.scenario = name
        self.graph = src.graph()
        self.positions = src.positions()
        self.reset()
        logger.info("scenario %s: %d nodes", name, len(self.graph))

    def choose(self, algorithm: str) -> None:
        self.engine = search_for(algorithm)

    # ------------- selection -------------

    def tap(self, node: str) -> SelectionPhase:
        if node not in self.graph:
            raise InvalidEndpoint(node, "tapped node")
        self.selection = self.selection.tap(node)
        if not self.selection.complete:
            self.outcome = None
        return self.selection.phase

    def reset(self) -> None:
        self.selection = self.selection.reset()
        self.outcome = None

    # ------------- run -------------

    def run(self) -> SearchOutcome:
        if not self.selection.complete:
            raise SelectionIncomplete(self.selection)
        self.outcome = self.engine.search(
            self.graph,
            self.positions,
            self.selection.source,
            self.selection.target,
            hooks=self.hooks,
        )
        return self.outcome

    def frames(self) -> list[ReplayFrame]:
        if self.outcome is None:
            return []
        return replay(self.outcome, self.graph, recorder=self.recorder)
