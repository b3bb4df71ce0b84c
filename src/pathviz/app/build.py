# pathviz/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pathviz.app.protocols import GraphSource, PathSearch
from pathviz.config.models import ScenarioModel
from pathviz.domain.entities.geography import Point
from pathviz.domain.entities.graph import Edge
from pathviz.domain.search.search_core import SearchOutcome
from pathviz.domain.search.search_errors import InvalidEndpoint
from pathviz.io.search_logging import SearchLogging
from pathviz.runtime.hooks import CancelCheck, NoopHooks, SearchHooks
from pathviz.runtime.registries import make_search, resolve_graph


@dataclass
class App:
    config: ScenarioModel
    source: GraphSource
    graph: dict[str, tuple[Edge, ...]]
    positions: dict[str, Point]
    engine: PathSearch
    hooks: SearchHooks

    def run(
        self, source: str | None = None, target: str | None = None, *, cancel: CancelCheck | None = None
    ) -> SearchOutcome:
        s = source if source is not None else self.config.source
        t = target if target is not None else self.config.target
        if s is None:
            raise InvalidEndpoint(None, "source")
        if t is None:
            raise InvalidEndpoint(None, "target")
        return self.engine.search(self.graph, self.positions, s, t, hooks=self.hooks, cancel=cancel)


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True, deps: dict | None = None) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Scenario graph, built once and shared read-only by every run
    src = resolve_graph(model.graph, deps=deps)
    graph, positions = src.graph(), src.positions()

    # 2) Engine & hooks
    engine = make_search(model.search, deps=deps)
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    return App(model, src, graph, positions, engine, hooks)
