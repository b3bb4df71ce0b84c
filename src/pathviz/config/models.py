from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- GRAPH SOURCES ---------------------


class GraphByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: Literal["simple", "advanced"] = "simple"


class GraphLiteral(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["literal"] = "literal"
    positions: dict[str, tuple[float, float]]
    edges: list[tuple[str, str]] = Field(default_factory=list)
    on_unknown: Literal["skip", "raise"] = "skip"

    @field_validator("positions")
    @classmethod
    def _non_empty(cls, v: dict[str, tuple[float, float]]):
        if not v:
            raise ValueError("a literal graph needs at least one node")
        return v

    @model_validator(mode="after")
    def _check_edges(self):
        # "skip" drops bad edges at build time; "raise" fails here, before any search
        if self.on_unknown == "raise":
            for u, v in self.edges:
                for n in (u, v):
                    if n not in self.positions:
                        raise ValueError(f"edge ({u!r}, {v!r}) references unknown node {n!r}")
        return self


class GraphRandom(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["random"] = "random"
    n: int = 12
    radius: float = 150.0
    width: float = 400.0
    height: float = 300.0
    seed: int = 123

    @field_validator("n", "radius", "width", "height")
    def _pos(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


GraphRef = Annotated[GraphByName | GraphLiteral | GraphRandom, Field(discriminator="by")]


# ----------------- SEARCH ---------------------


class SearchDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class SearchAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: Literal["straight_line"] = "straight_line"


SearchUnion = Annotated[SearchDijkstraModel | SearchAStarModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    log: LogModel = LogModel()
    graph: GraphRef = Field(default_factory=GraphByName)
    search: SearchUnion = Field(default_factory=SearchDijkstraModel)
    source: str | None = None
    target: str | None = None

    @model_validator(mode="after")
    def _endpoints_declared(self):
        if not isinstance(self.graph, GraphLiteral):
            return self  # checked against the built graph at run time
        for role in ("source", "target"):
            node = getattr(self, role)
            if node is not None and node not in self.graph.positions:
                raise ValueError(f"{role} {node!r} is not a declared node")
        return self


def load_scenario(path: str | Path) -> ScenarioModel:
    text = Path(path).read_text(encoding="utf-8")
    return ScenarioModel.model_validate_json(text)
