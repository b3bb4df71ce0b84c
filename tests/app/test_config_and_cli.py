import json
import math

import pytest
from pydantic import ValidationError

from pathviz.app.build import build
from pathviz.app.cli import main
from pathviz.config.models import GraphLiteral, ScenarioModel, SearchAStarModel, load_scenario
from pathviz.domain.search.search_errors import InvalidEndpoint
from pathviz.io.datasets import make_dataset
from pathviz.runtime.hooks import NoopHooks
from pathviz.runtime.rng import RNGRegistry

LITERAL = {
    "by": "literal",
    "positions": {"A": [0, 0], "B": [3, 4], "C": [6, 8]},
    "edges": [["A", "B"], ["B", "C"]],
}


# ------------------ CONFIG ------------------


def test_defaults_select_simple_dijkstra():
    m = ScenarioModel()
    assert m.graph.by == "name" and m.graph.name == "simple"
    assert m.search.kind == "dijkstra"
    assert m.log.level == "INFO" and m.log.sample_every == 1


def test_discriminated_unions():
    m = ScenarioModel.model_validate({"graph": LITERAL, "search": {"kind": "astar"}})
    assert isinstance(m.graph, GraphLiteral)
    assert isinstance(m.search, SearchAStarModel)
    assert m.graph.positions["B"] == (3.0, 4.0)


@pytest.mark.parametrize(
    "cfg",
    [
        {"surprise": 1},
        {"log": {"sample_every": 0}},
        {"search": {"kind": "bfs"}},
        {"graph": {"by": "name", "name": "huge"}},
        {"graph": {"by": "random", "n": 0}},
        {"graph": {"by": "random", "radius": -1}},
        {"graph": {"by": "literal", "positions": {}}},
        {"graph": {**LITERAL, "edges": [["A", "Q"]], "on_unknown": "raise"}},
        {"graph": LITERAL, "source": "Q"},
    ],
)
def test_invalid_configs_are_rejected(cfg):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(cfg)


def test_unknown_edge_is_accepted_when_skipping():
    m = ScenarioModel.model_validate({"graph": {**LITERAL, "edges": [["A", "Q"], ["A", "B"]]}})
    app = build(m, use_logging=False)
    assert [v for v, _ in app.graph["A"]] == ["B"]


def test_load_scenario_from_file(tmp_path):
    p = tmp_path / "scenario.json"
    p.write_text(json.dumps({"name": "t", "graph": LITERAL, "source": "A", "target": "C"}))
    m = load_scenario(p)
    assert m.name == "t" and m.target == "C"


# ------------------ BUILD ------------------


def test_build_literal_and_run():
    app = build({"graph": LITERAL, "source": "A", "target": "C"}, use_logging=False)
    assert isinstance(app.hooks, NoopHooks)
    out = app.run()
    assert out.path == ("A", "B", "C")
    assert out.distance == pytest.approx(10.0)
    # explicit endpoints override the configured ones
    assert app.run("C", "A").path == ("C", "B", "A")


def test_run_without_endpoints_raises():
    app = build({}, use_logging=False)
    with pytest.raises(InvalidEndpoint) as ei:
        app.run()
    assert ei.value.role == "source"
    assert str(ei.value) == "no source configured"
    with pytest.raises(InvalidEndpoint) as ei:
        app.run("A")
    assert ei.value.role == "target"
    assert str(ei.value) == "no target configured"


def test_random_graph_is_seeded():
    cfg = {"graph": {"by": "random", "n": 15, "seed": 5}}
    a, b = build(cfg, use_logging=False), build(cfg, use_logging=False)
    c = build({"graph": {"by": "random", "n": 15, "seed": 6}}, use_logging=False)
    assert a.positions == b.positions and a.graph == b.graph
    assert a.positions != c.positions


def test_deps_override_rng_and_named_datasets():
    cfg = {"graph": {"by": "random", "n": 8}}
    a = build(cfg, use_logging=False, deps={"rng": RNGRegistry(1, scenario="x")})
    b = build(cfg, use_logging=False, deps={"rng": RNGRegistry(1, scenario="x")})
    assert a.positions == b.positions

    tiny = make_dataset("simple", {"S": (0, 0), "T": (1, 0)}, [("S", "T")])
    app = build({"source": "S", "target": "T"}, use_logging=False, deps={"datasets": {"simple": tiny}})
    assert app.run().path == ("S", "T")


# ------------------ CLI ------------------


def test_cli_prints_outcome(capsys):
    rc = main(["--source", "A", "--target", "M", "--no-log"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    doc = json.loads(lines[0])
    assert doc["algorithm"] == "dijkstra"
    assert doc["path"] == ["A", "X", "D", "N", "M"]
    assert doc["distance"] == pytest.approx(400 + 100 * math.sqrt(2))
    assert doc["visited_order"][0] == "A"


def test_cli_frames_and_astar(capsys):
    rc = main(
        ["--scenario", "advanced", "--algorithm", "astar", "--source", "N1", "--target", "N15", "--frames", "--no-log"]
    )
    assert rc == 0
    lines = [json.loads(x) for x in capsys.readouterr().out.splitlines()]
    assert lines[0]["algorithm"] == "astar"
    assert lines[-1]["kind"] == "path" and lines[-1]["is_final"]
    assert lines[-1]["path_nodes"] == lines[0]["path"]


def test_cli_unreachable_prints_null_distance(tmp_path, capsys):
    p = tmp_path / "s.json"
    p.write_text(json.dumps({"graph": {**LITERAL, "edges": []}, "source": "A", "target": "C"}))
    assert main(["--config", str(p), "--no-log"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["path"] == [] and doc["distance"] is None


def test_cli_errors_exit_2(tmp_path, capsys):
    assert main(["--source", "A", "--target", "N15", "--no-log"]) == 2
    assert "'N15' is not a node" in capsys.readouterr().err

    assert main(["--no-log"]) == 2
    assert "no source configured" in capsys.readouterr().err

    p = tmp_path / "bad.json"
    p.write_text('{"graph": {"by": "nowhere"}}')
    assert main(["--config", str(p), "--no-log"]) == 2
    assert main(["--config", str(tmp_path / "missing.json"), "--no-log"]) == 2
