# pathviz/app/cli.py
"""
Run one search from the command line and print the outcome as JSON lines.

Usage:
    pathviz --source A --target M
    pathviz --scenario advanced --algorithm astar --source N1 --target N15 --frames
    pathviz --config scenario.json
"""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from pathviz.app.build import build
from pathviz.app.replay import replay
from pathviz.config.models import ScenarioModel, load_scenario
from pathviz.domain.search.search_errors import SearchError
from pathviz.io.recorder import JsonlSink, Recorder


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathviz",
        description="Shortest-path search with a replayable trace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="scenario JSON file (overrides --scenario)")
    parser.add_argument("--scenario", choices=["simple", "advanced"], default="simple")
    parser.add_argument("--algorithm", choices=["dijkstra", "astar"], default=None)
    parser.add_argument("--source", help="start node id")
    parser.add_argument("--target", help="end node id")
    parser.add_argument("--frames", action="store_true", help="also print replay frames")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None
    )
    parser.add_argument("--no-log", action="store_true", help="disable JSON search logs")
    return parser.parse_args(argv)


def _scenario(args: argparse.Namespace) -> ScenarioModel:
    if args.config:
        model = load_scenario(args.config)
    else:
        model = ScenarioModel.model_validate(
            {"name": args.scenario, "graph": {"by": "name", "name": args.scenario}}
        )
    updates: dict = {}
    if args.log_level:
        updates["log"] = model.log.model_copy(update={"level": args.log_level})
    if args.algorithm:
        updates["search"] = {"kind": args.algorithm}
    if args.source:
        updates["source"] = args.source
    if args.target:
        updates["target"] = args.target
    # re-validate so the discriminated union and endpoint checks apply
    return ScenarioModel.model_validate({**model.model_dump(), **updates})


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        app = build(_scenario(args), use_logging=not args.no_log)
        outcome = app.run()
    except (ValidationError, SearchError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    out = sys.stdout
    out.write(json.dumps(outcome.to_dict()) + "\n")
    if args.frames:
        replay(outcome, app.graph, recorder=Recorder(JsonlSink(out)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
