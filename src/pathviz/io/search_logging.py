# io/search_logging.py
import json
import logging
import math
import sys

from pathviz.runtime.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="pathviz", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    One place to shape and emit structured logs for search runs.
    Per-node and per-edge records are DEBUG-only and sampled.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._examined = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # search lifecycle

    def search_start(self, *, algorithm, source, target, nodes):
        self._examined = 0
        self._emit("INFO", "search_start", algorithm=algorithm, source=source, target=target, nodes=nodes)

    def settle(self, node, *, distance, step):
        if self.debug and (step % self.sample_every) == 0:
            self._emit("DEBUG", "settle", node=node, distance=_num(distance), step=step)

    def examine(self, u, v, *, weight, improved):
        self._examined += 1
        if self.debug and (self._examined % self.sample_every) == 0:
            self._emit("DEBUG", "examine", edge=[u, v], weight=weight, improved=improved)

    def search_end(self, outcome, *, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=outcome.algorithm,
            reachable=outcome.reachable,
            distance=_num(outcome.distance),
            path=list(outcome.path),
            settled=len(outcome.visited_order),
            examined=len(outcome.visited_edges),
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, algorithm, exc: BaseException, **extra):
        self._emit("ERROR", "search_error", algorithm=algorithm, error=str(exc), **extra)


def _num(x: float) -> float | None:
    # json has no Infinity
    return x if math.isfinite(x) else None
