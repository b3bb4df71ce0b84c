# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, frame) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, frame) -> None:
        payload = asdict(frame) if is_dataclass(frame) else frame
        self.fp.write(json.dumps(payload, default=str) + "\n")


class MemorySink:
    def __init__(self):
        self.frames: list = []

    def write(self, frame) -> None:
        self.frames.append(frame)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, frame) -> None:
        for s in self.sinks:
            try:
                s.write(frame)
            except OSError:
                # one broken output must not starve the others
                logger.exception("sink %s failed", type(s).__name__)
