# runtime/rng.py
from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(p: object) -> int:
    """Map a stream name or sub-key (node count, scenario label...) to a u32."""
    if isinstance(p, (int, np.integer)):
        return _u32(int(p))
    text = p if isinstance(p, str) else repr(p)
    return _u32(crc32(text.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Stream name plus optional sub-keys, e.g. ("layout", 12) for a 12-node layout."""

    stream: str
    parts: tuple[int, ...]  # u32 tags, stream name first

    @classmethod
    def of(cls, stream: str, *parts: object) -> RNGKey:
        return cls(stream=stream, parts=(_tag(stream), *map(_tag, parts)))


class RNGRegistry:
    """
    Deterministic numpy generators for generated scenarios.

    Every stream is seeded from [master_seed, scenario, *key.parts], so two
    registries built with the same seed and scenario label lay out identical
    graphs, whatever order their streams are requested in.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _tag(str(scenario))

    @cache
    def generator(self, key: RNGKey) -> np.random.Generator:
        # cached per key: repeated lookups continue the same stream
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, *key.parts])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        return self.generator(RNGKey.of(name))

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        return self.generator(RNGKey.of(name, *parts))
