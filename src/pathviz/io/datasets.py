# pathviz/io/datasets.py
"""
Built-in scenarios and a seeded random geometric scenario generator.

Coordinates are canvas units; edge weights are always the Euclidean length
between endpoints, which keeps the A* straight-line heuristic admissible.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from pathviz.app.protocols import GraphSource
from pathviz.domain.entities.geography import Point, to_positions
from pathviz.domain.entities.graph import Edge, OnUnknown, build_euclidean_graph


@dataclass(frozen=True)
class Dataset(GraphSource):
    name: str
    points: dict[str, Point]
    pairs: tuple[tuple[str, str], ...]
    on_unknown: OnUnknown = field(default="skip", compare=False)

    def positions(self) -> dict[str, Point]:
        return dict(self.points)

    def graph(self) -> dict[str, tuple[Edge, ...]]:
        return build_euclidean_graph(self.points, self.pairs, on_unknown=self.on_unknown)


def make_dataset(name, positions, pairs, *, on_unknown: OnUnknown = "skip") -> Dataset:
    return Dataset(
        name=name,
        points=to_positions(positions),
        pairs=tuple((u, v) for u, v in pairs),
        on_unknown=on_unknown,
    )


# ---------------- Simple: 10 nodes on a 100-unit grid ----------------

SIMPLE = make_dataset(
    "simple",
    {
        "A": (50, 50), "B": (150, 50), "C": (250, 50),
        "D": (150, 150), "E": (250, 150), "X": (50, 150),
        "Y": (50, 250), "Z": (150, 250), "M": (250, 250),
        "N": (350, 150),
    },
    [
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("A", "X"),
        ("X", "Y"), ("Y", "Z"), ("Z", "E"), ("B", "Y"), ("C", "Z"),
        ("X", "D"), ("D", "N"), ("N", "M"),
    ],
)  # fmt: skip

# ---------------- Advanced: 15 nodes in five columns ----------------

ADVANCED = make_dataset(
    "advanced",
    {
        "N1": (0, 0), "N2": (0, 100), "N3": (0, 200), "N4": (0, 300),
        "N5": (100, 50), "N6": (100, 150), "N7": (100, 250),
        "N8": (200, 0), "N9": (200, 100), "N10": (200, 200), "N11": (200, 300),
        "N12": (300, 50), "N13": (300, 250),
        "N14": (400, 100), "N15": (400, 200),
    },
    [
        # neighbouring columns
        ("N1", "N5"), ("N1", "N8"), ("N2", "N5"), ("N2", "N6"),
        ("N3", "N6"), ("N3", "N7"), ("N4", "N7"), ("N4", "N11"),
        ("N5", "N8"), ("N5", "N9"), ("N6", "N9"), ("N6", "N10"),
        ("N7", "N10"), ("N7", "N11"),
        # dense middle
        ("N8", "N12"), ("N9", "N12"), ("N9", "N13"), ("N10", "N13"), ("N11", "N13"),
        # exits
        ("N12", "N14"), ("N13", "N14"), ("N13", "N15"), ("N14", "N15"),
        # long cross-links
        ("N2", "N3"), ("N8", "N9"), ("N10", "N11"), ("N5", "N12"),
    ],
)  # fmt: skip

DATASETS: dict[str, Dataset] = {d.name: d for d in (SIMPLE, ADVANCED)}


def get_dataset(name: str) -> Dataset:
    try:
        return DATASETS[name]
    except KeyError:
        raise ValueError(f"Unknown dataset {name!r}; expected one of {sorted(DATASETS)}") from None


# ---------------- Random geometric scenarios ----------------


def random_dataset(
    rng: np.random.Generator,
    n: int,
    *,
    radius: float,
    width: float = 400.0,
    height: float = 300.0,
    name: str = "random",
) -> Dataset:
    """Uniform points in a width x height box, joined when closer than radius."""
    xy = rng.uniform((0.0, 0.0), (width, height), size=(n, 2))
    d = np.hypot(xy[:, None, 0] - xy[None, :, 0], xy[:, None, 1] - xy[None, :, 1])
    close = np.triu(d <= radius, k=1)
    ids = [f"R{i}" for i in range(n)]
    points = {ids[i]: Point(float(x), float(y)) for i, (x, y) in enumerate(xy)}
    pairs = tuple((ids[int(i)], ids[int(j)]) for i, j in np.argwhere(close))
    return Dataset(name=name, points=points, pairs=pairs)
