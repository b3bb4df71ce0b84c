import math
from collections.abc import Hashable, Mapping
from dataclasses import dataclass


# Core geometry types used by the graph builder and the A* heuristic
@dataclass(frozen=True)
class Point:
    x: float  # layout units (canvas pixels)
    y: float


Pt = Point | tuple[float, float]
Positions = Mapping[Hashable, Point]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


def euclid(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def to_positions(raw: Mapping[Hashable, Pt]) -> dict[Hashable, Point]:
    """Normalize a literal {node: (x, y)} mapping, keeping insertion order."""
    return {n: to_point(p) for n, p in raw.items()}
