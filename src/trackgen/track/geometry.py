"""
Geometry helpers shared by the sampler and the spline rasterizer.
"""

from typing import NamedTuple, Sequence, Tuple
import numpy as np


class Point(NamedTuple):
    """2D coordinate in canvas pixels."""
    x: float
    y: float


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(b.x - a.x, b.y - a.y))


def circular_index(index: int, length: int) -> int:
    return index % length


def circular_window(points: Sequence[Point], start: int, size: int = 4) -> Tuple[Point, ...]:
    """Return `size` consecutive points starting at `start`, wrapping at the end.

    With fewer points than `size` the window repeats indices.
    """
    n = len(points)
    return tuple(points[circular_index(start + k, n)] for k in range(size))


def points_to_array(points: Sequence[Tuple[float, float]]) -> np.ndarray:
    """Stack points into an (N, 2) float array."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=float)
    return np.array([(p[0], p[1]) for p in points], dtype=float)
