"""
Spline rasterizer - Catmull-Rom sampling over a closed loop of control points.

Segment i interpolates between control points i+1 and i+2 (mod N), using
points i and i+3 as tangent guides. Each segment gets a sample count
proportional to its chord length; a count of zero skips the segment.
Samples run over t in [0, 1), so the seam point is produced once, by the
following segment at t = 0.
"""

from typing import Iterator, List, NamedTuple, Sequence, Tuple
import numpy as np

from trackgen.track.geometry import Point, circular_window, distance


class CurveSample(NamedTuple):
    """Point on the curve, tagged with its segment and parameter."""
    x: float
    y: float
    segment: int
    t: float


def point_on_curve(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate the uniform Catmull-Rom basis between p1 and p2 at t."""
    t2 = t * t
    t3 = t2 * t

    x = 0.5 * ((2.0 * p1.x) +
               (-p0.x + p2.x) * t +
               (2.0 * p0.x - 5.0 * p1.x + 4.0 * p2.x - p3.x) * t2 +
               (-p0.x + 3.0 * p1.x - 3.0 * p2.x + p3.x) * t3)

    y = 0.5 * ((2.0 * p1.y) +
               (-p0.y + p2.y) * t +
               (2.0 * p0.y - 5.0 * p1.y + 4.0 * p2.y - p3.y) * t2 +
               (-p0.y + 3.0 * p1.y - 3.0 * p2.y + p3.y) * t3)

    return Point(x, y)


def sample_count(p1: Point, p2: Point, density: float) -> int:
    """Number of samples for the segment between p1 and p2."""
    return int(np.floor(distance(p1, p2) * density))


class CurveSamples:
    """Lazy, restartable sequence of curve samples.

    Nothing is evaluated until iteration; each new iteration starts
    from the first segment again.

    Usage:
        samples = rasterize(points, density=1.0)
        for sample in samples:
            ...
    """

    def __init__(self, control_points: Sequence[Point], density: float):
        self._points: Tuple[Point, ...] = tuple(Point(*p) for p in control_points)
        self.density = density

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveSamples):
            return NotImplemented
        return self._points == other._points and self.density == other.density

    def __hash__(self) -> int:
        return hash((self._points, self.density))

    @property
    def control_points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def num_segments(self) -> int:
        return len(self._points)

    def window(self, segment: int) -> Tuple[Point, ...]:
        """The four control points used by a segment."""
        return circular_window(self._points, segment)

    def segment_counts(self) -> List[int]:
        """Sample count of every segment, without evaluating the curve."""
        counts = []
        for i in range(self.num_segments):
            _, p1, p2, _ = self.window(i)
            counts.append(sample_count(p1, p2, self.density))
        return counts

    def __iter__(self) -> Iterator[CurveSample]:
        for i in range(self.num_segments):
            p0, p1, p2, p3 = self.window(i)
            count = sample_count(p1, p2, self.density)

            # Zero-length or low-density segments contribute nothing
            if count == 0:
                continue

            for j in range(count):
                t = j / count
                point = point_on_curve(p0, p1, p2, p3, t)
                yield CurveSample(point.x, point.y, i, t)

    def __len__(self) -> int:
        return sum(self.segment_counts())

    def to_array(self) -> np.ndarray:
        """Sample coordinates as an (M, 2) float array."""
        coords = [(s.x, s.y) for s in self]
        if not coords:
            return np.zeros((0, 2), dtype=float)
        return np.array(coords, dtype=float)


def rasterize(control_points: Sequence[Point], density: float) -> CurveSamples:
    """Build the curve sample sequence for a closed loop.

    Args:
        control_points: Loop control points, treated circularly
        density: Samples per pixel of chord between a segment's interior points

    Returns:
        Lazy sequence with one segment per control point
    """
    return CurveSamples(control_points, density)
