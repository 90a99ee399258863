"""
Point sampler - Control points on a jittered circle.

Each control point starts evenly spaced around a circle centred on the
canvas and is then perturbed in radius and angle by seeded jitter.
Jitter may push a point past its neighbours in angle; that order is kept.
"""

from typing import Tuple
import numpy as np

from trackgen.track.geometry import Point
from trackgen.track.rng import SeededRandom
from trackgen.track.settings import TrackSettings

DEFAULT_CANVAS_SIZE = 500


def generate_control_points(
    settings: TrackSettings,
    prng: SeededRandom,
    canvas_size: float = DEFAULT_CANVAS_SIZE,
) -> Tuple[Point, ...]:
    """Generate the control points for one track.

    Draws two values per point from `prng`, radius jitter first and
    angle jitter second.

    Args:
        settings: Track settings
        prng: Random source owned by this generation call
        canvas_size: Side length of the square canvas in pixels

    Returns:
        Exactly settings.num_points points in generation order
    """
    half = canvas_size / 2
    center_x = center_y = half
    base_radius = settings.radius_fraction * half
    num_points = settings.num_points

    points = []
    for i in range(num_points):
        jitter_r = prng.uniform(-1, 1)
        jitter_t = prng.uniform(-1, 1)

        radius = base_radius + jitter_r * settings.radius_jitter_fraction * base_radius
        theta = (i / num_points) * (2 * np.pi) + jitter_t * settings.theta_jitter_fraction * np.pi

        points.append(Point(
            center_x + radius * float(np.cos(theta)),
            center_y + radius * float(np.sin(theta)),
        ))

    return tuple(points)
