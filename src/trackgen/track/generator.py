"""
Track generator - Generation entry point.

Each call:
- Validates the settings
- Seeds a fresh random source from settings.seed
- Samples control points on a jittered circle
- Builds the lazy curve sample sequence
"""

from dataclasses import dataclass
from typing import Tuple
import logging
import numpy as np

from trackgen.track.geometry import Point, points_to_array
from trackgen.track.rng import SeededRandom
from trackgen.track.sampler import DEFAULT_CANVAS_SIZE, generate_control_points
from trackgen.track.settings import TrackSettings
from trackgen.track.spline import CurveSamples, rasterize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedTrack:
    """Result of one generation call."""
    settings: TrackSettings
    canvas_size: int
    control_points: Tuple[Point, ...]
    samples: CurveSamples

    @property
    def num_points(self) -> int:
        return len(self.control_points)

    @property
    def num_samples(self) -> int:
        return len(self.samples)

    def control_point_array(self) -> np.ndarray:
        return points_to_array(self.control_points)

    def sample_array(self) -> np.ndarray:
        return self.samples.to_array()


class TrackGenerator:
    """Closed-loop track generator.

    Holds no state between calls besides the canvas size; every call
    builds its own random source from the settings seed.

    Usage:
        generator = TrackGenerator()
        track = generator.generate(TrackSettings(seed=42))
    """

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE):
        """Initialize generator.

        Args:
            canvas_size: Side length of the square canvas in whole pixels

        Raises:
            ValueError: If canvas_size is not a positive integer
        """
        if isinstance(canvas_size, bool) or not isinstance(canvas_size, (int, np.integer)):
            raise ValueError(f"canvas_size must be an integer, got {canvas_size!r}")
        if canvas_size <= 0:
            raise ValueError(f"canvas_size must be positive, got {canvas_size}")
        self.canvas_size = int(canvas_size)

    def generate(self, settings: TrackSettings | None = None) -> GeneratedTrack:
        """Generate a track.

        Args:
            settings: Track settings. Uses defaults if None.

        Returns:
            GeneratedTrack with control points and curve samples

        Raises:
            TrackConfigError: If the settings are invalid
        """
        settings = (settings or TrackSettings()).validate()

        prng = SeededRandom(settings.seed)
        control_points = generate_control_points(settings, prng, self.canvas_size)
        samples = rasterize(control_points, settings.spline_point_density)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generated track: seed=%r points=%d samples=%d",
                settings.seed, len(control_points), len(samples),
            )

        return GeneratedTrack(
            settings=settings,
            canvas_size=self.canvas_size,
            control_points=control_points,
            samples=samples,
        )


def generate_track(
    settings: TrackSettings | None = None,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> GeneratedTrack:
    """Generate a track with a throwaway TrackGenerator."""
    return TrackGenerator(canvas_size).generate(settings)
