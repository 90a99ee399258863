"""
trackgen - Procedural closed-loop track generation.

This package provides:
- Seeded control point placement on a jittered circle
- Catmull-Rom spline rasterization with distance-adaptive sampling
- A numpy-backed raster canvas and track renderer
- PNG, JSON and NumPy export of generated tracks
- A headless settings session that regenerates on every change
"""

__version__ = "0.1.0"

from trackgen.track.settings import TrackSettings, TrackConfigError
from trackgen.track.generator import TrackGenerator, GeneratedTrack, generate_track
from trackgen.render.renderer import TrackRenderer

__all__ = [
    "TrackSettings",
    "TrackConfigError",
    "TrackGenerator",
    "GeneratedTrack",
    "generate_track",
    "TrackRenderer",
    "__version__",
]
