"""
Track module - Control point sampling and spline rasterization.

This module contains:
- TrackSettings: Per-generation configuration record
- SeededRandom: Deterministic PRNG injected into each generation call
- generate_control_points: Jittered circle point sampler
- rasterize: Catmull-Rom curve sampler over wrapping point windows
- TrackGenerator: Generation entry point producing a GeneratedTrack
"""

from trackgen.track.settings import TrackSettings, TrackConfigError
from trackgen.track.rng import SeededRandom
from trackgen.track.geometry import Point
from trackgen.track.sampler import generate_control_points
from trackgen.track.spline import CurveSample, CurveSamples, rasterize
from trackgen.track.generator import TrackGenerator, GeneratedTrack, generate_track

__all__ = [
    "TrackSettings",
    "TrackConfigError",
    "SeededRandom",
    "Point",
    "generate_control_points",
    "CurveSample",
    "CurveSamples",
    "rasterize",
    "TrackGenerator",
    "GeneratedTrack",
    "generate_track",
]
