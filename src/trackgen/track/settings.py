"""
Track settings - Per-generation configuration record.

Defines:
- TrackSettings with the default generation parameters
- Option name aliases accepted from external settings surfaces
- Validation performed before a generation call starts
"""

import dataclasses
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping
import numpy as np


class TrackConfigError(ValueError):
    """Raised when track settings cannot be used for generation."""


# Alternative option names mapped onto TrackSettings fields
SETTING_ALIASES: Dict[str, str] = {
    # camelCase names from the settings surface
    "numPoints": "num_points",
    "radiusFraction": "radius_fraction",
    "radiusJitterFraction": "radius_jitter_fraction",
    "thetaJitterFraction": "theta_jitter_fraction",
    "splinePointDensity": "spline_point_density",
    # Short names used by the slider bindings
    "radius": "radius_fraction",
    "radius_jitter": "radius_jitter_fraction",
    "theta_jitter": "theta_jitter_fraction",
}

FLOAT_FIELDS = (
    "radius_fraction",
    "radius_jitter_fraction",
    "theta_jitter_fraction",
    "spline_point_density",
)


@dataclass(frozen=True)
class TrackSettings:
    """Configuration for a single track generation.

    All fractions are relative: the radius to the canvas half-extent,
    radius jitter to the radius, and theta jitter to pi.
    """
    num_points: int = 10                    # Control points on the loop
    radius_fraction: float = 0.333          # Fraction of canvas half-extent
    radius_jitter_fraction: float = 0.3     # Fraction of radius
    theta_jitter_fraction: float = 1 / 20   # Fraction of pi
    spline_point_density: float = 1.0       # Curve samples per pixel of chord

    # RNG seed (None for a non-deterministic seed)
    seed: int | str | None = 12345

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def resolve_name(cls, name: str) -> str:
        """Map an option name or alias onto a settings field name.

        Raises:
            KeyError: If the name is not a known setting
        """
        resolved = SETTING_ALIASES.get(name, name)
        if resolved not in cls.field_names():
            raise KeyError(f"Unknown track setting: {name!r}")
        return resolved

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "TrackSettings":
        """Build settings from a mapping, filling missing fields with defaults.

        Args:
            values: Option names (snake_case, camelCase or short names) to values

        Returns:
            New TrackSettings
        """
        kwargs = {cls.resolve_name(name): value for name, value in values.items()}
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}

    def replace(self, **changes: Any) -> "TrackSettings":
        """Return a copy with the given fields (or aliases) changed."""
        resolved = {self.resolve_name(name): value for name, value in changes.items()}
        return dataclasses.replace(self, **resolved)

    def validate(self) -> "TrackSettings":
        """Check that these settings can drive a generation call.

        Point counts below 4 are accepted; they give degenerate but valid loops.

        Returns:
            self, to allow chaining

        Raises:
            TrackConfigError: On a non-integer or negative point count, a
                non-finite float field, a negative density or a bad seed type
        """
        if isinstance(self.num_points, bool) or not isinstance(self.num_points, (int, np.integer)):
            raise TrackConfigError(
                f"num_points must be an integer, got {self.num_points!r}"
            )
        if self.num_points < 0:
            raise TrackConfigError(f"num_points must be >= 0, got {self.num_points}")

        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise TrackConfigError(f"{name} must be a number, got {value!r}")
            if not np.isfinite(value):
                raise TrackConfigError(f"{name} must be finite, got {value!r}")

        if self.spline_point_density < 0:
            raise TrackConfigError(
                f"spline_point_density must be >= 0, got {self.spline_point_density}"
            )

        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, (int, str, np.integer))
        ):
            raise TrackConfigError(f"seed must be an int, str or None, got {self.seed!r}")

        return self
