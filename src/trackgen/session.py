"""
Track session - Headless settings binding with regenerate-on-change.

A session stands in for a settings UI: it owns the current settings,
applies changes coming from input controls, and regenerates the whole
track after every change. Generation itself stays stateless.
"""

from typing import Any, Callable, Optional
import logging
import numpy as np

from trackgen.track.generator import GeneratedTrack, TrackGenerator
from trackgen.track.rng import random_seed
from trackgen.track.settings import TrackConfigError, TrackSettings

logger = logging.getLogger(__name__)


def coerce_setting(name: str, value: Any) -> Any:
    """Convert a raw control value (often text) into a settings value.

    Args:
        name: Settings field name
        value: Raw value from an input control

    Returns:
        int for num_points, float for fractions and density; seeds keep
        non-numeric text as a string seed

    Raises:
        TrackConfigError: If a numeric field gets a non-numeric value
    """
    if name == "seed":
        if value is None or (isinstance(value, int) and not isinstance(value, bool)):
            return value
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return text
        # Integral numbers seed like the integer itself ("7.0" == 7)
        if np.isfinite(number) and number.is_integer():
            return int(number)
        return text

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise TrackConfigError(f"{name} must be numeric, got {value!r}") from None

    if name == "num_points":
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


class TrackSession:
    """Mutable settings holder that regenerates on every change.

    Usage:
        session = TrackSession(on_update=renderer_callback)
        session.update("num_points", "12")
        session.randomize_seed()
        session.reset()
    """

    def __init__(
        self,
        settings: TrackSettings | None = None,
        generator: TrackGenerator | None = None,
        on_update: Optional[Callable[[GeneratedTrack], None]] = None,
    ):
        """Initialize session and generate the initial track.

        Args:
            settings: Starting settings. Uses defaults if None.
            generator: Generator to call. A default one is created if None.
            on_update: Called with each newly generated track
        """
        self.settings = settings or TrackSettings()
        self.generator = generator or TrackGenerator()
        self.on_update = on_update
        self.track: GeneratedTrack | None = None
        self.generation_count = 0

        self.regenerate()

    def regenerate(self) -> GeneratedTrack:
        """Generate a fresh track from the current settings."""
        self.track = self.generator.generate(self.settings)
        self.generation_count += 1

        if self.on_update is not None:
            self.on_update(self.track)

        return self.track

    def update(self, name: str, value: Any) -> GeneratedTrack:
        """Change one setting and regenerate.

        Args:
            name: Setting name or alias
            value: New value, coerced like a text control value

        Raises:
            KeyError: If the setting name is unknown
            TrackConfigError: If the new value is invalid; settings are unchanged
        """
        return self.update_many(**{name: value})

    def update_many(self, **values: Any) -> GeneratedTrack:
        """Change several settings and regenerate once."""
        changes = {}
        for name, value in values.items():
            field_name = TrackSettings.resolve_name(name)
            changes[field_name] = coerce_setting(field_name, value)

        new_settings = self.settings.replace(**changes).validate()
        logger.debug("Settings changed: %s", changes)
        self.settings = new_settings
        return self.regenerate()

    def randomize_seed(self) -> GeneratedTrack:
        """Pick a new random seed and regenerate."""
        seed = random_seed()
        logger.info("New random seed: %d", seed)
        return self.update("seed", seed)

    def reset(self) -> GeneratedTrack:
        """Restore default settings and regenerate."""
        self.settings = TrackSettings()
        return self.regenerate()
