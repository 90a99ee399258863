"""
Track renderer - Paints a generated track onto a raster canvas.

Draw order:
- Clear to the background color
- One small square per curve sample
- One larger square per control point, drawn last so markers stay visible
"""

from dataclasses import dataclass
import logging

from trackgen.render.canvas import Color, RasterCanvas
from trackgen.track.generator import GeneratedTrack

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Renderer colors and marker sizes."""
    background: str | Color = "black"
    sample_color: str | Color = "blue"
    sample_size: float = 2.0
    point_color: str | Color = "red"
    point_size: float = 6.0
    draw_control_points: bool = True

    def __post_init__(self):
        """Validate marker sizes."""
        if self.sample_size <= 0 or self.point_size <= 0:
            raise ValueError("Marker sizes must be positive")


class TrackRenderer:
    """Render generated tracks.

    Usage:
        renderer = TrackRenderer()
        canvas = renderer.render(track)
    """

    def __init__(self, config: RenderConfig | None = None):
        """Initialize renderer.

        Args:
            config: Render configuration. Uses defaults if None.
        """
        self.config = config or RenderConfig()

    def new_canvas(self, track: GeneratedTrack) -> RasterCanvas:
        size = int(track.canvas_size)
        return RasterCanvas(size, size, self.config.background)

    def render(self, track: GeneratedTrack, canvas: RasterCanvas | None = None) -> RasterCanvas:
        """Render a track.

        Args:
            track: Track to draw
            canvas: Target canvas. A new one sized to the track is created if None.

        Returns:
            The canvas that was drawn on
        """
        if canvas is None:
            canvas = self.new_canvas(track)

        canvas.clear(self.config.background)

        half_sample = self.config.sample_size / 2
        drawn = 0
        for sample in track.samples:
            canvas.fill_rect(
                sample.x - half_sample,
                sample.y - half_sample,
                self.config.sample_size,
                self.config.sample_size,
                self.config.sample_color,
            )
            drawn += 1

        if self.config.draw_control_points:
            half_point = self.config.point_size / 2
            for point in track.control_points:
                canvas.fill_rect(
                    point.x - half_point,
                    point.y - half_point,
                    self.config.point_size,
                    self.config.point_size,
                    self.config.point_color,
                )

        logger.debug("Rendered %d samples and %d control points", drawn, track.num_points)
        return canvas
