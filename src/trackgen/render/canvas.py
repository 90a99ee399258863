"""
Raster canvas - numpy-backed RGB drawing surface.

Supports the two draw calls a track render needs: clearing the whole
surface and filling an axis-aligned rectangle. Rectangles are clipped
to the surface; ones entirely outside it are ignored.
"""

from typing import Dict, Tuple
import numpy as np

Color = Tuple[int, int, int]

NAMED_COLORS: Dict[str, Color] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
}


def to_rgb(color: str | Color) -> Color:
    """Resolve a color name or RGB tuple.

    Raises:
        ValueError: On an unknown name or a malformed tuple
    """
    if isinstance(color, str):
        try:
            return NAMED_COLORS[color.lower()]
        except KeyError:
            raise ValueError(f"Unknown color name: {color!r}") from None

    rgb = tuple(int(c) for c in color)
    if len(rgb) != 3 or any(c < 0 or c > 255 for c in rgb):
        raise ValueError(f"Color must be three values in 0..255, got {color!r}")
    return rgb


class RasterCanvas:
    """RGB raster surface.

    Pixel (x, y) is stored at row y, column x.

    Usage:
        canvas = RasterCanvas(500, 500)
        canvas.clear("black")
        canvas.fill_rect(10, 10, 2, 2, "blue")
    """

    def __init__(self, width: int, height: int, background: str | Color = "black"):
        """Initialize canvas.

        Args:
            width: Width in pixels
            height: Height in pixels
            background: Initial fill color
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.clear(background)

    def clear(self, color: str | Color = "black") -> None:
        """Fill the whole canvas with one color."""
        self._pixels[:, :] = to_rgb(color)

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: str | Color) -> None:
        """Fill the pixels covered by a rectangle.

        Covers columns floor(x) up to floor(x + width) and the matching rows.
        """
        if not np.all(np.isfinite([x, y, width, height])):
            return

        x0 = max(int(np.floor(x)), 0)
        y0 = max(int(np.floor(y)), 0)
        x1 = min(int(np.floor(x + width)), self.width)
        y1 = min(int(np.floor(y + height)), self.height)

        if x0 >= x1 or y0 >= y1:
            return

        self._pixels[y0:y1, x0:x1] = to_rgb(color)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self._pixels[y, x]
        return (int(r), int(g), int(b))

    def count_color(self, color: str | Color) -> int:
        """Number of pixels with exactly this color."""
        return int(np.all(self._pixels == np.array(to_rgb(color), dtype=np.uint8), axis=-1).sum())

    def to_array(self) -> np.ndarray:
        """Copy of the pixel buffer, shape (height, width, 3), dtype uint8."""
        return self._pixels.copy()
