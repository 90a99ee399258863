"""
Render module - Raster output for generated tracks.

This module contains:
- RasterCanvas: RGB pixel buffer receiving clear and fill-rectangle calls
- TrackRenderer: Paints curve samples and control point markers
- TrackExporter: Writes renders and track data to PNG, JSON and NumPy files
"""

from trackgen.render.canvas import RasterCanvas
from trackgen.render.renderer import TrackRenderer, RenderConfig
from trackgen.render.exporter import TrackExporter, ExporterConfig

__all__ = [
    "RasterCanvas",
    "TrackRenderer",
    "RenderConfig",
    "TrackExporter",
    "ExporterConfig",
]
