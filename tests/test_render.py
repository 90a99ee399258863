"""Basic tests for the trackgen render module."""

import json

import pytest
import numpy as np
from PIL import Image

from trackgen.render.canvas import RasterCanvas, to_rgb
from trackgen.render.renderer import TrackRenderer, RenderConfig
from trackgen.render.exporter import TrackExporter, ExporterConfig
from trackgen.track.generator import GeneratedTrack, generate_track
from trackgen.track.geometry import Point
from trackgen.track.settings import TrackSettings
from trackgen.track.spline import rasterize


RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def square_track():
    """Unjittered four point track on a 500 pixel canvas."""
    points = (
        Point(350.0, 250.0),
        Point(250.0, 350.0),
        Point(150.0, 250.0),
        Point(250.0, 150.0),
    )
    return GeneratedTrack(
        settings=TrackSettings(num_points=4),
        canvas_size=500,
        control_points=points,
        samples=rasterize(points, 1.0),
    )


class TestRasterCanvas:
    """Test raster canvas."""

    def test_canvas_creation(self):
        canvas = RasterCanvas(40, 30)

        assert canvas.to_array().shape == (30, 40, 3)
        assert canvas.count_color("black") == 40 * 30

    def test_fill_rect(self):
        """Test a rectangle covers exactly its pixels."""
        canvas = RasterCanvas(20, 20)
        canvas.fill_rect(5, 6, 2, 3, "blue")

        assert canvas.count_color(BLUE) == 6
        assert canvas.get_pixel(5, 6) == BLUE
        assert canvas.get_pixel(6, 8) == BLUE
        assert canvas.get_pixel(7, 6) == BLACK

    def test_fill_rect_clipped(self):
        """Test rectangles partly off the canvas are clipped."""
        canvas = RasterCanvas(20, 20)
        canvas.fill_rect(-5, -5, 10, 10, "red")

        assert canvas.count_color(RED) == 25

    def test_fill_rect_outside_ignored(self):
        """Test rectangles fully off the canvas draw nothing."""
        canvas = RasterCanvas(20, 20)
        canvas.fill_rect(100, 100, 6, 6, "red")
        canvas.fill_rect(-10, 5, 4, 4, "red")
        canvas.fill_rect(float("nan"), 5, 4, 4, "red")

        assert canvas.count_color(RED) == 0

    def test_clear(self):
        canvas = RasterCanvas(10, 10)
        canvas.fill_rect(0, 0, 5, 5, "red")
        canvas.clear("white")

        assert canvas.count_color("white") == 100

    def test_colors(self):
        """Test color names and tuples resolve."""
        assert to_rgb("Blue") == BLUE
        assert to_rgb("green") == (0, 128, 0)
        assert to_rgb("WHITE") == (255, 255, 255)
        assert to_rgb((1, 2, 3)) == (1, 2, 3)
        with pytest.raises(ValueError):
            to_rgb("octarine")
        with pytest.raises(ValueError):
            to_rgb((0, 0, 300))

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            RasterCanvas(0, 10)


class TestTrackRenderer:
    """Test track renderer."""

    def test_render_markers(self, square_track):
        """Test control points are red and curve samples blue."""
        canvas = TrackRenderer().render(square_track)

        for point in square_track.control_points:
            assert canvas.get_pixel(int(point.x), int(point.y)) == RED

        mid = [s for s in square_track.samples if s.segment == 0][70]
        assert canvas.get_pixel(int(np.floor(mid.x)), int(np.floor(mid.y))) == BLUE
        assert canvas.get_pixel(0, 0) == BLACK

    def test_control_points_drawn_last(self, square_track):
        """Test each control point marker is a full 6x6 red square."""
        canvas = TrackRenderer().render(square_track)

        assert canvas.count_color(RED) == 4 * 36

    def test_render_clears_canvas(self, square_track):
        """Test an existing canvas is cleared first."""
        canvas = RasterCanvas(500, 500, background="white")
        TrackRenderer().render(square_track, canvas)

        assert canvas.count_color("white") == 0

    def test_render_without_samples(self):
        """Test zero density renders only control points."""
        track = generate_track(TrackSettings(spline_point_density=0.0))
        canvas = TrackRenderer().render(track)

        assert canvas.count_color(BLUE) == 0
        assert canvas.count_color(RED) > 0

    def test_new_canvas_matches_track(self):
        """Test the default canvas has the generator's pixel size."""
        track = generate_track(TrackSettings(), canvas_size=320)
        canvas = TrackRenderer().render(track)

        assert canvas.to_array().shape == (320, 320, 3)

    def test_render_config(self, square_track):
        config = RenderConfig(background="white", draw_control_points=False)
        canvas = TrackRenderer(config).render(square_track)

        assert canvas.count_color(RED) == 0
        assert canvas.get_pixel(0, 0) == (255, 255, 255)

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            RenderConfig(sample_size=0)


class TestTrackExporter:
    """Test track exporter."""

    def test_export_png(self, tmp_path, square_track):
        exporter = TrackExporter(ExporterConfig(output_dir=str(tmp_path / "out")))
        canvas = TrackRenderer().render(square_track)

        path = exporter.export_png(canvas, "square.png")

        assert path.exists()
        with Image.open(path) as image:
            assert image.size == (500, 500)
            assert image.getpixel((350, 250)) == RED

    def test_export_json(self, tmp_path, square_track):
        exporter = TrackExporter(ExporterConfig(output_dir=str(tmp_path)))

        path = exporter.export_json(square_track)

        with open(path) as f:
            data = json.load(f)
        assert data["settings"]["num_points"] == 4
        assert len(data["control_points"]) == 4
        assert len(data["samples"]) == square_track.num_samples
        assert data["samples"][0]["segment"] == 0
        assert data["samples"][0]["t"] == 0.0

    def test_export_numpy(self, tmp_path, square_track):
        exporter = TrackExporter(ExporterConfig(output_dir=str(tmp_path)))

        path = exporter.export_numpy(square_track)

        with np.load(path) as data:
            assert data["control_points"].shape == (4, 2)
            assert data["samples"].shape == (square_track.num_samples, 2)
            assert len(data["sample_segments"]) == square_track.num_samples

    def test_export_without_samples(self, tmp_path, square_track):
        exporter = TrackExporter(ExporterConfig(output_dir=str(tmp_path), include_samples=False))

        with open(exporter.export_json(square_track)) as f:
            data = json.load(f)
        assert "samples" not in data
