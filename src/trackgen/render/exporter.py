"""
Track exporter - Export renders and track data to files.

Provides:
- PNG export of a rendered canvas
- JSON export of settings, control points and samples
- NumPy compressed export of point arrays
"""

from dataclasses import dataclass
from pathlib import Path
import json
import logging
import numpy as np
from PIL import Image

from trackgen.render.canvas import RasterCanvas
from trackgen.track.generator import GeneratedTrack

logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "./tracks"
    include_samples: bool = True


class TrackExporter:
    """Export generated tracks to files."""

    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.

        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()

        # Ensure output directory exists
        self._output_path = Path(self.config.output_dir)
        self._output_path.mkdir(parents=True, exist_ok=True)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def export_png(self, canvas: RasterCanvas, filename: str = "track.png") -> Path:
        """Export a rendered canvas to a PNG image.

        Args:
            canvas: Rendered canvas
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename
        Image.fromarray(canvas.to_array()).save(output_file, format="PNG")
        logger.info("Wrote image %s", output_file)
        return output_file

    def export_json(self, track: GeneratedTrack, filename: str = "track.json") -> Path:
        """Export track settings and geometry to JSON.

        Args:
            track: Generated track
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename

        data = {
            "settings": track.settings.to_dict(),
            "canvas_size": track.canvas_size,
            "control_points": [{"x": p.x, "y": p.y} for p in track.control_points],
        }
        if self.config.include_samples:
            data["samples"] = [
                {"x": s.x, "y": s.y, "segment": s.segment, "t": s.t}
                for s in track.samples
            ]

        with open(output_file, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        logger.info("Wrote track data %s", output_file)
        return output_file

    def export_numpy(self, track: GeneratedTrack, filename: str = "track.npz") -> Path:
        """Export control points and samples to a NumPy compressed file.

        Args:
            track: Generated track
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename

        arrays = {"control_points": track.control_point_array()}
        if self.config.include_samples:
            samples = list(track.samples)
            arrays["samples"] = np.array(
                [(s.x, s.y) for s in samples], dtype=float
            ).reshape(-1, 2)
            arrays["sample_segments"] = np.array([s.segment for s in samples], dtype=np.int64)

        np.savez_compressed(output_file, **arrays)

        logger.info("Wrote arrays %s", output_file)
        return output_file
