"""Basic tests for the trackgen session and command line."""

import os

import pytest

from trackgen.cli import main, parse_args, settings_from_args, EXIT_CONFIG_ERROR
from trackgen.session import TrackSession, coerce_setting
from trackgen.track.generator import generate_track
from trackgen.track.settings import TrackSettings, TrackConfigError


class TestCoerceSetting:
    """Test control value coercion."""

    def test_numeric_text(self):
        assert coerce_setting("num_points", "12") == 12
        assert coerce_setting("radius_fraction", "0.25") == 0.25
        assert coerce_setting("spline_point_density", 2) == 2.0

    def test_seed_text(self):
        """Test numeric seeds become ints and other text stays text."""
        assert coerce_setting("seed", "42") == 42
        assert coerce_setting("seed", "monza") == "monza"
        assert coerce_setting("seed", None) is None

    def test_integral_seed_values(self):
        """Test integral numeric seeds become ints whatever their spelling."""
        assert coerce_setting("seed", "7.0") == 7
        assert coerce_setting("seed", 7.0) == 7
        assert isinstance(coerce_setting("seed", " 7.0 "), int)
        assert coerce_setting("seed", "7.5") == "7.5"

    def test_integral_seed_track(self):
        """Test a "7.0" seed reproduces the seed 7 track."""
        session = TrackSession()
        session.update("seed", "7.0")

        assert session.settings.seed == 7
        assert session.track == generate_track(TrackSettings(seed=7))

    def test_non_numeric(self):
        with pytest.raises(TrackConfigError):
            coerce_setting("radius_fraction", "wide")


class TestTrackSession:
    """Test the settings session."""

    def test_initial_generation(self):
        """Test a session generates on creation."""
        session = TrackSession()

        assert session.track is not None
        assert session.generation_count == 1
        assert session.track.settings == TrackSettings()

    def test_update_regenerates(self):
        """Test every change gives a fresh track."""
        tracks = []
        session = TrackSession(on_update=tracks.append)

        session.update("num_points", "6")
        session.update("theta_jitter", 0.1)

        assert session.settings.num_points == 6
        assert session.settings.theta_jitter_fraction == 0.1
        assert session.track.num_points == 6
        assert len(tracks) == 3

    def test_update_many_regenerates_once(self):
        session = TrackSession()
        session.update_many(numPoints=5, seed="spa")

        assert session.generation_count == 2
        assert session.settings.seed == "spa"

    def test_invalid_update_keeps_settings(self):
        """Test a rejected change leaves settings and track alone."""
        session = TrackSession()
        before = session.track

        with pytest.raises(TrackConfigError):
            session.update("num_points", "-4")

        assert session.settings == TrackSettings()
        assert session.track is before

    def test_unknown_setting(self):
        with pytest.raises(KeyError):
            TrackSession().update("laps", 3)

    def test_reset(self):
        """Test reset restores defaults."""
        session = TrackSession(TrackSettings(num_points=5, seed=1))
        session.reset()

        assert session.settings == TrackSettings()
        assert session.track.num_points == 10

    def test_randomize_seed(self):
        session = TrackSession()
        session.randomize_seed()

        assert isinstance(session.settings.seed, int)
        assert session.generation_count == 2


class TestCommandLine:
    """Test the command line entry point."""

    def test_default_args(self):
        args = parse_args([])
        settings = settings_from_args(args)

        assert settings == TrackSettings()

    def test_text_seed(self):
        settings = settings_from_args(parse_args(["--seed", "monza"]))
        assert settings.seed == "monza"

    def test_writes_outputs(self, tmp_path):
        code = main([
            "--output-dir", str(tmp_path),
            "--num-points", "6",
            "--json", "track.json",
            "--npz", "track.npz",
        ])

        assert code == 0
        assert (tmp_path / "track.png").exists()
        assert (tmp_path / "track.json").exists()
        assert (tmp_path / "track.npz").exists()

    def test_skip_png(self, tmp_path):
        code = main(["--output-dir", str(tmp_path), "--png", ""])

        assert code == 0
        assert not (tmp_path / "track.png").exists()

    def test_invalid_configuration(self, tmp_path):
        code = main(["--output-dir", str(tmp_path), "--density", "-1"])
        assert code == EXIT_CONFIG_ERROR

    def test_undecodable_seed(self, tmp_path):
        """Test a seed decoded from non-UTF-8 argv bytes still generates."""
        seed = os.fsdecode(b"\xff")
        code = main(["--output-dir", str(tmp_path), "--seed", seed, "--json", "track.json", "--png", ""])

        assert code == 0
        assert (tmp_path / "track.json").exists()
