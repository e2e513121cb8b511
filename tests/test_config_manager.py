"""
Tests for ConfigManager (YAML loading, fallbacks, playlist parsing).
"""

import pytest
import yaml

from managers.config_manager import ConfigManager, parse_enum
from models.config import ShowConfig, DEFAULT_PLAYLIST
from models.enums import GeneratorID, LogLevel


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture
def defaults_file(tmp_path):
    return write_yaml(tmp_path / "factory_defaults.yaml", {
        "run_duration_s": 30,
        "playlist": ["rainbow"],
    })


class TestLoading:

    def test_reads_values(self, tmp_path, defaults_file):
        config_file = write_yaml(tmp_path / "config.yaml", {
            "run_duration_s": 5,
            "fade_duration_s": 1.5,
            "frame_interval_ms": 20,
            "debug_overlay": True,
            "fade_easing": "in_out_quad",
            "log_level": "debug",
            "playlist": ["matrix", "GAME_OF_LIFE", "moving-blocks"],
        })

        config = ConfigManager(config_file, defaults_file).load()

        assert config.run_duration_s == 5.0
        assert config.fade_duration_s == 1.5
        assert config.frame_interval_ms == 20.0
        assert config.debug_overlay is True
        assert config.fade_easing == "in_out_quad"
        assert config.log_level == LogLevel.DEBUG
        assert config.playlist == [GeneratorID.MATRIX, GeneratorID.GAME_OF_LIFE, GeneratorID.MOVING_BLOCKS]

    def test_missing_keys_use_defaults(self, tmp_path, defaults_file):
        config_file = write_yaml(tmp_path / "config.yaml", {"debug_overlay": True})

        config = ConfigManager(config_file, defaults_file).load()

        assert config.run_duration_s == 60.0
        assert config.fade_duration_s == 2.0
        assert config.frame_interval_ms == 16.0
        assert config.playlist == DEFAULT_PLAYLIST

    def test_unknown_generators_skipped(self, tmp_path, defaults_file):
        config_file = write_yaml(tmp_path / "config.yaml", {"playlist": ["hills", "mandelbrot", 42]})

        config = ConfigManager(config_file, defaults_file).load()

        assert config.playlist == [GeneratorID.HILLS]

    def test_include_files_merged(self, tmp_path, defaults_file):
        write_yaml(tmp_path / "timing.yaml", {"run_duration_s": 12})
        write_yaml(tmp_path / "playlist.yaml", {"playlist": ["triangles"]})
        config_file = write_yaml(tmp_path / "config.yaml", {
            "include": ["timing.yaml", "playlist.yaml"],
            "debug_overlay": True,
        })

        config = ConfigManager(config_file, defaults_file).load()

        assert config.run_duration_s == 12.0
        assert config.playlist == [GeneratorID.TRIANGLES]
        assert config.debug_overlay is True


class TestFallback:

    def test_missing_file_uses_factory_defaults(self, tmp_path, defaults_file):
        config = ConfigManager(tmp_path / "nope.yaml", defaults_file).load()

        assert config.run_duration_s == 30.0
        assert config.playlist == [GeneratorID.RAINBOW]

    @pytest.mark.parametrize("data", [
        {"playlist": []},
        {"playlist": ["nothing", "valid"]},
        {"run_duration_s": -1},
        {"fade_duration_s": -0.5},
        {"fade_easing": "bounce"},
        {"playlist": "hills"},
    ])
    def test_invalid_config_uses_factory_defaults(self, tmp_path, defaults_file, data):
        config_file = write_yaml(tmp_path / "config.yaml", data)

        config = ConfigManager(config_file, defaults_file).load()

        assert config.playlist == [GeneratorID.RAINBOW]

    def test_nothing_readable_uses_builtin(self, tmp_path):
        config = ConfigManager(tmp_path / "a.yaml", tmp_path / "b.yaml").load()
        assert config == ShowConfig()

    def test_shipped_config_loads(self):
        config = ConfigManager().load()
        assert config.playlist
        assert config.frame_interval_ms > 0


class TestShowConfigValidation:

    def test_empty_playlist(self):
        with pytest.raises(ValueError):
            ShowConfig(playlist=[])

    def test_negative_durations(self):
        with pytest.raises(ValueError):
            ShowConfig(run_duration_s=-1.0)
        with pytest.raises(ValueError):
            ShowConfig(fade_duration_s=-1.0)

    def test_frame_interval_seconds(self):
        assert ShowConfig(frame_interval_ms=16.0).frame_interval_s == pytest.approx(0.016)


class TestParseEnum:

    def test_case_and_dashes(self):
        assert parse_enum(GeneratorID, "Random-Walkers") == GeneratorID.RANDOM_WALKERS
        assert parse_enum(LogLevel, " warn ") == LogLevel.WARN

    def test_unknown(self):
        assert parse_enum(GeneratorID, "qrcode") is None
        assert parse_enum(GeneratorID, None) is None
