"""Tests for TOML configuration loading."""
import pytest

from shared import config as config_module
from shared.config import GameConfig, WordShiftConfig, get_config


class TestDefaults:
    def test_game_defaults(self):
        game = GameConfig()
        assert (game.min_word_length, game.shift_min, game.shift_max) == (4, 1, 9)

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")
        cfg = WordShiftConfig.load()
        assert cfg.game == GameConfig()
        assert cfg.global_settings.log_level == "WARNING"

    def test_to_dict(self):
        data = WordShiftConfig().to_dict()
        assert data["game"]["shift_max"] == 9
        assert data["global_settings"]["log_file"] is None


class TestLoad:
    def test_reads_sections(self, tmp_path):
        path = tmp_path / "ws.toml"
        path.write_text(
            '[global]\nlog_level = "DEBUG"\nlog_json = true\n'
            "[game]\nmin_word_length = 5\nshift_max = 5\nseed = 7\n"
        )
        cfg = WordShiftConfig.load(path)
        assert cfg.global_settings.log_level == "DEBUG"
        assert cfg.global_settings.log_json is True
        assert cfg.game.min_word_length == 5
        assert cfg.game.shift_max == 5
        assert cfg.game.seed == 7

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "ws.toml"
        path.write_text("[game]\nshift_min = 2\ncolour = 'blue'\n[extra]\nx = 1\n")
        cfg = WordShiftConfig.load(path)
        assert cfg.game.shift_min == 2

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            WordShiftConfig.load(tmp_path / "nope.toml")

    def test_inverted_range_rejected(self, tmp_path):
        path = tmp_path / "ws.toml"
        path.write_text("[game]\nshift_min = 6\nshift_max = 3\n")
        with pytest.raises(ValueError):
            WordShiftConfig.load(path)

    @pytest.mark.parametrize(
        "kwargs",
        [{"shift_min": 0}, {"min_word_length": 0}, {"shift_min": 4, "shift_max": 2}],
    )
    def test_validate(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs).validate()

    def test_get_config_caches(self, tmp_path):
        path = tmp_path / "ws.toml"
        path.write_text("[game]\nshift_max = 4\n")
        first = get_config(path)
        assert get_config() is first
        assert first.game.shift_max == 4

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"shift_min": "1"},
            {"shift_max": 9.0},
            {"min_word_length": True},
            {"default_shift": None},
            {"seed": "7"},
        ],
    )
    def test_validate_rejects_wrong_types(self, kwargs):
        with pytest.raises(ValueError, match="must be an integer"):
            GameConfig(**kwargs).validate()

    def test_string_value_in_file_rejected(self, tmp_path):
        path = tmp_path / "ws.toml"
        path.write_text('[game]\nshift_min = "1"\n')
        with pytest.raises(ValueError, match="shift_min"):
            WordShiftConfig.load(path)
