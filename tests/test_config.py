"""
Tests for configuration loading and the snake rule config.
"""

import yaml

from snake_arcade.game.config import SnakeConfig
from snake_arcade.utils.config_loader import (
    Config,
    load_config,
    save_config,
    config_from_dict,
    _deep_merge,
)


class TestSnakeConfig:
    """Tests for SnakeConfig."""

    def test_defaults(self):
        """Test the stock arena and timing."""
        config = SnakeConfig()

        assert (config.columns, config.rows) == (20, 15)
        assert (config.spawn_column, config.spawn_row) == (5, 5)
        assert config.ticks_per_second == 60

    def test_step_interval(self):
        """Test higher difficulty means fewer ticks per step."""
        config = SnakeConfig()

        assert config.step_interval(1) == 60
        assert config.step_interval(2) == 30
        assert config.step_interval(4) == 15
        assert config.step_interval(5) == 12

    def test_step_interval_never_zero(self):
        """Test the interval bottoms out at one tick."""
        config = SnakeConfig(ticks_per_second=3)

        assert config.step_interval(5) == 1

    def test_currency_multiplier(self):
        """Test only listed tiers pay extra."""
        config = SnakeConfig()

        assert config.currency_multiplier(1) == 1
        assert config.currency_multiplier(5) == 2

    def test_dict_round_trip(self):
        """Test to_dict/from_dict preserve settings."""
        config = SnakeConfig(columns=12, rows=9, max_foods=3, currency_multipliers={4: 3})

        restored = SnakeConfig.from_dict(config.to_dict())

        assert restored == config

    def test_partial_food_tables_merge(self):
        """Test partial value tables keep the other defaults."""
        config = SnakeConfig.from_dict({"food": {"values": {"epic": 20}}})

        assert config.food_values["epic"] == 20
        assert config.food_values["common"] == 1
        assert config.kind_chances["rare"] == 0.10

    def test_multiplier_keys_become_ints(self):
        """Test string keys from YAML/JSON are converted."""
        config = SnakeConfig.from_dict({"food": {"currency_multipliers": {"3": "4"}}})

        assert config.currency_multipliers == {3: 4}
        assert config.currency_multiplier(3) == 4


class TestDeepMerge:
    """Tests for _deep_merge."""

    def test_nested_override(self):
        """Test nested keys override without dropping siblings."""
        base = {"snake": {"columns": 20, "rows": 15}, "audio": {"enabled": True}}

        merged = _deep_merge(base, {"snake": {"columns": 30}})

        assert merged == {"snake": {"columns": 30, "rows": 15}, "audio": {"enabled": True}}
        assert base["snake"]["columns"] == 20


class TestLoadConfig:
    """Tests for load_config/save_config."""

    def test_shipped_defaults(self):
        """Test the shipped default.yaml matches the dataclass defaults."""
        config = load_config()

        assert config.snake == SnakeConfig()
        assert config.visualization.cell_size == 30
        assert config.audio.enabled is True
        assert config.progression.profile_path == "save/profile.json"

    def test_user_override(self, tmp_path):
        """Test a user file overrides only what it names."""
        user_file = tmp_path / "user.yaml"
        user_file.write_text(yaml.dump({
            "snake": {"columns": 30, "difficulty": {"default": 2}},
            "audio": {"enabled": False},
        }))

        config = load_config(str(user_file))

        assert config.snake.columns == 30
        assert config.snake.rows == 15
        assert config.snake.default_difficulty == 2
        assert config.snake.difficulty_max == 4
        assert config.audio.enabled is False
        assert config.audio.sample_rate == 22050

    def test_missing_user_file(self, tmp_path, capsys):
        """Test a missing user file is reported and ignored."""
        config = load_config(str(tmp_path / "nope.yaml"))

        assert config.snake == SnakeConfig()
        assert "[Config]" in capsys.readouterr().out

    def test_unknown_keys_ignored(self):
        """Test unknown dataclass fields are filtered."""
        config = config_from_dict({"visualization": {"cell_size": 12, "shader": "crt"}})

        assert config.visualization.cell_size == 12

    def test_save_and_reload(self, tmp_path):
        """Test a saved config loads back as the same settings."""
        path = tmp_path / "saved.yaml"
        config = Config()
        config.snake.columns = 25
        config.visualization.window_title = "Test"

        save_config(config, str(path))
        loaded = load_config(str(path))

        assert loaded.snake.columns == 25
        assert loaded.visualization.window_title == "Test"
