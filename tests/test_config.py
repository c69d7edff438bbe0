"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from setgame.config import Config, GameConfig, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test defaults when no path is given."""
        config = load_config()
        assert config == Config()
        assert config.game.initial_deal == 12
        assert config.game.deal_more == 3
        assert config.game.remove_on_match
        assert config.game.seed is None
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_overrides(self, tmp_path):
        """Test values from YAML override defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  initial_deal: 9\n"
            "  deal_face_down: true\n"
            "  seed: 5\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(str(path))

        assert config.game.initial_deal == 9
        assert config.game.deal_face_down
        assert config.game.seed == 5
        assert config.game.deal_more == 3
        assert config.logging.level == "DEBUG"

    def test_deal_more_must_be_positive(self):
        """Test a zero or negative deal-more batch is rejected."""
        with pytest.raises(ValidationError):
            GameConfig(deal_more=0)
        with pytest.raises(ValidationError):
            GameConfig(deal_more=-3)

    def test_initial_deal_not_negative(self):
        """Test a negative opening deal is rejected; zero is allowed."""
        with pytest.raises(ValidationError):
            GameConfig(initial_deal=-1)
        assert GameConfig(initial_deal=0).initial_deal == 0

    def test_yaml_rejects_zero_deal_more(self, tmp_path):
        """Test invalid values in YAML fail at load time."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  deal_more: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)
