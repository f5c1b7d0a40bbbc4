"""Tests for tracker configuration."""

from pathlib import Path

from beerball.config import BeerballConfig, get_config, set_config


class TestBeerballConfig:
    """Tests for BeerballConfig."""

    def test_defaults(self, monkeypatch):
        for name in (
            "BEERBALL_STORAGE_DIR",
            "BEERBALL_AUTOSAVE",
            "BEERBALL_HISTORY_LIMIT",
            "BEERBALL_HOST",
            "BEERBALL_PORT",
            "BEERBALL_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = BeerballConfig.from_env()

        assert config.storage_dir == Path("~/.beerball").expanduser()
        assert config.autosave is True
        assert config.history_limit == 20
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.log_level == "INFO"
        assert config.validate() == []

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BEERBALL_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("BEERBALL_AUTOSAVE", "off")
        monkeypatch.setenv("BEERBALL_HISTORY_LIMIT", "5")
        monkeypatch.setenv("BEERBALL_PORT", "9001")
        monkeypatch.setenv("BEERBALL_LOG_LEVEL", "debug")

        config = BeerballConfig.from_env()

        assert config.storage_dir == tmp_path
        assert config.autosave is False
        assert config.history_limit == 5
        assert config.port == 9001
        assert config.log_level == "DEBUG"
        assert config.log_level_value == 10

    def test_validate(self, test_config):
        test_config.history_limit = 0
        test_config.port = 70000
        test_config.log_level = "LOUD"
        test_config.host = ""

        errors = test_config.validate()

        assert len(errors) == 4

    def test_singleton(self, test_config):
        assert get_config() is test_config
        set_config(None)
        assert get_config() is get_config()
