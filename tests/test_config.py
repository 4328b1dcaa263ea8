"""Tests for configuration loading, overrides and the global instance."""

from pathlib import Path

import pytest

from utils.config import (
    AppConfig,
    Config,
    OutputConfig,
    SDEConfig,
    get_config,
    reload_config,
    reset_config,
)
from utils.exceptions import ConfigurationError


class TestDefaults:
    """Hardcoded defaults when nothing is set."""

    def test_sections(self):
        config = Config()
        assert config.sde.sde_path is None
        assert config.sde.download is False
        assert config.sde.download_url.endswith("-jsonl.zip")
        assert config.output.output_dir == Path("./output")
        assert config.output.format == "csv"
        assert config.output.pretty is True
        assert config.app.log_level == "INFO"

    def test_user_agent(self):
        app = AppConfig(name="eve-sde-converter", version="1.2.3")
        assert app.computed_user_agent.startswith("eve-sde-converter/1.2.3")
        assert AppConfig(user_agent="custom/1").computed_user_agent == "custom/1"


class TestEnvironment:
    """Environment variables override defaults."""

    def test_env_prefixes(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SDE_SDE_PATH", str(tmp_path))
        monkeypatch.setenv("OUTPUT_FORMAT", "JSON")
        monkeypatch.setenv("OUTPUT_PRETTY", "false")
        monkeypatch.setenv("APP_LOG_LEVEL", "debug")

        config = Config()

        assert config.sde.sde_path == tmp_path
        assert config.output.format == "json"
        assert config.output.pretty is False
        assert config.app.log_level == "DEBUG"

    def test_invalid_format(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_FORMAT", "xml")
        with pytest.raises(ValueError):
            OutputConfig()


class TestOverrides:
    """Explicit overrides win over the environment."""

    def test_routed_to_sections(self, tmp_path):
        config = Config.from_overrides(
            sde_path=tmp_path / "sde",
            download=True,
            output_dir=tmp_path / "out",
            format="json",
            pretty=False,
        )
        assert config.sde.sde_path == tmp_path / "sde"
        assert config.sde.download is True
        assert config.output.output_dir == tmp_path / "out"
        assert config.output.format == "json"
        assert config.output.pretty is False

    def test_none_keeps_environment(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_FORMAT", "json")
        config = Config.from_overrides(format=None, pretty=None)
        assert config.output.format == "json"
        assert config.output.pretty is True

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="bogus"):
            Config.from_overrides(bogus=1)


class TestValidate:
    def test_requires_sde_source(self):
        with pytest.raises(ConfigurationError, match="--sde-path or --download"):
            Config().validate()

    def test_download_is_enough(self):
        Config.from_overrides(download=True).validate()

    def test_requires_output_dir(self, tmp_path):
        config = Config(
            sde=SDEConfig(sde_path=tmp_path),
            output=OutputConfig.model_construct(output_dir=""),
        )
        with pytest.raises(ConfigurationError, match="output directory"):
            config.validate()


class TestGlobalInstance:
    """Singleton access."""

    def test_lazy_singleton(self):
        assert get_config() is get_config()

    def test_explicit_instance_replaces_singleton(self, tmp_path):
        config = Config.from_overrides(sde_path=tmp_path)
        assert get_config(config) is config
        assert get_config() is config

    def test_reset_and_reload(self, monkeypatch):
        first = get_config()
        reset_config()
        assert get_config() is not first

        monkeypatch.setenv("OUTPUT_FORMAT", "json")
        assert reload_config().output.format == "json"
        assert get_config().output.format == "json"
