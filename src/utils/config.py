"""Centralized configuration management for the SDE converter.

This module provides configuration from environment variables, ``.env``
files and explicit overrides (the CLI passes its options as overrides).

Features:
- Environment variable support via .env files
- Fallback priority: explicit overrides → environment/.env → hardcoded defaults
- Type-safe configuration using Pydantic
- Singleton pattern for global access

Usage:
    from utils.config import get_config

    config = get_config()
    writer = create_writer(config.output)
"""

from __future__ import annotations

import threading
import tomllib
from logging import getLogger
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.exceptions import ConfigurationError

logger = getLogger(__name__)

DEFAULT_PROJECT_NAME = "eve-sde-converter"


def _read_pyproject() -> dict:
    """Read pyproject.toml and extract project metadata."""
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Could not read pyproject.toml: {e}")
        return {"name": DEFAULT_PROJECT_NAME, "version": "dev", "repository": None}

    project = data.get("project", {})
    urls = project.get("urls") if isinstance(project.get("urls"), dict) else {}
    return {
        "name": project.get("name", DEFAULT_PROJECT_NAME),
        "version": project.get("version", "dev"),
        "repository": urls.get("Repository") or urls.get("Homepage"),
    }


# Read project metadata once at module load
_PROJECT_METADATA = _read_pyproject()


class AppConfig(BaseSettings):
    """Application-wide configuration."""

    name: str = Field(
        default_factory=lambda: _PROJECT_METADATA["name"],
        description="Application name (from pyproject.toml)",
    )
    version: str = Field(
        default_factory=lambda: _PROJECT_METADATA["version"],
        description="Application version (from pyproject.toml)",
    )
    user_agent: str = Field(
        default="",
        description="HTTP User-Agent header (auto-generated if empty)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for rotating log files (console only if unset)",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def computed_user_agent(self) -> str:
        """Generate User-Agent header if not explicitly set."""
        if self.user_agent:
            return self.user_agent
        contact = _PROJECT_METADATA.get("repository")
        if contact:
            return f"{self.name}/{self.version} (+{contact})"
        return f"{self.name}/{self.version}"


class SDEConfig(BaseSettings):
    """Static Data Export (SDE) source configuration."""

    sde_path: Path | None = Field(
        default=None,
        description="Directory containing the extracted SDE JSONL files",
    )
    download: bool = Field(
        default=False,
        description="Download the latest SDE before converting",
    )
    download_url: str = Field(
        default="https://developers.eveonline.com/static-data/eve-online-static-data-latest-jsonl.zip",
        description="URL of the SDE JSONL archive published by CCP",
    )
    latest_url: str = Field(
        default="https://developers.eveonline.com/static-data/tranquility/latest.jsonl",
        description="URL for latest SDE build metadata from CCP",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for metadata requests",
        gt=0,
    )
    download_timeout: float = Field(
        default=600.0,
        description="Timeout in seconds for the archive download",
        gt=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="SDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


class OutputConfig(BaseSettings):
    """Output writer configuration."""

    output_dir: Path = Field(
        default=Path("./output"),
        description="Directory the converted files are written to",
    )
    format: Literal["csv", "json"] = Field(
        default="csv",
        description="Output format",
    )
    pretty: bool = Field(
        default=True,
        description="Indent JSON output",
    )
    passthrough_dir: Path | None = Field(
        default=None,
        description="Directory with community JSON files copied verbatim",
    )

    model_config = SettingsConfigDict(
        env_prefix="OUTPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        """Accept upper-case format names."""
        if isinstance(v, str):
            return v.lower()
        return v


class Config:
    """Main configuration container.

    Each section can be supplied directly; sections left out are read from
    the environment.
    """

    def __init__(
        self,
        app: AppConfig | None = None,
        sde: SDEConfig | None = None,
        output: OutputConfig | None = None,
    ) -> None:
        """Initialize configuration from explicit sections, environment and defaults."""
        self.app = app if app is not None else AppConfig()
        self.sde = sde if sde is not None else SDEConfig()
        self.output = output if output is not None else OutputConfig()

    @classmethod
    def from_overrides(cls, **overrides: Any) -> Config:
        """Build a config where non-None keyword overrides win over the environment.

        Keys are routed to the section that declares them, e.g.
        ``Config.from_overrides(sde_path=..., output_dir=..., format="json")``.
        """
        sections: dict[str, dict[str, Any]] = {"app": {}, "sde": {}, "output": {}}
        section_types = {"app": AppConfig, "sde": SDEConfig, "output": OutputConfig}
        for key, value in overrides.items():
            if value is None:
                continue
            for section, settings_cls in section_types.items():
                if key in settings_cls.model_fields:
                    sections[section][key] = value
                    break
            else:
                raise ConfigurationError(f"Unknown configuration option: {key}")

        return cls(
            app=AppConfig(**sections["app"]),
            sde=SDEConfig(**sections["sde"]),
            output=OutputConfig(**sections["output"]),
        )

    def validate(self) -> None:
        """Check the combination of options is usable.

        Raises:
            ConfigurationError: If no SDE source or no output directory is set.
        """
        if self.sde.sde_path is None and not self.sde.download:
            raise ConfigurationError(
                "either --sde-path or --download must be specified"
            )
        if not str(self.output.output_dir).strip():
            raise ConfigurationError("output directory must be specified")

    def reload(self) -> None:
        """Reload configuration from environment variables."""
        self.__init__()

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(\n  app={self.app},\n  sde={self.sde},\n  output={self.output}\n)"
        )


# Global configuration instance (singleton)
_config_instance: Config | None = None
_config_lock = threading.Lock()


def get_config(config: Config | None = None) -> Config:
    """Get the global configuration instance (lazy initialization).

    Args:
        config: Optional config instance to use instead of singleton.
                If provided, it replaces the singleton.

    Returns:
        Global Config instance
    """
    global _config_instance  # noqa: PLW0603

    if config is not None:
        with _config_lock:
            _config_instance = config
        return _config_instance

    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = Config()

    assert _config_instance is not None
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment.

    Returns:
        Reloaded Config instance
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = Config()
    return _config_instance


def reset_config() -> None:
    """Reset the global config instance.

    Primarily for testing.
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = None
