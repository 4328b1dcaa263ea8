"""Tests for logging level precedence and file output.

Log level resolution order:
1. Explicit parameter (the CLI's --verbose)
2. APP_LOG_LEVEL environment variable
3. Config defaults
"""

import logging
import os
import time
from logging.handlers import RotatingFileHandler

import pytest

from utils.config import AppConfig, Config, get_config
from utils.logging_setup import (
    LOG_FILE_PREFIX,
    _cleanup_old_logs,
    resolve_log_level,
    setup_logging,
)


class TestLogLevelPrecedence:
    """Deterministic log level resolution."""

    def test_explicit_parameter_wins(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "INFO")
        setup_logging(log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "ERROR")
        setup_logging(log_level=None)
        assert logging.getLogger().level == logging.ERROR

    def test_config_default(self):
        get_config(Config(app=AppConfig(log_level="WARNING")))
        setup_logging(log_level=None)
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.parametrize(
        ("explicit", "env", "expected"),
        [
            ("DEBUG", "INFO", "DEBUG"),
            (None, "warning", "WARNING"),
            (None, None, "INFO"),
        ],
    )
    def test_resolve_combinations(self, monkeypatch, explicit, env, expected):
        if env:
            monkeypatch.setenv("APP_LOG_LEVEL", env)
        assert resolve_log_level(explicit) == expected

    def test_case_insensitive(self):
        setup_logging(log_level="debug")
        assert logging.getLogger().level == logging.DEBUG


class TestHandlers:
    """Console and rotating file output."""

    def test_console_only_by_default(self):
        setup_logging(log_level="INFO")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_file_handler(self, tmp_path):
        setup_logging(log_level="INFO", log_dir=tmp_path / "logs")

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)
        assert list((tmp_path / "logs").glob(f"{LOG_FILE_PREFIX}*.log"))

    def test_httpx_quieted(self):
        setup_logging(log_level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_cleanup_old_logs(self, tmp_path):
        for i in range(5):
            path = tmp_path / f"{LOG_FILE_PREFIX}2025010{i}_000000.log"
            path.write_text("x")
            stamp = time.time() - (10 - i) * 60
            os.utime(path, (stamp, stamp))
        (tmp_path / "other.log").write_text("x")

        _cleanup_old_logs(tmp_path, keep_count=2)

        remaining = sorted(p.name for p in tmp_path.glob(f"{LOG_FILE_PREFIX}*.log"))
        assert remaining == [
            f"{LOG_FILE_PREFIX}20250103_000000.log",
            f"{LOG_FILE_PREFIX}20250104_000000.log",
        ]
        assert (tmp_path / "other.log").exists()
