"""Tests for mcp_devtools.config."""

import logging
from pathlib import Path

import pytest
from mcp_devtools.config import Settings, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "NPM_REGISTRY", "HTTP_TIMEOUT", "EXEC_TIMEOUT", "DOWNLOADS_DIR", "STALE_MONTHS"):
            monkeypatch.delenv("MCP_DEVTOOLS_" + name, raising=False)
        settings = Settings.from_env()
        assert settings.log_level == "WARNING"
        assert settings.npm_registry == "https://registry.npmjs.org"
        assert settings.http_timeout == 10.0
        assert settings.exec_timeout == 60.0
        assert settings.downloads_dir == Path("~/Downloads").expanduser()
        assert settings.stale_months == 3

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MCP_DEVTOOLS_LOG_LEVEL", "debug")
        monkeypatch.setenv("MCP_DEVTOOLS_NPM_REGISTRY", "https://npm.example.com/")
        monkeypatch.setenv("MCP_DEVTOOLS_EXEC_TIMEOUT", "0")
        monkeypatch.setenv("MCP_DEVTOOLS_DOWNLOADS_DIR", str(tmp_path))
        monkeypatch.setenv("MCP_DEVTOOLS_PORT", "9000")
        settings = Settings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.npm_registry == "https://npm.example.com"
        assert settings.exec_timeout == 0.0
        assert settings.downloads_dir == tmp_path
        assert settings.port == 9000

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("MCP_DEVTOOLS_HTTP_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="MCP_DEVTOOLS_HTTP_TIMEOUT"):
            Settings.from_env()

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("MCP_DEVTOOLS_STALE_MONTHS", "1.5")
        with pytest.raises(ValueError, match="MCP_DEVTOOLS_STALE_MONTHS"):
            Settings.from_env()


class TestConfigureLogging:
    def test_single_handler(self):
        logger = logging.getLogger("mcp_devtools")
        configure_logging("INFO")
        configure_logging("DEBUG")
        ours = [h for h in logger.handlers if getattr(h, "_mcp_devtools", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG
