"""Runtime settings and logging setup.

All settings are env-overridable and read once per process via
Settings.from_env(). Logging always goes to stderr: the MCP stdio transport
owns stdout.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "MCP_DEVTOOLS_"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _env_float(name: str, default: str) -> float:
    raw = _env(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: str) -> int:
    raw = _env(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    npm_registry: str = "https://registry.npmjs.org"
    http_timeout: float = 10.0
    exec_timeout: float = 60.0  # 0 disables
    downloads_dir: Path = Path("~/Downloads")
    stale_months: int = 3
    host: str = "127.0.0.1"
    port: int = 8973

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from MCP_DEVTOOLS_* environment variables."""
        return cls(
            log_level=_env("LOG_LEVEL", "WARNING").upper(),
            npm_registry=_env("NPM_REGISTRY", "https://registry.npmjs.org").rstrip("/"),
            http_timeout=_env_float("HTTP_TIMEOUT", "10"),
            exec_timeout=_env_float("EXEC_TIMEOUT", "60"),
            downloads_dir=Path(_env("DOWNLOADS_DIR", "~/Downloads")).expanduser(),
            stale_months=_env_int("STALE_MONTHS", "3"),
            host=_env("HOST", "127.0.0.1"),
            port=_env_int("PORT", "8973"),
        )


def configure_logging(level: str | None = None) -> None:
    """Install a single stderr handler on the package logger."""
    level = level or Settings.from_env().log_level
    logger = logging.getLogger("mcp_devtools")
    if not any(getattr(h, "_mcp_devtools", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mcp_devtools = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
