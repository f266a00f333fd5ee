"""TOML config loading and profiles."""

from __future__ import annotations

import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Any

from manifoldmcp import __version__
from manifoldmcp.remote.client import DEFAULT_API_KEY_ENV, MANIFOLD_API_BASE

# Default config search path (project root or cwd)
_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"
_CWD_CONFIG = Path.cwd() / "config"


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override values take precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir() -> Path:
    if _CWD_CONFIG.exists():
        return _CWD_CONFIG
    return _CONFIG_DIR


def load_config(profile: str | None = None, config_dir: Path | None = None) -> dict[str, Any]:
    """Load merged config from default.toml and optional profile overlay."""
    config_dir = config_dir or _find_config_dir()
    default_path = config_dir / "default.toml"
    base = _load_toml(default_path) if default_path.exists() else {}
    if profile:
        profile_path = config_dir / f"{profile}.toml"
        if profile_path.exists():
            overlay = _load_toml(profile_path)
            base = _deep_merge(base, overlay)
    return base


def get_settings(
    profile: str | None = None,
    config_dir: Path | None = None,
    environ: dict[str, str] | None = None,
) -> Settings:
    """Return Settings from merged config, with the API key read from the environment once."""
    raw = load_config(profile, config_dir)
    settings = Settings.from_dict(raw)
    env = os.environ if environ is None else environ
    settings.api_key = env.get(settings.api_key_env) or None
    return settings


class Settings:
    """Application settings from TOML config plus the API key from the environment."""

    def __init__(
        self,
        *,
        manifold: dict[str, Any] | None = None,
        server: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
        api_key: str | None = None,
    ):
        self.manifold = manifold or {}
        self.server = server or {}
        self.logging = logging or {}
        self.api_key = api_key

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        return cls(
            manifold=raw.get("manifold"),
            server=raw.get("server"),
            logging=raw.get("logging"),
        )

    # Convenience accessors with defaults
    @property
    def api_base(self) -> str:
        return self.manifold.get("api_base", MANIFOLD_API_BASE)

    @property
    def api_key_env(self) -> str:
        return self.manifold.get("api_key_env", DEFAULT_API_KEY_ENV)

    @property
    def timeout_sec(self) -> float | None:
        value = self.manifold.get("timeout_sec")
        return float(value) if value is not None else None

    @property
    def server_name(self) -> str:
        return self.server.get("name", "manifold-markets")

    @property
    def server_version(self) -> str:
        return str(self.server.get("version", __version__))

    @property
    def logging_level(self) -> str:
        return self.logging.get("level", "INFO").upper()

    @property
    def logging_format(self) -> str:
        return self.logging.get("format", "console")

    @property
    def logging_level_num(self) -> int:
        return getattr(logging, self.logging_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog with settings. Call once at application entry.

    Output goes to stderr: stdout carries the MCP protocol stream.
    """
    import structlog

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.logging_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging_level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
