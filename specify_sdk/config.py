"""Configuration loader — reads specify.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .constants import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "specify.yaml"
DEFAULT_CACHE_DIR = "~/.specify"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CacheConfig:
    enabled: bool = False
    directory: str = DEFAULT_CACHE_DIR


@dataclass(frozen=True)
class SpecifyConfig:
    publisher_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    request_timeout: int = 30
    cache: CacheConfig = field(default_factory=CacheConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_cache(raw: dict[str, Any]) -> CacheConfig:
    return CacheConfig(
        enabled=bool(raw.get("enabled", False)),
        directory=str(
            raw.get("directory") or os.environ.get("SPECIFY_CACHE_DIR") or DEFAULT_CACHE_DIR
        ),
    )


def _build_config(raw: dict[str, Any]) -> SpecifyConfig:
    base_url = raw.get("base_url") or os.environ.get("SPECIFY_BASE_URL") or DEFAULT_BASE_URL
    return SpecifyConfig(
        publisher_key=str(
            raw.get("publisher_key") or os.environ.get("SPECIFY_PUBLISHER_KEY", "")
        ),
        base_url=str(base_url).rstrip("/"),
        request_timeout=int(raw.get("request_timeout", 30)),
        cache=_build_cache(raw.get("cache") or {}),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> SpecifyConfig:
    """Load and validate SDK configuration from YAML + .env.

    Args:
        config_path: Path to a YAML config file. Defaults to ``specify.yaml``
            in the working directory; when that default is absent, settings
            come from ``SPECIFY_*`` environment variables alone.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not config_path.exists():
            cfg = _build_config({})
            _validate(cfg)
            logger.info("Configuration loaded from environment")
            return cfg
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = _build_config(raw)
    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: SpecifyConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.publisher_key:
        raise ValueError("A publisher key must be configured (SPECIFY_PUBLISHER_KEY)")
    if cfg.request_timeout <= 0:
        raise ValueError("request_timeout must be positive")
