"""YAML configuration for the HTTP transport."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("scryfall.yaml")


@dataclass
class ClientConfig:
    """Settings for talking to the catalog API."""

    base_url: str = "https://api.scryfall.com"
    rate_limit_ms: int = 100  # API asks for 50-100 ms between requests
    timeout: float = 30.0
    max_retries: int = 3
    user_agent: str = "scryfall-types/0.1"


def load_config(path: Optional[Path] = None) -> ClientConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        config = ClientConfig()
    else:
        logger.info("Loading config from %s", config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        config = _parse_config(raw) if raw else ClientConfig()

    _validate_config(config)
    return config


def _parse_config(raw: Dict[str, Any]) -> ClientConfig:
    """Parse raw YAML dict into ClientConfig.

    Accepts the settings either at the top level or under a ``client`` key.
    """
    section = raw.get("client", raw)
    defaults = ClientConfig()
    return ClientConfig(
        base_url=str(section.get("base_url", defaults.base_url)),
        rate_limit_ms=section.get("rate_limit_ms", defaults.rate_limit_ms),
        timeout=section.get("timeout", defaults.timeout),
        max_retries=section.get("max_retries", defaults.max_retries),
        user_agent=str(section.get("user_agent", defaults.user_agent)),
    )


def _validate_config(config: ClientConfig) -> None:
    """Validate config and raise on errors."""
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"Config error: base_url must be an http(s) URL, got '{config.base_url}'"
        )
    if not isinstance(config.rate_limit_ms, int) or config.rate_limit_ms < 0:
        raise ValueError(
            f"Config error: rate_limit_ms must be a non-negative integer, "
            f"got {config.rate_limit_ms!r}"
        )
    if not isinstance(config.timeout, (int, float)) or config.timeout <= 0:
        raise ValueError(f"Config error: timeout must be positive, got {config.timeout!r}")
    if not isinstance(config.max_retries, int) or config.max_retries < 1:
        raise ValueError(
            f"Config error: max_retries must be at least 1, got {config.max_retries!r}"
        )

    logger.info(
        "Config validated: base_url=%s, rate_limit=%dms, retries=%d",
        config.base_url,
        config.rate_limit_ms,
        config.max_retries,
    )
