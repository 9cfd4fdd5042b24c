"""TOML config loading → Config dataclass."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

log = logging.getLogger(__name__)

# Google Fonts only serves unicode-range split CSS to browsers it recognizes.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:139.0) "
    "Gecko/20100101 Firefox/139.0"
)
DEFAULT_CONFIG_NAME = "fontranges.toml"


@dataclass
class FetchConfig:
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 60.0    # seconds
    retries: int = 3
    retry_delay: float = 2.0  # seconds, multiplied by the attempt number


@dataclass
class GoogleConfig:
    css_url: str = "https://fonts.googleapis.com/css2"
    display: str = "swap"
    families: list[str] = field(default_factory=list)  # analyzed when no input is given


@dataclass
class Config:
    fetch: FetchConfig = field(default_factory=FetchConfig)
    google: GoogleConfig = field(default_factory=GoogleConfig)


def default_config() -> Config:
    return Config()


def _parse_fetch(raw: dict) -> FetchConfig:
    try:
        fetch = FetchConfig(
            user_agent=raw.get("user_agent", DEFAULT_USER_AGENT),
            timeout=float(raw.get("timeout", 60.0)),
            retries=int(raw.get("retries", 3)),
            retry_delay=float(raw.get("retry_delay", 2.0)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid [fetch] value: {exc}") from exc
    if fetch.timeout <= 0:
        raise ConfigError(f"fetch.timeout must be positive, got {fetch.timeout}")
    if fetch.retries < 1:
        raise ConfigError(f"fetch.retries must be at least 1, got {fetch.retries}")
    if fetch.retry_delay < 0:
        raise ConfigError(f"fetch.retry_delay must not be negative, got {fetch.retry_delay}")
    return fetch


def _parse_google(raw: dict) -> GoogleConfig:
    families = raw.get("families", [])
    if isinstance(families, str):
        families = [families]
    return GoogleConfig(
        css_url=raw.get("css_url", GoogleConfig.css_url),
        display=raw.get("display", GoogleConfig.display),
        families=list(families),
    )


def load_config(path: Path) -> Config:
    """Load a TOML config file and return a Config. Missing tables use defaults."""
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot load config {path}: {exc}") from exc

    config = Config(
        fetch=_parse_fetch(raw.get("fetch", {})),
        google=_parse_google(raw.get("google", {})),
    )

    log.debug("Loaded config from %s: %d default families", path, len(config.google.families))
    return config


def find_config(start: Path | None = None) -> Path | None:
    """Return fontranges.toml in the given (or current) directory, if present."""
    candidate = (start or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.exists() else None
