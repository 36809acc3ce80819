"""Configuration management for m3ucatalog."""

import json
import os
from dataclasses import dataclass
from pathlib import Path

from m3ucatalog.utils.retry import ConfigError


CONFIG_DIR = Path.home() / ".m3ucatalog"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    "playlist_url": "",
    "request_timeout": 30.0,
    "max_retries": 3,
    "chunk_size": 500,
    "row_limit": 20,
    "log_level": "WARNING",
    "cache_dir": "./cache",
}

_INT_KEYS = ("max_retries", "chunk_size", "row_limit")
_FLOAT_KEYS = ("request_timeout",)


@dataclass
class Config:
    playlist_url: str = ""
    request_timeout: float = 30.0
    max_retries: int = 3
    chunk_size: int = 500
    row_limit: int = 20
    log_level: str = "WARNING"
    cache_dir: str = "./cache"

    @property
    def cache_file(self) -> Path:
        return Path(self.cache_dir) / "playlist.m3u"

    def ensure_dirs(self):
        """Create the cache directory if it doesn't exist."""
        Path(self.cache_dir).mkdir(parents=True, exist_ok=True)


def load_config() -> Config:
    """Load configuration from config files and environment variables."""
    # Load .env file from project directory if it exists
    from dotenv import load_dotenv
    load_dotenv()

    data = dict(DEFAULT_CONFIG)

    if CONFIG_FILE.exists():
        with open(CONFIG_FILE) as f:
            data.update(json.load(f))

    local_config = Path(".m3ucatalog.json")
    if local_config.exists():
        with open(local_config) as f:
            data.update(json.load(f))

    # Environment variables override (M3UCATALOG_PLAYLIST_URL, etc.)
    for key in DEFAULT_CONFIG:
        env_key = f"M3UCATALOG_{key.upper()}"
        env_val = os.environ.get(env_key)
        if env_val is not None:
            try:
                if key in _INT_KEYS:
                    env_val = int(env_val)
                elif key in _FLOAT_KEYS:
                    env_val = float(env_val)
            except ValueError as e:
                raise ConfigError(f"Invalid value for {env_key}: {env_val!r}") from e
            data[key] = env_val

    if not data.get("playlist_url"):
        data["playlist_url"] = os.environ.get("M3U_URL", "")

    _check_ranges(data)
    return Config(**{k: v for k, v in data.items() if k in Config.__dataclass_fields__})


def _check_ranges(data: dict):
    """Reject numeric settings the rest of the app cannot work with."""
    if data["chunk_size"] < 1:
        raise ConfigError(f"chunk_size must be at least 1, got {data['chunk_size']!r}")
    for key in ("max_retries", "row_limit", "request_timeout"):
        if data[key] < 0:
            raise ConfigError(f"{key} must not be negative, got {data[key]!r}")


def save_config(config: Config):
    """Save configuration to the global config file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = {
        k: getattr(config, k)
        for k in Config.__dataclass_fields__
    }
    with open(CONFIG_FILE, "w") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
