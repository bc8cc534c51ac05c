"""Load strings and configuration from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

# The bundled config.yml sits next to this module; deployments can point elsewhere
_CONFIG_PATH = Path(
    os.environ.get("PHOTO_GUARD_CONFIG_PATH", Path(__file__).parent / "config.yml")
)

_cache: dict | None = None


def _load() -> dict:
    global _cache
    if _cache is None:
        with open(_CONFIG_PATH, encoding="utf-8") as f:
            _cache = yaml.safe_load(f) or {}
    return _cache


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    try:
        return _load().get("defaults", {})
    except (FileNotFoundError, OSError):
        return {}


def get_photo_domains() -> list[str]:
    return _load()["photo_domains"]


def get_output_strings() -> dict[str, str]:
    return _load()["output"]
