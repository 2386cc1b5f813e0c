from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_TTL_MS = 10 * 60 * 1000


def load_settings(path: str | None = None) -> dict[str, Any]:
    config_path = Path(path or os.getenv("ALBUMLINK_SETTINGS_PATH", "config/settings.example.yaml"))
    if not config_path.exists():
        return {}
    return yaml.safe_load(config_path.read_text()) or {}


def section(settings: dict[str, Any], name: str) -> dict[str, Any]:
    value = settings.get(name)
    return value if isinstance(value, dict) else {}


def cache_config(settings: dict[str, Any]) -> tuple[int, bool]:
    cache = section(settings, "cache")
    return int(cache.get("ttl_ms", DEFAULT_TTL_MS)), bool(cache.get("include_text_queries", False))


def timeout_for(settings: dict[str, Any], name: str, default: float) -> float:
    return float(section(settings, name).get("timeout_sec", default))
