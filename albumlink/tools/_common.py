from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Coroutine, TypeVar

from albumlink.core import AlbumCache
from albumlink.core.errors import AlbumLinkError
from albumlink.core.settings import cache_config, section

T = TypeVar("T")


def configure_logging(settings: dict[str, Any]) -> None:
    level = str(section(settings, "logging").get("level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def get_cache(settings: dict[str, Any]) -> AlbumCache:
    ttl_ms, _ = cache_config(settings)
    return AlbumCache(ttl_ms=ttl_ms)


def print_json(data: Any) -> None:
    if hasattr(data, "model_dump"):
        print(json.dumps(data.model_dump(), indent=2))
        return
    print(json.dumps(data, indent=2))


def run_lookup(coro: Coroutine[Any, Any, T], settings: dict[str, Any]) -> T:
    timeout_sec = float(section(settings, "orchestrator").get("timeout_sec", 90))
    try:
        return asyncio.run(asyncio.wait_for(coro, timeout_sec))
    except AlbumLinkError as exc:
        print_json({"error": exc.message, "code": exc.code})
    except asyncio.TimeoutError:
        print_json({"error": f"Lookup timed out after {timeout_sec}s", "code": "LOOKUP_TIMEOUT"})
    raise SystemExit(1)
