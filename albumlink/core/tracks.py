from __future__ import annotations

import asyncio
import logging
from typing import Any

from .fallback import settle_all
from .models import ResolvedTrack
from .odesli_client import fetch_links, platform_url, target_platform
from .settings import load_settings

logger = logging.getLogger(__name__)

TRACK_TIMEOUT_SEC = 15


def fallback_track(track: dict[str, Any]) -> ResolvedTrack:
    return ResolvedTrack(
        name=str(track.get("trackName") or "Unknown track"),
        duration_ms=int(track.get("trackTimeMillis") or 0),
        track_number=track.get("trackNumber"),
        target_url=None,
    )


async def resolve_track(track: dict[str, Any], settings: dict[str, Any]) -> ResolvedTrack:
    track_url = track.get("trackViewUrl")
    if not track_url:
        return fallback_track(track)

    payload = await asyncio.to_thread(fetch_links, str(track_url), settings, TRACK_TIMEOUT_SEC)
    return fallback_track(track).model_copy(update={"target_url": platform_url(payload, target_platform(settings))})


async def resolve_tracks(tracks: list[dict[str, Any]], settings: dict[str, Any] | None = None) -> list[ResolvedTrack]:
    """Resolve every catalog track concurrently; failures degrade to ``target_url=None``."""
    runtime_settings = settings if settings is not None else load_settings()

    def on_error(index: int, exc: BaseException) -> ResolvedTrack:
        logger.debug("Track %s unresolved: %s", tracks[index].get("trackName"), exc)
        return fallback_track(tracks[index])

    resolved = await settle_all([resolve_track(track, runtime_settings) for track in tracks], on_error)
    logger.info(
        "Resolved %d/%d track URLs",
        sum(1 for track in resolved if track.target_url),
        len(resolved),
    )
    return resolved
