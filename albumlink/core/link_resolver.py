from __future__ import annotations

import asyncio
import logging
from typing import Any

from . import deezer_client, musicbrainz_client
from .fallback import first_success
from .odesli_client import fetch_links, platform_url, target_platform
from .settings import load_settings, section

logger = logging.getLogger(__name__)

# How a direct album link for each target platform appears in MusicBrainz url-rels.
_ALBUM_URL_MARKERS = {
    "spotify": "open.spotify.com/album",
    "deezer": "deezer.com/album",
}


async def try_direct(reference: str | None, settings: dict[str, Any]) -> str | None:
    if not reference:
        return None
    logger.debug("Odesli lookup for %s", reference)
    payload = await asyncio.to_thread(fetch_links, reference, settings)
    return platform_url(payload, target_platform(settings))


async def try_deezer_bridge(album_name: str, artist_name: str, settings: dict[str, Any]) -> str | None:
    albums = await asyncio.to_thread(deezer_client.search_albums, f"{album_name} {artist_name}", settings)
    if not albums or not albums[0].get("link"):
        return None
    payload = await asyncio.to_thread(fetch_links, str(albums[0]["link"]), settings)
    return platform_url(payload, target_platform(settings))


def _musicbrainz_lookup(album_name: str, artist_name: str, settings: dict[str, Any]) -> str | None:
    marker = _ALBUM_URL_MARKERS.get(target_platform(settings))
    if marker is None:
        return None
    cfg = section(settings, "musicbrainz")
    groups = musicbrainz_client.search_release_groups(
        album_name, artist_name, settings, limit=int(cfg.get("max_release_groups", 3))
    )
    for group in groups:
        group_id = str(group["id"])
        found = musicbrainz_client.find_relation_url(
            musicbrainz_client.release_group_relations(group_id, settings), marker
        )
        if found:
            return found
        releases = musicbrainz_client.releases_with_relations(
            group_id, settings, limit=int(cfg.get("max_releases", 10))
        )
        for release in releases:
            found = musicbrainz_client.find_relation_url(release.get("relations") or [], marker)
            if found:
                return found
    return None


async def try_musicbrainz_bridge(album_name: str, artist_name: str, settings: dict[str, Any]) -> str | None:
    return await asyncio.to_thread(_musicbrainz_lookup, album_name, artist_name, settings)


async def resolve_target_url(
    reference: str | None,
    album_name: str,
    artist_name: str,
    settings: dict[str, Any] | None = None,
) -> str | None:
    """Target-platform URL for one album, or None when no strategy finds one."""
    runtime_settings = settings if settings is not None else load_settings()
    strategies = [
        ("direct", lambda: try_direct(reference, runtime_settings)),
        ("deezer", lambda: try_deezer_bridge(album_name, artist_name, runtime_settings)),
        ("musicbrainz", lambda: try_musicbrainz_bridge(album_name, artist_name, runtime_settings)),
    ]
    return await first_success(strategies)
