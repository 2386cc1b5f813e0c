from __future__ import annotations

import asyncio
import logging
from typing import Any

from . import itunes_client
from .errors import LinkResolutionError
from .keys import spotify_album_url
from .link_resolver import resolve_target_url
from .models import ArtistRef, ResolvedAlbum, ResolvedTrack
from .odesli_client import fetch_links, platform_entity_id
from .settings import load_settings
from .tracks import resolve_tracks

logger = logging.getLogger(__name__)

# Odesli keys under which the primary catalog's album ID is reported.
_ITUNES_PLATFORMS = ("itunes", "appleMusic")


def _release_date(value: Any) -> str:
    if isinstance(value, str) and value:
        return value.split("T")[0]
    return "Unknown"


def _artwork(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value.replace("100x100", "600x600")
    return None


def build_album(collection: dict[str, Any], url: str, tracks: list[ResolvedTrack]) -> ResolvedAlbum:
    genre = collection.get("primaryGenreName")
    return ResolvedAlbum(
        source="itunes",
        name=str(collection.get("collectionName") or "Unknown album"),
        url=url,
        artists=[ArtistRef(name=str(collection.get("artistName") or "Unknown artist"), url=collection.get("artistViewUrl"))],
        release_date=_release_date(collection.get("releaseDate")),
        total_tracks=int(collection.get("trackCount") or len(tracks)),
        artwork=_artwork(collection.get("artworkUrl100")),
        genres=[str(genre)] if genre else [],
        label=None,
        popularity=None,
        copyright=collection.get("copyright") or None,
        tracks=tracks,
    )


async def _fetch_tracks(collection_id: Any, settings: dict[str, Any]) -> list[dict[str, Any]]:
    results = await asyncio.to_thread(itunes_client.lookup_collection, collection_id, settings)
    _, tracks = itunes_client.split_collection(results)
    return tracks


async def search_album(query: str, settings: dict[str, Any] | None = None) -> ResolvedAlbum | None:
    """Look an album up in the iTunes catalog and attach target-platform links.

    Returns None when the search finds nothing. Search and lookup failures
    propagate as ``CatalogError``; link failures only degrade the URLs.
    """
    runtime_settings = settings if settings is not None else load_settings()
    logger.info("Searching iTunes for: %s", query)
    albums = await asyncio.to_thread(itunes_client.search_albums, query, runtime_settings, 1)
    if not albums:
        logger.info("No iTunes album found for: %s", query)
        return None

    album = albums[0]
    view_url = album.get("collectionViewUrl")
    album_name = str(album.get("collectionName") or query)
    artist_name = str(album.get("artistName") or "")
    logger.info("Found album: %s by %s", album_name, artist_name)

    itunes_tracks = await _fetch_tracks(album.get("collectionId"), runtime_settings)
    target_url, tracks = await asyncio.gather(
        resolve_target_url(view_url, album_name, artist_name, runtime_settings),
        resolve_tracks(itunes_tracks, runtime_settings),
    )
    if target_url:
        logger.info("Target album URL: %s", target_url)
    else:
        logger.warning("No target album URL found for %s; using catalog URL", album_name)

    return build_album(album, str(target_url or view_url or ""), tracks)


async def album_from_spotify_id(album_id: str, settings: dict[str, Any] | None = None) -> ResolvedAlbum | None:
    """Resolve a Spotify album ID through its iTunes equivalent.

    The Spotify URL is already known, so only the tracks need link resolution.
    Returns None when Odesli does not know the album or has no iTunes
    counterpart for it.
    """
    runtime_settings = settings if settings is not None else load_settings()
    url = spotify_album_url(album_id)
    try:
        payload = await asyncio.to_thread(fetch_links, url, runtime_settings)
    except LinkResolutionError as exc:
        if exc.code != "ODESLI_NOT_FOUND":
            raise
        logger.info("Odesli has no match for %s", url)
        return None
    collection_id = platform_entity_id(payload, _ITUNES_PLATFORMS)
    if not collection_id:
        logger.info("No iTunes equivalent for %s", url)
        return None

    results = await asyncio.to_thread(itunes_client.lookup_collection, collection_id, runtime_settings)
    collection, itunes_tracks = itunes_client.split_collection(results)
    if collection is None:
        logger.info("iTunes collection %s not found", collection_id)
        return None

    tracks = await resolve_tracks(itunes_tracks, runtime_settings)
    return build_album(collection, url, tracks)
