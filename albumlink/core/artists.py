from __future__ import annotations

import asyncio
import logging
import re
from typing import Any
from urllib.parse import quote

from . import lastfm_client
from .errors import ArtistLookupError
from .models import ArtistMatch, ResolvedArtist, TopAlbum
from .settings import load_settings

logger = logging.getLogger(__name__)

_SPOTIFY_ARTIST_URL = re.compile(r"open\.spotify\.com/artist/([a-zA-Z0-9]+)")
_SPOTIFY_PLAYLIST_URL = re.compile(r"open\.spotify\.com/playlist/([a-zA-Z0-9]+)")
_BLANK_ALBUM_NAMES = {"", "(null)"}


def _search_url(query: str, kind: str) -> str:
    return f"https://open.spotify.com/search/{quote(query, safe='')}/{kind}"


def spotify_artist_url(query: str) -> str:
    match = _SPOTIFY_ARTIST_URL.search(query)
    if match:
        return f"https://open.spotify.com/artist/{match.group(1)}"
    return _search_url(query, "artists")


def find_spotify_playlist_url(query: str) -> str:
    match = _SPOTIFY_PLAYLIST_URL.search(query)
    if match:
        return f"https://open.spotify.com/playlist/{match.group(1)}"
    return _search_url(query, "playlists")


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _names_match(candidate: str, query: str) -> bool:
    name = candidate.lower()
    wanted = query.lower()
    return name == wanted or wanted in name or name in wanted


def _image(album: dict[str, Any], size: str = "extralarge") -> str | None:
    for image in album.get("image") or []:
        if isinstance(image, dict) and image.get("size") == size:
            return image.get("#text") or None
    return None


async def is_artist_query(query: str, settings: dict[str, Any] | None = None) -> ArtistMatch | None:
    runtime_settings = settings if settings is not None else load_settings()
    try:
        matches = await asyncio.to_thread(lastfm_client.search_artists, query, runtime_settings, 3)
    except ArtistLookupError as exc:
        logger.warning("Last.fm artist check failed: %s", exc.message)
        return None

    match = next((item for item in matches if _names_match(str(item["name"]), query)), None)
    if match is None:
        return None
    artist_name = str(match["name"])
    logger.info("Artist confirmed via Last.fm: %s", artist_name)
    return ArtistMatch(artist_name=artist_name, target_url=spotify_artist_url(artist_name))


async def get_artist_top_albums(
    artist_name: str,
    source_url: str,
    settings: dict[str, Any] | None = None,
    limit: int = 5,
) -> ResolvedArtist | None:
    """Artist summary with its top albums by Last.fm play count.

    None when Last.fm does not know the artist. Transport failures raise
    ``ArtistLookupError``.
    """
    runtime_settings = settings if settings is not None else load_settings()
    logger.info("Fetching top albums for %s", artist_name)
    try:
        info = await asyncio.to_thread(lastfm_client.artist_info, artist_name, runtime_settings)
        corrected_name = str(info.get("name") or artist_name)
        raw_albums = await asyncio.to_thread(lastfm_client.top_albums, corrected_name, runtime_settings, limit + 5)
    except ArtistLookupError as exc:
        if exc.code == "LASTFM_NOT_FOUND":
            return None
        raise

    albums = [
        album
        for album in raw_albums
        if str(album.get("name") or "") not in _BLANK_ALBUM_NAMES and _as_int(album.get("playcount")) > 0
    ][:limit]

    return ResolvedArtist(
        name=corrected_name,
        url=source_url,
        listeners=_as_int((info.get("stats") or {}).get("listeners")),
        albums=[
            TopAlbum(
                rank=rank,
                name=str(album["name"]),
                playcount=_as_int(album.get("playcount")),
                url=album.get("url"),
                image=_image(album),
            )
            for rank, album in enumerate(albums, start=1)
        ],
    )


async def lookup_artist(
    query: str,
    settings: dict[str, Any] | None = None,
    name: str | None = None,
) -> ResolvedArtist | None:
    """Artist summary for a name or a Spotify artist URL.

    A Spotify artist URL is taken as already confirmed and its canonical form
    becomes the artist URL. It carries no artist name, so Last.fm is queried with ``name``.
    """
    runtime_settings = settings if settings is not None else load_settings()
    if _SPOTIFY_ARTIST_URL.search(query):
        if not name:
            raise ArtistLookupError("ARTIST_NAME_REQUIRED", "A Spotify artist URL needs the artist name for Last.fm")
        return await get_artist_top_albums(name, spotify_artist_url(query), runtime_settings)

    match = await is_artist_query(query, runtime_settings)
    if match is None:
        return None
    return await get_artist_top_albums(match.artist_name, match.target_url, runtime_settings)
