from __future__ import annotations

import logging
from typing import Any

from .cache import AlbumCache
from .catalog import album_from_spotify_id, search_album
from .keys import parse_spotify_album_id
from .models import ResolvedAlbum
from .settings import cache_config, load_settings

logger = logging.getLogger(__name__)


async def get_album(query: str, cache: AlbumCache, settings: dict[str, Any] | None = None) -> ResolvedAlbum | None:
    runtime_settings = settings if settings is not None else load_settings()
    album_id = parse_spotify_album_id(query)
    _, include_text_queries = cache_config(runtime_settings)
    use_cache = album_id is not None or include_text_queries

    if use_cache:
        cached = cache.get(query)
        if cached is not None:
            return cached

    if album_id is not None:
        album = await album_from_spotify_id(album_id, runtime_settings)
    else:
        album = await search_album(query, runtime_settings)

    if album is not None and use_cache:
        cache.set(query, album)
    return album

