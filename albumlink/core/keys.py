from __future__ import annotations

import re

_ALBUM_PATH = re.compile(r"/album/([a-z0-9]+)", re.IGNORECASE)
_ALBUM_URI = re.compile(r"[a-z][\w+.-]*:album:([a-z0-9]+)", re.IGNORECASE)

_SPOTIFY_ALBUM_URL = re.compile(r"open\.spotify\.com/(?:intl-[\w-]+/)?album/([a-zA-Z0-9]+)")
_SPOTIFY_ALBUM_URI = re.compile(r"spotify:album:([a-zA-Z0-9]+)")
_SPOTIFY_ID = re.compile(r"[a-zA-Z0-9]{22}")


def normalize_key(value: str) -> str:
    """Canonical cache key for an album ID, URL, URI, or free-text query.

    IDs are folded to lower case along with everything else, so the bare ID,
    a web URL and a URI naming the same album share one key.
    """
    match = _ALBUM_PATH.search(value) or _ALBUM_URI.search(value)
    if match:
        return match.group(1).lower()
    return value.lower()


def _looks_like_bare_id(text: str) -> bool:
    # Base62 IDs almost always carry a digit or an upper-case letter past the first character.
    return bool(_SPOTIFY_ID.fullmatch(text)) and any(ch.isdigit() or ch.isupper() for ch in text[1:])


def parse_spotify_album_id(value: str) -> str | None:
    """Spotify album ID from an album URL, a ``spotify:album:`` URI or a bare ID.

    A bare 22-character lower-case word, capitalized or not, is read as free
    text rather than an ID.
    """
    text = value.strip()
    match = _SPOTIFY_ALBUM_URL.search(text) or _SPOTIFY_ALBUM_URI.search(text)
    if match:
        return match.group(1)
    if _looks_like_bare_id(text):
        return text
    return None


def spotify_album_url(album_id: str) -> str:
    return f"https://open.spotify.com/album/{album_id}"
