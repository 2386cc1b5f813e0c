from __future__ import annotations

import os
from typing import Any

import requests

from .errors import ArtistLookupError
from .settings import section

LASTFM_API_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_NOT_FOUND = 6


def _api_key(settings: dict[str, Any]) -> str | None:
    key_env = str(section(settings, "lastfm").get("api_key_env", "LASTFM_API_KEY"))
    return os.getenv(key_env)


def call(method: str, params: dict[str, Any], settings: dict[str, Any]) -> dict[str, Any]:
    api_key = _api_key(settings)
    if not api_key:
        raise ArtistLookupError("LASTFM_KEY_MISSING", "Last.fm API key missing; set LASTFM_API_KEY.")

    timeout_sec = float(section(settings, "lastfm").get("timeout_sec", 8))
    query = {**params, "method": method, "api_key": api_key, "format": "json"}
    try:
        resp = requests.get(LASTFM_API_URL, params=query, timeout=timeout_sec)
    except requests.Timeout as exc:
        raise ArtistLookupError("LASTFM_TIMEOUT", f"Last.fm {method} timed out after {timeout_sec}s") from exc
    except requests.RequestException as exc:
        raise ArtistLookupError("LASTFM_REQUEST_FAILED", f"Last.fm {method} failed: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ArtistLookupError("LASTFM_BAD_JSON", f"Last.fm {method} returned malformed JSON") from exc
    if not isinstance(payload, dict):
        raise ArtistLookupError("LASTFM_BAD_JSON", f"Last.fm {method} returned an unexpected payload")

    # Error bodies come back with either a 200 or a 4xx status.
    if "error" in payload:
        message = str(payload.get("message") or "unknown error")
        if payload.get("error") == LASTFM_NOT_FOUND:
            raise ArtistLookupError("LASTFM_NOT_FOUND", message)
        raise ArtistLookupError("LASTFM_API_ERROR", f"Last.fm {method} failed: {message}")
    if resp.status_code != 200:
        raise ArtistLookupError("LASTFM_API_ERROR", f"Last.fm {method} failed: {resp.status_code}")
    return payload


def search_artists(query: str, settings: dict[str, Any], limit: int = 3) -> list[dict[str, Any]]:
    payload = call("artist.search", {"artist": query, "limit": limit}, settings)
    matches = ((payload.get("results") or {}).get("artistmatches") or {}).get("artist") or []
    # A single match is returned as an object rather than a one-item list.
    if isinstance(matches, dict):
        matches = [matches]
    return [item for item in matches if isinstance(item, dict) and item.get("name")]


def artist_info(artist_name: str, settings: dict[str, Any]) -> dict[str, Any]:
    payload = call("artist.getinfo", {"artist": artist_name}, settings)
    artist = payload.get("artist")
    return artist if isinstance(artist, dict) else {}


def top_albums(artist_name: str, settings: dict[str, Any], limit: int = 10) -> list[dict[str, Any]]:
    payload = call("artist.gettopalbums", {"artist": artist_name, "limit": limit}, settings)
    albums = (payload.get("topalbums") or {}).get("album") or []
    if isinstance(albums, dict):
        albums = [albums]
    return [item for item in albums if isinstance(item, dict)]
