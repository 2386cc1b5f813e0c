from __future__ import annotations

from typing import Any

import requests

from .errors import LinkResolutionError
from .settings import timeout_for

DEEZER_ALBUM_SEARCH_URL = "https://api.deezer.com/search/album"


def search_albums(query: str, settings: dict[str, Any], limit: int = 1) -> list[dict[str, Any]]:
    timeout_sec = timeout_for(settings, "deezer", 6)
    try:
        resp = requests.get(DEEZER_ALBUM_SEARCH_URL, params={"q": query, "limit": limit}, timeout=timeout_sec)
    except requests.Timeout as exc:
        raise LinkResolutionError("DEEZER_TIMEOUT", f"Deezer search timed out after {timeout_sec}s") from exc
    except requests.RequestException as exc:
        raise LinkResolutionError("DEEZER_REQUEST_FAILED", f"Deezer search failed: {exc}") from exc

    if resp.status_code != 200:
        raise LinkResolutionError("DEEZER_SEARCH_FAILED", f"Deezer search failed: {resp.status_code}")
    try:
        payload = resp.json()
    except ValueError as exc:
        raise LinkResolutionError("DEEZER_BAD_JSON", "Deezer returned malformed JSON") from exc

    # Deezer reports quota and query errors with a 200 and an "error" object.
    if isinstance(payload, dict) and payload.get("error"):
        error = payload["error"]
        message = error.get("message", "unknown error") if isinstance(error, dict) else error
        raise LinkResolutionError("DEEZER_SEARCH_FAILED", f"Deezer search failed: {message}")

    albums = (payload.get("data") if isinstance(payload, dict) else None) or []
    if not isinstance(albums, list):
        return []
    return [item for item in albums if isinstance(item, dict)]
