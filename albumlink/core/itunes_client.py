from __future__ import annotations

from typing import Any

import requests

from .errors import CatalogError
from .settings import section

ITUNES_SEARCH_URL = "https://itunes.apple.com/search"
ITUNES_LOOKUP_URL = "https://itunes.apple.com/lookup"


def _get_results(url: str, params: dict[str, Any], settings: dict[str, Any], code: str) -> list[dict[str, Any]]:
    cfg = section(settings, "itunes")
    timeout_sec = float(cfg.get("timeout_sec", 15))
    params = {**params, "country": str(cfg.get("country", "US"))}
    try:
        resp = requests.get(url, params=params, timeout=timeout_sec)
    except requests.Timeout as exc:
        raise CatalogError(f"{code}_TIMEOUT", f"iTunes request timed out after {timeout_sec}s") from exc
    except requests.RequestException as exc:
        raise CatalogError(f"{code}_FAILED", f"iTunes request failed: {exc}") from exc

    if resp.status_code != 200:
        raise CatalogError(f"{code}_FAILED", f"iTunes request failed: {resp.status_code}")
    try:
        payload = resp.json()
    except ValueError as exc:
        raise CatalogError("ITUNES_BAD_JSON", "iTunes returned malformed JSON") from exc

    results = (payload.get("results") if isinstance(payload, dict) else None) or []
    if not isinstance(results, list):
        return []
    return [item for item in results if isinstance(item, dict)]


def search_albums(query: str, settings: dict[str, Any], limit: int = 1) -> list[dict[str, Any]]:
    params = {"term": query, "entity": "album", "limit": limit}
    return _get_results(ITUNES_SEARCH_URL, params, settings, "ITUNES_SEARCH")


def lookup_collection(collection_id: int | str, settings: dict[str, Any]) -> list[dict[str, Any]]:
    """Collection record followed by its songs, as returned by the lookup endpoint."""
    params = {"id": collection_id, "entity": "song"}
    return _get_results(ITUNES_LOOKUP_URL, params, settings, "ITUNES_LOOKUP")


def split_collection(results: list[dict[str, Any]]) -> tuple[dict[str, Any] | None, list[dict[str, Any]]]:
    collection = next((item for item in results if item.get("wrapperType") == "collection"), None)
    tracks = [item for item in results if item.get("wrapperType") == "track"]
    return collection, tracks
