from __future__ import annotations

from typing import Any

import requests

from .errors import LinkResolutionError
from .settings import section

MB_BASE_URL = "https://musicbrainz.org/ws/2"
DEFAULT_USER_AGENT = "albumlink/0.1 (https://github.com/albumlink/albumlink)"


def _get(path: str, params: dict[str, Any], settings: dict[str, Any]) -> dict[str, Any]:
    cfg = section(settings, "musicbrainz")
    timeout_sec = float(cfg.get("timeout_sec", 8))
    headers = {"User-Agent": str(cfg.get("user_agent", DEFAULT_USER_AGENT))}
    try:
        resp = requests.get(
            f"{MB_BASE_URL}/{path}",
            params={**params, "fmt": "json"},
            headers=headers,
            timeout=timeout_sec,
        )
    except requests.Timeout as exc:
        raise LinkResolutionError("MUSICBRAINZ_TIMEOUT", f"MusicBrainz request timed out after {timeout_sec}s") from exc
    except requests.RequestException as exc:
        raise LinkResolutionError("MUSICBRAINZ_REQUEST_FAILED", f"MusicBrainz request failed: {exc}") from exc

    if resp.status_code == 503:
        raise LinkResolutionError("MUSICBRAINZ_RATE_LIMIT", "Rate-limited by MusicBrainz")
    if resp.status_code != 200:
        raise LinkResolutionError("MUSICBRAINZ_LOOKUP_FAILED", f"MusicBrainz request failed: {resp.status_code}")
    try:
        payload = resp.json()
    except ValueError as exc:
        raise LinkResolutionError("MUSICBRAINZ_BAD_JSON", "MusicBrainz returned malformed JSON") from exc
    return payload if isinstance(payload, dict) else {}


def search_release_groups(album_name: str, artist_name: str, settings: dict[str, Any], limit: int = 3) -> list[dict[str, Any]]:
    query = f'release:"{album_name}" AND artist:"{artist_name}"'
    payload = _get("release-group", {"query": query, "limit": limit}, settings)
    groups = payload.get("release-groups") or []
    return [group for group in groups if isinstance(group, dict) and group.get("id")]


def release_group_relations(group_id: str, settings: dict[str, Any]) -> list[dict[str, Any]]:
    payload = _get(f"release-group/{group_id}", {"inc": "url-rels"}, settings)
    return [rel for rel in payload.get("relations") or [] if isinstance(rel, dict)]


def releases_with_relations(group_id: str, settings: dict[str, Any], limit: int = 10) -> list[dict[str, Any]]:
    payload = _get("release", {"release-group": group_id, "inc": "url-rels", "limit": limit}, settings)
    return [release for release in payload.get("releases") or [] if isinstance(release, dict)]


def find_relation_url(relations: list[dict[str, Any]], marker: str) -> str | None:
    for rel in relations:
        resource = ((rel.get("url") or {}).get("resource")) if isinstance(rel.get("url"), dict) else None
        if resource and marker in resource:
            return str(resource)
    return None
