from __future__ import annotations

from typing import Any

import requests

from .errors import LinkResolutionError
from .settings import section

ODESLI_LINKS_URL = "https://api.song.link/v1-alpha.1/links"


def _odesli_cfg(settings: dict[str, Any]) -> dict[str, Any]:
    return section(settings, "odesli")


def target_platform(settings: dict[str, Any]) -> str:
    return str(_odesli_cfg(settings).get("platform", "spotify"))


def fetch_links(url: str, settings: dict[str, Any], timeout_sec: float | None = None) -> dict[str, Any]:
    cfg = _odesli_cfg(settings)
    timeout = timeout_sec if timeout_sec is not None else float(cfg.get("timeout_sec", 15))
    params = {"url": url, "userCountry": str(cfg.get("country", "US"))}
    try:
        resp = requests.get(ODESLI_LINKS_URL, params=params, timeout=timeout)
    except requests.Timeout as exc:
        raise LinkResolutionError("ODESLI_TIMEOUT", f"Odesli lookup timed out after {timeout}s") from exc
    except requests.RequestException as exc:
        raise LinkResolutionError("ODESLI_REQUEST_FAILED", f"Odesli request failed: {exc}") from exc

    if resp.status_code == 429:
        raise LinkResolutionError("ODESLI_RATE_LIMIT", "Rate-limited by Odesli")
    if resp.status_code in (400, 404):
        raise LinkResolutionError("ODESLI_NOT_FOUND", f"Odesli does not know {url}")
    if resp.status_code != 200:
        raise LinkResolutionError("ODESLI_LOOKUP_FAILED", f"Odesli lookup failed: {resp.status_code}")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise LinkResolutionError("ODESLI_BAD_JSON", "Odesli returned malformed JSON") from exc
    if not isinstance(payload, dict):
        raise LinkResolutionError("ODESLI_BAD_JSON", "Odesli returned an unexpected payload")
    return payload


def platform_url(payload: dict[str, Any], platform: str) -> str | None:
    link = (payload.get("linksByPlatform") or {}).get(platform)
    if not isinstance(link, dict):
        return None
    url = link.get("url")
    return str(url) if url else None


def platform_entity_id(payload: dict[str, Any], platforms: tuple[str, ...]) -> str | None:
    """Native catalog ID of the first listed platform present in ``payload``.

    Odesli unique IDs look like ``ITUNES_ALBUM::1441164426``; the entity record
    carries the bare ID, with the suffix of the unique ID as a fallback.
    """
    links = payload.get("linksByPlatform") or {}
    entities = payload.get("entitiesByUniqueId") or {}
    for platform in platforms:
        link = links.get(platform)
        if not isinstance(link, dict) or not link.get("entityUniqueId"):
            continue
        unique_id = str(link["entityUniqueId"])
        entity = entities.get(unique_id)
        if isinstance(entity, dict) and entity.get("id"):
            return str(entity["id"])
        return unique_id.split("::")[-1]
    return None
